"""Staking reward calculator screen."""

import logging
from typing import Dict, List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, DataTable, Input, Label, Select, Static, Switch

from config.settings import Settings
from staking_calc.calculators import CompoundingFrequency
from staking_calc.constraints import get_staking_constraints
from staking_calc.core.constants import DEFAULT_STAKE_DAYS
from staking_calc.core.models import CoinData, Platform
from staking_calc.data.pipeline import StakingDataPipeline
from staking_calc.engine import (
    CalculationOutcome,
    RewardCalculator,
    StakeRequest,
    StakeValidationError,
    parse_stake_inputs,
    project_balance,
)
from staking_calc.ui.widgets import GrowthChart

logger = logging.getLogger(__name__)


class CalculatorScreen(Widget):
    """Form for estimating staking rewards on a chosen coin and platform."""

    DEFAULT_CSS = """
    CalculatorScreen {
        height: 100%;
        width: 100%;
        padding: 0 1;
    }

    #form-panel {
        width: 100%;
        height: auto;
        border: solid #333;
        padding: 1;
        margin-bottom: 1;
    }

    #form-title, #results-title {
        text-style: bold;
        color: #ff8c00;
        height: 1;
    }

    .form-row {
        height: 3;
        width: 100%;
        margin-top: 1;
    }

    .form-label {
        width: 14;
        padding-top: 1;
        color: #888;
    }

    .form-input {
        width: 20;
    }

    #coin-select, #platform-select {
        width: 1fr;
    }

    #calculate-button {
        width: 20;
    }

    #error-line {
        height: auto;
        color: #ff4444;
    }

    #results-panel {
        height: 1fr;
        width: 100%;
        border: solid #333;
        padding: 1;
    }

    #results-table {
        height: auto;
        max-height: 10;
        margin-top: 1;
    }

    #constraints-info {
        height: auto;
        margin-top: 1;
        color: #aaa;
    }

    #growth-chart {
        height: auto;
        margin-top: 1;
    }

    #status-line {
        height: 1;
        background: #111;
        color: #888;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("enter", "calculate", "Calculate", show=True),
        Binding("c", "toggle_compound", "Compound", show=True),
    ]

    is_loading = reactive(False)

    def __init__(
        self,
        pipeline: StakingDataPipeline,
        settings: Settings,
        *args,
        **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.pipeline = pipeline
        self.settings = settings
        self.calculator = RewardCalculator()

        self._coins: List[CoinData] = []
        self._prices: Dict[str, float] = {}
        self._selected_symbol: str = ""
        self._platforms: List[Platform] = []
        self._initialized = False

    def compose(self) -> ComposeResult:
        with Vertical(id="calculator-main"):
            with Container(id="form-panel"):
                yield Static("Crypto Staking Reward Calculator", id="form-title")

                with Horizontal(classes="form-row"):
                    yield Label("Coin:", classes="form-label")
                    yield Select([("Loading...", "")], id="coin-select")

                with Horizontal(classes="form-row"):
                    yield Label("Platform:", classes="form-label")
                    yield Select([("Select a coin first", -1)], id="platform-select")

                with Horizontal(classes="form-row"):
                    yield Label("Amount:", classes="form-label")
                    yield Input(placeholder="0.0", id="amount-input", classes="form-input")
                    yield Label("Days:", classes="form-label")
                    yield Input(value=str(DEFAULT_STAKE_DAYS), id="days-input", classes="form-input")

                with Horizontal(classes="form-row"):
                    yield Label("Compound:", classes="form-label")
                    yield Switch(value=False, id="compound-switch")
                    yield Label("Frequency:", classes="form-label")
                    yield Select(
                        [(f.label, f.value) for f in CompoundingFrequency],
                        value=CompoundingFrequency.DAILY.value,
                        id="frequency-select",
                        disabled=True,
                    )

                with Horizontal(classes="form-row"):
                    yield Button("Calculate", id="calculate-button", variant="primary")

                yield Static("", id="error-line")

            with Container(id="results-panel"):
                yield Static("Estimated Rewards", id="results-title")
                yield DataTable(id="results-table")
                yield Static("", id="constraints-info")
                yield GrowthChart(id="growth-chart")

            yield Static("Ready | Enter: Calculate  C: Toggle compounding", id="status-line")

    async def on_mount(self) -> None:
        """Initialize when mounted."""
        if not self._initialized:
            self._setup_results_table()
            await self.load_data()
            self._initialized = True

    async def load_data(self) -> None:
        """Load coins, platforms and prices."""
        self.is_loading = True
        self._update_status("Loading staking data...")

        try:
            self._coins = await self.pipeline.load_coins()
            self._prices = await self.pipeline.load_prices(
                [c.symbol for c in self._coins], self.settings.default_currency
            )
            self._populate_coins()

            source = "bundled data" if self.pipeline.used_fallback else "live data"
            self._update_status(f"Loaded {len(self._coins)} coins from {source}")
            if self.pipeline.used_fallback:
                self._show_error("Live data could not be loaded. Showing bundled rates.")

        except Exception as e:
            logger.error(f"Error loading data: {e}")
            self._show_error("An error occurred while loading data. Please try again later.")
            self._update_status(f"Error: {e}")

        finally:
            self.is_loading = False

    def _populate_coins(self) -> None:
        select = self.query_one("#coin-select", Select)
        options = []
        for coin in self._coins:
            label = f"{coin.name} ({coin.symbol})"
            price = self._prices.get(coin.symbol)
            if price:
                label += f" - ${price:,.2f}"
            options.append((label, coin.symbol))
        select.set_options(options)

        if options:
            select.value = options[0][1]
            self._select_coin(str(options[0][1]))

    def _select_coin(self, symbol: str) -> None:
        """Show the platforms for a coin and reset previous results."""
        self._selected_symbol = symbol
        coin = next((c for c in self._coins if c.symbol == symbol), None)
        self._platforms = list(coin.platforms) if coin else []

        select = self.query_one("#platform-select", Select)
        options = [(p.label, i) for i, p in enumerate(self._platforms)]
        select.set_options(options or [("No platforms", -1)])
        best = coin.best_platform if coin else None
        if best is not None:
            select.value = self._platforms.index(best)

        self._clear_results()
        self._show_constraints(symbol)

    def _show_constraints(self, symbol: str) -> None:
        info = self.query_one("#constraints-info", Static)
        constraints = get_staking_constraints(symbol)
        if constraints is None:
            info.update(Text("No staking constraints on record for this coin.", style="dim"))
            return

        text = Text()
        text.append(f"{constraints.name} ", style="bold")
        text.append(f"min {constraints.min_stake_amount:g} {constraints.symbol} | ")
        text.append(f"unbonding {constraints.unbonding_period}d | ")
        text.append(f"{constraints.duration_hint()}\n")
        if constraints.staking_method:
            text.append(f"Method: {constraints.staking_method}  ", style="cyan")
        if constraints.staking_risks:
            text.append(f"Risks: {', '.join(constraints.staking_risks)}", style="yellow")
        if constraints.notes:
            text.append(f"\n{constraints.notes}", style="dim")
        info.update(text)

    def _setup_results_table(self) -> None:
        table = self.query_one("#results-table", DataTable)
        table.add_columns("Metric", "Amount", "Value")
        self._clear_results()

    def _clear_results(self) -> None:
        table = self.query_one("#results-table", DataTable)
        table.clear()
        for metric in ("Principal", "Reward", "Total", "APR", "APY"):
            table.add_row(metric, "-", "-")
        self.query_one("#growth-chart", GrowthChart).clear_chart()

    def _selected_platform(self) -> Optional[Platform]:
        value = self.query_one("#platform-select", Select).value
        if not isinstance(value, int) or not 0 <= value < len(self._platforms):
            return None
        return self._platforms[value]

    def _fiat(self, outcome: CalculationOutcome, amount: float) -> str:
        value = outcome.value_in_currency(amount, self._prices.get(self._selected_symbol))
        if value is None:
            return "-"
        return f"≈ ${value:,.2f}"

    def _show_outcome(self, outcome: CalculationOutcome) -> None:
        r = outcome.result
        symbol = self._selected_symbol

        table = self.query_one("#results-table", DataTable)
        table.clear()
        table.add_row("Principal", f"{r.principal:,.6f} {symbol}", self._fiat(outcome, r.principal))
        table.add_row("Reward", f"{r.interest:,.6f} {symbol}", self._fiat(outcome, r.interest))
        table.add_row("Total", f"{r.total:,.6f} {symbol}", self._fiat(outcome, r.total))
        table.add_row("APR", f"{r.apr:.2f}%", "")
        table.add_row("APY", f"{r.apy:.2f}%" if r.apy is not None else "-", "")

        chart = self.query_one("#growth-chart", GrowthChart)
        balances = project_balance(outcome.params, outcome.request.use_compound)
        chart.plot(balances, f"Balance over {outcome.request.days} days", symbol)

    def _show_error(self, message: str) -> None:
        self.query_one("#error-line", Static).update(message)

    def _update_status(self, message: str) -> None:
        """Update status line."""
        try:
            self.query_one("#status-line", Static).update(message)
        except Exception:
            logger.debug(f"Status line not mounted: {message}")

    async def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "coin-select" and event.value:
            self._select_coin(str(event.value))

    def on_switch_changed(self, event: Switch.Changed) -> None:
        if event.switch.id == "compound-switch":
            self.query_one("#frequency-select", Select).disabled = not event.value

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "calculate-button":
            self.calculate()

    def action_calculate(self) -> None:
        self.calculate()

    def action_toggle_compound(self) -> None:
        switch = self.query_one("#compound-switch", Switch)
        switch.value = not switch.value

    def calculate(self) -> None:
        """Read the form, validate and show the reward estimate."""
        if self.is_loading:
            return

        try:
            amount, days = parse_stake_inputs(
                self.query_one("#amount-input", Input).value,
                self.query_one("#days-input", Input).value,
            )
            frequency = self.query_one("#frequency-select", Select).value
            request = StakeRequest(
                symbol=self._selected_symbol,
                amount=amount,
                days=days,
                platform=self._selected_platform(),
                use_compound=self.query_one("#compound-switch", Switch).value,
                frequency=str(frequency) if frequency else CompoundingFrequency.DAILY.value,
            )
            outcome = self.calculator.calculate(request)

        except StakeValidationError as e:
            self._show_error(str(e))
            self._update_status("Check your inputs")
            return

        self._show_error("")
        self._show_outcome(outcome)
        self._update_status(
            f"{outcome.result.interest:,.6f} {self._selected_symbol} reward on "
            f"{outcome.platform.name}"
        )
