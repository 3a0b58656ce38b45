"""Main Textual application for the Staking Reward Calculator."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header, Footer, Static

from config.settings import get_settings
from staking_calc.data.pipeline import StakingDataPipeline
from staking_calc.ui.screens import CalculatorScreen

logger = logging.getLogger(__name__)


class StakingCalculatorApp(App):
    """Terminal UI for estimating crypto staking rewards."""

    TITLE = "Staking Reward Calculator"

    CSS = """
    Screen { background: #000000; }

    #status {
        dock: bottom;
        height: 1;
        background: #111;
        color: #888;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(self):
        super().__init__()
        self.settings = get_settings()
        self.pipeline = StakingDataPipeline(settings=self.settings)

    def compose(self) -> ComposeResult:
        yield Header()
        yield CalculatorScreen(
            pipeline=self.pipeline,
            settings=self.settings,
            id="calculator-screen",
        )
        yield Static("Enter: Calculate  C: Compound | R: Refresh  Q: Quit", id="status")
        yield Footer()

    async def action_refresh(self) -> None:
        """Drop cached responses and reload."""
        try:
            self.pipeline.clear_cache()
            screen = self.query_one("#calculator-screen", CalculatorScreen)
            await screen.load_data()
        except Exception as e:
            logger.error(f"Error refreshing: {e}")

    async def on_unmount(self) -> None:
        await self.pipeline.close()


def main():
    settings = get_settings()
    # Keep INFO noise out of the terminal UI unless asked for
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))
    StakingCalculatorApp().run()


if __name__ == "__main__":
    main()
