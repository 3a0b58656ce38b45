"""ASCII chart of a stake's balance over time."""

from typing import Optional, Sequence

import asciichartpy as acp
from rich.text import Text
from textual.widgets import Static


class GrowthChart(Static):
    """Line chart of the projected balance, rendered with asciichartpy."""

    MAX_POINTS = 80

    def __init__(self, height: int = 8, **kwargs):
        super().__init__(**kwargs)
        self._height = height

    def clear_chart(self, message: str = "No projection yet") -> None:
        self.update(Text(message, style="dim"))

    def on_mount(self) -> None:
        self.clear_chart()

    def plot(self, balances: Sequence[float], title: str, symbol: Optional[str] = None) -> None:
        """Render balances, resampled to fit the widget."""
        values = [float(v) for v in balances]
        if not values:
            self.clear_chart("No data available")
            return

        if len(values) > self.MAX_POINTS:
            step = len(values) / self.MAX_POINTS
            values = [values[int(i * step)] for i in range(self.MAX_POINTS)]

        config = {
            "height": self._height,
            "colors": [acp.green],
            "format": "{:12.4f}",
        }
        # asciichartpy divides by the value range
        if max(values) == min(values):
            values = values + [values[-1] * (1 + 1e-9) or 1e-9]

        output = Text()
        heading = f"  {title}" + (f" ({symbol})" if symbol else "")
        output.append(heading + "\n", style="bold #ff8c00")
        output.append_text(Text.from_ansi(acp.plot(values, config)))
        self.update(output)
