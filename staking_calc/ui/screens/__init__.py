"""UI Screens for the Staking Reward Calculator."""

from .calculator import CalculatorScreen

__all__ = ["CalculatorScreen"]
