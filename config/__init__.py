"""Configuration module for the Staking Reward Calculator."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
