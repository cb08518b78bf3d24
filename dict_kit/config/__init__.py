"""Configuration loading and storage."""

from .loader import load_config_file
from .store import Config, HookedConfig


__all__ = ["Config", "HookedConfig", "load_config_file"]
