"""Configuration for sampling runs."""

from .config_loader import ConfigLoader
from .memplot_config import MemplotConfig

__all__ = ["ConfigLoader", "MemplotConfig"]
