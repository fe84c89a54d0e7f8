"""Configuration management for struct menus."""

from .loader import load_settings
from .settings import MenuSettings

__all__ = [
    "MenuSettings",
    "load_settings",
]
