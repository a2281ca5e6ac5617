"""Configuration model and settings loading for schemalex.

This package facade re-exports all public names so that
``from schemalex.config import ...`` works for every caller.
"""

from __future__ import annotations

from schemalex.config.loader import load_config
from schemalex.config.model import Configuration, Settings

__all__ = [
    "Configuration",
    "Settings",
    "load_config",
]
