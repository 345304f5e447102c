"""Core module - configuration and exceptions."""

from __future__ import annotations

from random_oo.core.config import Settings, settings
from random_oo.core.exceptions import (
    AbstractMethodError,
    InvalidArgumentError,
    LimitError,
    RandomOOError,
    SeedError,
    UnknownGeneratorError,
)

__all__ = [
    "Settings",
    "settings",
    "RandomOOError",
    "AbstractMethodError",
    "InvalidArgumentError",
    "UnknownGeneratorError",
    "SeedError",
    "LimitError",
]
