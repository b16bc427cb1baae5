"""Shared types and settings."""

from minimalisp.core.config import Settings, settings
from minimalisp.core.types import Count, GroupSize, KeyFunc, Comparator

__all__ = [
    "Settings",
    "settings",
    "Count",
    "GroupSize",
    "KeyFunc",
    "Comparator",
]
