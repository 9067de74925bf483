"""Package-wide configuration."""

from curried.core.config import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
