"""Controlled enumerations for the level-dictionary domain.

The severity set is closed.  Anything that selects, counts or renders a
log level MUST go through SeverityLevel rather than a bare string.
"""

from __future__ import annotations

from enum import Enum


class SeverityLevel(str, Enum):
    """Log severities the collectors can be told to gather.

    Declaration order is the rendering order of a dictionary.
    """

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"

    @classmethod
    def parse(cls, name: str) -> SeverityLevel | None:
        """Return the level for *name* (case-insensitive), or None if unknown."""
        try:
            return cls(name.strip().upper())
        except ValueError:
            return None


# Always collected, whatever the observed rate.
ALWAYS_COLLECTED: tuple[SeverityLevel, ...] = (SeverityLevel.ERROR, SeverityLevel.WARN)

# Collected only while the ERROR+WARN rate stays below the threshold.
VERBOSE_LEVELS: tuple[SeverityLevel, ...] = (SeverityLevel.INFO, SeverityLevel.DEBUG)
