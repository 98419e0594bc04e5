"""DictionaryPolicy — decides which log levels to collect next cycle.

Design principles:
    1. Pure function: accepts LevelCounts, returns a Decision / Artifact.
    2. No side effects beyond logging, no state mutation, no I/O.
    3. Configuration is fixed at construction and shared by every window.

Policy:
    total          = count(ERROR) + count(WARN)
    window_seconds = window_size_millis / 1000   (integer, truncated toward zero)
    rate           = total / window_seconds      (real division)

    levels = [ERROR, WARN]                   always
           + [INFO, DEBUG]                   if rate < min_rate_per_second

    High error volume backs off verbose collection; a healthy system gets
    full visibility.

Sharp edge:
    window_seconds is an integer.  Any window shorter than one second gives
    window_seconds == 0 and the rate becomes inf (or nan for a zero total).
    This is the behaviour downstream consumers already observe.  Switching to
    real division would move the threshold for sub-second windows, so it
    stays as is.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from level_dictionary.domain.artifact import (
    ENCODING,
    ERROR_WARN_RATE_ATTR,
    ERROR_WARN_TOTAL_ATTR,
    WINDOW_MILLIS_ATTR,
    Artifact,
)
from level_dictionary.domain.counts import LevelCounts
from level_dictionary.domain.decision import Decision
from level_dictionary.domain.enums import ALWAYS_COLLECTED, VERBOSE_LEVELS, SeverityLevel

if TYPE_CHECKING:
    from level_dictionary.config import Settings

logger = logging.getLogger(__name__)


# ── Errors ───────────────────────────────────────────────────────────────────

class PolicyInputError(ValueError):
    """Raised in strict mode when counts or configuration are malformed."""


class InvalidWindowError(PolicyInputError):
    def __init__(self, window_size_millis: int) -> None:
        self.window_size_millis = window_size_millis
        super().__init__(f"window size must be positive, got {window_size_millis} ms")


class InvalidCountsError(PolicyInputError):
    def __init__(self, negatives: dict[SeverityLevel, int]) -> None:
        self.negatives = negatives
        detail = ", ".join(f"{lvl.value}={n}" for lvl, n in negatives.items())
        super().__init__(f"counts must be non-negative: {detail}")


# ── Configuration ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PolicyConfig:
    """Window size and rate threshold, fixed for the life of a policy."""

    # Size of the window the upstream counts were computed over
    window_size_millis: int = 60_000
    # ERROR+WARN events/second at or above which INFO/DEBUG are dropped
    min_rate_per_second: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> PolicyConfig:
        return cls(
            window_size_millis=settings.window_size_millis,
            min_rate_per_second=settings.min_rate_per_second,
        )


# ── Policy ───────────────────────────────────────────────────────────────────

class DictionaryPolicy:
    """Stateless collection policy over one window of level counts.

    Safe to share between threads and tasks: every call reads only its own
    arguments and the frozen PolicyConfig.

    Args:
        config: Window size and rate threshold.
        strict: Reject non-positive windows and negative counts instead of
            letting the arithmetic run on them.
    """

    def __init__(self, config: PolicyConfig | None = None, strict: bool = False) -> None:
        self._config = config or PolicyConfig()
        self._strict = strict

    @property
    def config(self) -> PolicyConfig:
        return self._config

    @property
    def strict(self) -> bool:
        return self._strict

    # ── Public API ───────────────────────────────────────────────────────

    def decide(self, counts: LevelCounts) -> Decision:
        """Choose the levels to collect for the next cycle.

        Raises:
            InvalidWindowError: strict mode only, window size <= 0.
            InvalidCountsError: strict mode only, any negative count.
        """
        window_millis = self._config.window_size_millis
        if self._strict:
            self._check_inputs(counts, window_millis)

        total = counts.count(SeverityLevel.ERROR) + counts.count(SeverityLevel.WARN)
        rate = _divide(total, _window_seconds(window_millis))

        levels = list(ALWAYS_COLLECTED)
        if rate < self._config.min_rate_per_second:
            levels.extend(VERBOSE_LEVELS)

        decision = Decision(
            levels=tuple(levels),
            total_warn_error=total,
            rate=rate,
            window_size_millis=window_millis,
        )

        if not decision.rate_is_finite:
            logger.warning(
                "Non-finite ERROR/WARN rate %s (total=%d, window=%d ms)",
                rate,
                total,
                window_millis,
            )
        logger.debug(
            "Decided %d levels: total=%d rate=%s threshold=%s",
            len(levels),
            total,
            rate,
            self._config.min_rate_per_second,
        )
        return decision

    @staticmethod
    def render(decision: Decision) -> Artifact:
        """Render a Decision into the dictionary body and its attributes."""
        body = "".join(f"{level.value}\n" for level in decision.levels)
        return Artifact(
            content=body.encode(ENCODING),
            attributes={
                ERROR_WARN_RATE_ATTR: format_rate(decision.rate),
                ERROR_WARN_TOTAL_ATTR: str(decision.total_warn_error),
                WINDOW_MILLIS_ATTR: str(decision.window_size_millis),
            },
        )

    def build(self, counts: LevelCounts) -> Artifact:
        """decide() then render()."""
        return self.render(self.decide(counts))

    # ── Helpers ──────────────────────────────────────────────────────────

    @staticmethod
    def _check_inputs(counts: LevelCounts, window_millis: int) -> None:
        if window_millis <= 0:
            raise InvalidWindowError(window_millis)
        negatives = {lvl: n for lvl, n in counts.levels.items() if n < 0}
        if negatives:
            raise InvalidCountsError(negatives)


def format_rate(rate: float) -> str:
    """Text form of a rate for the attribute map.

    Non-finite values use the Infinity / -Infinity / NaN spelling that
    existing dictionary consumers parse.
    """
    if math.isnan(rate):
        return "NaN"
    if math.isinf(rate):
        return "Infinity" if rate > 0 else "-Infinity"
    return str(rate)


def _window_seconds(window_size_millis: int) -> int:
    # Truncates toward zero, unlike //, so -500 ms is 0 s rather than -1 s.
    seconds = abs(window_size_millis) // 1000
    return seconds if window_size_millis >= 0 else -seconds


def _divide(total: int, seconds: int) -> float:
    # IEEE-754 semantics instead of ZeroDivisionError.
    if seconds == 0:
        if total == 0:
            return math.nan
        return math.inf if total > 0 else -math.inf
    try:
        return total / seconds
    except OverflowError:
        # Counts too large for a float saturate rather than raise.
        return math.copysign(math.inf, total) * (1 if seconds > 0 else -1)
