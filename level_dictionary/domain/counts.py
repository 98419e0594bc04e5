"""LevelCounts — the per-window aggregate handed over by the upstream aggregator.

A LevelCounts value is scoped to exactly one window and never changes once
built.  It only records what was counted; it carries no window size and no
opinion about what the counts mean.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from level_dictionary.domain.enums import SeverityLevel


class LevelCounts(BaseModel):
    """Message counts per severity observed over one window.

    Absent levels count as zero.  Counts are not range-checked here: a
    negative value is carried through as-is and left to the policy.
    The levels mapping is read-only.
    """

    levels: Mapping[SeverityLevel, int] = Field(
        default_factory=dict,
        validate_default=True,
        description="Message count per severity level for a single window",
    )

    model_config = {"frozen": True}

    # ── Validators ───────────────────────────────────────────────────────

    @field_validator("levels", mode="before")
    @classmethod
    def normalise_level_names(cls, v: Any) -> Any:
        # Aggregators key by raw level text; fold case and drop levels the
        # policy has no use for (TRACE, FATAL, ...).
        if not isinstance(v, Mapping):
            return v
        normalised: dict[SeverityLevel, Any] = {}
        for key, count in v.items():
            level = SeverityLevel.parse(str(key)) if not isinstance(key, SeverityLevel) else key
            if level is None:
                continue
            if level in normalised:
                raise ValueError(f"level {level.value} given more than once")
            normalised[level] = count
        return normalised

    @field_validator("levels", mode="after")
    @classmethod
    def freeze_levels(cls, v: Mapping[SeverityLevel, int]) -> Mapping[SeverityLevel, int]:
        return MappingProxyType(dict(v))

    @field_serializer("levels")
    def dump_levels(self, v: Mapping[SeverityLevel, int]) -> dict[str, int]:
        return {level.value: n for level, n in v.items()}

    # ── Accessors ────────────────────────────────────────────────────────

    def count(self, level: SeverityLevel) -> int:
        """Count for *level*, zero if the aggregator did not report it."""
        return self.levels.get(level, 0)

    @property
    def total(self) -> int:
        return sum(self.levels.values())

    @classmethod
    def from_mapping(cls, counts: Mapping[str, int]) -> LevelCounts:
        """Build from a plain ``{"ERROR": 3, "WARN": 1}`` style mapping."""
        return cls.model_validate({"levels": dict(counts)})
