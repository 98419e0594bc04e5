"""Decision — which levels to collect next cycle, and the numbers behind it.

Pure data.  A Decision is created fresh for every window and is never
mutated afterwards.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from level_dictionary.domain.enums import SeverityLevel


class Decision(BaseModel):
    """Outcome of applying the collection policy to one window of counts."""

    levels: tuple[SeverityLevel, ...] = Field(
        ..., description="Levels to collect, in rendering order, without duplicates"
    )
    total_warn_error: int = Field(..., description="ERROR + WARN count for the window")
    rate: float = Field(
        ...,
        description="ERROR + WARN events per second; may be inf or nan for sub-second windows",
    )
    window_size_millis: int = Field(..., description="Window size the counts were taken over")

    model_config = {"frozen": True}

    @property
    def collects_verbose(self) -> bool:
        """True when INFO and DEBUG were opened up for the next cycle."""
        return SeverityLevel.INFO in self.levels

    @property
    def rate_is_finite(self) -> bool:
        return math.isfinite(self.rate)
