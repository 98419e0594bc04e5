"""Artifact — the rendered dictionary handed to downstream transport.

The body lists one severity per line, each line ending in a newline, UTF-8
encoded.  The attributes carry the metrics behind the decision as text,
under the fixed keys below.  Downstream collectors read these keys, so
they must never change.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from level_dictionary.domain.enums import SeverityLevel

# ── Attribute keys ───────────────────────────────────────────────────────────

ERROR_WARN_RATE_ATTR = "error.warn.rate"
ERROR_WARN_TOTAL_ATTR = "error.warn.total"
WINDOW_MILLIS_ATTR = "window.size.millis"

ATTRIBUTE_KEYS: frozenset[str] = frozenset(
    {ERROR_WARN_RATE_ATTR, ERROR_WARN_TOTAL_ATTR, WINDOW_MILLIS_ATTR}
)

ENCODING = "utf-8"


# ── Artifact ─────────────────────────────────────────────────────────────────

class Artifact(BaseModel):
    """Rendered dictionary body plus its decision attributes."""

    content: bytes = Field(..., description="UTF-8 body, one level name per line")
    attributes: dict[str, str] = Field(
        ..., description="Decision metrics keyed by the fixed attribute names"
    )

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        return self.content.decode(ENCODING)

    def levels(self) -> list[SeverityLevel]:
        """Parse the body back into severities, preserving order."""
        return [SeverityLevel(line) for line in self.text.split("\n") if line]
