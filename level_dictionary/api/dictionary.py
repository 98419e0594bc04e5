"""REST endpoint for dictionary generation.

Path: POST /api/dictionary

Accepts one window of level counts, runs it through the packet builder and
returns the rendered dictionary text with its attributes.  The request body
is validated at the boundary; the policy itself never sees malformed JSON.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from level_dictionary.core.policy import PolicyInputError
from level_dictionary.domain.artifact import ENCODING
from level_dictionary.domain.counts import LevelCounts
from level_dictionary.transport.base import WindowRecord
from level_dictionary.transport.dictionary_builder import DictionaryPacketBuilder

logger = logging.getLogger(__name__)


def create_dictionary_router(builder: DictionaryPacketBuilder) -> APIRouter:
    """Factory that wires the dictionary endpoint to a concrete builder."""

    router = APIRouter(prefix="/api", tags=["dictionary"])

    @router.post("/dictionary")
    async def build_dictionary(counts: LevelCounts) -> dict[str, Any]:
        """Decide the next cycle's levels for one window of counts."""
        try:
            packet = builder.create_packet(WindowRecord(values=(counts,)))
        except PolicyInputError as exc:
            logger.warning("Rejected window counts: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        return {
            "content": packet.content.decode(ENCODING),
            "attributes": packet.attributes,
        }

    return router
