"""DictionaryPacketBuilder — wraps DictionaryPolicy as a packet builder.

Expected record layout:
    values[0]: LevelCounts, or a mapping such as {"ERROR": 12, "WARN": 40}

The window size is not read from the record; it comes from the policy's
configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from level_dictionary.core.policy import DictionaryPolicy
from level_dictionary.domain.counts import LevelCounts
from level_dictionary.transport.base import (
    DataPacket,
    DataPacketBuilder,
    PacketBuildError,
    WindowRecord,
)

logger = logging.getLogger(__name__)


class DictionaryPacketBuilder(DataPacketBuilder):
    """Builds dictionary packets from windowed level-count records."""

    def __init__(self, policy: DictionaryPolicy) -> None:
        self._policy = policy

    @property
    def name(self) -> str:
        return "dictionary"

    def create_packet(self, record: WindowRecord) -> DataPacket:
        counts = self._extract_counts(record)
        artifact = self._policy.build(counts)
        return DataPacket(content=artifact.content, attributes=dict(artifact.attributes))

    def _extract_counts(self, record: WindowRecord) -> LevelCounts:
        if not record.values:
            raise self._fail("record has no values")

        payload = record.get_value(0)
        if isinstance(payload, LevelCounts):
            return payload
        if isinstance(payload, Mapping):
            try:
                return LevelCounts.from_mapping(payload)
            except ValidationError as exc:
                raise self._fail(f"invalid level counts: {exc}") from exc

        raise self._fail(f"expected level counts, got {type(payload).__name__}")

    def _fail(self, reason: str) -> PacketBuildError:
        logger.warning("Builder '%s' rejected record: %s", self.name, reason)
        return PacketBuildError(self.name, reason)
