"""Tests for the packet builder seam around DictionaryPolicy."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from level_dictionary.core.policy import DictionaryPolicy, InvalidWindowError, PolicyConfig
from level_dictionary.domain.artifact import (
    ERROR_WARN_RATE_ATTR,
    ERROR_WARN_TOTAL_ATTR,
    WINDOW_MILLIS_ATTR,
)
from level_dictionary.domain.counts import LevelCounts
from level_dictionary.transport.base import DataPacket, PacketBuildError, WindowRecord
from level_dictionary.transport.dictionary_builder import DictionaryPacketBuilder


# ── Helpers ──────────────────────────────────────────────────────────────────

def _builder(window: int = 10_000, min_rate: float = 5.0, strict: bool = False) -> DictionaryPacketBuilder:
    policy = DictionaryPolicy(
        PolicyConfig(window_size_millis=window, min_rate_per_second=min_rate),
        strict=strict,
    )
    return DictionaryPacketBuilder(policy)


# ── Packet Creation ──────────────────────────────────────────────────────────


class TestPacketCreation:
    def test_level_counts_payload(self) -> None:
        counts = LevelCounts.from_mapping({"ERROR": 50, "WARN": 50})
        packet = _builder().create_packet(WindowRecord(values=(counts,)))
        assert isinstance(packet, DataPacket)
        assert packet.content == b"ERROR\nWARN\n"
        assert packet.attributes == {
            ERROR_WARN_RATE_ATTR: "10.0",
            ERROR_WARN_TOTAL_ATTR: "100",
            WINDOW_MILLIS_ATTR: "10000",
        }

    def test_mapping_payload(self) -> None:
        record = WindowRecord(values=({"error": 1, "warn": 1},))
        packet = _builder(min_rate=20.0).create_packet(record)
        assert packet.content == b"ERROR\nWARN\nINFO\nDEBUG\n"

    def test_extra_values_ignored(self) -> None:
        record = WindowRecord(values=({"ERROR": 1}, "window-42", 1_700_000_000))
        packet = _builder().create_packet(record)
        assert packet.attributes[ERROR_WARN_TOTAL_ATTR] == "1"

    def test_record_not_mutated(self) -> None:
        raw = {"ERROR": 3, "TRACE": 9}
        _builder().create_packet(WindowRecord(values=(raw,)))
        assert raw == {"ERROR": 3, "TRACE": 9}

    def test_builder_name(self) -> None:
        assert _builder().name == "dictionary"


# ── Rejection ────────────────────────────────────────────────────────────────


class TestPacketRejection:
    def test_empty_record(self) -> None:
        with pytest.raises(PacketBuildError) as exc_info:
            _builder().create_packet(WindowRecord())
        assert exc_info.value.builder_name == "dictionary"
        assert "no values" in exc_info.value.reason

    def test_wrong_payload_type(self) -> None:
        with pytest.raises(PacketBuildError) as exc_info:
            _builder().create_packet(WindowRecord(values=(["ERROR", "WARN"],)))
        assert "list" in exc_info.value.reason

    def test_invalid_mapping_chains_cause(self) -> None:
        with pytest.raises(PacketBuildError) as exc_info:
            _builder().create_packet(WindowRecord(values=({"ERROR": "lots"},)))
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_strict_policy_errors_propagate(self) -> None:
        with pytest.raises(InvalidWindowError):
            _builder(window=0, strict=True).create_packet(WindowRecord(values=({},)))
