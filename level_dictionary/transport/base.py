"""Transport-side shapes and the packet builder seam.

A pipeline stage receives WindowRecords from the tuple transport and hands
DataPackets to the outbound transport.  Builders sit between the two.

Architectural rules:
    1. Builders must NOT mutate the incoming record.
    2. create_packet() must return a complete DataPacket or raise.
    3. No decision logic lives inside a builder, only extraction and mapping.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field


class WindowRecord(BaseModel):
    """Positional record emitted by the windowed aggregator."""

    values: tuple[Any, ...] = Field(default_factory=tuple, description="Record fields by position")

    model_config = {"frozen": True}

    def get_value(self, index: int) -> Any:
        return self.values[index]


class DataPacket(BaseModel):
    """Outbound packet: raw content plus string attributes."""

    content: bytes
    attributes: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}


class PacketBuildError(Exception):
    """Raised when a builder cannot turn a record into a packet."""

    def __init__(self, builder_name: str, reason: str) -> None:
        self.builder_name = builder_name
        self.reason = reason
        super().__init__(f"Builder '{builder_name}' failed: {reason}")


class DataPacketBuilder(ABC):
    """Base class for turning inbound records into outbound packets."""

    @abstractmethod
    def create_packet(self, record: WindowRecord) -> DataPacket:
        """Build a DataPacket from *record*.

        Raises:
            PacketBuildError: If the record does not carry what the builder needs.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this builder, used in errors and logs."""
        ...
