"""Wire format of the packets a webcam station sends to its receivers."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

APP_TITLE = "Webcam"

# One byte of type, three bytes of padding, then a little-endian 32-bit size.
_HEADER = struct.Struct("<B3xI")
HEADER_SIZE = _HEADER.size


class PacketType(enum.IntEnum):
    """Kind of payload a packet carries."""

    VIDEO = 0
    AUDIO = 1


@dataclass(frozen=True)
class PacketHeader:
    """Type and payload size that precede every packet's payload."""

    type: int
    size: int

    def __post_init__(self) -> None:
        if not 0 <= self.type <= 0xFF:
            raise ValueError("packet type must fit in one byte")
        if not 0 <= self.size <= 0xFFFFFFFF:
            raise ValueError("payload size must fit in 32 bits")

    def pack(self) -> bytes:
        """Serialise the header."""
        return _HEADER.pack(self.type, self.size)

    @classmethod
    def unpack(cls, data: bytes) -> "PacketHeader":
        """Read a header from the start of ``data``."""
        if len(data) < HEADER_SIZE:
            raise ValueError("data too short for a packet header")
        raw_type, size = _HEADER.unpack_from(data)
        try:
            packet_type: int = PacketType(raw_type)
        except ValueError:
            packet_type = raw_type
        return cls(packet_type, size)


def encode_packet(packet_type: int, payload: bytes) -> bytes:
    """Build a packet of the given type around ``payload``."""
    body = bytes(payload)
    return PacketHeader(packet_type, len(body)).pack() + body


def decode_packet(data: bytes) -> tuple[PacketHeader, bytes]:
    """Split a packet into its header and the payload the header announces."""
    header = PacketHeader.unpack(data)
    payload = bytes(data[HEADER_SIZE:HEADER_SIZE + header.size])
    if len(payload) < header.size:
        raise ValueError("packet payload is truncated")
    return header, payload