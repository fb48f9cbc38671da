"""Common framing for binary navigation packets: header parsing and checks."""

from __future__ import annotations

import struct
from dataclasses import dataclass

HEADER_SIZE = 5
MAX_MICROSECONDS = 999_999

_HEADER = struct.Struct("<BBBH")


class PacketError(ValueError):
    """Raised when a packet is malformed or does not match the expected type."""


@dataclass(frozen=True)
class PacketHeader:
    """The 5-byte header: LRC, packet id, data length and CRC16 of the data."""

    lrc: int
    packet_id: int
    length: int
    crc: int

    @classmethod
    def from_bytes(cls, packet: bytes) -> PacketHeader:
        """Parse the header from the first five bytes of ``packet``."""
        data = bytes(packet)
        if len(data) < HEADER_SIZE:
            raise PacketError(
                f"Packet too short for header: {len(data)} bytes, need {HEADER_SIZE}"
            )
        lrc, packet_id, length, crc = _HEADER.unpack_from(data, 0)
        return cls(lrc=lrc, packet_id=packet_id, length=length, crc=crc)


def validate_packet(packet: bytes, packet_id: int, data_size: int) -> PacketHeader:
    """Check total size, packet id and declared length; return the parsed header."""
    data = bytes(packet)
    expected_size = HEADER_SIZE + data_size
    if len(data) != expected_size:
        raise PacketError(
            f"Invalid packet size: {len(data)}, expected: {expected_size}"
        )
    header = PacketHeader.from_bytes(data)
    if header.packet_id != packet_id:
        raise PacketError(
            f"Invalid packet ID: 0x{header.packet_id:x} (expected 0x{packet_id:X})"
        )
    if header.length != data_size:
        raise PacketError(
            f"Invalid packet length: {header.length}, expected: {data_size}"
        )
    return header


def decode_unix_time(seconds: int, microseconds: int) -> float:
    """Combine whole seconds and microseconds into a float Unix time."""
    if not 0 <= microseconds <= MAX_MICROSECONDS:
        raise PacketError(
            f"Invalid microseconds: {microseconds} (expected 0-{MAX_MICROSECONDS})"
        )
    return float(seconds) + float(microseconds) * 1e-6