"""Decoder for the raw GNSS packet (id 29)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from navdecode.packet import HEADER_SIZE, decode_unix_time, validate_packet

RAW_GNSS_PACKET_ID = 0x1D
RAW_GNSS_DATA_SIZE = 74

_BODY = struct.Struct("<II3d10fH")

_STATUS_BITS = {
    "doppler_velocity_valid": 3,
    "time_valid": 4,
    "external_gnss": 5,
    "tilt_valid": 6,
}

_NAV_FIELDS = (
    "latitude",
    "longitude",
    "height",
    "velocity_north",
    "velocity_east",
    "velocity_down",
    "sigma_latitude",
    "sigma_longitude",
    "sigma_height",
    "tilt",
    "heading",
    "sigma_tilt",
    "sigma_heading",
)


@dataclass(frozen=True)
class RawGnssFrame:
    """Position, velocity, tilt and heading straight from the GNSS receiver."""

    unix_time: float = 0.0
    latitude: float = 0.0  # rad
    longitude: float = 0.0  # rad
    height: float = 0.0  # m
    velocity_north: float = 0.0  # m/s
    velocity_east: float = 0.0
    velocity_down: float = 0.0
    sigma_latitude: float = 0.0  # m
    sigma_longitude: float = 0.0
    sigma_height: float = 0.0
    tilt: float = 0.0  # rad
    heading: float = 0.0  # rad
    sigma_tilt: float = 0.0  # rad
    sigma_heading: float = 0.0  # rad

    gnss_fix_status: int = 0
    doppler_velocity_valid: bool = False
    time_valid: bool = False
    external_gnss: bool = False
    tilt_valid: bool = False


def decode_raw_gnss(packet: bytes) -> RawGnssFrame:
    """Decode a 79-byte raw GNSS packet into a :class:`RawGnssFrame`."""
    data = bytes(packet)
    validate_packet(data, RAW_GNSS_PACKET_ID, RAW_GNSS_DATA_SIZE)

    seconds, microseconds, *values, status = _BODY.unpack_from(data, HEADER_SIZE)
    unix_time = decode_unix_time(seconds, microseconds)

    return RawGnssFrame(
        unix_time=unix_time,
        **dict(zip(_NAV_FIELDS, values)),
        gnss_fix_status=status & 0x07,
        **{name: bool(status >> bit & 1) for name, bit in _STATUS_BITS.items()},
    )