"""Decoder for the fixed-size navigation message (no header, 100 bytes)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from navdecode.packet import PacketError

NAV_MESSAGE_SIZE = 100

# Linear clock correction applied to the raw timestamp.
TIMESTAMP_CORRECTION = 17.427051482643094
TIMESTAMP_GAIN = 2.224677453845612e-05

_BODY = struct.Struct("<2d19fd")

_FLOAT_FIELDS = (
    "altitude",
    "roll",
    "pitch",
    "yaw",
    "vel_u",
    "vel_v",
    "vel_w",
    "vel_p",
    "vel_q",
    "vel_r",
    "acc_u",
    "acc_v",
    "acc_w",
    "acc_p",
    "acc_q",
    "acc_r",
    "vel_n",
    "vel_e",
    "vel_d",
)


@dataclass(frozen=True)
class NavMessageFrame:
    """Navigation state: position, attitude, body rates and NED velocity."""

    timestamp: float = 0.0  # UTC second of the day
    latitude: float = 0.0  # rad
    longitude: float = 0.0  # rad
    altitude: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
    vel_u: float = 0.0
    vel_v: float = 0.0
    vel_w: float = 0.0
    vel_p: float = 0.0
    vel_q: float = 0.0
    vel_r: float = 0.0
    acc_u: float = 0.0
    acc_v: float = 0.0
    acc_w: float = 0.0
    acc_p: float = 0.0
    acc_q: float = 0.0
    acc_r: float = 0.0
    vel_n: float = 0.0
    vel_e: float = 0.0
    vel_d: float = 0.0


def corrected_timestamp(raw: float) -> float:
    """Apply the clock drift and offset correction to a raw timestamp."""
    return raw - (raw * TIMESTAMP_GAIN + TIMESTAMP_CORRECTION)


def decode_nav_message(packet: bytes) -> NavMessageFrame:
    """Decode a 100-byte navigation message into a :class:`NavMessageFrame`."""
    data = bytes(packet)
    if len(data) != NAV_MESSAGE_SIZE:
        raise PacketError(
            f"Invalid packet size: {len(data)}, expected: {NAV_MESSAGE_SIZE}"
        )
    latitude, longitude, *values, raw_timestamp = _BODY.unpack(data)
    return NavMessageFrame(
        timestamp=corrected_timestamp(raw_timestamp),
        latitude=latitude,
        longitude=longitude,
        **dict(zip(_FLOAT_FIELDS, values)),
    )