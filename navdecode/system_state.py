"""Decoder for the system state packet (id 20)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from navdecode.packet import HEADER_SIZE, decode_unix_time, validate_packet

SYSTEM_STATE_PACKET_ID = 0x14
SYSTEM_STATE_DATA_SIZE = 100

_BODY = struct.Struct("<HHII3d16f")

_SYSTEM_STATUS_BITS = {
    "system_failure": 0,
    "accelerometer_sensor_failure": 1,
    "gyroscope_sensor_failure": 2,
    "magnetometer_sensor_failure": 3,
    "gnss_failure_secondary_antenna": 4,
    "gnss_failure_primary_antenna": 5,
    "accelerometer_over_range": 6,
    "gyroscope_over_range": 7,
    "magnetometer_over_range": 8,
    "minimum_temperature_alarm": 10,
    "maximum_temperature_alarm": 11,
    "gnss_antenna_connection_broken": 14,
    "data_output_overflow_alarm": 15,
}

_FILTER_STATUS_BITS = {
    "orientation_filter_initialised": 0,
    "navigation_filter_initialised": 1,
    "heading_initialised": 2,
    "utc_time_initialised": 3,
    "event1": 7,
    "event2": 8,
    "internal_gnss_enabled": 9,
    "dual_antenna_heading_active": 10,
    "velocity_heading_enabled": 11,
    "gnss_fix_interrupted": 12,
    "external_position_active": 13,
    "external_velocity_active": 14,
    "external_heading_active": 15,
}

_NAV_FIELDS = (
    "latitude",
    "longitude",
    "altitude",
    "velocity_north",
    "velocity_east",
    "velocity_down",
    "accel_x",
    "accel_y",
    "accel_z",
    "g_force",
    "roll",
    "pitch",
    "yaw",
    "angular_velocity_x",
    "angular_velocity_y",
    "angular_velocity_z",
    "sigma_latitude",
    "sigma_longitude",
    "sigma_altitude",
)


@dataclass(frozen=True)
class SystemStateFrame:
    """Status flags and navigation solution from a system state packet."""

    # System status
    system_failure: bool = False
    accelerometer_sensor_failure: bool = False
    gyroscope_sensor_failure: bool = False
    magnetometer_sensor_failure: bool = False
    gnss_failure_secondary_antenna: bool = False
    gnss_failure_primary_antenna: bool = False
    accelerometer_over_range: bool = False
    gyroscope_over_range: bool = False
    magnetometer_over_range: bool = False
    minimum_temperature_alarm: bool = False
    maximum_temperature_alarm: bool = False
    gnss_antenna_connection_broken: bool = False
    data_output_overflow_alarm: bool = False

    # Filter status
    orientation_filter_initialised: bool = False
    navigation_filter_initialised: bool = False
    heading_initialised: bool = False
    utc_time_initialised: bool = False
    gnss_fix_status: int = 0
    event1: bool = False
    event2: bool = False
    internal_gnss_enabled: bool = False
    dual_antenna_heading_active: bool = False
    velocity_heading_enabled: bool = False
    gnss_fix_interrupted: bool = False
    external_position_active: bool = False
    external_velocity_active: bool = False
    external_heading_active: bool = False

    # Navigation data (angles in radians, distances in metres)
    unix_time: float = 0.0
    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0
    velocity_north: float = 0.0
    velocity_east: float = 0.0
    velocity_down: float = 0.0
    accel_x: float = 0.0
    accel_y: float = 0.0
    accel_z: float = 0.0
    g_force: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
    angular_velocity_x: float = 0.0
    angular_velocity_y: float = 0.0
    angular_velocity_z: float = 0.0
    sigma_latitude: float = 0.0
    sigma_longitude: float = 0.0
    sigma_altitude: float = 0.0


def _flags(value: int, bits: dict[str, int]) -> dict[str, bool]:
    return {name: bool(value >> bit & 1) for name, bit in bits.items()}


def decode_system_state(packet: bytes) -> SystemStateFrame:
    """Decode a 105-byte system state packet into a :class:`SystemStateFrame`."""
    data = bytes(packet)
    validate_packet(data, SYSTEM_STATE_PACKET_ID, SYSTEM_STATE_DATA_SIZE)

    system_status, filter_status, seconds, microseconds, *values = _BODY.unpack_from(
        data, HEADER_SIZE
    )
    unix_time = decode_unix_time(seconds, microseconds)

    return SystemStateFrame(
        **_flags(system_status, _SYSTEM_STATUS_BITS),
        **_flags(filter_status, _FILTER_STATUS_BITS),
        gnss_fix_status=(filter_status >> 4) & 0x07,
        unix_time=unix_time,
        **dict(zip(_NAV_FIELDS, values)),
    )