"""Decoders for the deviation packets (ids 25, 26) and the raw sensors packet (id 28)."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from navdecode.packet import HEADER_SIZE, validate_packet

VELOCITY_DEVIATION_PACKET_ID = 0x19
ORIENTATION_DEVIATION_PACKET_ID = 0x1A
RAW_SENSORS_PACKET_ID = 0x1C

VELOCITY_DEVIATION_DATA_SIZE = 12
ORIENTATION_DEVIATION_DATA_SIZE = 12
RAW_SENSORS_DATA_SIZE = 48

_TRIPLE = struct.Struct("<3f")
_RAW_SENSORS = struct.Struct("<12f")


@dataclass(frozen=True)
class VelocityDeviationFrame:
    """Standard deviations of the north, east and down velocity in m/s."""

    sigma_velocity_north: float = 0.0
    sigma_velocity_east: float = 0.0
    sigma_velocity_down: float = 0.0


@dataclass(frozen=True)
class OrientationDeviationFrame:
    """Standard deviations of roll, pitch and heading in radians."""

    sigma_roll: float = 0.0
    sigma_pitch: float = 0.0
    sigma_heading: float = 0.0


@dataclass(frozen=True)
class RawSensorsFrame:
    """IMU and environmental sensor measurements."""

    accel_x: float = 0.0  # m/s^2
    accel_y: float = 0.0
    accel_z: float = 0.0
    gyro_x: float = 0.0  # rad/s
    gyro_y: float = 0.0
    gyro_z: float = 0.0
    mag_x: float = 0.0  # mG
    mag_y: float = 0.0
    mag_z: float = 0.0
    imu_temperature: float = 0.0  # deg C
    pressure: float = 0.0  # Pa
    pressure_temperature: float = 0.0  # deg C


def decode_velocity_deviation(packet: bytes) -> VelocityDeviationFrame:
    """Decode a 17-byte velocity standard deviation packet."""
    data = bytes(packet)
    validate_packet(data, VELOCITY_DEVIATION_PACKET_ID, VELOCITY_DEVIATION_DATA_SIZE)
    north, east, down = _TRIPLE.unpack_from(data, HEADER_SIZE)
    return VelocityDeviationFrame(
        sigma_velocity_north=north,
        sigma_velocity_east=east,
        sigma_velocity_down=down,
    )


def decode_orientation_deviation(packet: bytes) -> OrientationDeviationFrame:
    """Decode a 17-byte orientation standard deviation packet."""
    data = bytes(packet)
    validate_packet(
        data, ORIENTATION_DEVIATION_PACKET_ID, ORIENTATION_DEVIATION_DATA_SIZE
    )
    roll, pitch, heading = _TRIPLE.unpack_from(data, HEADER_SIZE)
    return OrientationDeviationFrame(
        sigma_roll=roll, sigma_pitch=pitch, sigma_heading=heading
    )


def decode_raw_sensors(packet: bytes) -> RawSensorsFrame:
    """Decode a 53-byte raw sensors packet."""
    data = bytes(packet)
    validate_packet(data, RAW_SENSORS_PACKET_ID, RAW_SENSORS_DATA_SIZE)
    (
        accel_x,
        accel_y,
        accel_z,
        gyro_x,
        gyro_y,
        gyro_z,
        mag_x,
        mag_y,
        mag_z,
        imu_temperature,
        pressure,
        pressure_temperature,
    ) = _RAW_SENSORS.unpack_from(data, HEADER_SIZE)
    return RawSensorsFrame(
        accel_x=accel_x,
        accel_y=accel_y,
        accel_z=accel_z,
        gyro_x=gyro_x,
        gyro_y=gyro_y,
        gyro_z=gyro_z,
        mag_x=mag_x,
        mag_y=mag_y,
        mag_z=mag_z,
        imu_temperature=imu_temperature,
        pressure=pressure,
        pressure_temperature=pressure_temperature,
    )