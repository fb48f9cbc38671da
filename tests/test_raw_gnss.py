import struct

import pytest

from navdecode.packet import PacketError
from navdecode.raw_gnss import RawGnssFrame, decode_raw_gnss

NAV_VALUES = (
    0.5,  # latitude
    -1.5,  # longitude
    120.0,  # height
    1.0,  # velocity north
    2.0,  # velocity east
    -0.5,  # velocity down
    0.25,  # sigma latitude
    0.75,  # sigma longitude
    1.5,  # sigma height
    0.125,  # tilt
    3.0,  # heading
    0.0625,  # sigma tilt
    0.03125,  # sigma heading
)


def _packet(seconds=1_700_000_000, microseconds=0, nav=NAV_VALUES, status=0,
            packet_id=0x1D, length=74):
    body = struct.pack("<II3d10fH", seconds, microseconds, *nav, status)
    return struct.pack("<BBBH", 0x11, packet_id, length, 0xBEEF) + body


def test_round_trip_navigation_values():
    frame = decode_raw_gnss(_packet())
    assert (
        frame.latitude,
        frame.longitude,
        frame.height,
        frame.velocity_north,
        frame.velocity_east,
        frame.velocity_down,
        frame.sigma_latitude,
        frame.sigma_longitude,
        frame.sigma_height,
        frame.tilt,
        frame.heading,
        frame.sigma_tilt,
        frame.sigma_heading,
    ) == NAV_VALUES


def test_unix_time_whole_seconds():
    frame = decode_raw_gnss(_packet(seconds=1_700_000_000, microseconds=0))
    assert frame.unix_time == 1_700_000_000.0


def test_unix_time_with_microseconds():
    frame = decode_raw_gnss(_packet(seconds=1000, microseconds=500_000))
    assert frame.unix_time == pytest.approx(1000.5)


def test_maximum_microseconds_accepted():
    frame = decode_raw_gnss(_packet(seconds=10, microseconds=999_999))
    assert 10.0 < frame.unix_time < 11.0


def test_invalid_microseconds_raises():
    with pytest.raises(PacketError, match="Invalid microseconds"):
        decode_raw_gnss(_packet(microseconds=1_000_000))


def test_zero_status_clears_flags():
    frame = decode_raw_gnss(_packet(status=0))
    assert frame.gnss_fix_status == 0
    assert not any(
        (frame.doppler_velocity_valid, frame.time_valid, frame.external_gnss,
         frame.tilt_valid)
    )


@pytest.mark.parametrize("fix", range(8))
def test_fix_status_uses_low_three_bits(fix):
    frame = decode_raw_gnss(_packet(status=fix))
    assert frame.gnss_fix_status == fix
    assert not frame.doppler_velocity_valid


@pytest.mark.parametrize(
    "bit, name",
    [
        (3, "doppler_velocity_valid"),
        (4, "time_valid"),
        (5, "external_gnss"),
        (6, "tilt_valid"),
    ],
)
def test_each_status_flag(bit, name):
    frame = decode_raw_gnss(_packet(status=1 << bit))
    flags = {
        "doppler_velocity_valid": frame.doppler_velocity_valid,
        "time_valid": frame.time_valid,
        "external_gnss": frame.external_gnss,
        "tilt_valid": frame.tilt_valid,
    }
    assert flags.pop(name) is True
    assert not any(flags.values())
    assert frame.gnss_fix_status == 0


def test_high_status_bits_are_ignored():
    frame = decode_raw_gnss(_packet(status=0xFF80))
    assert frame.gnss_fix_status == 0
    assert not any(
        (frame.doppler_velocity_valid, frame.time_valid, frame.external_gnss,
         frame.tilt_valid)
    )


def test_all_status_bits_set():
    frame = decode_raw_gnss(_packet(status=0x7F))
    assert frame.gnss_fix_status == 7
    assert all(
        (frame.doppler_velocity_valid, frame.time_valid, frame.external_gnss,
         frame.tilt_valid)
    )


def test_frame_matches_constructed_frame():
    frame = decode_raw_gnss(_packet(seconds=42, status=0x12))
    expected = RawGnssFrame(
        42.0,
        *NAV_VALUES,
        gnss_fix_status=2,
        time_valid=True,
    )
    assert frame == expected


def test_wrong_packet_id_raises():
    with pytest.raises(PacketError, match="Invalid packet ID"):
        decode_raw_gnss(_packet(packet_id=0x14))


def test_wrong_declared_length_raises():
    with pytest.raises(PacketError, match="Invalid packet length"):
        decode_raw_gnss(_packet(length=73))


def test_wrong_size_raises():
    with pytest.raises(PacketError, match="Invalid packet size"):
        decode_raw_gnss(_packet()[:-1])
    with pytest.raises(PacketError, match="Invalid packet size"):
        decode_raw_gnss(_packet() + b"\x00")