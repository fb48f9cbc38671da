import struct

import pytest

from navdecode.nav_message import (
    NAV_MESSAGE_SIZE,
    TIMESTAMP_CORRECTION,
    NavMessageFrame,
    decode_nav_message,
)
from navdecode.packet import PacketError

FLOATS = [
    10.5, 0.25, -0.5, 1.0,
    2.0, 3.0, 4.0,
    5.0, 6.0, 7.0,
    8.0, 9.0, 10.0,
    11.0, 12.0, 13.0,
    -1.0, -2.0, -3.0,
]


def _packet(lat=0.9, lon=0.2, floats=FLOATS, timestamp=0.0):
    return struct.pack("<2d19fd", lat, lon, *floats, timestamp)


def test_100_byte_packet_is_accepted():
    packet = _packet()
    assert len(packet) == 100
    assert decode_nav_message(packet).latitude == 0.9
    with pytest.raises(PacketError, match="Invalid packet size"):
        decode_nav_message(packet[:-1])


def test_decodes_all_fields():
    frame = decode_nav_message(_packet())
    assert frame.latitude == 0.9
    assert frame.longitude == 0.2
    assert (
        frame.altitude, frame.roll, frame.pitch, frame.yaw,
        frame.vel_u, frame.vel_v, frame.vel_w,
        frame.vel_p, frame.vel_q, frame.vel_r,
        frame.acc_u, frame.acc_v, frame.acc_w,
        frame.acc_p, frame.acc_q, frame.acc_r,
        frame.vel_n, frame.vel_e, frame.vel_d,
    ) == tuple(FLOATS)


def test_zero_raw_timestamp_gives_negative_correction():
    frame = decode_nav_message(_packet(timestamp=0.0))
    assert frame.timestamp == -TIMESTAMP_CORRECTION


def test_timestamp_is_monotonic():
    early = decode_nav_message(_packet(timestamp=1000.0)).timestamp
    late = decode_nav_message(_packet(timestamp=2000.0)).timestamp
    assert late > early
    assert early < 1000.0


def test_accepts_bytearray():
    assert decode_nav_message(bytearray(_packet())) == decode_nav_message(_packet())


def test_all_zero_fields_except_timestamp():
    frame = decode_nav_message(bytes(NAV_MESSAGE_SIZE))
    assert frame == NavMessageFrame(timestamp=-TIMESTAMP_CORRECTION)


@pytest.mark.parametrize("size", [0, 99, 101, 105])
def test_wrong_size_raises(size):
    with pytest.raises(PacketError, match="Invalid packet size"):
        decode_nav_message(bytes(size))