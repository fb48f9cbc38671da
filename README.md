# navdecode

Decoders for the binary packets of a GNSS compass / INS unit and for a
fixed-layout 100-byte navigation message, plus a small set of navigation math
helpers built on NumPy.

## Installation

```
pip install navdecode
```

## Decoding packets

Each decoder takes one complete packet as a bytes-like object and returns a
frozen dataclass. All multi-byte values are little-endian.

| Packet | Function | Result |
|-------:|----------|--------|
| 20 (system state) | `navdecode.system_state.decode_system_state` | `SystemStateFrame` |
| 25 (velocity standard deviation) | `navdecode.sensors.decode_velocity_deviation` | `VelocityDeviationFrame` |
| 26 (orientation standard deviation) | `navdecode.sensors.decode_orientation_deviation` | `OrientationDeviationFrame` |
| 28 (raw sensors) | `navdecode.sensors.decode_raw_sensors` | `RawSensorsFrame` |
| 29 (raw GNSS) | `navdecode.raw_gnss.decode_raw_gnss` | `RawGnssFrame` |
| 100-byte navigation message | `navdecode.nav_message.decode_nav_message` | `NavMessageFrame` |

Packets 20, 25, 26, 28 and 29 start with a 5-byte header (LRC, packet ID,
payload length, CRC16) followed by the payload. Their decoders raise
`navdecode.packet.PacketError` (a subclass of `ValueError`) when the total
size, the packet ID or the declared payload length is wrong; packets 20 and 29
also raise it when the microsecond count of the time field is above 999999.

```python
from navdecode.packet import PacketError
from navdecode.system_state import decode_system_state

try:
    frame = decode_system_state(packet)
except PacketError as exc:
    print(f"dropped packet: {exc}")
else:
    print(frame.unix_time, frame.latitude, frame.longitude, frame.gnss_fix_status)
```

The header checks are available on their own:

- `navdecode.packet.validate_packet(packet, packet_id, data_size)` checks the
  packet and returns a `PacketHeader` with `lrc`, `packet_id`, `length` and
  `crc`.
- `PacketHeader.from_bytes(packet)` parses the first five bytes only.
- `navdecode.packet.decode_unix_time(seconds, microseconds)` combines the split
  time fields into seconds as a float.

### The navigation message

The navigation message has no header: it is exactly 100 bytes — latitude and
longitude as doubles, nineteen floats (altitude, roll, pitch, yaw, body
velocities U/V/W and P/Q/R, body accelerations U/V/W and P/Q/R, and N/E/D
velocities), then a raw timestamp as a double. `decode_nav_message` raises
`PacketError` only when the size is not 100 bytes. The timestamp in the
result has a linear clock correction applied, which is also available as
`navdecode.nav_message.corrected_timestamp(raw)`.

## Navigation math

`navdecode.navmath` provides:

- `symmetrical_angle(x)` – wrap an angle (or array of angles) into [-π, π).
- `normalize(u)` – unit vector as a 1-D array; a near-zero input gives
  `[1, 0, ...]` and an empty input gives an empty array.
- `lla_to_ned(lat, lon, alt, origin_lat, origin_lon, origin_alt)` – one
  WGS84 geodetic point (radians, metres) to local north/east/down metres,
  as an array `[N, E, D]`.
- `lla_to_ned_array(lat, lon, alt, origin_lat, origin_lon, origin_alt)` – the
  same for arrays, returning an `(n, 3)` array of N, E, D columns.
- `get_quat(roll, pitch, yaw)` – unit quaternion `[qw, qx, qy, qz]`.
- `cb2n(q)` – body-to-navigation rotation matrix of a quaternion; anything
  other than four values gives the identity.
- `transform_matrix(x)` – 4×4 homogeneous transform from
  `[px, py, pz, qw, qx, qy, qz]`; fewer than seven values give the identity.

The LLA conversions raise `ValueError` for a latitude outside [-π/2, π/2];
`lla_to_ned_array` also raises it for empty inputs or inputs of different
sizes.

```python
import math
from navdecode.navmath import get_quat, cb2n, lla_to_ned

q = get_quat(0.0, 0.0, math.pi / 2)
print(cb2n(q))
print(lla_to_ned(0.8001, 0.2001, 110.0, 0.8, 0.2, 100.0))
```

## What it does not do

navdecode decodes packets that have already been cut out of the byte stream.
It does not open serial ports or sockets, find packet boundaries in a stream,
or dispatch packets by ID. The LRC and CRC fields of the header are parsed
into `PacketHeader` but never verified. There is no command-line tool.

## Running the tests

```
pip install navdecode[test]
pytest
```