"""Geodetic and attitude helpers: LLA to NED, quaternions and transforms."""

from __future__ import annotations

import math

import numpy as np

# WGS84
SEMI_MAJOR_AXIS = 6378137.0
ECCENTRICITY_SQUARED = 0.00669437999014132

_HALF_PI = math.pi / 2
_TWO_PI = 2.0 * math.pi


def _wrap(value: float) -> float:
    y = math.remainder(value, _TWO_PI)
    return -math.pi if y == math.pi else y


def symmetrical_angle(x):
    """Wrap an angle, or an array of angles, into [-pi, pi)."""
    if np.ndim(x) == 0:
        return _wrap(float(x))
    arr = np.asarray(x, dtype=float)
    flat = np.fromiter((_wrap(v) for v in arr.ravel()), dtype=float, count=arr.size)
    return flat.reshape(arr.shape)


def normalize(u) -> np.ndarray:
    """Return ``u`` scaled to unit length; a near-zero vector becomes the first axis."""
    vec = np.asarray(u, dtype=float).ravel()
    if vec.size == 0:
        return np.empty(0)
    length = float(np.linalg.norm(vec))
    if length < 1e-12:
        result = np.zeros(vec.size)
        result[0] = 1.0
        return result
    return vec / length


def _check_latitude(lat, origin_lat) -> None:
    if not (np.all(np.abs(lat) <= _HALF_PI) and abs(origin_lat) <= _HALF_PI):
        raise ValueError("Latitude must be in [-pi/2, pi/2]")


def _ned(dphi, dlam, dh, origin_lat, origin_alt):
    a = SEMI_MAJOR_AXIS
    e2 = ECCENTRICITY_SQUARED
    cp = math.cos(origin_lat)
    sp = math.sin(origin_lat)
    tmp1 = math.sqrt(1 - e2 * sp * sp)
    tmp3 = tmp1**3
    dlam2 = dlam * dlam
    dphi2 = dphi * dphi

    east = (
        (a / tmp1 + origin_alt) * cp * dlam
        - (a * (1 - e2) / tmp3 + origin_alt) * sp * dphi * dlam
        + cp * dlam * dh
    )
    north = (
        (a * (1 - e2) / tmp3 + origin_alt) * dphi
        + 1.5 * cp * sp * a * e2 * dphi2
        + sp * sp * dh * dphi
        + 0.5 * sp * cp * (a / tmp1 + origin_alt) * dlam2
    )
    down = -(
        dh
        - 0.5 * (a - 1.5 * a * e2 * cp * cp + 0.5 * a * e2 + origin_alt) * dphi2
        - 0.5 * cp * cp * (a / tmp1 - origin_alt) * dlam2
    )
    return north, east, down


def lla_to_ned(lat, lon, alt, origin_lat, origin_lon, origin_alt) -> np.ndarray:
    """Convert one latitude/longitude/altitude to north/east/down about an origin."""
    _check_latitude(lat, origin_lat)
    north, east, down = _ned(
        lat - origin_lat,
        symmetrical_angle(lon - origin_lon),
        alt - origin_alt,
        origin_lat,
        origin_alt,
    )
    return np.array([north, east, down])


def lla_to_ned_array(lat, lon, alt, origin_lat, origin_lon, origin_alt) -> np.ndarray:
    """Convert arrays of coordinates to an (n, 3) array of north, east, down."""
    lat = np.asarray(lat, dtype=float).ravel()
    lon = np.asarray(lon, dtype=float).ravel()
    alt = np.asarray(alt, dtype=float).ravel()
    if not lat.size == lon.size == alt.size:
        raise ValueError("Inputs lat, lon, alt must have the same size")
    if lat.size == 0:
        raise ValueError("Input arrays must not be empty")
    _check_latitude(lat, origin_lat)
    north, east, down = _ned(
        lat - origin_lat,
        symmetrical_angle(lon - origin_lon),
        alt - origin_alt,
        origin_lat,
        origin_alt,
    )
    return np.column_stack((north, east, down))


def get_quat(roll, pitch, yaw) -> np.ndarray:
    """Unit quaternion [qw, qx, qy, qz] from roll, pitch and yaw angles."""
    c1, s1 = math.cos(0.5 * roll), math.sin(0.5 * roll)
    c2, s2 = math.cos(0.5 * pitch), math.sin(0.5 * pitch)
    c3, s3 = math.cos(0.5 * yaw), math.sin(0.5 * yaw)
    quat = np.array(
        [
            c1 * c2 * c3 + s1 * s2 * s3,
            s1 * c2 * c3 - c1 * s2 * s3,
            c1 * s2 * c3 + s1 * c2 * s3,
            c1 * c2 * s3 - s1 * s2 * c3,
        ]
    )
    return normalize(quat)


def cb2n(q) -> np.ndarray:
    """Body-to-navigation rotation matrix for a unit quaternion [qw, qx, qy, qz]."""
    quat = np.asarray(q, dtype=float).ravel()
    if quat.size != 4:
        return np.eye(3)
    q0, q1, q2, q3 = quat
    return np.array(
        [
            [
                q0 * q0 + q1 * q1 - q2 * q2 - q3 * q3,
                2.0 * (q1 * q2 - q0 * q3),
                2.0 * (q1 * q3 + q0 * q2),
            ],
            [
                2.0 * (q1 * q2 + q0 * q3),
                q0 * q0 - q1 * q1 + q2 * q2 - q3 * q3,
                2.0 * (q2 * q3 - q0 * q1),
            ],
            [
                2.0 * (q1 * q3 - q0 * q2),
                2.0 * (q2 * q3 + q0 * q1),
                q0 * q0 - q1 * q1 - q2 * q2 + q3 * q3,
            ],
        ]
    )


def transform_matrix(x) -> np.ndarray:
    """4x4 homogeneous transform from a state [px, py, pz, qw, qx, qy, qz, ...]."""
    state = np.asarray(x, dtype=float).ravel()
    if state.size < 7:
        return np.eye(4)
    transform = np.eye(4)
    transform[:3, :3] = cb2n(state[3:7])
    transform[:3, 3] = state[:3]
    return transform