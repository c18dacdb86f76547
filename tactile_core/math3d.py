from __future__ import annotations

from typing import Iterable, TypeAlias

import numpy as np


Vector3: TypeAlias = np.ndarray
Quaternion: TypeAlias = np.ndarray

IDENTITY_QUATERNION = np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float64)


def vec3(value: Iterable[float] | float = 0.0) -> Vector3:
    """Coerce a scalar or 3-sequence into a fresh float64 vector."""

    if isinstance(value, (int, float)):
        return np.full(3, float(value), dtype=np.float64)
    out = np.asarray(list(value), dtype=np.float64)
    if out.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {out.shape}")
    return out


def quat(value: Iterable[float] | None = None) -> Quaternion:
    """Coerce an `(x, y, z, w)` sequence into a normalized quaternion."""

    if value is None:
        return IDENTITY_QUATERNION.copy()
    out = np.asarray(list(value), dtype=np.float64)
    if out.shape != (4,):
        raise ValueError(f"expected 4 quaternion components, got shape {out.shape}")
    return quat_normalize(out)


def quat_normalize(q: Quaternion) -> Quaternion:
    norm = float(np.linalg.norm(q))
    if norm < 1e-12:
        return IDENTITY_QUATERNION.copy()
    return q / norm


def quat_multiply(a: Quaternion, b: Quaternion) -> Quaternion:
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return np.array(
        [
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
            aw * bw - ax * bx - ay * by - az * bz,
        ],
        dtype=np.float64,
    )


def quat_inverse(q: Quaternion) -> Quaternion:
    # Unit quaternions only: the conjugate is the inverse.
    return np.array([-q[0], -q[1], -q[2], q[3]], dtype=np.float64)


def quat_rotate(q: Quaternion, v: Vector3) -> Vector3:
    u = q[:3]
    w = q[3]
    t = 2.0 * np.cross(u, v)
    return v + w * t + np.cross(u, t)


def quat_from_axis_angle(axis: Iterable[float], angle_rad: float) -> Quaternion:
    a = vec3(axis)
    norm = float(np.linalg.norm(a))
    if norm < 1e-12:
        return IDENTITY_QUATERNION.copy()
    half = 0.5 * float(angle_rad)
    xyz = (a / norm) * np.sin(half)
    return np.array([xyz[0], xyz[1], xyz[2], np.cos(half)], dtype=np.float64)


def lerp_unclamped(a: Vector3, b: Vector3, t: float) -> Vector3:
    return a + (b - a) * float(t)
