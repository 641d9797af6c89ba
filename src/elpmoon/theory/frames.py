# theory/frames.py

from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from ..core.errors import ContractViolation
from ..core.types import CartesianPoint, SphericalPoint
from .series import ARCSEC_TO_RAD

ARCSEC_PER_TURN = 1296000.0


# ------------------------------------------------------------
# Of-date branch
# ------------------------------------------------------------

def precession_of_date(t: float) -> float:
    """Accumulated lunisolar precession in longitude from J2000 to t (arcsec)."""
    return t * (5029.0966 + t * (1.1120 + t * (0.000077 - 0.00002353 * t)))


def to_date(point: SphericalPoint, t: float) -> SphericalPoint:
    """Refer an ELP-frame position to the mean ecliptic and equinox of date."""
    return SphericalPoint(point.longitude + precession_of_date(t), point.latitude, point.distance)


# ------------------------------------------------------------
# Spherical <-> rectangular
# ------------------------------------------------------------

def spherical_to_cartesian(point: SphericalPoint) -> CartesianPoint:
    lon = point.longitude * ARCSEC_TO_RAD
    lat = point.latitude * ARCSEC_TO_RAD
    r = point.distance
    return CartesianPoint(
        r * math.cos(lon) * math.cos(lat),
        r * math.sin(lon) * math.cos(lat),
        r * math.sin(lat),
    )


def cartesian_to_spherical(point: CartesianPoint) -> SphericalPoint:
    """Inverse of spherical_to_cartesian; longitude in [0, 1296000) arcsec."""
    x, y, z = point.x, point.y, point.z
    rho = math.hypot(x, y)
    lon = math.atan2(y, x) / ARCSEC_TO_RAD % ARCSEC_PER_TURN
    lat = math.atan2(z, rho) / ARCSEC_TO_RAD
    return SphericalPoint(lon, lat, math.hypot(rho, z))


# ------------------------------------------------------------
# ELP frame -> mean ecliptic and equinox of J2000 (Laskar's p, q)
# ------------------------------------------------------------

P_COEFFICIENTS = (0.0, 0.10180391e-4, 0.47020439e-6, -0.5417367e-9, -0.2507948e-11, 0.463486e-14)
Q_COEFFICIENTS = (0.0, -0.113469002e-3, 0.12372674e-6, 0.12654170e-8, -0.1371808e-11, -0.320334e-14)


def laskar_pq(t: float) -> Tuple[float, float]:
    p = float(np.polynomial.polynomial.polyval(t, P_COEFFICIENTS))
    q = float(np.polynomial.polynomial.polyval(t, Q_COEFFICIENTS))
    return p, q


def rotation_to_j2000(t: float) -> np.ndarray:
    """
    Rotation from the ELP frame to the mean dynamical ecliptic and equinox of J2000.

    Raises ContractViolation when 1 - p² - q² < 0, which only happens far
    outside the validity range of the theory.
    """
    p, q = laskar_pq(t)
    w = 1.0 - p * p - q * q
    if w < 0.0:
        raise ContractViolation(f"t={t}: p² + q² exceeds 1, rotation undefined")
    s = math.sqrt(w)
    return np.array([
        [1.0 - 2.0 * p * p, 2.0 * p * q, 2.0 * p * s],
        [2.0 * p * q, 1.0 - 2.0 * q * q, -2.0 * q * s],
        [-2.0 * p * s, 2.0 * q * s, 1.0 - 2.0 * p * p - 2.0 * q * q],
    ])


def to_j2000(point: CartesianPoint, t: float) -> CartesianPoint:
    return CartesianPoint.from_array(rotation_to_j2000(t) @ point.as_array())


# ------------------------------------------------------------
# Mean ecliptic J2000 -> FK5 equator
# ------------------------------------------------------------

FK5_ROTATION = np.array([
    [1.000000000000, 0.000000437913, -0.000000189859],
    [-0.000000477299, 0.917482137607, -0.397776981791],
    [0.000000000000, 0.397776981701, 0.917482137607],
])
FK5_ROTATION.setflags(write=False)


def to_fk5(point: CartesianPoint) -> CartesianPoint:
    """Mean ecliptic/equinox of J2000 -> FK5 equator (mean equator, rotational equinox of J2000)."""
    return CartesianPoint.from_array(FK5_ROTATION @ point.as_array())
