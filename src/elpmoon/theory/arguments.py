# theory/arguments.py

from __future__ import annotations

from numbers import Integral

import numpy as np
from numpy.polynomial import polynomial as P

from ..core.errors import ContractViolation


# ------------------------------------------------------------
# Series lengths
# ------------------------------------------------------------

FULL_SERIES = 5    # up to t^4
LINEAR_SERIES = 2  # constant + rate

ARCSEC_PER_HALF_TURN = 648000.0
ARCSEC_PER_TURN = 1296000.0

# Index names for the argument vectors.
W1, W2, W3, T, OBP = range(5)
D, LP, L, F = range(4)
MERCURY, VENUS, EARTH, MARS, JUPITER, SATURN, URANUS, NEPTUNE = range(8)

ELP_NAMES = ("W1", "W2", "W3", "T", "varpi'")
DELAUNAY_NAMES = ("D", "l'", "l", "F")
PLANET_NAMES = ("Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune")


# ------------------------------------------------------------
# Published constants (arcseconds, t in Julian centuries TT from J2000.0)
# Chapront-Touzé & Chapront, ELP 2000-82B explanatory note, pp. 7-10.
# ------------------------------------------------------------

# Precession constant p in J2000 ("/cy).
PRECESSION_RATE = 5029.0966

ELP_COEFFICIENTS = np.array([
    # W1: mean mean longitude of the Moon
    [785939.95571, 1732559343.73604, -5.8883, 0.006604, -0.00003169],
    # W2: mean longitude of the lunar perigee
    [300071.67475, 14643420.2632, -38.2776, -0.045047, 0.00021301],
    # W3: mean longitude of the lunar ascending node
    [450160.39816, -6967919.3622, 6.3622, 0.007625, -0.00003586],
    # T: heliocentric mean longitude of the Earth-Moon barycenter
    [361679.22059, 129597742.2758, -0.0202, 0.000009, 0.00000015],
    # varpi': mean longitude of the perihelion of the Earth-Moon barycenter
    [370574.42753, 1161.2283, 0.5327, -0.000138, 0.0],
])
ELP_COEFFICIENTS.setflags(write=False)

# Direct polynomials for D, l', l, F. The t^2 coefficient of l is 32.3893
# (W1 - W2); a dropped decimal point there (323893) is what makes the direct
# and the algebraic forms disagree.
DELAUNAY_COEFFICIENTS = np.array([
    [1072260.73512, 1602961601.4603, -5.8681, 0.006595, -0.00003184],
    [1287104.79306, 129596581.0474, -0.5529, 0.000147, 0.0],
    [485868.28096, 1717915923.4728, 32.3893, 0.051651, -0.0002447],
    [335779.55755, 1739527263.0983, -12.2505, -0.001021, 0.00000417],
])
DELAUNAY_COEFFICIENTS.setflags(write=False)

# Planetary mean longitudes (lambda_0, lambda_1), VSOP82 values.
PLANETARY_COEFFICIENTS = np.array([
    [908103.25986, 538101628.68898],   # Mercury
    [655127.28305, 210664136.43355],   # Venus
    [361679.22059, 129597742.2758],    # Earth (T)
    [1279559.78866, 68905077.59284],   # Mars
    [123665.34212, 10925660.42861],    # Jupiter
    [180278.89694, 4399609.65932],     # Saturn
    [1130598.01841, 1542481.19393],    # Uranus
    [1095655.19575, 786550.32074],     # Neptune
])
PLANETARY_COEFFICIENTS.setflags(write=False)


def _check_degree(degree) -> int:
    if isinstance(degree, bool) or not isinstance(degree, Integral):
        raise ContractViolation(f"degree must be an integer, got {degree!r}")
    if not 1 <= degree <= FULL_SERIES:
        raise ContractViolation(f"degree must be in 1..{FULL_SERIES}, got {degree}")
    return int(degree)


def _polyval_rows(coeffs: np.ndarray, t: float, degree: int) -> np.ndarray:
    # polyval runs Horner's scheme over the first axis, one polynomial per row here.
    return np.asarray(P.polyval(float(t), coeffs[:, :degree].T), dtype=float)


def precession_argument(t: float) -> float:
    """
    Precession argument ζ (arcsec): W1 truncated to its linear part plus p*t.

    Always linear, whatever the caller uses elsewhere.
    """
    w1 = _polyval_rows(ELP_COEFFICIENTS[W1:W1 + 1], t, LINEAR_SERIES)[0]
    return float(w1 + PRECESSION_RATE * t)


def elp_arguments(t: float, degree: int = FULL_SERIES) -> np.ndarray:
    """ELP arguments (W1, W2, W3, T, varpi') in arcseconds, using the first `degree` coefficients."""
    return _polyval_rows(ELP_COEFFICIENTS, t, _check_degree(degree))


def delaunay_arguments(t: float, degree: int = FULL_SERIES) -> np.ndarray:
    """
    Delaunay arguments (D, l', l, F) in arcseconds, derived from the ELP arguments:

      D  = W1 - T + 180°
      l' = T - varpi'
      l  = W1 - W2
      F  = W1 - W3
    """
    w = elp_arguments(t, degree)
    return np.array([
        w[W1] - w[T] + ARCSEC_PER_HALF_TURN,
        w[T] - w[OBP],
        w[W1] - w[W2],
        w[W1] - w[W3],
    ])


def delaunay_arguments_from_series(t: float, degree: int = FULL_SERIES) -> np.ndarray:
    """Delaunay arguments from their own published polynomials. Diagnostics only."""
    return _polyval_rows(DELAUNAY_COEFFICIENTS, t, _check_degree(degree))


def planetary_arguments(t: float) -> np.ndarray:
    """Mean longitudes of Mercury..Neptune (arcsec), strictly linear in t."""
    return PLANETARY_COEFFICIENTS[:, 0] + PLANETARY_COEFFICIENTS[:, 1] * float(t)


def wrap_arcsec(x):
    """Reduce arcseconds to [-648000, 648000)."""
    return (np.asarray(x) + ARCSEC_PER_HALF_TURN) % ARCSEC_PER_TURN - ARCSEC_PER_HALF_TURN
