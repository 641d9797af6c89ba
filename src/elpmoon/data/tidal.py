# data/tidal.py
"""Tidal effects (ELP22-ELP27).

Series form: Σ A sin(i₁ζ + i₂D + i₃l' + i₄l + i₅F + φ).
Rows of *_MULTIPLIERS are (ζ, D, l', l, F); rows of *_COEFFICIENTS are
(φ degrees, A arcsec or km, P years). The *_1 tables are multiplied by t.
"""

LONGITUDE_0_MULTIPLIERS = (
    (0, 1, 1, -1, -1),
    (0, 1, 1, 0, -1),
    (0, 1, 1, 1, -1),
)

LATITUDE_0_MULTIPLIERS = (
    (0, 1, 1, 0, -2),
    (0, 1, 1, 0, 0),
)

DISTANCE_0_MULTIPLIERS = (
    (0, 1, 1, -1, -1),
    (0, 1, 1, 1, -1),
)

LONGITUDE_0_COEFFICIENTS = (
    (192.93665, 0.00004, 0.075),
    (192.93665, 0.00082, 18.600),
    (192.93665, 0.00004, 0.076),
)

LATITUDE_0_COEFFICIENTS = (
    (192.93663, 0.00004, 0.074),
    (192.93664, 0.00004, 0.075),
)

DISTANCE_0_COEFFICIENTS = (
    (282.93665, 0.00004, 0.075),
    (102.93665, 0.00004, 0.076),
)

LONGITUDE_1_MULTIPLIERS = (
    (0, 0, 0, 1, 0),
    (0, 0, 0, 2, 0),
    (0, 2, 0, -2, 0),
    (0, 2, 0, -1, 0),
    (0, 2, 0, 0, 0),
    (0, 2, 0, 1, 0),
)

LATITUDE_1_MULTIPLIERS = (
    (0, 0, 0, 0, 1),
    (0, 0, 0, 1, -1),
    (0, 0, 0, 1, 1),
    (0, 2, 0, 0, -1),
)

DISTANCE_1_MULTIPLIERS = (
    (0, 0, 0, 0, 0),
    (0, 0, 0, 1, 0),
    (0, 0, 0, 2, 0),
    (0, 2, 0, -1, 0),
    (0, 2, 0, 0, 0),
)

LONGITUDE_1_COEFFICIENTS = (
    (0.00000, 0.00058, 0.075),
    (0.00000, 0.00004, 0.038),
    (0.00000, 0.00002, 0.564),
    (0.00000, 0.00021, 0.087),
    (0.00000, 0.00009, 0.040),
    (0.00000, 0.00001, 0.026),
)

LATITUDE_1_COEFFICIENTS = (
    (180.00000, 0.00005, 0.075),
    (0.00000, 0.00003, 5.997),
    (0.00000, 0.00003, 0.037),
    (0.00000, 0.00001, 0.088),
)

DISTANCE_1_COEFFICIENTS = (
    (90.00000, 0.00356, 99999.999),
    (270.00000, 0.00072, 0.075),
    (270.00000, 0.00003, 0.038),
    (270.00000, 0.00019, 0.087),
    (270.00000, 0.00013, 0.040),
)
