# data/earth_figure.py
"""Abbreviated Earth figure perturbations (ELP4-ELP9).

Series form: Σ A sin(i₁ζ + i₂D + i₃l' + i₄l + i₅F + φ).
Only the leading ζ terms are bundled (the flattening terms of Meeus,
Astronomical Algorithms ch. 47, rewritten with ζ in place of L').
The *_1 tables are the ×t parts of the series and are empty here.
"""

LONGITUDE_0_MULTIPLIERS = (
    (1, 0, 0, 0, -1),
)

LONGITUDE_0_COEFFICIENTS = (
    (0.00000, 7.06320, 18.600),
)

LATITUDE_0_MULTIPLIERS = (
    (1, 0, 0, 0, 0),
    (1, 0, 0, -1, 0),
    (1, 0, 0, 1, 0),
)

LATITUDE_0_COEFFICIENTS = (
    (180.00000, 8.04600, 0.075),
    (0.00000, 0.45720, 8.850),
    (180.00000, 0.41400, 0.037),
)

DISTANCE_0_MULTIPLIERS = ()
DISTANCE_0_COEFFICIENTS = ()

LONGITUDE_1_MULTIPLIERS = ()
LONGITUDE_1_COEFFICIENTS = ()
LATITUDE_1_MULTIPLIERS = ()
LATITUDE_1_COEFFICIENTS = ()
DISTANCE_1_MULTIPLIERS = ()
DISTANCE_1_COEFFICIENTS = ()
