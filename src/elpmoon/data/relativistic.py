# data/relativistic.py
"""Relativistic perturbations (ELP31-ELP33).

Same layout as the Moon figure tables: multipliers (ζ, D, l', l, F),
coefficients (φ degrees, A, P years).
"""

LONGITUDE_MULTIPLIERS = (
    (0, 0, 1, -1, 0),
    (0, 0, 1, 0, 0),
    (0, 0, 1, 1, 0),
    (0, 1, 0, 0, 0),
    (0, 1, 1, 0, 0),
    (0, 2, -1, -1, 0),
    (0, 2, 0, -1, 0),
    (0, 2, 0, 0, 0),
    (0, 2, 0, 1, 0),
    (0, 2, 1, -1, 0),
    (0, 4, 0, -1, 0),
)

LATITUDE_MULTIPLIERS = (
    (0, 0, 1, 0, -1),
    (0, 0, 1, 0, 1),
    (0, 2, 0, 0, -1),
    (0, 2, 0, 0, 1),
)

DISTANCE_MULTIPLIERS = (
    (0, 0, 0, 0, 0),
    (0, 0, 0, 1, 0),
    (0, 0, 1, -1, 0),
    (0, 0, 1, 0, 0),
    (0, 0, 1, 1, 0),
    (0, 1, 0, 0, 0),
    (0, 2, -1, 0, 0),
    (0, 2, 0, -1, 0),
    (0, 2, 0, 0, 0),
    (0, 2, 0, 1, 0),
)

LONGITUDE_COEFFICIENTS = (
    (179.93473, 0.00006, 0.082),
    (179.98532, 0.00081, 1.000),
    (179.96323, 0.00005, 0.070),
    (0.00001, 0.00013, 0.081),
    (180.02282, 0.00001, 0.075),
    (0.02264, 0.00002, 0.095),
    (359.98826, 0.00002, 0.087),
    (180.00019, 0.00055, 0.040),
    (180.00017, 0.00006, 0.026),
    (180.74954, 0.00001, 0.080),
    (180.00035, 0.00001, 0.028),
)

LATITUDE_COEFFICIENTS = (
    (179.99803, 0.00004, 0.081),
    (179.99798, 0.00004, 0.069),
    (359.99810, 0.00002, 0.088),
    (180.00026, 0.00002, 0.026),
)

DISTANCE_COEFFICIENTS = (
    (270.00000, 0.00828, 99999.999),
    (89.99994, 0.00043, 0.075),
    (269.93292, 0.00005, 0.082),
    (270.00908, 0.00009, 1.000),
    (89.95765, 0.00005, 0.070),
    (270.00002, 0.00006, 0.081),
    (89.97071, 0.00002, 0.042),
    (269.99367, 0.00003, 0.087),
    (90.00014, 0.00106, 0.040),
    (90.00010, 0.00008, 0.026),
)
