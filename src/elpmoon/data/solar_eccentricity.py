# data/solar_eccentricity.py
"""Planetary perturbations, solar eccentricity (ELP34-ELP36).

Same layout as the Moon figure tables. Every table here is multiplied by t².
"""

LONGITUDE_MULTIPLIERS = (
    (0, 0, 1, -2, 0),
    (0, 0, 1, -1, 0),
    (0, 0, 1, 0, 0),
    (0, 0, 1, 1, 0),
    (0, 0, 1, 2, 0),
    (0, 0, 2, -1, 0),
    (0, 0, 2, 0, 0),
    (0, 0, 2, 1, 0),
    (0, 1, 1, 0, 0),
    (0, 2, -2, -1, 0),
    (0, 2, -2, 0, 0),
    (0, 2, -2, 1, 0),
    (0, 2, -1, -2, 0),
    (0, 2, -1, -1, 0),
    (0, 2, -1, 0, -2),
    (0, 2, -1, 0, 0),
    (0, 2, -1, 1, 0),
    (0, 2, 0, -1, 0),
    (0, 2, 0, 0, 0),
    (0, 2, 1, -2, 0),
    (0, 2, 1, -1, 0),
    (0, 2, 1, 0, -2),
    (0, 2, 1, 0, 0),
    (0, 2, 1, 1, 0),
    (0, 2, 2, -1, 0),
    (0, 4, -1, -2, 0),
    (0, 4, -1, -1, 0),
    (0, 4, -1, 0, 0),
)

LATITUDE_MULTIPLIERS = (
    (0, 0, 1, -1, -1),
    (0, 0, 1, -1, 1),
    (0, 0, 1, 0, -1),
    (0, 0, 1, 0, 1),
    (0, 0, 1, 1, -1),
    (0, 0, 1, 1, 1),
    (0, 2, -2, 0, -1),
    (0, 2, -1, -1, -1),
    (0, 2, -1, -1, 1),
    (0, 2, -1, 0, -1),
    (0, 2, -1, 0, 1),
    (0, 2, -1, 1, -1),
    (0, 2, 1, 0, -1),
)

DISTANCE_MULTIPLIERS = (
    (0, 0, 1, -2, 0),
    (0, 0, 1, -1, 0),
    (0, 0, 1, 0, 0),
    (0, 0, 1, 1, 0),
    (0, 0, 1, 2, 0),
    (0, 0, 2, -1, 0),
    (0, 1, 1, 0, 0),
    (0, 2, -2, -1, 0),
    (0, 2, -2, 0, 0),
    (0, 2, -1, -2, 0),
    (0, 2, -1, -1, 0),
    (0, 2, -1, 0, 0),
    (0, 2, -1, 1, 0),
    (0, 2, 0, 0, 0),
    (0, 2, 1, -1, 0),
    (0, 2, 1, 0, 0),
    (0, 2, 1, 1, 0),
    (0, 2, 2, -1, 0),
    (0, 4, -1, -1, 0),
)

LONGITUDE_COEFFICIENTS = (
    (0.00000, 0.00007, 0.039),
    (0.00000, 0.00108, 0.082),
    (0.00000, 0.00487, 1.000),
    (0.00000, 0.00080, 0.070),
    (0.00000, 0.00006, 0.036),
    (0.00000, 0.00004, 0.089),
    (0.00000, 0.00011, 0.500),
    (0.00000, 0.00002, 0.066),
    (180.00000, 0.00013, 0.075),
    (180.00000, 0.00011, 0.105),
    (180.00000, 0.00012, 0.044),
    (180.00000, 0.00001, 0.028),
    (180.00000, 0.00006, 0.360),
    (180.00000, 0.00150, 0.095),
    (180.00000, 0.00002, 0.322),
    (180.00000, 0.00120, 0.042),
    (180.00000, 0.00011, 0.027),
    (0.00000, 0.00002, 0.087),
    (0.00000, 0.00003, 0.040),
    (180.00000, 0.00002, 1.292),
    (0.00000, 0.00021, 0.080),
    (0.00000, 0.00001, 0.903),
    (0.00000, 0.00018, 0.039),
    (0.00000, 0.00002, 0.026),
    (0.00000, 0.00004, 0.074),
    (180.00000, 0.00002, 0.046),
    (180.00000, 0.00003, 0.028),
    (180.00000, 0.00001, 0.021),
)

LATITUDE_COEFFICIENTS = (
    (0.00000, 0.00005, 0.039),
    (0.00000, 0.00004, 0.857),
    (0.00000, 0.00004, 0.081),
    (0.00000, 0.00005, 0.069),
    (0.00000, 0.00004, 1.200),
    (0.00000, 0.00004, 0.036),
    (180.00000, 0.00002, 0.107),
    (180.00000, 0.00005, 0.340),
    (180.00000, 0.00006, 0.042),
    (180.00000, 0.00022, 0.097),
    (180.00000, 0.00006, 0.027),
    (180.00000, 0.00001, 0.042),
    (0.00000, 0.00009, 0.081),
)

DISTANCE_COEFFICIENTS = (
    (90.00000, 0.00005, 0.039),
    (90.00000, 0.00095, 0.082),
    (270.00000, 0.00036, 1.000),
    (270.00000, 0.00077, 0.070),
    (270.00000, 0.00004, 0.036),
    (90.00000, 0.00003, 0.089),
    (90.00000, 0.00012, 0.075),
    (90.00000, 0.00007, 0.105),
    (90.00000, 0.00014, 0.044),
    (270.00000, 0.00007, 0.360),
    (90.00000, 0.00111, 0.095),
    (90.00000, 0.00149, 0.042),
    (90.00000, 0.00009, 0.027),
    (270.00000, 0.00004, 0.040),
    (270.00000, 0.00018, 0.080),
    (270.00000, 0.00023, 0.039),
    (270.00000, 0.00002, 0.026),
    (270.00000, 0.00003, 0.074),
    (90.00000, 0.00003, 0.028),
)
