# data/moon_figure.py
"""Moon figure perturbations (ELP28-ELP30).

Series form: Σ A sin(i₁ζ + i₂D + i₃l' + i₄l + i₅F + φ).
Rows of *_MULTIPLIERS are (ζ, D, l', l, F); rows of *_COEFFICIENTS are
(φ degrees, A arcsec or km, P years).
"""

LONGITUDE_MULTIPLIERS = (
    (0, 0, 0, 0, 1),
    (0, 0, 0, 1, -1),
    (0, 0, 0, 2, -2),
    (0, 0, 0, 3, -2),
    (0, 0, 1, -1, 0),
    (0, 0, 1, 0, 0),
    (0, 0, 1, 1, 0),
    (0, 1, 0, -1, 0),
    (0, 1, 0, 0, 0),
    (0, 1, 1, -1, 0),
    (0, 2, -1, -1, 0),
    (0, 2, -1, 0, 0),
    (0, 2, 0, -3, 0),
    (0, 2, 0, -2, 0),
    (0, 2, 0, -1, 0),
    (0, 2, 0, 0, -2),
    (0, 2, 0, 0, 0),
    (0, 2, 1, -2, 0),
    (0, 2, 1, -1, 0),
    (0, 2, 1, 0, 0),
)

LATITUDE_MULTIPLIERS = (
    (0, 0, 0, 1, -1),
    (0, 0, 0, 1, 0),
    (0, 0, 0, 1, 1),
    (0, 0, 0, 2, -3),
    (0, 0, 0, 2, -1),
    (0, 0, 1, -1, -1),
    (0, 0, 1, 0, -1),
    (0, 0, 1, 0, 1),
    (0, 0, 1, 1, 1),
    (0, 2, 0, -2, -1),
    (0, 2, 0, -2, 1),
    (0, 2, 0, 0, -1),
)

DISTANCE_MULTIPLIERS = (
    (0, 0, 0, 0, 0),
    (0, 0, 0, 0, 1),
    (0, 0, 0, 0, 2),
    (0, 0, 0, 1, 0),
    (0, 0, 0, 3, -2),
    (0, 0, 1, -1, 0),
    (0, 0, 1, 0, 0),
    (0, 0, 1, 1, 0),
    (0, 2, -1, -1, 0),
    (0, 2, -1, 0, 0),
    (0, 2, 0, -2, 0),
    (0, 2, 0, -1, 0),
    (0, 2, 1, -1, 0),
    (0, 2, 1, 0, 0),
)

LONGITUDE_COEFFICIENTS = (
    (303.96185, 0.00004, 0.075),
    (259.88393, 0.00016, 5.997),
    (0.43020, 0.00040, 2.998),
    (0.43379, 0.00002, 0.077),
    (359.99858, 0.00014, 0.082),
    (359.99982, 0.00223, 1.000),
    (359.99961, 0.00014, 0.070),
    (359.99331, 0.00009, 1.127),
    (359.99537, 0.00001, 0.081),
    (0.06418, 0.00003, 8.850),
    (180.00095, 0.00004, 0.095),
    (180.00014, 0.00003, 0.042),
    (179.98126, 0.00001, 0.067),
    (179.98366, 0.00025, 0.564),
    (179.99638, 0.00014, 0.087),
    (179.95864, 0.00003, 0.474),
    (179.99904, 0.00002, 0.040),
    (179.99184, 0.00002, 1.292),
    (0.00313, 0.00002, 0.080),
    (359.99965, 0.00002, 0.039),
)

LATITUDE_COEFFICIENTS = (
    (0.02199, 0.00003, 5.997),
    (245.99067, 0.00001, 0.075),
    (0.00530, 0.00001, 0.037),
    (0.42283, 0.00002, 0.073),
    (0.74505, 0.00001, 0.076),
    (359.99982, 0.00001, 0.039),
    (359.99982, 0.00010, 0.081),
    (359.99982, 0.00010, 0.069),
    (359.99982, 0.00001, 0.036),
    (179.98356, 0.00001, 0.066),
    (179.98353, 0.00001, 0.086),
    (179.99478, 0.00005, 0.088),
)

DISTANCE_COEFFICIENTS = (
    (90.00000, 0.00130, 99999.999),
    (213.95720, 0.00003, 0.075),
    (270.03745, 0.00002, 0.037),
    (90.07597, 0.00004, 0.075),
    (270.43429, 0.00002, 0.077),
    (89.99919, 0.00013, 0.082),
    (270.00007, 0.00022, 1.000),
    (269.99903, 0.00011, 0.070),
    (89.99815, 0.00002, 0.095),
    (90.00052, 0.00003, 0.042),
    (269.98585, 0.00005, 0.564),
    (89.99863, 0.00013, 0.087),
    (269.99982, 0.00002, 0.080),
    (269.99982, 0.00003, 0.039),
)
