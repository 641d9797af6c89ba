# data/main_problem.py
"""Abbreviated Main Problem (leading terms of ELP1-ELP3).

Longitude and latitude: Σ A sin(i₁D + i₂l' + i₃l + i₄F), A in arcseconds.
Distance: Σ A cos(i₁D + i₂l' + i₃l + i₄F), A in kilometres.

The terms are those retained by J. Meeus, Astronomical Algorithms (2nd ed.),
tables 47.A and 47.B, rescaled from 1e-6 degree / 1e-3 km to arcseconds / km.
The first distance row carries the mean distance. Replace with the full
ELP1-ELP3 files through ``elpmoon.data.elp_files`` for the complete theory.
"""

LONGITUDE_MULTIPLIERS = (
    (0, 0, 1, 0),
    (2, 0, -1, 0),
    (2, 0, 0, 0),
    (0, 0, 2, 0),
    (0, 1, 0, 0),
    (0, 0, 0, 2),
    (2, 0, -2, 0),
    (2, -1, -1, 0),
    (2, 0, 1, 0),
    (2, -1, 0, 0),
    (0, 1, -1, 0),
    (1, 0, 0, 0),
    (0, 1, 1, 0),
    (2, 0, 0, -2),
    (0, 0, 1, 2),
    (0, 0, 1, -2),
    (4, 0, -1, 0),
    (0, 0, 3, 0),
    (4, 0, -2, 0),
    (2, 1, -1, 0),
    (2, 1, 0, 0),
    (1, 0, -1, 0),
    (1, 1, 0, 0),
    (2, -1, 1, 0),
    (2, 0, 2, 0),
    (4, 0, 0, 0),
    (2, 0, -3, 0),
    (0, 1, -2, 0),
    (2, 0, -1, 2),
    (2, -1, -2, 0),
    (1, 0, 1, 0),
    (2, -2, 0, 0),
    (0, 1, 2, 0),
    (0, 2, 0, 0),
    (2, -2, -1, 0),
    (2, 0, 1, -2),
    (2, 0, 0, 2),
    (4, -1, -1, 0),
    (0, 0, 2, 2),
    (3, 0, -1, 0),
    (2, 1, 1, 0),
    (4, -1, -2, 0),
    (0, 2, -1, 0),
    (2, 2, -1, 0),
    (2, 1, -2, 0),
    (2, -1, 0, -2),
    (4, 0, 1, 0),
    (0, 0, 4, 0),
    (4, -1, 0, 0),
    (1, 0, -2, 0),
    (2, 1, 0, -2),
    (0, 0, 2, -2),
    (1, 1, 1, 0),
    (3, 0, -2, 0),
    (4, 0, -3, 0),
    (2, -1, 2, 0),
    (0, 2, 1, 0),
    (1, 1, -1, 0),
    (2, 0, 3, 0),
)

LONGITUDE_COEFFICIENTS = (
    (22639.5864,),
    (4586.4972,),
    (2369.9304,),
    (769.0248,),
    (-666.4176,),
    (-411.5952,),
    (211.6548,),
    (205.4376,),
    (191.9592,),
    (164.7288,),
    (-147.3228,),
    (-124.9920,),
    (-109.3788,),
    (55.1772,),
    (-45.1008,),
    (39.5280,),
    (38.4300,),
    (36.1224,),
    (30.7728,),
    (-28.3968,),
    (-24.3576,),
    (-18.5868,),
    (17.9532,),
    (14.5296,),
    (14.3784,),
    (13.8996,),
    (13.1940,),
    (-9.6804,),
    (-9.3672,),
    (8.6040,),
    (-8.4528,),
    (8.0496,),
    (-7.6320,),
    (-7.4484,),
    (7.3728,),
    (-6.3828,),
    (-5.7420,),
    (4.3740,),
    (-3.9960,),
    (-3.2112,),
    (-2.9160,),
    (2.7324,),
    (-2.5668,),
    (-2.5200,),
    (2.4876,),
    (2.1456,),
    (1.9764,),
    (1.9332,),
    (1.8720,),
    (-1.7532,),
    (-1.4364,),
    (-1.3716,),
    (1.2636,),
    (-1.2240,),
    (1.1880,),
    (1.1772,),
    (-1.1628,),
    (1.0764,),
    (1.0584,),
)

LATITUDE_MULTIPLIERS = (
    (0, 0, 0, 1),
    (0, 0, 1, 1),
    (0, 0, 1, -1),
    (2, 0, 0, -1),
    (2, 0, -1, 1),
    (2, 0, -1, -1),
    (2, 0, 0, 1),
    (0, 0, 2, 1),
    (2, 0, 1, -1),
    (0, 0, 2, -1),
    (2, -1, 0, -1),
    (2, 0, -2, -1),
    (2, 0, 1, 1),
    (2, 1, 0, -1),
    (2, -1, -1, 1),
    (2, -1, 0, 1),
    (2, -1, -1, -1),
    (0, 1, -1, -1),
    (4, 0, -1, -1),
    (0, 1, 0, 1),
    (0, 0, 0, 3),
    (0, 1, -1, 1),
    (1, 0, 0, 1),
    (0, 1, 1, 1),
    (0, 1, 1, -1),
    (0, 1, 0, -1),
    (1, 0, 0, -1),
    (0, 0, 3, 1),
    (4, 0, 0, -1),
    (4, 0, -1, 1),
    (0, 0, 1, -3),
    (4, 0, -2, 1),
    (2, 0, 0, -3),
    (2, 0, 2, -1),
    (2, -1, 1, -1),
    (2, 0, -2, 1),
    (0, 0, 3, -1),
    (2, 0, 2, 1),
    (2, 0, -3, -1),
    (2, 1, -1, 1),
    (2, 1, 0, 1),
    (4, 0, 0, 1),
    (2, -1, 1, 1),
    (2, -2, 0, -1),
    (0, 0, 1, 3),
    (2, 1, 1, -1),
    (1, 1, 0, -1),
    (1, 1, 0, 1),
    (0, 1, -2, -1),
    (2, 1, -1, -1),
    (1, 0, 1, 1),
    (2, -1, -2, -1),
    (0, 1, 2, 1),
    (4, 0, -2, -1),
    (4, -1, -1, -1),
    (1, 0, 1, -1),
    (4, 0, 1, -1),
    (1, 0, -1, -1),
    (4, -1, 0, -1),
    (2, -2, 0, 1),
)

LATITUDE_COEFFICIENTS = (
    (18461.2392,),
    (1010.1672,),
    (999.6948,),
    (623.6532,),
    (199.4868,),
    (166.5756,),
    (117.2628,),
    (61.9128,),
    (33.3576,),
    (31.7592,),
    (29.5776,),
    (15.5664,),
    (15.1200,),
    (-12.0924,),
    (8.8668,),
    (7.9596,),
    (7.4340,),
    (-6.7320,),
    (6.5808,),
    (-6.4584,),
    (-6.2964,),
    (-5.6340,),
    (-5.3676,),
    (-5.3100,),
    (-5.0760,),
    (-4.8384,),
    (-4.8060,),
    (3.9852,),
    (3.6756,),
    (2.9988,),
    (2.7972,),
    (2.4156,),
    (2.1852,),
    (2.1456,),
    (1.7676,),
    (-1.6236,),
    (1.5804,),
    (1.5192,),
    (1.5156,),
    (-1.3176,),
    (-1.2636,),
    (1.1916,),
    (1.1340,),
    (1.0872,),
    (-1.0188,),
    (-0.8244,),
    (0.8028,),
    (0.8028,),
    (-0.7920,),
    (-0.7920,),
    (-0.6660,),
    (0.6516,),
    (-0.6372,),
    (0.6336,),
    (0.5976,),
    (-0.5904,),
    (0.4752,),
    (-0.4284,),
    (0.4140,),
    (0.3852,),
)

DISTANCE_MULTIPLIERS = (
    (0, 0, 0, 0),
    (0, 0, 1, 0),
    (2, 0, -1, 0),
    (2, 0, 0, 0),
    (0, 0, 2, 0),
    (0, 1, 0, 0),
    (0, 0, 0, 2),
    (2, 0, -2, 0),
    (2, -1, -1, 0),
    (2, 0, 1, 0),
    (2, -1, 0, 0),
    (0, 1, -1, 0),
    (1, 0, 0, 0),
    (0, 1, 1, 0),
    (2, 0, 0, -2),
    (0, 0, 1, -2),
    (4, 0, -1, 0),
    (0, 0, 3, 0),
    (4, 0, -2, 0),
    (2, 1, -1, 0),
    (2, 1, 0, 0),
    (1, 0, -1, 0),
    (1, 1, 0, 0),
    (2, -1, 1, 0),
    (2, 0, 2, 0),
    (4, 0, 0, 0),
    (2, 0, -3, 0),
    (0, 1, -2, 0),
    (2, -1, -2, 0),
    (1, 0, 1, 0),
    (2, -2, 0, 0),
    (0, 1, 2, 0),
    (2, -2, -1, 0),
    (2, 0, 1, -2),
    (4, -1, -1, 0),
    (3, 0, -1, 0),
    (2, 1, 1, 0),
    (4, -1, -2, 0),
    (0, 2, -1, 0),
    (2, 2, -1, 0),
    (4, 0, 1, 0),
    (0, 0, 4, 0),
    (4, -1, 0, 0),
    (1, 0, -2, 0),
    (0, 0, 2, -2),
    (0, 2, 1, 0),
    (2, 0, -1, -2),
)

DISTANCE_COEFFICIENTS = (
    (385000.560,),
    (-20905.355,),
    (-3699.111,),
    (-2955.968,),
    (-569.925,),
    (48.888,),
    (-3.149,),
    (246.158,),
    (-152.138,),
    (-170.733,),
    (-204.586,),
    (-129.620,),
    (108.743,),
    (104.755,),
    (10.321,),
    (79.661,),
    (-34.782,),
    (-23.210,),
    (-21.636,),
    (24.208,),
    (30.824,),
    (-8.379,),
    (-16.675,),
    (-12.831,),
    (-10.445,),
    (-11.650,),
    (14.403,),
    (-7.003,),
    (10.056,),
    (6.322,),
    (-9.884,),
    (5.751,),
    (-4.950,),
    (4.130,),
    (-3.958,),
    (3.258,),
    (2.616,),
    (-1.897,),
    (-2.117,),
    (2.354,),
    (-1.423,),
    (-1.117,),
    (-1.571,),
    (-1.739,),
    (-4.421,),
    (1.165,),
    (8.752,),
)
