# tests/test_time.py

from datetime import date, datetime

import pytest

from elpmoon.core.time import J2000_TT, jd_from_t, t_centuries, to_jd, to_jdn


def test_j2000_epoch():
    assert t_centuries(J2000_TT) == 0.0
    assert to_jd(datetime(2000, 1, 1, 12)) == J2000_TT
    assert to_jdn(date(2000, 1, 1)) == 2451545


def test_meeus_example_date():
    """Meeus, Example 47.a: 1992 April 12, 0h TD."""
    assert to_jd(date(1992, 4, 12)) == 2448724.5


def test_t_round_trip():
    for t in (-2.5, -0.077221081451, 0.0, 1.25):
        assert t_centuries(jd_from_t(t)) == pytest.approx(t, abs=1e-12)


def test_fractional_day():
    assert to_jd(datetime(1992, 4, 12, 6, 0, 0)) == pytest.approx(2448724.75)
