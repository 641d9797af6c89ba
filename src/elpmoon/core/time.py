from __future__ import annotations
from datetime import date, datetime

J2000_TT = 2451545.0  # JD(TT) at J2000.0
DAYS_PER_CENTURY = 36525.0


def t_centuries(jd_tt: float) -> float:
    """Julian centuries of TT since J2000.0 (negative before the epoch)."""
    return (jd_tt - J2000_TT) / DAYS_PER_CENTURY


def jd_from_t(t: float) -> float:
    return J2000_TT + t * DAYS_PER_CENTURY


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def to_jd(d: date | datetime) -> float:
    """
    Julian Date of a Gregorian date or naive datetime, read as TT.

    A bare date means 0h of that day.
    """
    jd = to_jdn(d) - 0.5
    if isinstance(d, datetime):
        jd += (d.hour + (d.minute + (d.second + d.microsecond / 1e6) / 60.0) / 60.0) / 24.0
    return jd
