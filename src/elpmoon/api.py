from __future__ import annotations

from typing import Optional, Union

from .config import TheoryConfig
from .core.errors import ContractViolation
from .core.time import t_centuries
from .core.types import CartesianPoint, SphericalPoint
from .data import ElpTables
from .theory import frames
from .theory.position import geocentric_position

FRAMES = ("elp", "date", "elp-xyz", "j2000", "fk5")


def moon_position(
    t: float,
    *,
    tables: Optional[ElpTables] = None,
    config: Optional[TheoryConfig] = None,
) -> SphericalPoint:
    """Spherical position referred to the ELP 2000 frame (arcsec, arcsec, km)."""
    return geocentric_position(t, tables, config)


def moon_position_of_date(
    t: float,
    *,
    tables: Optional[ElpTables] = None,
    config: Optional[TheoryConfig] = None,
) -> SphericalPoint:
    """Spherical position referred to the mean ecliptic and equinox of date."""
    return frames.to_date(geocentric_position(t, tables, config), t)


def moon_position_cartesian(
    t: float,
    *,
    tables: Optional[ElpTables] = None,
    config: Optional[TheoryConfig] = None,
) -> CartesianPoint:
    """Rectangular position (km) referred to the ELP 2000 frame."""
    return frames.spherical_to_cartesian(geocentric_position(t, tables, config))


def moon_position_cartesian_j2000(
    t: float,
    *,
    tables: Optional[ElpTables] = None,
    config: Optional[TheoryConfig] = None,
) -> CartesianPoint:
    """Rectangular position (km) referred to the mean ecliptic and equinox of J2000."""
    return frames.to_j2000(moon_position_cartesian(t, tables=tables, config=config), t)


def moon_position_cartesian_fk5(
    t: float,
    *,
    tables: Optional[ElpTables] = None,
    config: Optional[TheoryConfig] = None,
) -> CartesianPoint:
    """Rectangular position (km) referred to the FK5 equator."""
    return frames.to_fk5(moon_position_cartesian_j2000(t, tables=tables, config=config))


_BY_FRAME = {
    "elp": moon_position,
    "date": moon_position_of_date,
    "elp-xyz": moon_position_cartesian,
    "j2000": moon_position_cartesian_j2000,
    "fk5": moon_position_cartesian_fk5,
}


def moon_position_jd(
    jd_tt: float,
    frame: str = "elp",
    *,
    tables: Optional[ElpTables] = None,
    config: Optional[TheoryConfig] = None,
) -> Union[SphericalPoint, CartesianPoint]:
    """Position at a Julian Date (TT) in one of FRAMES."""
    if frame not in _BY_FRAME:
        raise ContractViolation(f"Unknown frame '{frame}'. Available: {list(FRAMES)}")
    return _BY_FRAME[frame](t_centuries(jd_tt), tables=tables, config=config)
