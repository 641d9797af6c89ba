"""elpmoon public API.

Geocentric position of the Moon from the semi-analytical lunar theory
ELP 2000-82B. Time arguments are Julian centuries of TT since J2000.0.
"""

from .api import (
    FRAMES,
    moon_position,
    moon_position_of_date,
    moon_position_cartesian,
    moon_position_cartesian_j2000,
    moon_position_cartesian_fk5,
    moon_position_jd,
)
from .config import DEFAULT_CONFIG, TheoryConfig
from .core.errors import ContractViolation, ElpError, TableFormatError
from .core.time import t_centuries
from .core.types import CartesianPoint, SphericalPoint
from .data import ElpTables, bundled_tables

__all__ = [
    "FRAMES",
    "moon_position",
    "moon_position_of_date",
    "moon_position_cartesian",
    "moon_position_cartesian_j2000",
    "moon_position_cartesian_fk5",
    "moon_position_jd",
    "DEFAULT_CONFIG",
    "TheoryConfig",
    "ContractViolation",
    "ElpError",
    "TableFormatError",
    "t_centuries",
    "CartesianPoint",
    "SphericalPoint",
    "ElpTables",
    "bundled_tables",
]
