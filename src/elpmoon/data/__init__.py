"""ELP 2000-82B term tables.

The 36 tables follow the numbering of the published files (CDS VI/79):

  ELP1-3    Main Problem                         lon, lat, dist
  ELP4-6    Earth figure                         lon, lat, dist
  ELP7-9    Earth figure              (×t)
  ELP10-12  planetary, type 1
  ELP13-15  planetary, type 1         (×t)
  ELP16-18  planetary, type 2
  ELP19-21  planetary, type 2         (×t)
  ELP22-24  tidal effects
  ELP25-27  tidal effects             (×t)
  ELP28-30  Moon figure
  ELP31-33  relativistic
  ELP34-36  solar eccentricity        (×t²)

`bundled_tables()` returns the tables shipped with the package; see the
individual data modules for what each one holds.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..core.errors import ContractViolation
from ..theory.series import (
    FIGURE,
    MAIN_COS,
    MAIN_SIN,
    PLANETARY_1,
    PLANETARY_2,
    SeriesForm,
    TermTable,
    check_table,
)
from . import earth_figure, main_problem, moon_figure, relativistic, solar_eccentricity, tidal

LONGITUDE, LATITUDE, DISTANCE = range(3)
COORDINATES = ("LONGITUDE", "LATITUDE", "DISTANCE")


@dataclass(frozen=True)
class ElpFile:
    number: int
    category: str
    coordinate: int   # LONGITUDE, LATITUDE or DISTANCE
    power: int        # the series is multiplied by t**power
    form: SeriesForm

    @property
    def n_coeff(self) -> int:
        # amplitude only for the Main Problem; phase, amplitude, period otherwise
        return 3 if self.form.phased else 1


def _catalogue() -> Tuple[ElpFile, ...]:
    groups = (
        ("main_problem", 0, None),
        ("earth_figure", 0, FIGURE),
        ("earth_figure", 1, FIGURE),
        ("planetary_1", 0, PLANETARY_1),
        ("planetary_1", 1, PLANETARY_1),
        ("planetary_2", 0, PLANETARY_2),
        ("planetary_2", 1, PLANETARY_2),
        ("tidal", 0, FIGURE),
        ("tidal", 1, FIGURE),
        ("moon_figure", 0, FIGURE),
        ("relativistic", 0, FIGURE),
        ("solar_eccentricity", 2, FIGURE),
    )
    files = []
    for g, (category, power, form) in enumerate(groups):
        for coord in (LONGITUDE, LATITUDE, DISTANCE):
            if form is None:
                f = MAIN_COS if coord == DISTANCE else MAIN_SIN
            else:
                f = form
            files.append(ElpFile(3 * g + coord + 1, category, coord, power, f))
    return tuple(files)


ELP_FILES: Tuple[ElpFile, ...] = _catalogue()
TOTAL_FILES = len(ELP_FILES)


def elp_file(number: int) -> ElpFile:
    if not 1 <= number <= TOTAL_FILES:
        raise ContractViolation(f"ELP file number must be in 1..{TOTAL_FILES}, got {number}")
    return ELP_FILES[number - 1]


@dataclass(frozen=True, eq=False)
class ElpTables:
    """Read-only set of the 36 term tables, indexed by ELP file number."""
    tables: Mapping[int, TermTable]

    def __post_init__(self):
        missing = [f.number for f in ELP_FILES if f.number not in self.tables]
        if missing:
            raise ContractViolation(f"missing ELP tables: {missing}")
        for f in ELP_FILES:
            check_table(f.form, self.tables[f.number])
        object.__setattr__(self, "tables", MappingProxyType(dict(self.tables)))

    def __getitem__(self, number: int) -> TermTable:
        return self.tables[number]

    def replace(self, updates: Mapping[int, TermTable]) -> "ElpTables":
        merged: Dict[int, TermTable] = dict(self.tables)
        merged.update(updates)
        return ElpTables(merged)

    def total_terms(self) -> int:
        return sum(len(t) for t in self.tables.values())


def empty_table(number: int) -> TermTable:
    f = elp_file(number)
    return TermTable.empty(f.form.multiplier_width, f.n_coeff, name=f"ELP{number}")


def empty_tables() -> ElpTables:
    return ElpTables({f.number: empty_table(f.number) for f in ELP_FILES})


def _from_module(number: int, module, prefix: str) -> TermTable:
    f = elp_file(number)
    return TermTable.from_rows(
        getattr(module, f"{prefix}_MULTIPLIERS"),
        getattr(module, f"{prefix}_COEFFICIENTS"),
        n_mult=f.form.multiplier_width,
        n_coeff=f.n_coeff,
        name=f"ELP{number}",
    )


# (first file number, module, suffix appended to LONGITUDE/LATITUDE/DISTANCE)
_BUNDLED = (
    (1, main_problem, ""),
    (4, earth_figure, "_0"),
    (7, earth_figure, "_1"),
    (22, tidal, "_0"),
    (25, tidal, "_1"),
    (28, moon_figure, ""),
    (31, relativistic, ""),
    (34, solar_eccentricity, ""),
)


@lru_cache(maxsize=None)
def bundled_tables() -> ElpTables:
    """Tables shipped with the package. Planetary tables (ELP10-21) are empty."""
    tables = {f.number: empty_table(f.number) for f in ELP_FILES}
    for first, module, suffix in _BUNDLED:
        for coord, label in enumerate(COORDINATES):
            tables[first + coord] = _from_module(first + coord, module, label + suffix)
    return ElpTables(tables)


__all__ = [
    "ELP_FILES",
    "ElpFile",
    "ElpTables",
    "bundled_tables",
    "elp_file",
    "empty_table",
    "empty_tables",
]
