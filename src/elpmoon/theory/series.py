from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from ..core.errors import ContractViolation
from .arguments import D, LP, L, F

ARCSEC_TO_RAD = np.pi / 648000.0


@dataclass(frozen=True, eq=False)
class TermTable:
    """
    One table of a trigonometric series.

    multipliers:  (n, k) integers, one column per fundamental argument of the form
    coefficients: (n, m) floats; (A, ...) for the Main Problem,
                  (phase deg, A, period yr) for every other category.
    Row i of both arrays describes the same term. Arrays are read-only.
    """
    multipliers: np.ndarray
    coefficients: np.ndarray
    name: str = ""

    def __post_init__(self):
        m = np.array(self.multipliers, dtype=np.int64)
        c = np.array(self.coefficients, dtype=float)
        if m.ndim != 2 or c.ndim != 2:
            raise ContractViolation(f"{self.name or 'table'}: multipliers and coefficients must be 2-D")
        if m.shape[0] != c.shape[0]:
            raise ContractViolation(
                f"{self.name or 'table'}: {m.shape[0]} multiplier rows vs {c.shape[0]} coefficient rows"
            )
        m.setflags(write=False)
        c.setflags(write=False)
        object.__setattr__(self, "multipliers", m)
        object.__setattr__(self, "coefficients", c)

    @classmethod
    def from_rows(
        cls,
        multipliers: Sequence[Sequence[int]],
        coefficients: Sequence[Sequence[float]],
        *,
        n_mult: int,
        n_coeff: int,
        name: str = "",
    ) -> "TermTable":
        """Build from row tuples; empty sequences give a (0, n) table."""
        m = np.array(multipliers, dtype=np.int64).reshape(-1, n_mult)
        c = np.array(coefficients, dtype=float).reshape(-1, n_coeff)
        return cls(m, c, name=name)

    @classmethod
    def empty(cls, n_mult: int, n_coeff: int, name: str = "") -> "TermTable":
        return cls(np.zeros((0, n_mult), dtype=np.int64), np.zeros((0, n_coeff)), name=name)

    def __len__(self) -> int:
        return int(self.multipliers.shape[0])


@dataclass(frozen=True)
class SeriesForm:
    """
    Shape of one family of series: which fundamental arguments enter the
    argument, whether a phase is added and which trigonometric function is summed.
    """
    name: str
    uses_zeta: bool
    n_planets: int                      # leading planetary columns (Mercury first)
    delaunay_columns: Tuple[int, ...]   # indices into (D, l', l, F)
    phased: bool
    trig: Callable[[np.ndarray], np.ndarray] = field(default=np.sin)

    @property
    def multiplier_width(self) -> int:
        return int(self.uses_zeta) + self.n_planets + len(self.delaunay_columns)

    @property
    def amplitude_column(self) -> int:
        return 1 if self.phased else 0

    def fundamentals(
        self,
        delaunay: np.ndarray,
        zeta: float = 0.0,
        planetary: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """Argument vector (arcsec) aligned with the multiplier columns."""
        parts = []
        if self.uses_zeta:
            parts.append(np.array([zeta], dtype=float))
        if self.n_planets:
            if planetary is None:
                raise ContractViolation(f"{self.name} series need the planetary arguments")
            planetary = np.asarray(planetary, dtype=float)
            if planetary.shape[0] < self.n_planets:
                raise ContractViolation(f"{self.name} series need {self.n_planets} planetary arguments")
            parts.append(planetary[: self.n_planets])
        delaunay = np.asarray(delaunay, dtype=float)
        if delaunay.shape != (4,):
            raise ContractViolation(f"Delaunay vector must have 4 entries, got shape {delaunay.shape}")
        parts.append(delaunay[list(self.delaunay_columns)])
        return np.concatenate(parts)


# Main Problem: Σ A sin(i1 D + i2 l' + i3 l + i4 F)  (cosine for distance)
MAIN_SIN = SeriesForm("main-sin", uses_zeta=False, n_planets=0, delaunay_columns=(D, LP, L, F), phased=False)
MAIN_COS = SeriesForm(
    "main-cos", uses_zeta=False, n_planets=0, delaunay_columns=(D, LP, L, F), phased=False, trig=np.cos
)
# Figures, tides, relativity, solar eccentricity: Σ A sin(i1 ζ + i2 D + i3 l' + i4 l + i5 F + φ)
FIGURE = SeriesForm("figure", uses_zeta=True, n_planets=0, delaunay_columns=(D, LP, L, F), phased=True)
# Planetary type 1: eight planets, then D, l, F (no l')
PLANETARY_1 = SeriesForm("planetary-1", uses_zeta=False, n_planets=8, delaunay_columns=(D, L, F), phased=True)
# Planetary type 2: Mercury..Uranus, then D, l', l, F
PLANETARY_2 = SeriesForm("planetary-2", uses_zeta=False, n_planets=7, delaunay_columns=(D, LP, L, F), phased=True)


def check_table(form: SeriesForm, table: TermTable) -> None:
    if table.multipliers.shape[1] != form.multiplier_width:
        raise ContractViolation(
            f"{table.name or 'table'}: {form.name} series take {form.multiplier_width} multipliers "
            f"per term, got {table.multipliers.shape[1]}"
        )
    if table.coefficients.shape[1] <= form.amplitude_column:
        raise ContractViolation(
            f"{table.name or 'table'}: {form.name} series need at least "
            f"{form.amplitude_column + 1} coefficient columns"
        )


def evaluate_series(
    form: SeriesForm,
    table: TermTable,
    delaunay: np.ndarray,
    zeta: float = 0.0,
    planetary: Optional[np.ndarray] = None,
) -> float:
    """
    Σ A * trig(Σ m_k * arg_k + φ) over the table, arguments in arcsec, φ in degrees.

    An empty table sums to exactly 0.0.
    """
    check_table(form, table)
    if len(table) == 0:
        return 0.0
    arg = (table.multipliers @ form.fundamentals(delaunay, zeta, planetary)) * ARCSEC_TO_RAD
    if form.phased:
        arg = arg + np.radians(table.coefficients[:, 0])
    amp = table.coefficients[:, form.amplitude_column]
    return float(amp @ form.trig(arg))


# ------------------------------------------------------------
# Kernel entry points
# ------------------------------------------------------------

def series_a_sin(delaunay: np.ndarray, table: TermTable) -> float:
    return evaluate_series(MAIN_SIN, table, delaunay)


def series_a_cos(delaunay: np.ndarray, table: TermTable) -> float:
    return evaluate_series(MAIN_COS, table, delaunay)


def series_b(zeta: float, delaunay: np.ndarray, table: TermTable) -> float:
    return evaluate_series(FIGURE, table, delaunay, zeta=zeta)


def series_c(planetary: np.ndarray, delaunay: np.ndarray, table: TermTable) -> float:
    return evaluate_series(PLANETARY_1, table, delaunay, planetary=planetary)


def series_d(planetary: np.ndarray, delaunay: np.ndarray, table: TermTable) -> float:
    return evaluate_series(PLANETARY_2, table, delaunay, planetary=planetary)
