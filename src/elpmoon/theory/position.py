# theory/position.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from ..config import DEFAULT_CONFIG, TheoryConfig
from ..core.types import SphericalPoint
from ..data import ElpTables, bundled_tables
from .arguments import W1, delaunay_arguments, elp_arguments, planetary_arguments, precession_argument
from .series import FIGURE, MAIN_COS, MAIN_SIN, PLANETARY_1, PLANETARY_2, SeriesForm, evaluate_series


@dataclass(frozen=True)
class Perturbation:
    """One block of three series (lon, lat, dist), multiplied by t**power."""
    name: str
    form: SeriesForm
    power: int
    files: Tuple[int, int, int]


# Theory order; the sums are accumulated in exactly this sequence.
PERTURBATIONS: Tuple[Perturbation, ...] = (
    Perturbation("earth_figure", FIGURE, 0, (4, 5, 6)),
    Perturbation("earth_figure_t", FIGURE, 1, (7, 8, 9)),
    Perturbation("planetary_1", PLANETARY_1, 0, (10, 11, 12)),
    Perturbation("planetary_1_t", PLANETARY_1, 1, (13, 14, 15)),
    Perturbation("planetary_2", PLANETARY_2, 0, (16, 17, 18)),
    Perturbation("planetary_2_t", PLANETARY_2, 1, (19, 20, 21)),
    Perturbation("tidal", FIGURE, 0, (22, 23, 24)),
    Perturbation("tidal_t", FIGURE, 1, (25, 26, 27)),
    Perturbation("moon_figure", FIGURE, 0, (28, 29, 30)),
    Perturbation("relativistic", FIGURE, 0, (31, 32, 33)),
    Perturbation("solar_eccentricity_t2", FIGURE, 2, (34, 35, 36)),
)


def _files_for(p: Perturbation, config: TheoryConfig) -> Tuple[int, int, int]:
    if p.name == "earth_figure_t" and config.earth_figure_linear == "reference":
        return (4, 5, 6)
    return p.files


def contributions(
    t: float,
    tables: Optional[ElpTables] = None,
    config: Optional[TheoryConfig] = None,
) -> Dict[str, np.ndarray]:
    """
    Per-block (lon ", lat ", dist km) contributions at t, already scaled by t**power.

    Keys are "main_problem", the PERTURBATIONS names, then "mean_longitude" (W1).
    Summing the values in order gives `geocentric_position(t)`.
    """
    tables = bundled_tables() if tables is None else tables
    config = DEFAULT_CONFIG if config is None else config
    t = float(t)

    out: Dict[str, np.ndarray] = {}

    # 1. Main Problem on the full arguments
    dl = delaunay_arguments(t, config.main_problem_terms)
    out["main_problem"] = np.array([
        evaluate_series(MAIN_SIN, tables[1], dl),
        evaluate_series(MAIN_SIN, tables[2], dl),
        evaluate_series(MAIN_COS, tables[3], dl),
    ])

    # 2. Everything else uses the truncated arguments
    dl = delaunay_arguments(t, config.perturbation_terms)
    zeta = precession_argument(t)
    planets = planetary_arguments(t)

    # 3. Perturbations
    for p in PERTURBATIONS:
        scale = t ** p.power
        out[p.name] = np.array([
            evaluate_series(p.form, tables[n], dl, zeta=zeta, planetary=planets) * scale
            for n in _files_for(p, config)
        ])

    # 4. Mean longitude on the full arguments
    w = elp_arguments(t, config.main_problem_terms)
    out["mean_longitude"] = np.array([w[W1], 0.0, 0.0])
    return out


def geocentric_position(
    t: float,
    tables: Optional[ElpTables] = None,
    config: Optional[TheoryConfig] = None,
) -> SphericalPoint:
    """
    Geocentric Moon position referred to the ELP 2000 frame (inertial mean
    ecliptic of date, departure point of J2000).

    Returns longitude and latitude in arcseconds, distance in km.
    """
    acc = np.zeros(3)
    for part in contributions(t, tables, config).values():
        acc += part
    return SphericalPoint(float(acc[0]), float(acc[1]), float(acc[2]))
