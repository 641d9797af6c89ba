# tests/test_position.py

import logging

import numpy as np
import pytest

from elpmoon import TheoryConfig, moon_position, moon_position_of_date
from elpmoon.core.errors import ContractViolation
from elpmoon.core.time import t_centuries
from elpmoon.data import bundled_tables, empty_tables
from elpmoon.theory.arguments import elp_arguments
from elpmoon.theory.position import PERTURBATIONS, contributions, geocentric_position
from elpmoon.theory.series import TermTable

# Meeus, Astronomical Algorithms, Example 47.a: 1992 April 12, 0h TD.
MEEUS_JD = 2448724.5
MEEUS_LON_DEG = 133.162655
MEEUS_LAT_DEG = -3.229126
MEEUS_DIST_KM = 368409.7


def _constant_term(amplitude, n_mult=5):
    # phase 90° and all multipliers zero: the series is just `amplitude`
    return TermTable.from_rows([(0,) * n_mult], [(90.0, amplitude, 0.0)], n_mult=n_mult, n_coeff=3)


def test_meeus_example_47a_of_date():
    """
    The bundled abbreviated tables reproduce Meeus' geometric
    position to a few thousandths of a degree (his planetary A1/A2/A3 terms
    are not among them).
    """
    t = t_centuries(MEEUS_JD)
    assert t == pytest.approx(-0.077221081451, abs=1e-12)

    pos = moon_position_of_date(t)
    assert pos.longitude_deg == pytest.approx(MEEUS_LON_DEG, abs=0.01)
    assert pos.latitude_deg == pytest.approx(MEEUS_LAT_DEG, abs=0.005)
    assert pos.distance == pytest.approx(MEEUS_DIST_KM, abs=0.5)


@pytest.mark.parametrize("t", [-1.0, 0.0, 0.12, 0.5])
def test_contributions_sum_to_position(t):
    parts = contributions(t)
    assert list(parts)[0] == "main_problem"
    assert list(parts)[-1] == "mean_longitude"
    assert [p.name for p in PERTURBATIONS] == list(parts)[1:-1]

    total = np.sum(np.array(list(parts.values())), axis=0)
    pos = geocentric_position(t)
    assert pos.longitude == pytest.approx(total[0], rel=1e-14)
    assert pos.latitude == pytest.approx(total[1], rel=1e-12, abs=1e-9)
    assert pos.distance == pytest.approx(total[2], rel=1e-14)


@pytest.mark.parametrize("t", [-2.0, 0.0, 0.3, 1.5])
def test_position_is_physically_plausible(t):
    pos = moon_position(t)
    assert 356000.0 < pos.distance < 407000.0
    assert abs(pos.latitude_deg) < 5.4
    parts = contributions(t)
    small = sum(v for k, v in parts.items() if k not in ("main_problem", "mean_longitude"))
    assert np.all(np.abs(small) < 30.0)          # arcsec / km


def test_empty_tables_leave_mean_longitude():
    t = 0.25
    pos = geocentric_position(t, empty_tables())
    assert pos.longitude == elp_arguments(t)[0]
    assert pos.latitude == 0.0
    assert pos.distance == 0.0


def test_mean_longitude_follows_main_problem_terms():
    t = 0.8
    cfg = TheoryConfig(main_problem_terms=2)
    parts = contributions(t, empty_tables(), cfg)
    assert parts["mean_longitude"][0] == elp_arguments(t, 2)[0]


def test_planetary_blocks_are_summed_and_scaled():
    t = 0.5
    tables = empty_tables().replace({
        10: _constant_term(1.5, n_mult=11),
        13: _constant_term(2.0, n_mult=11),
        18: _constant_term(0.25, n_mult=11),
    })
    parts = contributions(t, tables)
    assert parts["planetary_1"][0] == pytest.approx(1.5)
    assert parts["planetary_1_t"][0] == pytest.approx(2.0 * t)
    assert parts["planetary_2"][2] == pytest.approx(0.25)

    pos = geocentric_position(t, tables)
    assert pos.longitude == pytest.approx(elp_arguments(t)[0] + 1.5 + 1.0)
    assert pos.distance == pytest.approx(0.25)


def test_solar_eccentricity_scales_with_t_squared():
    tables = empty_tables().replace({35: _constant_term(2.0)})
    for t in (-0.5, 0.0, 0.3):
        assert contributions(t, tables)["solar_eccentricity_t2"][1] == pytest.approx(2.0 * t * t)


def test_earth_figure_linear_dedicated_uses_its_own_tables():
    t = 0.3
    tables = bundled_tables()
    parts = contributions(t, tables)
    assert np.all(parts["earth_figure_t"] == 0.0)  # bundled ELP7-9 are empty

    tables = empty_tables().replace({4: _constant_term(1.0), 7: _constant_term(3.0)})
    parts = contributions(t, tables)
    assert parts["earth_figure"][0] == pytest.approx(1.0)
    assert parts["earth_figure_t"][0] == pytest.approx(3.0 * t)


def test_earth_figure_linear_reference_reuses_constant_tables(caplog):
    t = 0.3
    with caplog.at_level(logging.WARNING, logger="elpmoon.config"):
        cfg = TheoryConfig(earth_figure_linear="reference")
    assert any("ELP4-6" in r.getMessage() for r in caplog.records)

    parts = contributions(t, bundled_tables(), cfg)
    np.testing.assert_allclose(parts["earth_figure_t"], parts["earth_figure"] * t, rtol=1e-14, atol=0.0)
    assert parts["earth_figure_t"][1] != 0.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"earth_figure_linear": "both"},
        {"main_problem_terms": 0},
        {"main_problem_terms": 6},
        {"perturbation_terms": 2.0},
        {"perturbation_terms": True},
    ],
)
def test_config_validation(kwargs):
    with pytest.raises(ContractViolation):
        TheoryConfig(**kwargs)


def test_evaluation_is_repeatable():
    a = moon_position(0.1234)
    b = moon_position(0.1234)
    assert a == b


def test_main_problem_dominates_at_epoch():
    parts = contributions(0.0)
    rest = sum(v for k, v in parts.items() if k not in ("main_problem", "mean_longitude"))
    assert abs(parts["main_problem"][0]) > 100.0 * abs(rest[0])
