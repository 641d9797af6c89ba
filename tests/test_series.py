# tests/test_series.py

import math

import numpy as np
import pytest

from elpmoon.core.errors import ContractViolation
from elpmoon.data import bundled_tables, empty_table
from elpmoon.theory import series as s
from elpmoon.theory.series import TermTable

QUARTER = 324000.0  # 90 degrees in arcsec
DELAUNAY = np.array([1072260.7, 1287104.8, 485868.3, 335779.6])
PLANETS = np.linspace(100000.0, 800000.0, 8)


@pytest.mark.parametrize("form", [s.MAIN_SIN, s.MAIN_COS, s.FIGURE, s.PLANETARY_1, s.PLANETARY_2])
def test_empty_table_sums_to_zero(form):
    n_coeff = 3 if form.phased else 1
    table = TermTable.empty(form.multiplier_width, n_coeff)
    assert s.evaluate_series(form, table, DELAUNAY, zeta=123.0, planetary=PLANETS) == 0.0


def test_kernel_wrappers_on_empty_tables():
    assert s.series_a_sin(DELAUNAY, empty_table(1)) == 0.0
    assert s.series_a_cos(DELAUNAY, empty_table(3)) == 0.0
    assert s.series_b(1.0, DELAUNAY, empty_table(4)) == 0.0
    assert s.series_c(PLANETS, DELAUNAY, empty_table(10)) == 0.0
    assert s.series_d(PLANETS, DELAUNAY, empty_table(16)) == 0.0


def test_main_sine_single_term():
    table = TermTable.from_rows([(0, 0, 1, 0)], [(2.0,)], n_mult=4, n_coeff=1)
    d = np.array([0.0, 0.0, QUARTER, 0.0])
    assert s.series_a_sin(d, table) == pytest.approx(2.0, abs=1e-12)
    assert s.series_a_cos(d, table) == pytest.approx(0.0, abs=1e-12)


def test_main_cosine_constant_term():
    table = TermTable.from_rows([(0, 0, 0, 0)], [(385000.56,)], n_mult=4, n_coeff=1)
    assert s.series_a_cos(DELAUNAY, table) == 385000.56


def test_main_two_terms_match_manual_sum():
    rows = [(2, 0, -1, 0), (0, 1, 0, 0)]
    amps = [(4586.4972,), (-666.4176,)]
    table = TermTable.from_rows(rows, amps, n_mult=4, n_coeff=1)
    expected = sum(
        a[0] * math.sin(sum(m * x for m, x in zip(r, DELAUNAY)) * math.pi / 648000.0)
        for r, a in zip(rows, amps)
    )
    assert s.series_a_sin(DELAUNAY, table) == pytest.approx(expected, rel=1e-12)


def test_figure_phase_and_zeta():
    table = TermTable.from_rows([(0, 0, 0, 0, 0)], [(90.0, 3.0, 1.0)], n_mult=5, n_coeff=3)
    assert s.series_b(0.0, DELAUNAY, table) == pytest.approx(3.0, abs=1e-12)

    table = TermTable.from_rows([(2, 0, 0, 0, 0)], [(0.0, 1.0, 1.0)], n_mult=5, n_coeff=3)
    assert s.series_b(QUARTER / 2, np.zeros(4), table) == pytest.approx(1.0, abs=1e-12)


def test_planetary_type_1_skips_l_prime():
    row = (0,) * 8 + (0, 0, 1)     # ... D, l, F
    table = TermTable.from_rows([row], [(0.0, 1.0, 1.0)], n_mult=11, n_coeff=3)
    d = np.array([0.0, 0.0, 0.0, QUARTER])
    assert s.series_c(np.zeros(8), d, table) == pytest.approx(1.0, abs=1e-12)
    d2 = d.copy()
    d2[1] = 98765.0
    assert s.series_c(np.zeros(8), d2, table) == s.series_c(np.zeros(8), d, table)


def test_planetary_type_1_uses_neptune():
    row = (0,) * 7 + (1, 0, 0, 0)
    table = TermTable.from_rows([row], [(0.0, 1.0, 1.0)], n_mult=11, n_coeff=3)
    planets = np.zeros(8)
    planets[7] = QUARTER
    assert s.series_c(planets, np.zeros(4), table) == pytest.approx(1.0, abs=1e-12)


def test_planetary_type_2_skips_neptune():
    row = (0,) * 6 + (1, 0, 1, 0, 0)   # Uranus, then D, l', l, F
    table = TermTable.from_rows([row], [(0.0, 1.0, 1.0)], n_mult=11, n_coeff=3)
    planets = np.zeros(8)
    planets[6] = QUARTER / 2
    d = np.array([0.0, QUARTER / 2, 0.0, 0.0])
    assert s.series_d(planets, d, table) == pytest.approx(1.0, abs=1e-12)
    planets[7] = 4321.0
    assert s.series_d(planets, d, table) == pytest.approx(1.0, abs=1e-12)


def test_wrong_table_width_is_rejected():
    table = TermTable.empty(5, 3)
    with pytest.raises(ContractViolation):
        s.series_a_sin(DELAUNAY, table)
    with pytest.raises(ContractViolation):
        s.series_c(PLANETS, DELAUNAY, table)


def test_missing_phase_column_is_rejected():
    table = TermTable.from_rows([(0, 0, 0, 0, 1)], [(1.0,)], n_mult=5, n_coeff=1)
    with pytest.raises(ContractViolation):
        s.series_b(0.0, DELAUNAY, table)


def test_planetary_kernels_need_planets():
    table = TermTable.from_rows([(0,) * 11], [(0.0, 1.0, 1.0)], n_mult=11, n_coeff=3)
    with pytest.raises(ContractViolation):
        s.evaluate_series(s.PLANETARY_1, table, DELAUNAY)


def test_row_count_mismatch():
    with pytest.raises(ContractViolation):
        TermTable(np.zeros((2, 4), dtype=int), np.zeros((3, 1)))


def test_tables_are_read_only():
    table = bundled_tables()[1]
    assert not table.multipliers.flags.writeable
    assert not table.coefficients.flags.writeable
    with pytest.raises(ValueError):
        table.coefficients[0, 0] = 0.0


def test_bundled_table_shapes():
    tables = bundled_tables()
    assert len(tables[1]) == 59
    assert len(tables[2]) == 60
    assert len(tables[3]) == 47
    assert tables[3].coefficients[0, 0] == pytest.approx(385000.56)
    assert len(tables[22]) == 3
    assert len(tables[28]) == 20
    assert len(tables[34]) == 28
    for n in range(10, 22):
        assert len(tables[n]) == 0
    assert tables[10].multipliers.shape == (0, 11)
