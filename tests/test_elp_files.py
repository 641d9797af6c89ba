# tests/test_elp_files.py

import logging

import pytest

from elpmoon.core.errors import TableFormatError
from elpmoon.data import bundled_tables
from elpmoon.data.elp_files import load_elp_directory, parse_record, read_elp_file

MAIN_LINES = [
    " MAIN PROBLEM. LONGITUDE (SINE)",
    "  0  0  1  0   22639.58578    -4586.46     -0.20     -0.08      0.00      0.00      0.00",
    "  2  0 -1  0    4586.43830      -38.13      0.00      0.00      0.00      0.00      0.00",
]

FIGURE_LINES = [
    " EARTH FIGURE PERTURBATIONS. LONGITUDE",
    "  1  0  0  0 -1 180.00000  0.00125    18.600",
    "",
    "  1  0  0  0  0   0.00000  0.00012     0.075",
]

PLANETARY_LINE = "".join(["  0"] * 7 + ["  2", "-10", "  0", "  1"]) + " 123.45678  0.00012    12.345"


def test_parse_record_reads_fixed_width_multipliers():
    mult, coeff = parse_record(PLANETARY_LINE, 11, 3)
    assert mult == [0, 0, 0, 0, 0, 0, 0, 2, -10, 0, 1]
    assert coeff == [123.45678, 0.00012, 12.345]


def test_read_main_problem_keeps_amplitude_only():
    table = read_elp_file(MAIN_LINES, 1)
    assert table.name == "ELP1"
    assert table.multipliers.tolist() == [[0, 0, 1, 0], [2, 0, -1, 0]]
    assert table.coefficients.shape == (2, 1)
    assert table.coefficients[0, 0] == pytest.approx(22639.58578)


def test_read_figure_file_skips_blank_lines():
    table = read_elp_file(FIGURE_LINES, 4)
    assert len(table) == 2
    assert table.multipliers[0].tolist() == [1, 0, 0, 0, -1]
    assert table.coefficients[0].tolist() == pytest.approx([180.0, 0.00125, 18.6])


def test_header_only_file_is_empty():
    table = read_elp_file([" PLANETARY PERTURBATIONS"], 10)
    assert len(table) == 0
    assert table.multipliers.shape == (0, 11)


def test_bad_record_reports_line_number():
    lines = FIGURE_LINES[:2] + ["  1  0  x  0  0   0.00000  0.00012     0.075"]
    with pytest.raises(TableFormatError, match=r"ELP4:3"):
        read_elp_file(lines, 4)


def test_missing_reals_is_an_error():
    with pytest.raises(TableFormatError):
        read_elp_file(FIGURE_LINES[:1] + ["  1  0  0  0  0   0.00000"], 22)


def test_load_directory_overlays_found_files(tmp_path, caplog):
    (tmp_path / "ELP22").write_text("\n".join(FIGURE_LINES) + "\n", encoding="ascii")
    (tmp_path / "elp1.txt").write_text("\n".join(MAIN_LINES) + "\n", encoding="ascii")

    with caplog.at_level(logging.INFO, logger="elpmoon.data.elp_files"):
        tables = load_elp_directory(tmp_path)
    assert "Loaded 2 ELP files" in caplog.text

    base = bundled_tables()
    assert len(tables[22]) == 2
    assert len(tables[1]) == 2
    assert tables[28] is base[28]
    assert len(base[22]) == 3


def test_load_empty_directory_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="elpmoon.data.elp_files"):
        tables = load_elp_directory(tmp_path)
    assert "No ELP files found" in caplog.text
    assert tables.total_terms() == bundled_tables().total_terms()


def test_load_requires_a_directory(tmp_path):
    with pytest.raises(TableFormatError):
        load_elp_directory(tmp_path / "missing")
