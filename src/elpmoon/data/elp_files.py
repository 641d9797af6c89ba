# data/elp_files.py
"""
Reader for the published ELP 2000-82B term files (CDS catalogue VI/79,
files ELP1 ... ELP36).

Each file starts with one title line followed by one record per term:

  ELP1-3        4i3, 2x, f13.5, 6f12.2      multipliers, A, dA/dσ (ignored)
  ELP4-9,22-36  5i3, 1x, f9.5, f9.5, f9.3   multipliers, φ, A, P
  ELP10-21      11i3, 1x, f9.5, f9.5, f9.3  multipliers, φ, A, P

Multipliers are read by column (they can run into each other, e.g. " 1-10");
the real numbers after them are whitespace separated.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ..core.errors import TableFormatError
from ..theory.series import TermTable
from . import ElpTables, bundled_tables, elp_file, TOTAL_FILES

logger = logging.getLogger(__name__)

INT_WIDTH = 3


def parse_record(line: str, n_mult: int, n_coeff: int):
    """Split one record into (multipliers, coefficients); raises ValueError on bad input."""
    head = line[: n_mult * INT_WIDTH]
    if len(head) < n_mult * INT_WIDTH:
        raise ValueError("record too short")
    mult = [int(head[i * INT_WIDTH:(i + 1) * INT_WIDTH]) for i in range(n_mult)]
    reals = [float(x) for x in line[n_mult * INT_WIDTH:].split()]
    if len(reals) < n_coeff:
        raise ValueError(f"expected {n_coeff} real numbers, got {len(reals)}")
    return mult, reals[:n_coeff]


def read_elp_file(source: Union[str, Path, Iterable[str]], number: int) -> TermTable:
    """
    Parse ELP file `number` from a path or from an iterable of lines.

    The Main Problem keeps only the amplitude column; every other file keeps
    (phase, amplitude, period).
    """
    f = elp_file(number)
    n_mult = f.form.multiplier_width

    if isinstance(source, (str, Path)):
        label = str(source)
        with open(source, "r", encoding="ascii") as fh:
            lines = fh.read().splitlines()
    else:
        label = f"ELP{number}"
        lines = list(source)

    multipliers, coefficients = [], []
    for lineno, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            m, c = parse_record(line.rstrip("\n"), n_mult, f.n_coeff)
        except ValueError as e:
            raise TableFormatError(f"{label}:{lineno}: {e}") from e
        multipliers.append(m)
        coefficients.append(c)

    logger.debug("%s: %d terms", label, len(multipliers))
    return TermTable.from_rows(
        multipliers, coefficients, n_mult=n_mult, n_coeff=f.n_coeff, name=f"ELP{number}"
    )


def _find(directory: Path, number: int) -> Optional[Path]:
    for name in (f"ELP{number}", f"elp{number}", f"ELP{number}.txt", f"elp{number}.txt"):
        p = directory / name
        if p.is_file():
            return p
    return None


def load_elp_directory(directory: Union[str, Path], base: Optional[ElpTables] = None) -> ElpTables:
    """
    Overlay whichever of ELP1..ELP36 exist in `directory` on `base`
    (the bundled tables by default).
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise TableFormatError(f"{directory} is not a directory")
    base = bundled_tables() if base is None else base

    updates = {}
    for number in range(1, TOTAL_FILES + 1):
        path = _find(directory, number)
        if path is not None:
            updates[number] = read_elp_file(path, number)

    if not updates:
        logger.warning("No ELP files found in %s; using the base tables", directory)
    else:
        logger.info("Loaded %d ELP files from %s: %s", len(updates), directory, sorted(updates))
    return base.replace(updates)
