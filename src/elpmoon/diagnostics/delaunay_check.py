#!/usr/bin/env python3
"""
Compare the Delaunay arguments derived from the ELP arguments with the ones
from their own published polynomials, over a range of t.
"""
from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np

from elpmoon.theory import arguments as ar


def max_differences(ts, degree: int = ar.FULL_SERIES) -> np.ndarray:
    """Largest |algebraic - direct| per argument (arcsec, reduced mod 360°)."""
    worst = np.zeros(4)
    for t in ts:
        diff = ar.wrap_arcsec(ar.delaunay_arguments(t, degree) - ar.delaunay_arguments_from_series(t, degree))
        worst = np.maximum(worst, np.abs(diff))
    return worst


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Algebraic vs direct Delaunay arguments.")
    p.add_argument("--t-min", type=float, default=-10.0, help="first t (Julian centuries)")
    p.add_argument("--t-max", type=float, default=10.0, help="last t (Julian centuries)")
    p.add_argument("--steps", type=int, default=201)
    p.add_argument("--degree", type=int, default=ar.FULL_SERIES)
    args = p.parse_args(argv)

    ts = np.linspace(args.t_min, args.t_max, args.steps)
    worst = max_differences(ts, args.degree)

    print(f"t in [{args.t_min:g}, {args.t_max:g}], {args.steps} samples, degree {args.degree}")
    print("Max |algebraic - direct| (arcsec):")
    for name, w in zip(ar.DELAUNAY_NAMES, worst):
        print(f"  {name:<3} = {w:.3e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
