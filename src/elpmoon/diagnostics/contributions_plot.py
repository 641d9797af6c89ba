#!/usr/bin/env python3
"""
Plot the size of each series block (Main Problem excluded) over a range of t.
"""
from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np

from elpmoon.theory.position import PERTURBATIONS, contributions

COORD_LABELS = ("longitude (arcsec)", "latitude (arcsec)", "distance (km)")


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "elpmoon[diagnostics]"') from e


def sample(ts) -> dict:
    """name -> (len(ts), 3) array of contributions."""
    out = {p.name: np.zeros((len(ts), 3)) for p in PERTURBATIONS}
    for i, t in enumerate(ts):
        parts = contributions(t)
        for name in out:
            out[name][i] = parts[name]
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Per-series contributions of ELP 2000-82B over time.")
    p.add_argument("--t-min", type=float, default=-2.0)
    p.add_argument("--t-max", type=float, default=2.0)
    p.add_argument("--steps", type=int, default=400)
    p.add_argument("--out-png", default="elp_contributions.png")
    args = p.parse_args(argv)

    plt = _need_matplotlib()

    ts = np.linspace(args.t_min, args.t_max, args.steps)
    data = sample(ts)

    fig, axes = plt.subplots(3, 1, figsize=(10, 10), sharex=True)
    for k, ax in enumerate(axes):
        for name, values in data.items():
            if np.any(values[:, k] != 0.0):
                ax.plot(ts, values[:, k], lw=1, label=name)
        ax.set_ylabel(COORD_LABELS[k])
        ax.grid(True, alpha=0.3)
    axes[0].legend(fontsize=8, ncol=2)
    axes[-1].set_xlabel("t (Julian centuries from J2000.0)")
    fig.suptitle("ELP 2000-82B perturbations (bundled tables)")
    fig.tight_layout()
    fig.savefig(args.out_png, dpi=120)
    print(f"Saved {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
