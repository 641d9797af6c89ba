from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from .core.errors import ElpError


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_time_args(p: argparse.ArgumentParser) -> None:
    g = p.add_mutually_exclusive_group()
    g.add_argument("--jd-tt", type=float, default=None, help="Julian Date in TT (default: J2000.0 = 2451545.0)")
    g.add_argument("--t", type=float, default=None, help="Julian centuries of TT since J2000.0")
    p.add_argument("--elp-dir", default=None, help="directory holding ELP1..ELP36 files to use instead of the bundled tables")
    p.add_argument("--verbose", action="store_true", help="debug logging")


def _resolve(args) -> tuple[float, float]:
    from .core.time import J2000_TT, jd_from_t, t_centuries

    if args.t is not None:
        return jd_from_t(args.t), args.t
    jd = J2000_TT if args.jd_tt is None else args.jd_tt
    return jd, t_centuries(jd)


def _tables(args):
    if args.elp_dir is None:
        return None
    from .data.elp_files import load_elp_directory

    return load_elp_directory(args.elp_dir)


def _setup_logging(args) -> None:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def cmd_position(argv: list[str]) -> int:
    from . import api
    from .config import TheoryConfig
    from .core.types import SphericalPoint

    p = argparse.ArgumentParser(prog="elpmoon position", description="Geocentric position of the Moon (ELP 2000-82B).")
    _add_time_args(p)
    p.add_argument("--frame", choices=api.FRAMES, default="elp", help="reference frame of the output")
    p.add_argument(
        "--earth-figure-linear",
        choices=["dedicated", "reference"],
        default="dedicated",
        help="table used for the t-part of the Earth figure series",
    )
    args = p.parse_args(argv)
    _setup_logging(args)

    jd, t = _resolve(args)
    config = TheoryConfig(earth_figure_linear=args.earth_figure_linear)
    pos = api.moon_position_jd(jd, args.frame, tables=_tables(args), config=config)

    print(f"JD_TT = {jd:.6f}")
    print(f"t (Julian centuries from J2000.0) = {t:.12f}")
    print(f"frame = {args.frame}")
    print()
    if isinstance(pos, SphericalPoint):
        print(f"  longitude = {pos.longitude:.5f} arcsec  ({pos.longitude_deg:.8f} deg)")
        print(f"  latitude  = {pos.latitude:.5f} arcsec  ({pos.latitude_deg:.8f} deg)")
        print(f"  distance  = {pos.distance:.5f} km")
    else:
        print(f"  x = {pos.x:.5f} km")
        print(f"  y = {pos.y:.5f} km")
        print(f"  z = {pos.z:.5f} km")
    return 0


def cmd_args(argv: list[str]) -> int:
    from .theory import arguments as ar

    p = argparse.ArgumentParser(prog="elpmoon args", description="Print the fundamental arguments of ELP 2000-82B.")
    _add_time_args(p)
    args = p.parse_args(argv)
    _setup_logging(args)

    jd, t = _resolve(args)
    print(f"JD_TT = {jd:.6f}")
    print(f"t (Julian centuries from J2000.0) = {t:.12f}")
    print()
    print("ELP arguments (arcsec; full / linear)")
    for name, full, lin in zip(ar.ELP_NAMES, ar.elp_arguments(t), ar.elp_arguments(t, ar.LINEAR_SERIES)):
        print(f"  {name:<7} = {full:22.6f}  {lin:22.6f}")
    print()
    print("Delaunay arguments (arcsec; full / linear)")
    for name, full, lin in zip(ar.DELAUNAY_NAMES, ar.delaunay_arguments(t), ar.delaunay_arguments(t, ar.LINEAR_SERIES)):
        print(f"  {name:<7} = {full:22.6f}  {lin:22.6f}")
    print()
    print("Planetary mean longitudes (arcsec)")
    for name, lam in zip(ar.PLANET_NAMES, ar.planetary_arguments(t)):
        print(f"  {name:<7} = {lam:22.6f}")
    print()
    print(f"Precession argument zeta = {ar.precession_argument(t):.6f} arcsec")
    return 0


def cmd_contributions(argv: list[str]) -> int:
    from .theory.position import contributions

    p = argparse.ArgumentParser(prog="elpmoon contributions", description="Per-series contributions to the position.")
    _add_time_args(p)
    args = p.parse_args(argv)
    _setup_logging(args)

    jd, t = _resolve(args)
    parts = contributions(t, _tables(args))
    print(f"JD_TT = {jd:.6f}   t = {t:.12f}")
    print()
    print(f"  {'series':<24}{'lon (arcsec)':>20}{'lat (arcsec)':>18}{'dist (km)':>18}")
    for name, (lon, lat, dist) in parts.items():
        print(f"  {name:<24}{lon:20.6f}{lat:18.6f}{dist:18.6f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="elpmoon", description="ELP 2000-82B lunar position toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("position", help="Geocentric position of the Moon")
    sub.add_parser("args", help="Print fundamental arguments")
    sub.add_parser("contributions", help="Print per-series contributions")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["delaunay-check", "contributions-plot"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    try:
        if args.cmd == "position":
            return cmd_position(rest)

        if args.cmd == "args":
            return cmd_args(rest)

        if args.cmd == "contributions":
            return cmd_contributions(rest)

        if args.cmd == "diag":
            tool_map = {
                "delaunay-check": "elpmoon.diagnostics.delaunay_check",
                "contributions-plot": "elpmoon.diagnostics.contributions_plot",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except ElpError as e:
        print(f"elpmoon: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
