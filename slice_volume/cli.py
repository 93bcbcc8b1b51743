"""Command line interface for slice-based volume estimation."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import math
from pathlib import Path

from .model import AXES, load_mesh
from .parameters import load_parameters
from .volume import VolumeEstimator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate the volume of a closed mesh up to an elevation")
    parser.add_argument("model", type=Path, help="Path to the input mesh (STL, OBJ, PLY, ...)")
    parser.add_argument(
        "--elevation",
        type=float,
        required=True,
        help="Upper elevation bound of the integration",
    )
    parser.add_argument(
        "--slices",
        type=int,
        default=None,
        help="Number of trapezoidal bands (default: 100)",
    )
    parser.add_argument(
        "--up-axis",
        choices=sorted(AXES),
        default=None,
        help="Coordinate used as elevation (default: y)",
    )
    parser.add_argument(
        "--params",
        type=Path,
        default=None,
        help="Optional JSON file overriding the default estimation parameters",
    )
    parser.add_argument(
        "--metadata",
        type=Path,
        default=None,
        help="Optional path to write the estimate summary as JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    params = load_parameters(args.params)
    overrides = {}
    if args.slices is not None:
        overrides["slice_count"] = args.slices
    if args.up_axis is not None:
        overrides["up_axis"] = args.up_axis
    if overrides:
        params = dataclasses.replace(params, **overrides)

    mesh = load_mesh(args.model)
    logger.debug("Loaded %s with %d triangles", args.model, mesh.triangle_count)

    report = VolumeEstimator(params).report(mesh, args.elevation)
    if not math.isfinite(report.volume):
        logger.warning(
            "Volume estimate for %s is not finite; the mesh may be empty or degenerate", args.model
        )
        return 1

    print(f"{report.volume:.6f}")

    if args.metadata:
        with args.metadata.open("w", encoding="utf-8") as fp:
            json.dump(report.as_dict(), fp, indent=2)

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
