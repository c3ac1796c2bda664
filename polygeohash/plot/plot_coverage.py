#!/usr/bin/env python3
"""
Visualize geohash coverage saved by polygeohash.generate (.npz output)

Usage:
  python -m polygeohash.plot.plot_coverage coverage.npz
  python -m polygeohash.plot.plot_coverage coverage.npz --annotate --max_points 200
  python -m polygeohash.plot.plot_coverage data/geohashes/coverage.npz --out coverage.png
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from .. import paths


def plot_polygon(ax, polygon: np.ndarray) -> None:
    if polygon.shape[0] == 0:
        return
    # Close the ring; lng on x, lat on y
    closed = np.vstack([polygon, polygon[0]])
    ax.plot(closed[:, 1], closed[:, 0], color="black", linewidth=2)
    ax.scatter(polygon[:, 1], polygon[:, 0], s=10, color="black")


def plot_file(
    file: str | Path,
    *,
    annotate: bool = False,
    max_points: Optional[int] = None,
):
    """Plot the polygon and first-discovery points from a saved run and return (fig, ax)."""
    file_path = paths.output_path(file)

    data = np.load(file_path)
    polygon = data["polygon"]
    points = data["points"].reshape(-1, 2)
    geohashes = data["geohashes"]
    precision = int(data["precision"])

    if max_points is not None:
        points = points[:max_points]
        geohashes = geohashes[:max_points]

    fig, ax = plt.subplots(figsize=(6, 6))
    plot_polygon(ax, polygon)

    if points.shape[0]:
        # Colour by discovery order so the row-major sweep is visible.
        order = np.arange(points.shape[0])
        ax.scatter(points[:, 1], points[:, 0], c=order, cmap="viridis", s=6)
        if annotate:
            for (lat, lng), geohash in zip(points, geohashes):
                ax.annotate(str(geohash), (lng, lat), fontsize=6)

    ax.set_title(f"{len(geohashes)} geohashes (precision {precision})", fontsize=9)
    ax.set_xlabel("longitude")
    ax.set_ylabel("latitude")
    ax.set_aspect("equal")

    fig.tight_layout()
    return fig, ax


def main():
    p = argparse.ArgumentParser()
    p.add_argument(
        "file",
        type=str,
        help=".npz file from polygeohash.generate (if no path, load from data/geohashes/)",
    )
    p.add_argument("--annotate", action="store_true", help="label each point with its geohash")
    p.add_argument("--max_points", type=int, default=None, help="only draw the first N geohashes")
    p.add_argument("--out", type=str, default=None, help="save the figure here instead of showing it")
    args = p.parse_args()

    fig, _ = plot_file(args.file, annotate=args.annotate, max_points=args.max_points)
    if args.out:
        fig.savefig(args.out, dpi=150)
        print(f"[plot] saved {args.out}")
    else:
        plt.show()


if __name__ == "__main__":
    main()
