"""
Bounding-box grid over a lat/lng polygon.

- Normalises vertex input into a read-only (n, 2) float64 array of (lat, lng)
- Computes the axis-aligned bounding box
- Enumerates grid points inside the box at a fixed step, latitude-major

Rows and columns are stepped by integer index rather than by accumulating
the step, so the inclusive upper bound does not drift with float error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

LAT_STEP = 1e-4
LNG_STEP = 1e-4

# Slack for (max - min) / step landing a hair under a whole number.
_STEP_TOLERANCE = 1e-9


class InvalidPolygonError(ValueError):
    """Raised when vertex input cannot be used as a polygon."""


def as_polygon(vertices: Sequence[Sequence[float]], validate: bool = False) -> np.ndarray:
    """
    Convert an ordered vertex list into a read-only (n, 2) array of (lat, lng).

    The ring is closed implicitly; callers need not repeat the first vertex.
    With validate=True, fewer than 3 vertices or non-finite coordinates are
    rejected instead of degenerating to an empty result.
    """
    try:
        xy = np.array(vertices, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidPolygonError(f"vertices must be (lat, lng) pairs: {exc}") from exc

    if xy.size == 0:
        xy = xy.reshape(0, 2)
    if xy.ndim != 2 or xy.shape[1] != 2:
        raise InvalidPolygonError(f"vertices must be Nx2 (lat, lng) pairs, got shape {xy.shape}")

    if validate:
        if xy.shape[0] < 3:
            raise InvalidPolygonError(f"Polygon must have at least 3 vertices, got {xy.shape[0]}")
        if not np.all(np.isfinite(xy)):
            raise InvalidPolygonError("Polygon coordinates must be finite")

    xy.flags.writeable = False
    return xy


@dataclass(frozen=True)
class BoundingBox:
    min_lat: float
    min_lng: float
    max_lat: float
    max_lng: float


def bounding_box(polygon: np.ndarray) -> Optional[BoundingBox]:
    """Smallest axis-aligned box holding every vertex, or None for an empty polygon."""
    if polygon.shape[0] == 0:
        return None
    lo = polygon.min(axis=0)
    hi = polygon.max(axis=0)
    return BoundingBox(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))


def step_count(lo: float, hi: float, step: float) -> int:
    """Number of grid coordinates in [lo, hi] starting at lo."""
    if not math.isfinite(lo) or not math.isfinite(hi) or hi < lo:
        return 0
    return int(math.floor((hi - lo) / step + _STEP_TOLERANCE)) + 1


def grid_shape(box: Optional[BoundingBox], lat_step: float = LAT_STEP, lng_step: float = LNG_STEP) -> Tuple[int, int]:
    if box is None:
        return 0, 0
    return (
        step_count(box.min_lat, box.max_lat, lat_step),
        step_count(box.min_lng, box.max_lng, lng_step),
    )


def grid_points(
    polygon: np.ndarray,
    lat_step: float = LAT_STEP,
    lng_step: float = LNG_STEP,
) -> Iterator[Tuple[float, float]]:
    """Yield (lat, lng) for every grid point in the polygon's bounding box, row by row."""
    box = bounding_box(polygon)
    n_lat, n_lng = grid_shape(box, lat_step, lng_step)
    for i in range(n_lat):
        lat = box.min_lat + i * lat_step
        for k in range(n_lng):
            yield lat, box.min_lng + k * lng_step
