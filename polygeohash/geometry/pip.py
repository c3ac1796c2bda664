"""Point-in-polygon classification by ray casting (even-odd rule)."""

from __future__ import annotations

import numpy as np


def is_point_in_polygon(lat: float, lng: float, polygon: np.ndarray) -> bool:
    """
    True if (lat, lng) lies inside the closed ring `polygon`.

    Each edge pairs vertex i with the previous vertex j (vertex n-1 pairs with
    vertex 0). An edge counts when it straddles the line at `lng` and the
    crossing lies beyond `lat`; an odd count means inside. Points exactly on an
    edge get whatever the arithmetic gives.

    Fewer than 3 vertices enclose nothing, so every point is outside.
    """
    if polygon.shape[0] < 3:
        return False

    xi = polygon[:, 0]
    yi = polygon[:, 1]
    xj = np.roll(xi, 1)
    yj = np.roll(yi, 1)

    crosses = (yi > lng) != (yj > lng)
    if not np.any(crosses):
        return False

    # Only straddling edges reach the division, so yj - yi is never zero here.
    xi, yi, xj, yj = xi[crosses], yi[crosses], xj[crosses], yj[crosses]
    x_cross = (xj - xi) * (lng - yi) / (yj - yi) + xi
    return bool(np.count_nonzero(lat < x_cross) % 2)
