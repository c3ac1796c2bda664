"""
Polygon to geohash generation.

GeoHashGenerator walks the polygon's bounding-box grid, keeps the points that
fall inside the polygon, encodes them, and yields each geohash the first time
it is seen. Iteration is lazy: memory grows with the number of unique
geohashes, not with the grid, and a consumer may stop at any time.

Usage:
  gen = GeoHashGenerator([[52.52, 13.40], [52.52, 13.41], [52.53, 13.41]])
  for geohash in gen.generate_geohashes():
      ...
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence, Set, Tuple

from .encoding.geohash import DEFAULT_PRECISION, check_precision, encode
from .geometry.grid import LAT_STEP, LNG_STEP, as_polygon, bounding_box, grid_points, grid_shape
from .geometry.pip import is_point_in_polygon

logger = logging.getLogger(__name__)


class GeoHashGenerator:
    def __init__(
        self,
        polygon: Sequence[Sequence[float]],
        precision: int = DEFAULT_PRECISION,
        lat_step: float = LAT_STEP,
        lng_step: float = LNG_STEP,
        validate: bool = False,
    ) -> None:
        if not lat_step > 0 or not lng_step > 0:
            raise ValueError(f"grid steps must be positive, got lat_step={lat_step}, lng_step={lng_step}")
        self.polygon = as_polygon(polygon, validate=validate)
        self.precision = check_precision(precision)
        self.lat_step = float(lat_step)
        self.lng_step = float(lng_step)

    def iter_cells(self) -> Iterator[Tuple[str, float, float]]:
        """
        Yield (geohash, lat, lng) for each unique geohash, in grid discovery order.

        (lat, lng) is the first grid point inside the polygon that encoded to
        that geohash. Every call starts a fresh run with an empty seen-set.
        """
        box = bounding_box(self.polygon)
        n_lat, n_lng = grid_shape(box, self.lat_step, self.lng_step)
        logger.debug(
            "geohash run: %d vertices, bbox=%s, grid=%dx%d, precision=%d",
            self.polygon.shape[0], box, n_lat, n_lng, self.precision,
        )

        seen: Set[str] = set()
        visited = 0
        for lat, lng in grid_points(self.polygon, self.lat_step, self.lng_step):
            visited += 1
            if not is_point_in_polygon(lat, lng, self.polygon):
                continue
            geohash = encode(lat, lng, self.precision)
            if geohash in seen:
                continue
            seen.add(geohash)
            yield geohash, lat, lng

        logger.debug("geohash run done: %d unique geohashes from %d grid points", len(seen), visited)

    def generate_geohashes(self) -> Iterator[str]:
        """Yield the unique geohashes covering the polygon, in grid discovery order."""
        for geohash, _, _ in self.iter_cells():
            yield geohash

    def __iter__(self) -> Iterator[str]:
        return self.generate_geohashes()


def polygon_to_geohashes(
    polygon: Sequence[Sequence[float]],
    precision: int = DEFAULT_PRECISION,
) -> Iterator[str]:
    """Shorthand for GeoHashGenerator(polygon, precision).generate_geohashes()."""
    return GeoHashGenerator(polygon, precision=precision).generate_geohashes()
