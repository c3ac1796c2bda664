"""Polygon geometry: bounding-box grid and point-in-polygon tests."""

from .grid import (
    LAT_STEP,
    LNG_STEP,
    BoundingBox,
    InvalidPolygonError,
    as_polygon,
    bounding_box,
    grid_points,
    grid_shape,
)
from .pip import is_point_in_polygon

__all__ = [
    "LAT_STEP",
    "LNG_STEP",
    "BoundingBox",
    "InvalidPolygonError",
    "as_polygon",
    "bounding_box",
    "grid_points",
    "grid_shape",
    "is_point_in_polygon",
]
