"""Polygon to geohash coverage package."""

from . import paths
from .encoding.geohash import DEFAULT_PRECISION, GEOHASH_ALPHABET, encode
from .generator import GeoHashGenerator, polygon_to_geohashes
from .geometry import InvalidPolygonError, is_point_in_polygon

__all__ = [
    "paths",
    "DEFAULT_PRECISION",
    "GEOHASH_ALPHABET",
    "encode",
    "GeoHashGenerator",
    "polygon_to_geohashes",
    "InvalidPolygonError",
    "is_point_in_polygon",
]
