"""Geohash encoding."""

from .geohash import DEFAULT_PRECISION, GEOHASH_ALPHABET, encode

__all__ = ["DEFAULT_PRECISION", "GEOHASH_ALPHABET", "encode"]
