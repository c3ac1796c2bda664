"""
Geohash encoding.

Interleaved binary search over [-90, 90] latitude and [-180, 180] longitude,
longitude bit first, packed 5 bits per base-32 character.
"""

from __future__ import annotations

GEOHASH_ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"
DEFAULT_PRECISION = 8

BITS_PER_CHAR = 5

LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)


def check_precision(precision: int) -> int:
    try:
        value = int(precision)
        valid = not isinstance(precision, bool) and value == precision and value >= 1
    except (TypeError, ValueError):
        valid = False
    if not valid:
        raise ValueError(f"precision must be a positive integer, got {precision!r}")
    return value


def encode(lat: float, lng: float, precision: int = DEFAULT_PRECISION) -> str:
    """Encode (lat, lng) as a geohash of exactly `precision` characters."""
    precision = check_precision(precision)

    min_lat, max_lat = LAT_RANGE
    min_lng, max_lng = LNG_RANGE
    chars = []
    even = True
    bit = 0
    ch = 0

    while len(chars) < precision:
        if even:
            mid = (min_lng + max_lng) / 2
            if lng >= mid:
                ch |= 1 << (BITS_PER_CHAR - 1 - bit)
                min_lng = mid
            else:
                max_lng = mid
        else:
            mid = (min_lat + max_lat) / 2
            if lat >= mid:
                ch |= 1 << (BITS_PER_CHAR - 1 - bit)
                min_lat = mid
            else:
                max_lat = mid
        even = not even

        bit += 1
        if bit == BITS_PER_CHAR:
            chars.append(GEOHASH_ALPHABET[ch])
            bit = 0
            ch = 0

    return "".join(chars)
