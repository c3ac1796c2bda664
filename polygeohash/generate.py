"""Config-driven geohash generation entrypoint.

Usage:
  python -m polygeohash.generate
  python -m polygeohash.generate --config configs/generate.yaml --verbose
"""

from __future__ import annotations

import argparse
import itertools
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import yaml

from . import paths
from .encoding.geohash import DEFAULT_PRECISION
from .generator import GeoHashGenerator
from .geometry.grid import LAT_STEP, LNG_STEP


def _load_config(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_polygon(cfg: Dict[str, Any], config_path: Path) -> List[List[float]]:
    inline = cfg.get("polygon")
    polygon_path = cfg.get("polygon_path")
    if (inline is None) == (polygon_path is None):
        raise ValueError("config must set exactly one of 'polygon' or 'polygon_path'")
    if inline is not None:
        return inline

    # YAML is a superset of JSON, so one loader covers both file types.
    data = _load_config(paths.relative_to_config(polygon_path, config_path))
    if isinstance(data, dict):
        data = data.get("polygon", [])
    return data


def _save(out_path: Path, geohashes: List[str], points: np.ndarray, polygon: np.ndarray, precision: int) -> None:
    suffix = out_path.suffix.lower()
    if suffix == ".txt":
        with open(out_path, "w", encoding="utf-8") as f:
            for geohash in geohashes:
                f.write(geohash + "\n")
    elif suffix == ".npz":
        np.savez_compressed(
            out_path,
            geohashes=np.array(geohashes, dtype=f"<U{precision}"),
            points=points,
            polygon=np.asarray(polygon, dtype=np.float64),
            precision=np.int32(precision),
        )
    else:
        raise ValueError(f"Unsupported output format: {out_path.suffix!r} (use .txt or .npz)")


def generate_from_config(config_path: Path) -> Path:
    cfg = _load_config(config_path)

    polygon = _load_polygon(cfg, config_path)

    gen_cfg = cfg.get("generator", {}) or {}
    generator = GeoHashGenerator(
        polygon,
        precision=gen_cfg.get("precision", DEFAULT_PRECISION),
        lat_step=float(gen_cfg.get("lat_step", LAT_STEP)),
        lng_step=float(gen_cfg.get("lng_step", LNG_STEP)),
        validate=bool(gen_cfg.get("validate", False)),
    )

    out_cfg = cfg.get("output", {}) or {}
    limit: Optional[int] = out_cfg.get("limit")
    if limit is not None:
        limit = int(limit)
        if limit < 0:
            raise ValueError(f"output.limit must be >= 0, got {limit}")

    out_path = paths.output_path(out_cfg.get("out_path", "geohashes.txt"))
    out_path.parent.mkdir(parents=True, exist_ok=True)

    cells = list(itertools.islice(generator.iter_cells(), limit))
    geohashes = [geohash for geohash, _, _ in cells]
    points = np.array([(lat, lng) for _, lat, lng in cells], dtype=np.float64).reshape(-1, 2)

    _save(out_path, geohashes, points, generator.polygon, generator.precision)

    print(
        f"[generate] saved {out_path} with {len(geohashes)} geohashes "
        f"(precision={generator.precision}, vertices={generator.polygon.shape[0]}"
        f"{'' if limit is None else f', limit={limit}'})"
    )
    return out_path


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument(
        "--config",
        type=str,
        default=str(paths.CONFIG_DIR / "generate.yaml"),
        help="path to generation config",
    )
    p.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = p.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = paths.project_path(args.config)
    generate_from_config(config_path)


if __name__ == "__main__":
    main()
