"""Where configs are read from and run outputs are written to."""

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

PROJECT_ROOT = Path(__file__).resolve().parents[1]
CONFIG_DIR = PROJECT_ROOT / "configs"
OUTPUT_DIR = PROJECT_ROOT / "data" / "geohashes"


def output_path(path: PathLike) -> Path:
    """
    Locate a run output.

    A bare filename lives in OUTPUT_DIR; any other relative path is taken
    from the project root.
    """
    p = Path(path)
    if p.is_absolute():
        return p
    if p.parent == Path("."):
        return OUTPUT_DIR / p
    return PROJECT_ROOT / p


def relative_to_config(path: PathLike, config_path: PathLike) -> Path:
    p = Path(path)
    if p.is_absolute():
        return p
    return Path(config_path).resolve().parent / p


def project_path(path: PathLike) -> Path:
    p = Path(path)
    return p if p.is_absolute() else PROJECT_ROOT / p
