from pathlib import Path

from polygeohash import paths


def test_output_path():
    assert paths.output_path("cells.npz") == paths.OUTPUT_DIR / "cells.npz"
    assert paths.output_path("runs/cells.npz") == paths.PROJECT_ROOT / "runs" / "cells.npz"
    absolute = Path("/tmp/cells.npz").resolve()
    assert paths.output_path(absolute) == absolute


def test_relative_to_config(tmp_path):
    config = tmp_path / "configs" / "generate.yaml"
    assert paths.relative_to_config("area.yaml", config) == tmp_path.resolve() / "configs" / "area.yaml"
    assert paths.relative_to_config(tmp_path / "x.yaml", str(config)) == tmp_path / "x.yaml"


def test_project_path():
    assert paths.project_path("configs/generate.yaml") == paths.CONFIG_DIR / "generate.yaml"
