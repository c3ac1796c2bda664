import logging
import sys

import numpy as np
import pytest
import yaml

from polygeohash.generate import generate_from_config, main
from polygeohash.generator import GeoHashGenerator

POLYGON = [[0.0, 0.0], [0.0, 0.005], [0.005, 0.005], [0.005, 0.0]]


def _write_config(tmp_path, cfg):
    path = tmp_path / "generate.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_txt_output(tmp_path, capsys):
    out = tmp_path / "out" / "cells.txt"
    config = _write_config(tmp_path, {"polygon": POLYGON, "output": {"out_path": str(out)}})

    assert generate_from_config(config) == out
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines == list(GeoHashGenerator(POLYGON).generate_geohashes())
    assert "[generate] saved" in capsys.readouterr().out


def test_npz_output_with_limit_and_precision(tmp_path):
    out = tmp_path / "cells.npz"
    config = _write_config(
        tmp_path,
        {
            "polygon": POLYGON,
            "generator": {"precision": 9, "validate": True},
            "output": {"out_path": str(out), "limit": 5},
        },
    )
    generate_from_config(config)

    data = np.load(out)
    assert data["geohashes"].tolist() == list(GeoHashGenerator(POLYGON, precision=9).generate_geohashes())[:5]
    assert data["points"].shape == (5, 2)
    assert np.allclose(data["polygon"], POLYGON)
    assert int(data["precision"]) == 9


def test_polygon_path(tmp_path):
    polygon_file = tmp_path / "area.json"
    polygon_file.write_text('{"polygon": [[0, 0], [0, 0.002], [0.002, 0.002]]}', encoding="utf-8")
    out = tmp_path / "cells.txt"
    config = _write_config(tmp_path, {"polygon_path": str(polygon_file), "output": {"out_path": str(out)}})

    generate_from_config(config)
    expected = list(GeoHashGenerator([[0, 0], [0, 0.002], [0.002, 0.002]]).generate_geohashes())
    assert out.read_text(encoding="utf-8").splitlines() == expected


def test_relative_polygon_path_is_read_next_to_config(tmp_path):
    area_dir = tmp_path / "areas"
    area_dir.mkdir()
    (area_dir / "square.yaml").write_text(yaml.safe_dump(POLYGON), encoding="utf-8")
    out = tmp_path / "cells.txt"
    config = _write_config(tmp_path, {"polygon_path": "areas/square.yaml", "output": {"out_path": str(out)}})

    generate_from_config(config)
    assert out.read_text(encoding="utf-8").splitlines() == list(GeoHashGenerator(POLYGON).generate_geohashes())


def test_bad_precision_in_config(tmp_path):
    config = _write_config(
        tmp_path,
        {"polygon": POLYGON, "generator": {"precision": None}, "output": {"out_path": str(tmp_path / "a.txt")}},
    )
    with pytest.raises(ValueError):
        generate_from_config(config)


def test_polygon_source_must_be_unique(tmp_path):
    both = _write_config(tmp_path, {"polygon": POLYGON, "polygon_path": "x.yaml"})
    with pytest.raises(ValueError):
        generate_from_config(both)

    neither = _write_config(tmp_path, {"output": {"out_path": str(tmp_path / "a.txt")}})
    with pytest.raises(ValueError):
        generate_from_config(neither)


def test_unsupported_suffix(tmp_path):
    config = _write_config(tmp_path, {"polygon": POLYGON, "output": {"out_path": str(tmp_path / "a.csv")}})
    with pytest.raises(ValueError):
        generate_from_config(config)


def test_negative_limit(tmp_path):
    config = _write_config(
        tmp_path, {"polygon": POLYGON, "output": {"out_path": str(tmp_path / "a.txt"), "limit": -1}}
    )
    with pytest.raises(ValueError):
        generate_from_config(config)


def test_main_with_verbose(tmp_path, monkeypatch, capsys, caplog):
    out = tmp_path / "cells.npz"
    config = _write_config(tmp_path, {"polygon": POLYGON, "output": {"out_path": str(out)}})
    monkeypatch.setattr(sys, "argv", ["polygeohash-generate", "--config", str(config), "--verbose"])
    caplog.set_level(logging.DEBUG, logger="polygeohash")

    main()

    assert out.exists()
    assert f"[generate] saved {out}" in capsys.readouterr().out
    assert any(r.name == "polygeohash.generator" for r in caplog.records)
