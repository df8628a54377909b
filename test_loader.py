# -*- coding: utf-8 -*-
import json
import logging

import pytest

from wavemesh import ModelManager, load_model, load_obj
from wavemesh.errors import IndexOutOfRange, InvalidFaceArity, MalformedNumber
from wavemesh.utils.config import Config, DEFAULT_CONFIG, loader_settings


def test_load_model(write_obj, square_obj):
    mesh = load_model(write_obj(square_obj, "square.obj"))
    assert mesh.name == "square"
    assert mesh.vertex_count == 6


def test_load_obj(write_obj, triangle_obj):
    model = load_obj(write_obj(triangle_obj))
    assert len(model.v) == 3
    assert len(model.f) == 1


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_model(tmp_path / "nope.obj")


def test_failed_load_is_reported(write_obj, caplog):
    path = write_obj("v 0 0 0\nvn 0 0 1\nf 1//1 2//1 3//1\n", "broken.obj")
    with caplog.at_level(logging.ERROR, logger="WaveMesh"):
        with pytest.raises(IndexOutOfRange):
            load_model(path)
    assert any("failed to load model broken" in r.getMessage() for r in caplog.records)


def test_parse_failure_is_reported(write_obj, caplog):
    path = write_obj("v 0 zero 0\n", "bad.obj")
    with caplog.at_level(logging.ERROR, logger="WaveMesh"):
        with pytest.raises(MalformedNumber):
            load_model(path)
    assert any("failed to load model bad.obj" in r.getMessage() for r in caplog.records)


def test_skip_policy_override(write_obj, square_obj):
    path = write_obj(square_obj + "f 1/1/1 2/2/1\n")
    mesh = load_model(path, on_error="skip")
    assert mesh.vertex_count == 6


def test_parallel_override(write_obj, square_obj):
    path = write_obj(square_obj * 3)
    sequential = load_model(path)
    parallel = load_model(path, parallel=True)
    assert parallel.vertices == sequential.vertices


def test_load_model_with_config(tmp_path, write_obj, square_obj):
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text(json.dumps({"loader": {"on_error": "skip"}}), encoding="utf-8")
    config = Config(str(cfg_path))
    assert config.loader_settings()["on_error"] == "skip"
    assert config.loader_settings()["parallel"] is False

    mesh = load_model(write_obj(square_obj + "f 1/1/1\n"), config=config)
    assert mesh.vertex_count == 6


def test_config_created_with_defaults(tmp_path):
    cfg_path = tmp_path / "config.json"
    config = Config(str(cfg_path))
    assert cfg_path.is_file()
    assert json.loads(cfg_path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert config["loader"]["on_error"] == "abort"
    # singleton
    assert Config(str(tmp_path / "other.json")) is config


def test_config_recovers_from_broken_file(tmp_path):
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text("{not json", encoding="utf-8")
    config = Config(str(cfg_path))
    assert config.data == DEFAULT_CONFIG


def test_loader_settings_validation():
    assert loader_settings()["on_error"] == "abort"
    with pytest.raises(ValueError):
        loader_settings({"on_error": "explode"})


def test_model_manager_caches(write_obj, square_obj):
    path = write_obj(square_obj)
    first = ModelManager.get(path)
    assert ModelManager.get(str(path)) is first
    ModelManager.clear()
    assert ModelManager.get(path) is not first


def test_model_manager_does_not_cache_failures(write_obj):
    path = write_obj("f 1//1 2//1 3//1\n")
    with pytest.raises(IndexOutOfRange):
        ModelManager.get(path)
    assert ModelManager._cache == {}


def test_example_cube_loads():
    from pathlib import Path
    cube = Path(__file__).parent / "examples" / "resources" / "cube.obj"
    mesh = load_model(cube)
    assert mesh.vertex_count == 36
    assert mesh.triangle_count == 12


def test_profiler_warns_on_slow_stage(caplog):
    import time
    from wavemesh.utils.profiler import Profiler

    with caplog.at_level(logging.DEBUG, logger="WaveMesh"):
        with Profiler("slow", warn_ms=0.0) as slow:
            time.sleep(0.002)
        with Profiler("fast") as fast:
            pass
    assert slow.elapsed_ms > 0.0
    assert fast.elapsed_ms >= 0.0
    levels = {r.getMessage().split(":")[0]: r.levelno for r in caplog.records
              if r.getMessage().startswith("[Profiler]")}
    assert levels["[Profiler] slow"] == logging.WARNING
    assert levels["[Profiler] fast"] == logging.DEBUG


def test_model_manager_keys_on_loader_settings(tmp_path, write_obj, square_obj):
    path = write_obj(square_obj + "f 1/1/1 2/2/1\n")
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text(json.dumps({"loader": {"on_error": "skip"}}), encoding="utf-8")
    skip_config = Config(str(cfg_path))

    # по‑умолчанию модель отклоняется, со skip – грань выбрасывается
    with pytest.raises(InvalidFaceArity):
        ModelManager.get(path)
    skipped = ModelManager.get(path, config=skip_config)
    assert skipped.vertex_count == 6
    assert ModelManager.get(path, config=skip_config) is skipped
    with pytest.raises(InvalidFaceArity):
        ModelManager.get(path)
