# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ с диска: файл читается целиком, разбирается,
собирается в triangle list с касательными и оборачивается в Mesh.

Ошибка в любой части модели отклоняет загрузку целиком (по‑умолчанию);
в лог пишется "failed to load model <name>: <reason>", исключение
пробрасывается вызывающему.
"""

from pathlib import Path

from wavemesh.errors import ModelLoadError
from wavemesh.geometry.assembler import build
from wavemesh.multithread.task_pool import TaskPool
from wavemesh.obj.model import ObjModel
from wavemesh.obj.parser import parse_obj
from wavemesh.scene.mesh import Mesh
from wavemesh.utils.config import loader_settings
from wavemesh.utils.logger import logger
from wavemesh.utils.profiler import Profiler


def _resolve(path) -> Path:
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"Model not found: {p}")
    return p


def load_obj(path, warn_ms=None) -> ObjModel:
    """Только разбор файла, без сборки вершин."""
    p = _resolve(path)
    try:
        with Profiler(f"parse {p.name}", warn_ms):
            return parse_obj(p.read_text(encoding="utf-8"))
    except ModelLoadError as exc:
        logger.error(f"[Loader] failed to load model {p.name}: {exc}")
        raise


def load_model(path, *, on_error=None, parallel=None, config=None) -> Mesh:
    """
    Загрузить модель и вернуть Mesh.

    Параметры on_error / parallel перекрывают секцию ``loader`` из config
    (или DEFAULT_CONFIG, если config не передан).
    """
    settings = config.loader_settings() if config is not None else loader_settings()
    overrides = {}
    if on_error is not None:
        overrides["on_error"] = on_error
    if parallel is not None:
        overrides["parallel"] = parallel
    settings = loader_settings({**settings, **overrides})

    model = load_obj(path, settings["slow_load_ms"])
    name = Path(path).stem
    try:
        with Profiler(f"build {name}", settings["slow_load_ms"]):
            if settings["parallel"]:
                with TaskPool(max_workers=settings["max_workers"]) as pool:
                    vertices = build(model, settings["on_error"], pool,
                                     settings["degenerate_epsilon"])
            else:
                vertices = build(model, settings["on_error"], None,
                                 settings["degenerate_epsilon"])
    except ModelLoadError as exc:
        logger.error(f"[Loader] failed to load model {name}: {exc}")
        raise

    mesh = Mesh(vertices, name=name)
    logger.info(f"[Loader] Loaded model {name}: {mesh.vertex_count} vertices, "
                f"{mesh.triangle_count} triangles")
    return mesh
