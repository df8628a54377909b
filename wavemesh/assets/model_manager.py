# wavemesh/assets/model_manager.py
"""Менеджер кэширования моделей – один объект на процесс."""

from pathlib import Path

from wavemesh.utils.config import loader_settings
from wavemesh.utils.loader import load_model
from wavemesh.utils.logger import logger


class ModelManager:
    """Кеширующий менеджер моделей: (путь, настройки loader) -> Mesh."""
    _cache = {}

    @classmethod
    def get(cls, path, config=None):
        settings = config.loader_settings() if config is not None else loader_settings()
        key = (Path(path).expanduser().resolve(), tuple(sorted(settings.items())))
        if key in cls._cache:
            return cls._cache[key]
        mesh = load_model(key[0], config=config)
        cls._cache[key] = mesh
        logger.debug(f"[ModelManager] Loaded model: {key[0]}")
        return mesh

    @classmethod
    def clear(cls):
        cls._cache.clear()
