"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.

Секция ``loader`` управляет сборкой меша:
    on_error           – "abort" (вся модель отклоняется) или "skip"
                         (сломанная грань выбрасывается с предупреждением)
    parallel           – собирать грани в пуле потоков
    max_workers        – размер пула (None – решает ThreadPoolExecutor)
    degenerate_epsilon – порог синуса угла между UV‑рёбрами (вырожденный базис)
    slow_load_ms       – после скольких мс этап загрузки попадает в лог как warning
"""

import copy
import json
from pathlib import Path
from wavemesh.utils.logger import logger

ERROR_POLICIES = ("abort", "skip")

DEFAULT_CONFIG = {
    "loader": {
        "on_error": "abort",
        "parallel": False,
        "max_workers": None,
        "degenerate_epsilon": 1e-6,
        "slow_load_ms": 1000.0,
    },
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "config.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def get(self, key, default=None):
        return self.data.get(key, default)

    def loader_settings(self) -> dict:
        """Секция loader, дополненная значениями по‑умолчанию."""
        return loader_settings(self.get("loader", {}))


def loader_settings(overrides=None) -> dict:
    settings = dict(DEFAULT_CONFIG["loader"])
    if overrides:
        settings.update(overrides)
    if settings["on_error"] not in ERROR_POLICIES:
        raise ValueError(
            f"Unknown on_error policy {settings['on_error']!r}, "
            f"expected one of {ERROR_POLICIES}"
        )
    return settings
