"""
Контекст‑менеджер профайлинга – измеряет время этапа загрузки модели
(разбор, сборка вершин) и предупреждает, если этап слишком долгий.
"""

import time
from typing import Optional

from wavemesh.utils.logger import logger

class Profiler:
    """Контекст‑менеджер для измерения времени выполнения."""
    def __init__(self, name: str, warn_ms: Optional[float] = None):
        self.name = name
        self.warn_ms = warn_ms
        self.elapsed_ms = 0.0
        self._start = 0.0

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        if exc_type is not None:
            logger.debug(f"[Profiler] {self.name}: failed after {self.elapsed_ms:.2f} ms")
        elif self.warn_ms is not None and self.elapsed_ms > self.warn_ms:
            logger.warning(f"[Profiler] {self.name}: {self.elapsed_ms:.2f} ms "
                           f"(slower than {self.warn_ms:.0f} ms)")
        else:
            logger.debug(f"[Profiler] {self.name}: {self.elapsed_ms:.2f} ms")
