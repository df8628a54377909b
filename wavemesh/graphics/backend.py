"""
Абстрактный интерфейс графического бекенда.

Ядро загрузки моделей само ничего не рисует – ему нужны только вызовы,
которыми Mesh выгружает вершинный буфер и рисует triangle list.
Устройство, swap‑chain, шейдеры и синхронизация кадра остаются на стороне
реализации бекенда.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

class GraphicsBackend(ABC):
    """Base interface for graphics backends."""

    @abstractmethod
    def create_buffer(self, data: bytes, usage: str = "default") -> Any:
        pass

    @abstractmethod
    def set_vertex_buffers(
        self,
        vertex_buffer: Any,
        index_buffer: Optional[Any] = None
    ) -> None:
        pass

    @abstractmethod
    def draw(
        self,
        vertex_count: int,
        start_vertex: int = 0,
        instance_count: int = 1
    ) -> None:
        pass

    @abstractmethod
    def release_resource(self, resource: Any) -> None:
        pass
