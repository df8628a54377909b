# -*- coding: utf-8 -*-
"""
conftest.py – мок‑бэкенд и общие OBJ‑фикстуры.
Не требует реального графического API, а проверяет, что Mesh вызывает
ожидаемые методы бекенда.
"""

import ctypes
from typing import Any, Optional, Tuple
import pytest

from wavemesh.assets.model_manager import ModelManager
from wavemesh.graphics.backend import GraphicsBackend
from wavemesh.utils.config import Config


# ----------------------------------------------------------------------
# MockBackend – полностью реализует интерфейс GraphicsBackend.
# ----------------------------------------------------------------------
class MockBackend(GraphicsBackend):
    """Каждый метод только записывает вызов в `self.calls`."""

    def __init__(self) -> None:
        # (method_name, args, kwargs)
        self.calls: list[Tuple[str, Tuple[Any, ...], dict]] = []
        self._resources: list[Any] = []

    def _record(self, name: str, *a, **kw) -> None:
        self.calls.append((name, a, kw))

    def create_buffer(self, data: bytes, usage: str = "default") -> Any:
        self._record("create_buffer", data, usage)
        ptr = ctypes.c_void_p(0xB0B0 + len(data))
        self._resources.append(ptr)
        return ptr

    def set_vertex_buffers(
        self,
        vertex_buffer: Any,
        index_buffer: Optional[Any] = None,
    ) -> None:
        self._record("set_vertex_buffers", vertex_buffer, index_buffer)

    def draw(
        self,
        vertex_count: int,
        start_vertex: int = 0,
        instance_count: int = 1,
    ) -> None:
        self._record("draw", vertex_count, start_vertex, instance_count)

    def release_resource(self, resource: Any) -> None:
        self._record("release_resource", resource)
        self._resources.remove(resource)

    # -----------------------------------------------------------------
    # Утилиты для тестов --------------------------------------------------
    # -----------------------------------------------------------------
    def called(self, name: str) -> bool:
        """True, если метод `name` был вызван хотя бы один раз."""
        return any(call[0] == name for call in self.calls)

    def count(self, name: str) -> int:
        """Сколько раз был вызван метод `name`."""
        return sum(1 for call in self.calls if call[0] == name)


# ----------------------------------------------------------------------
# Образцы моделей
# ----------------------------------------------------------------------
# Квадрат в плоскости XY, UV совпадают с XY – касательные (1,0,0)/(0,1,0).
SQUARE_OBJ = """\
# square
o Square
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 1.0 1.0 0.0
v 0.0 1.0 0.0
vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vt 0.0 1.0
vn 0.0 0.0 1.0
usemtl None
s off
f 1/1/1 2/2/1 3/3/1 4/4/1
"""

TRIANGLE_OBJ = """\
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 0.0 1.0 0.0
vt 0.0 0.0
vt 1.0 0.0
vt 0.0 1.0
vn 0.0 0.0 1.0
f 1/1/1 2/2/1 3/3/1
"""


@pytest.fixture
def mock_backend() -> MockBackend:
    """Создаёт чистый MockBackend."""
    return MockBackend()


@pytest.fixture
def square_obj() -> str:
    return SQUARE_OBJ


@pytest.fixture
def triangle_obj() -> str:
    return TRIANGLE_OBJ


@pytest.fixture
def write_obj(tmp_path):
    """Записать текст модели во временный .obj‑файл и вернуть путь."""
    def _write(text: str, name: str = "model.obj"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def _fresh_singletons():
    Config.reset()
    ModelManager.clear()
    yield
    Config.reset()
    ModelManager.clear()
