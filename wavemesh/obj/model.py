# wavemesh/obj/model.py
"""
Данные разобранного OBJ‑файла: три таблицы атрибутов и список граней.

Индексы в гранях хранятся как в файле – с единицы.  Перевод в 0‑based
и проверка границ выполняются при разрешении (geometry.resolver).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple


class VertexIndices(NamedTuple):
    """Угол грани: индексы позиции, (необязательной) UV и нормали."""
    v: int
    vt: Optional[int]
    vn: int


class Face(NamedTuple):
    corners: Tuple[VertexIndices, ...]
    line: Optional[int] = None


@dataclass(frozen=True)
class ObjModel:
    """Неизменяемый результат разбора."""
    v: Tuple[Tuple[float, float, float, float], ...] = field(default_factory=tuple)
    vt: Tuple[Tuple[float, float], ...] = field(default_factory=tuple)
    vn: Tuple[Tuple[float, float, float], ...] = field(default_factory=tuple)
    f: Tuple[Face, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, text: str) -> "ObjModel":
        from wavemesh.obj.parser import parse_obj
        return parse_obj(text)

    def __repr__(self) -> str:
        return (f"ObjModel(v={len(self.v)}, vt={len(self.vt)}, "
                f"vn={len(self.vn)}, f={len(self.f)})")
