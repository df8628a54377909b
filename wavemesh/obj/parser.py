# -*- coding: utf-8 -*-
"""
Построчный парсер Wavefront OBJ: позиции (v), текстурные координаты (vt),
нормали (vn) и грани (f).  Прочие ключевые слова (#, o, g, s, usemtl,
mtllib …) молча пропускаются.

Формат угла грани: ``v/vt/vn`` или ``v//vn`` – позиция и нормаль
обязательны, UV может отсутствовать.  Число углов здесь не проверяется,
это делает триангуляция.
"""

from typing import List, Optional, Tuple

from wavemesh.errors import MalformedNumber, MissingRequiredField
from wavemesh.obj.model import Face, ObjModel, VertexIndices
from wavemesh.utils.logger import logger

# ключевое слово -> (минимум аргументов, название для сообщений)
_ATTRIBUTE_RECORDS = {
    "v": (3, "vertex position"),
    "vt": (2, "texture coordinate"),
    "vn": (3, "vertex normal"),
}


def _parse_floats(keyword: str, args: List[str], line_no: Optional[int]) -> List[float]:
    required, what = _ATTRIBUTE_RECORDS[keyword]
    values = []
    for token in args:
        try:
            values.append(float(token))
        except ValueError:
            raise MalformedNumber(
                f"couldn't parse {token!r} as a float in {what}", line=line_no
            ) from None
    if len(values) < required:
        raise MissingRequiredField(
            f"{what} needs {required} numbers, got {len(values)}", line=line_no
        )
    return values


def _parse_index(field: str, what: str, line_no: Optional[int]) -> int:
    # только беззнаковые десятичные числа: int() принял бы "+1", "-1", "1_0"
    if not (field.isascii() and field.isdigit()):
        raise MalformedNumber(f"couldn't parse {field!r} as a {what} index",
                              line=line_no)
    return int(field)


def parse_vertex_indices(token: str, line_no: Optional[int] = None) -> VertexIndices:
    """'1/2/3' -> VertexIndices(1, 2, 3); '1//3' -> VertexIndices(1, None, 3)."""
    fields = token.split("/")
    if len(fields) > 3:
        raise MalformedNumber(f"face corner {token!r} has more than three fields",
                              line=line_no)
    if not fields[0]:
        raise MissingRequiredField(f"face corner {token!r} has no position index",
                                   line=line_no)
    if len(fields) < 3 or not fields[2]:
        raise MissingRequiredField(f"face corner {token!r} has no normal index",
                                   line=line_no)
    v = _parse_index(fields[0], "position", line_no)
    vt = _parse_index(fields[1], "uv", line_no) if fields[1] else None
    vn = _parse_index(fields[2], "normal", line_no)
    return VertexIndices(v, vt, vn)


def parse_line(line: str, line_no: Optional[int] = None) -> Optional[Tuple[str, tuple]]:
    """
    Классифицировать одну строку.

    Возврат:
        ("v", (x, y, z, w)) | ("vt", (u, v)) | ("vn", (x, y, z))
        | ("f", (VertexIndices, ...)) | None для игнорируемых строк.
    """
    parts = line.split()
    if not parts:
        return None
    keyword, args = parts[0], parts[1:]

    if keyword == "v":
        values = _parse_floats(keyword, args, line_no)
        w = values[3] if len(values) > 3 else 1.0
        return "v", (values[0], values[1], values[2], w)
    if keyword == "vt":
        values = _parse_floats(keyword, args, line_no)
        return "vt", (values[0], values[1])
    if keyword == "vn":
        values = _parse_floats(keyword, args, line_no)
        return "vn", (values[0], values[1], values[2])
    if keyword == "f":
        return "f", tuple(parse_vertex_indices(tok, line_no) for tok in args)
    return None


def parse_obj(text: str) -> ObjModel:
    """Разобрать весь текст модели; таблицы заполняются строго по порядку."""
    v, vt, vn, faces = [], [], [], []
    tables = {"v": v, "vt": vt, "vn": vn}

    # строки делятся только по "\n" ("\r\n" – тоже), как в исходном файле
    for line_no, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        record = parse_line(line, line_no)
        if record is None:
            continue
        keyword, payload = record
        if keyword == "f":
            faces.append(Face(payload, line_no))
        else:
            tables[keyword].append(payload)

    model = ObjModel(v=tuple(v), vt=tuple(vt), vn=tuple(vn), f=tuple(faces))
    logger.debug(f"[Parser] Parsed {model!r}")
    return model
