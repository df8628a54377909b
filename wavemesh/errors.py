# wavemesh/errors.py
"""
Иерархия ошибок загрузки модели.

Любая ошибка конвейера (разбор → индексы → триангуляция → касательные)
поднимается как подкласс ModelLoadError.  Процесс не завершается: решение
«отклонить модель целиком» или «пропустить грань» принимает вызывающий код.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    MALFORMED_NUMBER = "MalformedNumber"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    INVALID_FACE_ARITY = "InvalidFaceArity"
    INDEX_OUT_OF_RANGE = "IndexOutOfRange"
    TANGENT_BASIS_DEGENERATE = "TangentBasisDegenerate"


class ModelLoadError(Exception):
    """Базовая ошибка; хранит вид ошибки, строку файла и номер грани."""
    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, line: Optional[int] = None,
                 face: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.face = face

    def with_context(self, line: Optional[int] = None,
                     face: Optional[int] = None) -> "ModelLoadError":
        """Дополнить контекст, не затирая уже известные значения."""
        if self.line is None:
            self.line = line
        if self.face is None:
            self.face = face
        return self

    def __str__(self) -> str:
        where = []
        if self.line is not None:
            where.append(f"line {self.line}")
        if self.face is not None:
            where.append(f"face {self.face}")
        name = self.kind.value if self.kind else type(self).__name__
        if where:
            return f"{name} ({', '.join(where)}): {self.message}"
        return f"{name}: {self.message}"


class MalformedNumber(ModelLoadError):
    kind = ErrorKind.MALFORMED_NUMBER


class MissingRequiredField(MalformedNumber):
    """Аргументов меньше, чем требует ключевое слово."""
    kind = ErrorKind.MISSING_REQUIRED_FIELD


class InvalidFaceArity(ModelLoadError):
    kind = ErrorKind.INVALID_FACE_ARITY


class IndexOutOfRange(ModelLoadError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE


class TangentBasisDegenerate(ModelLoadError):
    kind = ErrorKind.TANGENT_BASIS_DEGENERATE


__all__ = [
    "ErrorKind",
    "ModelLoadError",
    "MalformedNumber",
    "MissingRequiredField",
    "InvalidFaceArity",
    "IndexOutOfRange",
    "TangentBasisDegenerate",
]
