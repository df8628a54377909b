"""
WaveMesh – загрузка Wavefront OBJ в готовый для GPU triangle list
с касательным базисом для normal mapping.
"""

from wavemesh.utils import logger
from wavemesh.errors import (
    ErrorKind,
    ModelLoadError,
    MalformedNumber,
    MissingRequiredField,
    InvalidFaceArity,
    IndexOutOfRange,
    TangentBasisDegenerate,
)
from wavemesh.obj import ObjModel, VertexIndices, Face, parse_obj
from wavemesh.geometry import ModelVertex, Vertex, VERTEX_LAYOUT, build
from wavemesh.math import Vec2, Vec3, Mat3
from wavemesh.scene import Mesh
from wavemesh.graphics import GraphicsBackend
from wavemesh.utils.loader import load_model, load_obj
from wavemesh.assets import ModelManager

__version__ = "1.0.0"

__all__ = [
    "ErrorKind",
    "ModelLoadError",
    "MalformedNumber",
    "MissingRequiredField",
    "InvalidFaceArity",
    "IndexOutOfRange",
    "TangentBasisDegenerate",
    "ObjModel",
    "VertexIndices",
    "Face",
    "parse_obj",
    "ModelVertex",
    "Vertex",
    "VERTEX_LAYOUT",
    "build",
    "Vec2",
    "Vec3",
    "Mat3",
    "Mesh",
    "GraphicsBackend",
    "load_model",
    "load_obj",
    "ModelManager",
]
