"""
Пакет obj – разбор текстового формата Wavefront OBJ.
"""

from wavemesh.obj.model import Face, ObjModel, VertexIndices
from wavemesh.obj.parser import parse_line, parse_obj, parse_vertex_indices

__all__ = ["Face", "ObjModel", "VertexIndices",
           "parse_line", "parse_obj", "parse_vertex_indices"]
