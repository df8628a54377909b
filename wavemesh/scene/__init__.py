"""
Пакет scene – меши, готовые к выгрузке в графический бекенд.
"""

from wavemesh.scene.mesh import Mesh, pack_vertices

__all__ = ["Mesh", "pack_vertices"]
