"""
Пакет assets – кэш загруженных моделей.
"""

from wavemesh.assets.model_manager import ModelManager

__all__ = ["ModelManager"]
