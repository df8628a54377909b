from wavemesh.graphics.backend import GraphicsBackend

__all__ = ["GraphicsBackend"]
