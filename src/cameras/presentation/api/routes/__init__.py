from . import cameras, health

__all__ = ["cameras", "health"]
