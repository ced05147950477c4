"""Route group exports."""

from . import health, map_places

__all__ = ["health", "map_places"]
