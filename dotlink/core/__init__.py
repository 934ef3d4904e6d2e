"""Core foundation for canvas geometry.

- Point: canvas-local coordinate (geometry atom)
- Geometry: distance, centroid and mean-distance helpers
"""

from dotlink.core.geometry import Geometry, Point

__all__ = [
    "Geometry",
    "Point",
]
