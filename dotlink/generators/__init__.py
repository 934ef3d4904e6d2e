"""Layout generation for new puzzle sessions.

Provides the PointGenerator for placing target points by rejection sampling
and deriving each layout's reference score.
"""

from dotlink.generators.point_generator import (
    GeneratedLayout,
    LayoutError,
    PointGenerator,
)

__all__ = [
    "PointGenerator",
    "GeneratedLayout",
    "LayoutError",
]
