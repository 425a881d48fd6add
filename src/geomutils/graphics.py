"""
Drawing layer representation of geometry values.

These are plain tuples, the shape host drawing bindings hand over.
Both representations use lower-left origin, so conversion
from/to `geomutils.geometry` types is a field copy, see
`geomutils.geometry.to_graphics` and `geomutils.geometry.from_graphics`.
"""
from typing import NamedTuple


class GraphicsPoint(NamedTuple):
    x: float
    y: float


class GraphicsSize(NamedTuple):
    width: float
    height: float


class GraphicsRect(NamedTuple):
    origin: GraphicsPoint
    size: GraphicsSize

    @staticmethod
    def from_xywh(x, y, w, h):
        return GraphicsRect(GraphicsPoint(x, y), GraphicsSize(w, h))
