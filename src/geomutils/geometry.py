"""
Library of geometry classes and helpers on top of them.

All values are immutable. Every helper accepts both screen-space
types defined here and drawing layer types from `geomutils.graphics`,
result is given in representation of the input.
"""

from enum import Enum

import numpy as np
from pydantic import BaseModel, ConfigDict

from geomutils.errors import InvalidArgument
from geomutils.graphics import GraphicsPoint, GraphicsSize, GraphicsRect


class GeometryEnum(Enum):
    """
    Enum which also could be given by its ordinal or by its name,
    e.g. `Alignment.parse("top_left")` or `Alignment.parse(2)`.
    """

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            name = value.strip().upper().replace("-", "_")
            if name in cls.__members__:
                return cls[name]
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass

        raise InvalidArgument(f"Unknown {cls.__name__} value: {value!r}")


class FloatPrecision(GeometryEnum):
    SINGLE = 32
    DOUBLE = 64


_DTYPES = {
    FloatPrecision.SINGLE: np.float32,
    FloatPrecision.DOUBLE: np.float64,
}


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @staticmethod
    def from_xy(x, y):
        return Point(x=x, y=y)

    @staticmethod
    def from_graphics(p: GraphicsPoint):
        return Point(x=p.x, y=p.y)

    def to_graphics(self) -> GraphicsPoint:
        return GraphicsPoint(self.x, self.y)

    def to_vec(self):
        return self.x, self.y


class Size(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float

    @staticmethod
    def from_wh(w, h):
        return Size(width=w, height=h)

    @staticmethod
    def from_graphics(s: GraphicsSize):
        return Size(width=s.width, height=s.height)

    def to_graphics(self) -> GraphicsSize:
        return GraphicsSize(self.width, self.height)

    def to_vec(self):
        return self.width, self.height


class Rect(BaseModel):
    """
    Rectangle given by its origin (lower-left corner) and size.
    Edges are derived from origin and size on each access,
    so for negative size `max_x < min_x`, which is allowed.
    """
    model_config = ConfigDict(frozen=True)

    origin: Point
    size: Size

    @staticmethod
    def from_xywh(x, y, w, h):
        return Rect(origin=Point(x=x, y=y), size=Size(width=w, height=h))

    @staticmethod
    def from_graphics(r: GraphicsRect):
        return Rect.from_xywh(r.origin.x, r.origin.y, r.size.width, r.size.height)

    def to_graphics(self) -> GraphicsRect:
        return GraphicsRect(self.origin.to_graphics(), self.size.to_graphics())

    def to_vec(self):
        return self.x, self.y, self.width, self.height

    @property
    def x(self):
        return self.origin.x

    @property
    def y(self):
        return self.origin.y

    @property
    def width(self):
        return self.size.width

    @property
    def height(self):
        return self.size.height

    @property
    def min_x(self):
        return self.origin.x

    @property
    def mid_x(self):
        return self.origin.x + self.size.width / 2.

    @property
    def max_x(self):
        return self.origin.x + self.size.width

    @property
    def min_y(self):
        return self.origin.y

    @property
    def mid_y(self):
        return self.origin.y + self.size.height / 2.

    @property
    def max_y(self):
        return self.origin.y + self.size.height


_GRAPHICS_TYPES = (GraphicsPoint, GraphicsSize, GraphicsRect)
_SCREEN_TYPES = (Point, Size, Rect)


def to_graphics(value):
    """
    Converts point, size or rect to its drawing layer representation.
    Values which are already in that representation are returned as is.
    """
    if isinstance(value, _GRAPHICS_TYPES):
        return value
    if isinstance(value, _SCREEN_TYPES):
        return value.to_graphics()
    raise InvalidArgument(f"Can't convert {type(value).__name__} to graphics representation")


def from_graphics(value):
    """
    Converts drawing layer point, size or rect to screen-space one.
    Values which are already screen-space are returned as is.
    """
    if isinstance(value, _SCREEN_TYPES):
        return value
    if isinstance(value, GraphicsRect):
        return Rect.from_graphics(value)
    if isinstance(value, GraphicsSize):
        return Size.from_graphics(value)
    if isinstance(value, GraphicsPoint):
        return Point.from_graphics(value)
    raise InvalidArgument(f"Can't convert {type(value).__name__} to screen representation")


def same_representation(like, value):
    """
    Returns value converted to representation of `like`.
    """
    if isinstance(like, _GRAPHICS_TYPES):
        return to_graphics(value)
    return value


def distance(pt1, pt2, precision=FloatPrecision.DOUBLE) -> float:
    """
    Euclidean distance between two points.
    :param pt1: first point
    :param pt2: second point
    :param precision: float width the distance is calculated with.
    :return: distance
    """
    dtype = _DTYPES[FloatPrecision.parse(precision)]
    dx = dtype(pt1.x) - dtype(pt2.x)
    dy = dtype(pt1.y) - dtype(pt2.y)
    return float(np.sqrt(dx * dx + dy * dy))


def mid_left(rect):
    r = from_graphics(rect)
    return same_representation(rect, Point.from_xy(r.min_x, r.mid_y))


def mid_right(rect):
    r = from_graphics(rect)
    return same_representation(rect, Point.from_xy(r.max_x, r.mid_y))


def mid_top(rect):
    r = from_graphics(rect)
    return same_representation(rect, Point.from_xy(r.mid_x, r.max_y))


def mid_bottom(rect):
    r = from_graphics(rect)
    return same_representation(rect, Point.from_xy(r.mid_x, r.min_y))


def center(rect):
    r = from_graphics(rect)
    return same_representation(rect, Point.from_xy(r.mid_x, r.mid_y))


def top_left(rect):
    r = from_graphics(rect)
    return same_representation(rect, Point.from_xy(r.min_x, r.max_y))


def top_right(rect):
    r = from_graphics(rect)
    return same_representation(rect, Point.from_xy(r.max_x, r.max_y))


def bottom_left(rect):
    r = from_graphics(rect)
    return same_representation(rect, r.origin)


def bottom_right(rect):
    r = from_graphics(rect)
    return same_representation(rect, Point.from_xy(r.max_x, r.min_y))


def rect_size(rect):
    """
    Size of rectangle, origin is ignored.
    """
    r = from_graphics(rect)
    return same_representation(rect, r.size)


def rect_of_size(size):
    """
    Rectangle of given size placed at (0, 0).
    """
    s = from_graphics(size)
    return same_representation(size, Rect(origin=Point(x=0., y=0.), size=s))


def scale_rect(rect, x_scale: float, y_scale: float):
    """
    Scales rectangle size, origin stays where it was.
    Factors are not validated, so zero or negative factors
    give a degenerate rectangle.
    :param rect: rectangle to scale
    :param x_scale: fraction to scale width with (1.0 is 100%)
    :param y_scale: fraction to scale height with (1.0 is 100%)
    :return: scaled rectangle
    """
    r = from_graphics(rect)
    scaled = Rect.from_xywh(r.x, r.y, r.width * x_scale, r.height * y_scale)
    return same_representation(rect, scaled)
