"""
Fitting rectangles into sizes and aligning them against each other.
"""
import logging

from geomutils.geometry import (
    GeometryEnum, Point, Rect, Size,
    from_graphics, same_representation, scale_rect, rect_of_size,
    center, mid_top, mid_bottom, mid_left, mid_right,
    top_left, top_right, bottom_left, bottom_right,
)

LOG = logging.getLogger(__name__)


class ScalingPolicy(GeometryEnum):
    PROPORTIONAL = 0  # Fit proportionally
    FIT = 1  # Forced fit (distort if necessary)
    NONE = 2  # Don't scale (clip)


class Alignment(GeometryEnum):
    CENTER = 0
    TOP = 1
    TOP_LEFT = 2
    TOP_RIGHT = 3
    LEFT = 4
    BOTTOM = 5
    BOTTOM_LEFT = 6
    BOTTOM_RIGHT = 7
    RIGHT = 8


_ANCHORS = {
    Alignment.CENTER: center,
    Alignment.TOP: mid_top,
    Alignment.TOP_LEFT: top_left,
    Alignment.TOP_RIGHT: top_right,
    Alignment.LEFT: mid_left,
    Alignment.BOTTOM: mid_bottom,
    Alignment.BOTTOM_LEFT: bottom_left,
    Alignment.BOTTOM_RIGHT: bottom_right,
    Alignment.RIGHT: mid_right,
}


def anchor_point(rect, alignment):
    """
    Point of rectangle which is used when aligning by given alignment.
    E.g. for `Alignment.TOP_RIGHT` it is top right corner.
    """
    alignment = Alignment.parse(alignment)
    return _ANCHORS[alignment](rect)


def align_rectangles(alignee, aligner, alignment):
    """
    Moves `alignee` so that its anchor point matches the same
    anchor point of `aligner`. Size of `alignee` is kept.
    :param alignee: rect to be aligned
    :param aligner: rect to be aligned from
    :param alignment: way to align the rectangles
    :return: aligned copy of `alignee`
    """
    alignment = Alignment.parse(alignment)
    subject = from_graphics(alignee)

    target = anchor_point(from_graphics(aligner), alignment)

    # Anchor offset is taken from the rect placed at (0, 0),
    # so it doesn't depend on where alignee currently is.
    offset = anchor_point(rect_of_size(subject.size), alignment)

    aligned = Rect(
        origin=Point.from_xy(target.x - offset.x, target.y - offset.y),
        size=subject.size,
    )
    return same_representation(alignee, aligned)


def _proportional_scale(r: Rect, width: float, height: float):
    ratios = [
        target / source
        for target, source in ((width, r.width), (height, r.height))
        if source != 0
    ]
    if not ratios:
        return None
    return min(ratios)


def scale_rect_to_size(scalee, size, scaling):
    """
    Scales rectangle to fit given size. Origin is kept.

    * `ScalingPolicy.NONE` keeps the size, caller is expected to clip it.
    * `ScalingPolicy.FIT` sets the size to the given one, aspect ratio
      is not preserved.
    * `ScalingPolicy.PROPORTIONAL` scales both axes by the same factor,
      so that result fits into `size`. Axis with zero source dimension
      is ignored when choosing that factor. If both are zero, result
      is an empty rect at original origin.

    :param scalee: rect to be scaled
    :param size: size to scale to
    :param scaling: way to scale the rectangle
    :return: scaled copy of `scalee`
    """
    scaling = ScalingPolicy.parse(scaling)
    r = from_graphics(scalee)
    s = from_graphics(size)

    if scaling == ScalingPolicy.NONE:
        res = r
    elif scaling == ScalingPolicy.FIT:
        res = Rect(origin=r.origin, size=s)
    else:
        scale = _proportional_scale(r, s.width, s.height)
        if scale is None:
            LOG.debug(f"Proportional scaling of empty rect {r.to_vec()}")
            res = Rect(origin=r.origin, size=Size(width=0., height=0.))
        else:
            res = scale_rect(r, scale, scale)

    return same_representation(scalee, res)
