import pytest

from geomutils.errors import InvalidArgument
from geomutils.geometry import Rect, Point, Size
from geomutils.graphics import GraphicsRect, GraphicsSize
from geomutils.layout import (
    Alignment, ScalingPolicy, align_rectangles, anchor_point, scale_rect_to_size,
)


ALIGNEE = Rect.from_xywh(0, 0, 4, 4)
ALIGNER = Rect.from_xywh(10, 10, 20, 20)


@pytest.mark.parametrize("alignment, origin", [
    (Alignment.CENTER, (18, 18)),
    (Alignment.TOP, (18, 26)),
    (Alignment.TOP_LEFT, (10, 26)),
    (Alignment.TOP_RIGHT, (26, 26)),
    (Alignment.LEFT, (10, 18)),
    (Alignment.BOTTOM, (18, 10)),
    (Alignment.BOTTOM_LEFT, (10, 10)),
    (Alignment.BOTTOM_RIGHT, (26, 10)),
    (Alignment.RIGHT, (26, 18)),
])
def test_align_rectangles(alignment, origin):
    res = align_rectangles(ALIGNEE, ALIGNER, alignment)
    assert res.origin == Point.from_xy(*origin)
    assert res.size == ALIGNEE.size

    # Anchors coincide after alignment.
    assert anchor_point(res, alignment) == anchor_point(ALIGNER, alignment)


@pytest.mark.parametrize("alignment", list(Alignment))
def test_align_rectangles_idempotent(alignment):
    alignee = Rect.from_xywh(0.3, -0.7, 1.1, 2.3)
    aligner = Rect.from_xywh(10.1, -3.3, 7.7, 5.5)

    once = align_rectangles(alignee, aligner, alignment)
    twice = align_rectangles(once, aligner, alignment)
    assert twice == once


def test_align_rectangles_by_ordinal_and_name():
    expected = align_rectangles(ALIGNEE, ALIGNER, Alignment.TOP_RIGHT)
    assert align_rectangles(ALIGNEE, ALIGNER, 3) == expected
    assert align_rectangles(ALIGNEE, ALIGNER, "top_right") == expected
    assert align_rectangles(ALIGNEE, ALIGNER, "Top-Right") == expected


def test_align_graphics_rectangles():
    res = align_rectangles(
        ALIGNEE.to_graphics(), ALIGNER.to_graphics(), Alignment.CENTER
    )
    assert isinstance(res, GraphicsRect)
    assert res == GraphicsRect.from_xywh(18, 18, 4, 4)

    # Mixed representations: result follows alignee.
    res = align_rectangles(ALIGNEE, ALIGNER.to_graphics(), Alignment.CENTER)
    assert res == Rect.from_xywh(18, 18, 4, 4)


@pytest.mark.parametrize("alignment", [9, -1, "middle", None, 2.0, True])
def test_align_rectangles_invalid(alignment):
    with pytest.raises(InvalidArgument):
        align_rectangles(ALIGNEE, ALIGNER, alignment)

    # Inputs are untouched.
    assert ALIGNEE == Rect.from_xywh(0, 0, 4, 4)


def test_anchor_point():
    r = Rect.from_xywh(0, 0, 10, 10)
    assert anchor_point(r, Alignment.CENTER) == Point.from_xy(5, 5)
    assert anchor_point(r, Alignment.LEFT) == Point.from_xy(0, 5)
    assert anchor_point(r, Alignment.TOP) == Point.from_xy(5, 10)
    assert anchor_point(r, Alignment.BOTTOM_LEFT) == r.origin


def test_scale_none():
    r = Rect.from_xywh(1, 2, 100, 50)
    assert scale_rect_to_size(r, Size.from_wh(10, 10), ScalingPolicy.NONE) == r


def test_scale_fit():
    target = Size.from_wh(30, 70)
    for r in [Rect.from_xywh(1, 2, 100, 50), Rect.from_xywh(-5, 0, 3, 9)]:
        res = scale_rect_to_size(r, target, ScalingPolicy.FIT)
        assert res.size == target
        assert res.origin == r.origin


def test_scale_proportional():
    r = Rect.from_xywh(0, 0, 100, 50)
    res = scale_rect_to_size(r, Size.from_wh(50, 50), ScalingPolicy.PROPORTIONAL)
    assert res == Rect.from_xywh(0, 0, 50, 25)


@pytest.mark.parametrize("source, target", [
    ((3, 4, 100, 50), (50, 50)),
    ((0, 0, 7, 13), (200, 100)),
    ((1, 1, 640, 480), (1920, 1080)),
    ((0, 0, 0.3, 0.9), (0.5, 0.5)),
])
def test_scale_proportional_fits_and_keeps_aspect(source, target):
    r = Rect.from_xywh(*source)
    s = Size.from_wh(*target)
    res = scale_rect_to_size(r, s, ScalingPolicy.PROPORTIONAL)

    assert res.origin == r.origin
    assert res.width / res.height == pytest.approx(r.width / r.height)
    assert res.width <= s.width + 1e-9
    assert res.height <= s.height + 1e-9
    # One of the axes touches the bounds.
    assert (
        res.width == pytest.approx(s.width) or res.height == pytest.approx(s.height)
    )


def test_scale_proportional_degenerate():
    target = Size.from_wh(50, 20)

    res = scale_rect_to_size(Rect.from_xywh(1, 2, 0, 10), target, ScalingPolicy.PROPORTIONAL)
    assert res == Rect.from_xywh(1, 2, 0, 20)

    res = scale_rect_to_size(Rect.from_xywh(1, 2, 10, 0), target, ScalingPolicy.PROPORTIONAL)
    assert res == Rect.from_xywh(1, 2, 50, 0)

    res = scale_rect_to_size(Rect.from_xywh(1, 2, 0, 0), target, ScalingPolicy.PROPORTIONAL)
    assert res == Rect.from_xywh(1, 2, 0, 0)


def test_scale_graphics():
    res = scale_rect_to_size(
        GraphicsRect.from_xywh(0, 0, 100, 50), GraphicsSize(50, 50), "proportional"
    )
    assert isinstance(res, GraphicsRect)
    assert res == GraphicsRect.from_xywh(0, 0, 50, 25)


@pytest.mark.parametrize("scaling", [3, "stretch", None])
def test_scale_invalid(scaling):
    with pytest.raises(InvalidArgument):
        scale_rect_to_size(ALIGNEE, Size.from_wh(1, 1), scaling)


def test_anchor_point_for_every_alignment():
    r = Rect.from_xywh(0, 0, 10, 10)
    anchors = {anchor_point(r, alignment) for alignment in Alignment}
    assert len(anchors) == len(Alignment)

    with pytest.raises(InvalidArgument):
        anchor_point(r, 9)
