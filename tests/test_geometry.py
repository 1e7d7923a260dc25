import numpy as np
import pytest

from plotnav.core.geometry import (
    SELECTION_FACES,
    Rect,
    bottomleft,
    bottomright,
    clamp_point,
    positivize,
    rect_outline,
    selection_vertices,
    topleft,
    topright,
)


@pytest.mark.parametrize(
    "rect",
    [
        Rect((0, 0), (1, 2)),
        Rect((5, 5), (-3, 2)),
        Rect((5, 5), (3, -2)),
        Rect((-1, 4), (-2, -6)),
        Rect((1, 1), (0, -0.5)),
    ],
)
def test_positivize_is_idempotent_and_non_negative(rect):
    once = positivize(rect)
    assert positivize(once) == once
    assert once.widths[0] >= 0
    assert once.widths[1] >= 0


def test_positivize_moves_origin_to_min_corner():
    rect = positivize(Rect((5.0, 5.0), (-3.0, -2.0)))
    assert rect.origin == (2.0, 3.0)
    assert rect.widths == (3.0, 2.0)


def test_from_corners_keeps_direction():
    rect = Rect.from_corners((4, 6), (1, 8))
    assert rect.origin == (4.0, 6.0)
    assert rect.widths == (-3.0, 2.0)


def test_corners():
    rect = Rect((1, 2), (3, 4))
    assert bottomleft(rect) == (1, 2)
    assert bottomright(rect) == (4, 2)
    assert topleft(rect) == (1, 6)
    assert topright(rect) == (4, 6)


def test_has_zero_width():
    assert Rect((0, 0), (0, 3)).has_zero_width()
    assert Rect((0, 0), (3, 0)).has_zero_width()
    assert not Rect((0, 0), (-1, 1)).has_zero_width()


def test_clamp_point():
    assert clamp_point((-1, 12), (0, 0), (10, 10)) == (0, 10)
    assert clamp_point((3, 4), (0, 0), (10, 10)) == (3, 4)


def test_selection_vertices_order():
    verts = selection_vertices(Rect((0, 0), (10, 10)), Rect((2, 3), (4, 5)))
    expected = [
        (0, 0), (10, 0), (10, 10), (0, 10),
        (2, 3), (6, 3), (6, 8), (2, 8),
    ]
    np.testing.assert_allclose(verts, expected)


def test_selection_vertices_clamps_inner_into_outer():
    verts = selection_vertices(Rect((0, 0), (10, 10)), Rect((8, -5), (-20, 30)))
    inner = verts[4:]
    assert inner[:, 0].min() >= 0 and inner[:, 0].max() <= 10
    assert inner[:, 1].min() >= 0 and inner[:, 1].max() <= 10
    np.testing.assert_allclose(inner[0], (0, 0))
    np.testing.assert_allclose(inner[2], (8, 10))


def test_selection_faces_cover_ring():
    assert SELECTION_FACES.shape == (8, 3)
    assert set(SELECTION_FACES.ravel()) == set(range(8))


def test_rect_outline_is_closed():
    outline = rect_outline(Rect((1, 1), (2, 3)))
    assert outline.shape == (5, 2)
    np.testing.assert_allclose(outline[0], outline[-1])
    np.testing.assert_allclose(outline[2], (3, 4))
