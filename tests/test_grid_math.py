from mapper.constants import CELL_SIZE
from mapper.utils.grid_math import Rect, image_size, reveal_offset, snap_delta, snap_point, snap_remainder
from tests.helpers import FakeImage


def test_snap_lands_on_lower_grid_line():
    for delta in range(-200, 201):
        snapped = snap_delta(delta)
        assert snapped % CELL_SIZE == 0
        assert 0 <= delta - snapped < CELL_SIZE
        assert 0 <= snap_remainder(delta) < CELL_SIZE


def test_snap_examples():
    assert snap_delta(100) == 96
    assert snap_delta(32) == 32
    assert snap_delta(0) == 0
    assert snap_delta(-1) == -32
    assert snap_delta(-32) == -32
    assert snap_delta(-40) == -64


def test_snap_point_uses_cell_origin():
    assert snap_point(600, 150) == (576, 128)
    assert snap_point(31, 32) == (0, 32)


def test_rect_contains_excludes_edges():
    rect = Rect(10, 20, 50, 60)
    assert rect.contains(11, 21)
    assert rect.contains(49, 59)
    assert not rect.contains(10, 30)
    assert not rect.contains(30, 20)
    assert not rect.contains(50, 30)
    assert not rect.contains(30, 60)


def test_rect_at_uses_size():
    assert Rect.at(5, 7, (10, 20)) == Rect(5, 7, 15, 27)


def test_image_size_of_missing_image_is_zero():
    assert image_size(None) == (0, 0)
    assert image_size(FakeImage(3, 4)) == (3, 4)


def test_reveal_offset_only_applies_past_the_edge():
    assert reveal_offset(-127, 128) == 0
    assert reveal_offset(0, 128) == 0
    assert reveal_offset(500, 128) == 0


def test_reveal_offset_keeps_one_cell_visible():
    width = 128
    for position in range(-32 * 40, -width + 1, CELL_SIZE):
        clamped = position + reveal_offset(position, width)
        assert clamped == CELL_SIZE - width


def test_reveal_offset_with_width_off_grid():
    width = 100
    position = -128
    clamped = position + reveal_offset(position, width)
    assert -CELL_SIZE < clamped + width <= CELL_SIZE
    assert clamped == -68
