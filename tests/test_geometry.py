import pytest

from evolution.geometry import CELL_SIZE, MAP_PIXEL_WIDTH, MAP_WIDTH, Contact, FloatRect


def test_contact_bits_match_source_bitmask():
    assert Contact(1) == Contact.RIGHT
    assert Contact(2) == Contact.LEFT
    assert Contact(4) == Contact.BOTTOM
    assert Contact(5) == Contact.RIGHT | Contact.BOTTOM


def test_map_pixel_width_is_map_width_in_cells():
    full_map = FloatRect(0, 0, MAP_PIXEL_WIDTH, 1)
    assert full_map.right == MAP_WIDTH * CELL_SIZE


def test_overlapping_rectangles_intersect():
    a = FloatRect(0, 0, 10, 10)
    b = FloatRect(5, 5, 10, 10)
    assert a.intersection(b) == FloatRect(5, 5, 5, 5)
    assert a.intersects(b)


def test_intersection_is_symmetric():
    a = FloatRect(3, 1, 8, 6)
    b = FloatRect(6, 4, 2, 9)
    assert a.intersection(b) == b.intersection(a)


def test_touching_edges_do_not_intersect():
    a = FloatRect(0, 0, 10, 10)
    b = FloatRect(10, 0, 10, 10)
    assert a.intersection(b) is None
    assert not a.intersects(b)


def test_separate_rectangles_do_not_intersect():
    a = FloatRect(0, 0, 4, 4)
    b = FloatRect(0, 50, 4, 4)
    assert not b.intersects(a)


def test_contained_rectangle_intersection_is_itself():
    outer = FloatRect(0, 0, 100, 100)
    inner = FloatRect(20, 30, 5, 6)
    assert outer.intersection(inner) == inner


def test_right_and_bottom_edges():
    r = FloatRect(2, 3, 4, 5)
    assert r.right == r.left + r.width
    assert r.bottom == r.top + r.height


@pytest.mark.parametrize("dx,dy", [(0, 0), (3.5, -2), (-7, 11)])
def test_moved_round_trip(dx, dy):
    r = FloatRect(1, 2, 3, 4)
    assert r.moved(dx, dy).moved(-dx, -dy) == r
    assert r.moved(dx, dy).width == r.width