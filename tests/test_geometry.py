import pytest

from pacmaze.geometry import Direction, Rect, Vector2


@pytest.mark.parametrize(
    "name, opposite_name",
    [("UP", "DOWN"), ("DOWN", "UP"), ("LEFT", "RIGHT"), ("RIGHT", "LEFT")],
)
def test_opposite_is_involution(name, opposite_name):
    direction = Direction[name]
    assert direction.opposite() is Direction[opposite_name]
    assert Direction[name].opposite().opposite() is direction


def test_opposite_pairs():
    assert Direction.UP.opposite() is Direction.DOWN
    assert Direction.LEFT.opposite() is Direction.RIGHT


def test_overlapping_rects_intersect():
    a = Rect(0, 0, 32, 32)
    b = Rect(16, 16, 32, 32)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_rects_do_not_intersect():
    a = Rect(0, 0, 32, 32)
    assert not a.intersects(Rect(32, 0, 32, 32))
    assert not a.intersects(Rect(0, 32, 32, 32))


def test_distant_rects_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(100, 100, 10, 10))


def test_moved_right_shifts_x():
    assert Rect(0, 0, 1, 1).moved(Direction.RIGHT, 2.0) == Rect(2.0, 0, 1, 1)


def test_moved_up_decreases_y():
    moved = Rect(5, 5, 1, 1).moved(Direction.UP, 2.0)
    assert moved.y < 5
    assert moved.x == 5


@pytest.mark.parametrize("direction", list(Direction))
def test_moved_and_back_returns_original(direction):
    rect = Rect(10.0, 20.0, 28.0, 28.0)
    assert rect.moved(direction, 4.0).moved(direction.opposite(), 4.0) == rect


def test_vector_multiply_by_ones_is_identity():
    v = Vector2(3.5, -2.0)
    assert v * Vector2(1.0, 1.0) == v


def test_vector_multiply_commutes():
    a = Vector2(2.0, 3.0)
    b = Vector2(4.0, 5.0)
    assert a * b == b * a


def test_vector_add_zero_is_identity():
    v = Vector2(7.0, 9.0)
    assert v + Vector2() == v