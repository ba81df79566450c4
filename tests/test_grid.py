import pytest

from tilemap.errors import InvalidDimension, OutOfBounds
from tilemap.grid import create_grid


def test_create_is_all_zero():
    grid = create_grid(4, 3)
    assert grid.layer_names == ('ground', 'decoration', 'objects')
    assert grid.is_empty()
    for layer in grid.layers:
        assert len(layer.rows) == 3
        assert all(len(row) == 4 for row in layer.rows)


@pytest.mark.parametrize('width, height', [(0, 5), (5, 0), (201, 5), (5, 201), (-1, -1)])
def test_create_rejects_bad_dimensions(width, height):
    with pytest.raises(InvalidDimension):
        create_grid(width, height)


def test_create_accepts_limits():
    assert create_grid(1, 1).width == 1
    assert create_grid(200, 200).height == 200


@pytest.mark.parametrize('layer_count', [0, 4])
def test_create_rejects_bad_layer_count(layer_count):
    with pytest.raises(InvalidDimension):
        create_grid(5, 5, layer_count)


def test_set_returns_previous_value():
    grid = create_grid(3, 3)
    assert grid.set(1, 2, 0, 1) == 0
    assert grid.set(1, 2, 0, 7) == 1
    assert grid.get(1, 2, 0) == 7
    assert grid.get(0, 2, 0) == 0


@pytest.mark.parametrize('layer, row, col', [(3, 0, 0), (-1, 0, 0), (0, 3, 0), (0, 0, 3), (0, -1, 0)])
def test_out_of_bounds(layer, row, col):
    grid = create_grid(3, 3)
    with pytest.raises(OutOfBounds):
        grid.get(layer, row, col)
    with pytest.raises(OutOfBounds):
        grid.set(layer, row, col, 1)


def test_rows_are_independent():
    grid = create_grid(3, 3)
    grid.set(0, 0, 0, 1)
    assert grid.get(0, 1, 0) == 0


def test_fill_layer_and_all():
    grid = create_grid(2, 2)
    grid.fill_layer(2, 1)
    assert grid.snapshot()[2] == ((1, 1), (1, 1))
    assert grid.snapshot()[0] == ((0, 0), (0, 0))
    grid.fill_all(1)
    grid.fill_all()
    assert grid.is_empty()


def test_resize_shrink_keeps_top_left():
    grid = create_grid(10, 10)
    for layer in range(3):
        for r in range(10):
            for c in range(10):
                grid.set(layer, r, c, (r * 10 + c + layer) % 2)
    small = grid.resized(5, 5)
    assert (small.width, small.height) == (5, 5)
    for layer in range(3):
        assert small.layers[layer].rows == [row[:5] for row in grid.layers[layer].rows[:5]]


def test_resize_grow_zero_fills():
    grid = create_grid(5, 5)
    grid.set(0, 4, 4, 1)
    grid.set(2, 0, 0, 1)
    big = grid.resized(10, 10)
    assert big.get(0, 4, 4) == 1
    assert big.get(2, 0, 0) == 1
    assert sum(v for layer in big.snapshot() for row in layer for v in row) == 2


def test_resize_returns_new_grid():
    grid = create_grid(3, 3)
    other = grid.resized(3, 3)
    other.set(0, 0, 0, 1)
    assert grid.get(0, 0, 0) == 0


def test_resize_rejects_bad_dimensions():
    with pytest.raises(InvalidDimension):
        create_grid(3, 3).resized(0, 3)


def test_equality():
    a = create_grid(2, 2)
    b = create_grid(2, 2)
    assert a == b
    b.set(1, 1, 1, 1)
    assert a != b
    assert a != create_grid(2, 2, 1)
