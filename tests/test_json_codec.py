import pytest

from tilemap import json_codec
from tilemap.errors import InvalidDimension, MalformedBody, MalformedNumber, MissingKey
from tilemap.grid import create_grid

EXPECTED_2x2 = """{
  "width": 2,
  "height": 2,
  "tileSize": 64,
  "layers": {
    "ground": [
      [1, 0],
      [0, 0]
    ],
    "decoration": [
      [0, 0],
      [0, 1]
    ],
    "objects": [
      [0, 0],
      [0, 0]
    ]
  }
}
"""


def sample_grid(width=4, height=3, layer_count=3):
    grid = create_grid(width, height, layer_count)
    for layer in range(layer_count):
        for r in range(height):
            for c in range(width):
                grid.set(layer, r, c, int((r * width + c + layer) % 3 == 0))
    return grid


def test_serialize_layout():
    grid = create_grid(2, 2)
    grid.set(0, 0, 0, 1)
    grid.set(1, 1, 1, 1)
    assert json_codec.serialize(grid) == EXPECTED_2x2


def test_serialize_single_layer_uses_tiles_key():
    grid = create_grid(2, 1, 1)
    grid.set(0, 0, 1, 1)
    assert json_codec.serialize(grid, tile_size=32) == (
        '{\n  "width": 2,\n  "height": 1,\n  "tileSize": 32,\n  "tiles": [\n    [0, 1]\n  ]\n}\n'
    )


@pytest.mark.parametrize('width, height, layer_count', [(1, 1, 3), (4, 3, 3), (3, 5, 1), (200, 3, 2)])
def test_round_trip(width, height, layer_count):
    grid = sample_grid(width, height, layer_count)
    assert json_codec.deserialize(json_codec.serialize(grid), layer_count) == grid


def test_missing_layer_loads_as_zero():
    grid = sample_grid()
    text = json_codec.serialize(grid)
    start = text.index('    "decoration"')
    end = text.index('    "objects"')
    loaded = json_codec.deserialize(text[:start] + text[end:])
    assert loaded.layers[0] == grid.layers[0]
    assert loaded.layers[2] == grid.layers[2]
    assert all(v == 0 for row in loaded.layers[1].rows for v in row)


def test_compact_input():
    text = '{"width":2,"height":1,"layers":{"ground":[[1,1]],"objects":[[0,1]]}}'
    grid = json_codec.deserialize(text)
    assert grid.snapshot() == (((1, 1),), ((0, 0),), ((0, 1),))


def test_extra_rows_and_values_ignored():
    text = '{"width": 1, "height": 1, "tiles": [[1, 1, 1], [1]]}'
    grid = json_codec.deserialize(text, layer_count=1)
    assert grid.snapshot() == (((1,),),)


def test_other_integers_preserved():
    text = '{"width": 2, "height": 1, "tiles": [[5, -1]]}'
    assert json_codec.deserialize(text, layer_count=1).snapshot() == (((5, -1),),)


def test_width_not_a_number():
    with pytest.raises(MalformedNumber):
        json_codec.deserialize('{"width": "abc", "height": 2}')


def test_missing_dimension_key():
    with pytest.raises(MissingKey):
        json_codec.deserialize('{"width": 2}')


def test_dimension_out_of_range():
    with pytest.raises(InvalidDimension):
        json_codec.deserialize('{"width": 500, "height": 2}')


def test_truncated_layer_is_fatal():
    text = json_codec.serialize(sample_grid())
    with pytest.raises(MalformedBody):
        json_codec.deserialize(text[:text.index('"objects"') + 30])


def test_layer_not_an_array():
    with pytest.raises(MalformedBody):
        json_codec.deserialize('{"width": 1, "height": 1, "layers": {"ground": 5}}')


def test_bad_tile_value():
    with pytest.raises(MalformedNumber):
        json_codec.deserialize('{"width": 2, "height": 1, "layers": {"ground": [[1, x]]}}')


@pytest.mark.parametrize('layer_text', [
    '[1, 1]',
    '[[1, 1] junk [0, 0]]',
    '[[1, 1], 5]',
    '[[1, 1]',
])
def test_layer_without_row_arrays_is_fatal(layer_text):
    text = '{"width": 2, "height": 1, "layers": {"ground": %s}}' % layer_text
    with pytest.raises(MalformedBody):
        json_codec.deserialize(text)


def test_garbage_after_last_needed_row_is_fatal():
    text = '{"width": 1, "height": 1, "tiles": [[1], [0] oops]}'
    with pytest.raises(MalformedBody):
        json_codec.deserialize(text, layer_count=1)


def test_empty_layer_array_loads_as_zero():
    text = '{"width": 2, "height": 1, "layers": {"ground": []}}'
    assert json_codec.deserialize(text).is_empty()
