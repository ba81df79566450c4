import logging

from .errors import InvalidDimension, OutOfBounds
from .layer import LAYER_NAMES, Layer, WALKABLE
from .resize import copy_clipped

logger = logging.getLogger(__name__)

MIN_DIMENSION = 1
MAX_DIMENSION = 200
DEFAULT_LAYER_COUNT = len(LAYER_NAMES)


def validate_dimensions(width: int, height: int) -> None:
    for label, value in (('width', width), ('height', height)):
        if not MIN_DIMENSION <= value <= MAX_DIMENSION:
            raise InvalidDimension(
                f"map {label} must be between {MIN_DIMENSION} and {MAX_DIMENSION}, got {value}"
            )


def validate_layer_count(layer_count: int) -> None:
    if not 1 <= layer_count <= len(LAYER_NAMES):
        raise InvalidDimension(
            f"layer count must be between 1 and {len(LAYER_NAMES)}, got {layer_count}"
        )


class TileGrid:
    """Fixed-shape stack of layers sharing one width and height."""

    def __init__(self, width: int, height: int, layers: list[Layer]):
        self.width = width
        self.height = height
        self.layers = tuple(layers)

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    @property
    def layer_names(self) -> tuple[str, ...]:
        return tuple(layer.name for layer in self.layers)

    @property
    def single_layer(self) -> bool:
        return len(self.layers) == 1

    def layer(self, index: int) -> Layer:
        if not 0 <= index < len(self.layers):
            raise OutOfBounds(f"layer {index} outside 0..{len(self.layers) - 1}")
        return self.layers[index]

    def get(self, layer: int, row: int, col: int) -> int:
        return self.layer(layer).get(row, col)

    def set(self, layer: int, row: int, col: int, value: int) -> int:
        """Write ``value`` and return the value it replaced."""
        return self.layer(layer).paint(row, col, value)

    def fill_layer(self, layer: int, value: int = WALKABLE) -> None:
        self.layer(layer).fill(value)

    def fill_all(self, value: int = WALKABLE) -> None:
        for layer in self.layers:
            layer.fill(value)

    def resized(self, new_width: int, new_height: int) -> 'TileGrid':
        """Return a new grid of the given size keeping the top-left overlap."""
        validate_dimensions(new_width, new_height)
        layers = [
            Layer(layer.index, new_width, new_height, copy_clipped(layer.rows, new_width, new_height))
            for layer in self.layers
        ]
        logger.debug("Resized grid %dx%d -> %dx%d", self.width, self.height, new_width, new_height)
        return TileGrid(new_width, new_height, layers)

    def snapshot(self) -> tuple[tuple[tuple[int, ...], ...], ...]:
        return tuple(tuple(tuple(row) for row in layer.rows) for layer in self.layers)

    def is_empty(self) -> bool:
        return all(v == WALKABLE for layer in self.layers for row in layer.rows for v in row)

    def __eq__(self, other):
        if not isinstance(other, TileGrid):
            return NotImplemented
        return (self.width, self.height, self.layers) == (other.width, other.height, other.layers)

    def __repr__(self):
        return f"TileGrid({self.width}x{self.height}, layers={list(self.layer_names)})"


def create_grid(width: int, height: int, layer_count: int = DEFAULT_LAYER_COUNT) -> TileGrid:
    """Allocate an all-walkable grid."""
    validate_dimensions(width, height)
    validate_layer_count(layer_count)
    return TileGrid(width, height, [Layer(i, width, height) for i in range(layer_count)])
