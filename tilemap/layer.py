import re

from .errors import OutOfBounds

LAYER_NAMES = ('ground', 'decoration', 'objects')

WALKABLE = 0
SOLID = 1

# plain decimal integer, as written by both map formats
INT_TOKEN = re.compile(r'-?[0-9]+')


class Layer:
    """A single named tile layer, stored row-major."""

    def __init__(self, index: int, width: int, height: int, rows: list[list[int]] | None = None):
        self.index = index
        self.name = LAYER_NAMES[index]
        self.width = width
        self.height = height
        self.rows = rows if rows is not None else [[WALKABLE] * width for _ in range(height)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfBounds(
                f"cell ({row}, {col}) outside {self.name} layer of {self.width}x{self.height}"
            )

    def get(self, row: int, col: int) -> int:
        self._check(row, col)
        return self.rows[row][col]

    def paint(self, row: int, col: int, value: int) -> int:
        self._check(row, col)
        previous = self.rows[row][col]
        self.rows[row][col] = value
        return previous

    def fill(self, value: int = WALKABLE) -> None:
        for row in self.rows:
            row[:] = [value] * self.width

    def __eq__(self, other):
        if not isinstance(other, Layer):
            return NotImplemented
        return self.index == other.index and self.rows == other.rows

    def __repr__(self):
        return f"Layer({self.name!r}, {self.width}x{self.height})"
