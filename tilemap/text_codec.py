"""
Plain-text map format.

    <width> <height>
    LAYER:0
    0 0 1 ...
    ...
    LAYER:1
    ...

Single-layer maps omit the ``LAYER:`` lines.
"""

import logging

from .errors import MalformedBody, MalformedHeader
from .grid import DEFAULT_LAYER_COUNT, TileGrid, create_grid
from .layer import INT_TOKEN

logger = logging.getLogger(__name__)

LAYER_MARKER = 'LAYER:'


def serialize(grid: TileGrid) -> str:
    lines = [f"{grid.width} {grid.height}"]
    for layer in grid.layers:
        if not grid.single_layer:
            lines.append(f"{LAYER_MARKER}{layer.index}")
        lines.extend(' '.join(str(v) for v in row) for row in layer.rows)
    return '\n'.join(lines) + '\n'


def _parse_header(line: str | None) -> tuple[int, int]:
    if line is None:
        raise MalformedHeader("missing dimension line")
    parts = line.split()
    if len(parts) < 2:
        raise MalformedHeader(f"expected '<width> <height>', got {line!r}")
    if not all(INT_TOKEN.fullmatch(p) for p in parts[:2]):
        raise MalformedHeader(f"non-numeric dimensions in {line!r}")
    return int(parts[0]), int(parts[1])


def deserialize(text: str, layer_count: int = DEFAULT_LAYER_COUNT) -> TileGrid:
    """Build a new grid from ``text``; nothing is shared with any existing grid."""
    lines = [line.strip() for line in text.splitlines()]
    width, height = _parse_header(lines[0] if lines else None)
    grid = create_grid(width, height, layer_count)

    active = 0 if grid.single_layer else None
    row = 0
    for lineno, line in enumerate(lines[1:], start=2):
        if line.startswith(LAYER_MARKER):
            index = line[len(LAYER_MARKER):]
            if not INT_TOKEN.fullmatch(index):
                raise MalformedBody(f"line {lineno}: bad layer marker {line!r}")
            active = int(index)
            row = 0
            continue
        if not line:
            continue
        if active is None or not 0 <= active < layer_count or row >= height:
            continue

        tokens = line.split()[:width]
        if not all(INT_TOKEN.fullmatch(tok) for tok in tokens):
            raise MalformedBody(f"line {lineno}: non-integer tile in {line!r}")
        grid.layers[active].rows[row][:len(tokens)] = [int(tok) for tok in tokens]
        row += 1

    logger.debug("Parsed text map %dx%d with %d layer(s)", width, height, layer_count)
    return grid
