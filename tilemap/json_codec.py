"""
Hand-written JSON map format.

The writer emits one fixed layout; the reader only understands that layout
(see ``json_scanner``). Layers whose key is missing load as all walkable.
"""

import logging

from .errors import MalformedBody
from .grid import DEFAULT_LAYER_COUNT, TileGrid, create_grid
from .json_scanner import find_key, find_matching_bracket, iter_rows, parse_row, read_int, skip_whitespace

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 64
SINGLE_LAYER_KEY = 'tiles'


def _write_rows(lines: list[str], rows: list[list[int]], indent: str) -> None:
    for i, row in enumerate(rows):
        sep = ',' if i < len(rows) - 1 else ''
        lines.append(f"{indent}[{', '.join(str(v) for v in row)}]{sep}")


def serialize(grid: TileGrid, tile_size: int = DEFAULT_TILE_SIZE) -> str:
    lines = [
        '{',
        f'  "width": {grid.width},',
        f'  "height": {grid.height},',
        f'  "tileSize": {tile_size},',
    ]
    if grid.single_layer:
        lines.append(f'  "{SINGLE_LAYER_KEY}": [')
        _write_rows(lines, grid.layers[0].rows, '    ')
        lines.append('  ]')
    else:
        lines.append('  "layers": {')
        for layer in grid.layers:
            lines.append(f'    "{layer.name}": [')
            _write_rows(lines, layer.rows, '      ')
            sep = ',' if layer.index < grid.layer_count - 1 else ''
            lines.append(f'    ]{sep}')
        lines.append('  }')
    lines.append('}')
    return '\n'.join(lines) + '\n'


def _layer_span(text: str, key: str) -> str | None:
    """Text between the outer brackets of ``key``'s array, None if the key is absent."""
    pos = find_key(text, key)
    if pos == -1:
        return None
    open_pos = skip_whitespace(text, pos)
    if open_pos >= len(text) or text[open_pos] != '[':
        raise MalformedBody(f'"{key}" is not followed by an array')
    close_pos = find_matching_bracket(text, open_pos)
    if close_pos == -1:
        raise MalformedBody(f'unterminated array for "{key}"')
    return text[open_pos + 1:close_pos]


def deserialize(text: str, layer_count: int = DEFAULT_LAYER_COUNT) -> TileGrid:
    width = read_int(text, 'width')
    height = read_int(text, 'height')
    grid = create_grid(width, height, layer_count)

    for layer in grid.layers:
        key = SINGLE_LAYER_KEY if grid.single_layer else layer.name
        span = _layer_span(text, key)
        if span is None:
            logger.info("Layer %r missing from JSON map, left blank", key)
            continue
        # scan the whole span so trailing garbage fails even past ``height``
        rows = list(iter_rows(span))
        if span.strip() and not rows:
            raise MalformedBody(f'"{key}" holds no row arrays')
        for row, row_text in enumerate(rows[:height]):
            values = parse_row(row_text)[:width]
            layer.rows[row][:len(values)] = values

    logger.debug("Parsed JSON map %dx%d with %d layer(s)", width, height, layer_count)
    return grid
