import logging
import os

from . import json_codec, text_codec
from .errors import InvalidDimension, MalformedBody, MapFileError, UnsupportedFormat
from .grid import DEFAULT_LAYER_COUNT, TileGrid, create_grid, validate_dimensions
from .undo import UndoEntry, UndoLedger

logger = logging.getLogger(__name__)

DEFAULT_MAP_SIZE = (50, 50)

CODECS = {
    'txt': text_codec,
    'json': json_codec,
}


def detect_format(path: str) -> str:
    """Map files ending in .json (any case) are JSON, everything else is text."""
    return 'json' if path.lower().endswith('.json') else 'txt'


def ensure_extension(path: str, fmt: str) -> str:
    ext = '.' + fmt
    return path if path.lower().endswith(ext) else path + ext


def parse_dimensions(width_text, height_text) -> tuple[int, int]:
    """Turn user-entered width/height into validated ints."""
    try:
        width = int(str(width_text).strip())
        height = int(str(height_text).strip())
    except ValueError:
        raise InvalidDimension(
            f"invalid number format: {width_text!r} x {height_text!r}"
        ) from None
    validate_dimensions(width, height)
    return width, height


def startup_dimensions(width_text, height_text, default=DEFAULT_MAP_SIZE) -> tuple[int, int, bool]:
    """Like ``parse_dimensions`` but falls back to ``default`` on bad input."""
    try:
        width, height = parse_dimensions(width_text, height_text)
    except InvalidDimension as exc:
        logger.warning("%s; using default %dx%d", exc, *default)
        return default[0], default[1], False
    return width, height, True


class EditorSession:
    """One open map: the grid, its undo ledger and the unsaved flag."""

    def __init__(self, grid: TileGrid, tile_size: int = json_codec.DEFAULT_TILE_SIZE):
        self.grid = grid
        self.tile_size = tile_size
        self.ledger = UndoLedger()
        self.unsaved = False

    @classmethod
    def new(cls, width: int, height: int, layer_count: int = DEFAULT_LAYER_COUNT,
            tile_size: int = json_codec.DEFAULT_TILE_SIZE) -> 'EditorSession':
        session = cls(create_grid(width, height, layer_count), tile_size)
        logger.info("New %dx%d map with %d layer(s)", width, height, layer_count)
        return session

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.grid.width, self.grid.height

    @property
    def layer_count(self) -> int:
        return self.grid.layer_count

    @property
    def can_undo(self) -> bool:
        return bool(self.ledger)

    @property
    def last_edit(self) -> UndoEntry | None:
        """The edit the next undo would revert."""
        return self.ledger.peek()

    # ---------------- editing -----------------
    def paint_cell(self, layer: int, row: int, col: int, value: int) -> bool:
        """Paint one cell. Returns False if it already held ``value``."""
        if self.grid.get(layer, row, col) == value:
            return False
        old = self.grid.set(layer, row, col, value)
        self.ledger.record(layer, row, col, old, value)
        self.unsaved = True
        logger.debug("Painted layer %d (%d, %d): %d -> %d", layer, row, col, old, value)
        return True

    def undo(self) -> bool:
        applied = self.ledger.undo(self.grid)
        if applied:
            self.unsaved = True
        return applied

    def clear_layer(self, layer: int) -> None:
        self.grid.fill_layer(layer)
        self.ledger.clear()
        self.unsaved = True
        logger.info("Cleared layer %s", self.grid.layers[layer].name)

    def clear_all(self) -> None:
        self.grid.fill_all()
        self.ledger.clear()
        self.unsaved = True
        logger.info("Cleared all layers")

    def resize(self, width: int, height: int) -> tuple[int, int]:
        new_grid = self.grid.resized(width, height)
        self.grid = new_grid
        self.ledger.clear()
        self.unsaved = True
        logger.info("Resized map to %dx%d", width, height)
        return self.dimensions

    # ---------------- persistence -----------------
    def serialize(self, fmt: str) -> str:
        if fmt == 'json':
            return json_codec.serialize(self.grid, self.tile_size)
        if fmt == 'txt':
            return text_codec.serialize(self.grid)
        raise UnsupportedFormat(f"unknown map format {fmt!r}")

    def save(self, path: str, fmt: str | None = None) -> str:
        """Write the map and return the path actually written."""
        fmt = fmt or detect_format(path)
        text = self.serialize(fmt)
        path = ensure_extension(path, fmt)
        directory = os.path.dirname(path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, 'w', encoding='utf-8', newline='\n') as f:
                f.write(text)
        except OSError as exc:
            raise MapFileError(path, exc) from exc
        self.unsaved = False
        logger.info("Saved %s map to %s", fmt, path)
        return path

    def load(self, path: str) -> str:
        """Replace the map with the file's contents and return its format."""
        fmt = detect_format(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except OSError as exc:
            raise MapFileError(path, exc) from exc
        except UnicodeDecodeError:
            raise MalformedBody(f"{path}: not a text map file") from None

        # parse completely before touching the current grid
        new_grid = CODECS[fmt].deserialize(text, self.layer_count)
        self.grid = new_grid
        self.ledger.clear()
        self.unsaved = False
        logger.info("Loaded %s map %dx%d from %s", fmt, new_grid.width, new_grid.height, path)
        return fmt
