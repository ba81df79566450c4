class TileMapError(Exception):
    """Base class for every failure raised by the map core."""


class InvalidDimension(TileMapError, ValueError):
    """Map width/height (or layer count) outside the accepted range."""


class OutOfBounds(TileMapError, IndexError):
    """A cell or layer coordinate outside the current grid."""


class MapFormatError(TileMapError):
    """Persisted map data that cannot be read."""


class MalformedHeader(MapFormatError):
    pass


class MalformedBody(MapFormatError):
    pass


class MissingKey(MapFormatError):
    pass


class MalformedNumber(MapFormatError):
    pass


class UnsupportedFormat(TileMapError, ValueError):
    pass


class MapFileError(TileMapError):
    """Reading or writing a map file failed at the OS level."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause
