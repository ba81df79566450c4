"""
Substring scanning primitives for the map JSON format.

The reader does not build a JSON tree. It looks keys up by literal text,
reads digit runs and matches brackets by depth, which is what lets partial
documents load with missing layers left blank.
"""

from typing import Iterator

from .errors import MalformedBody, MalformedNumber, MissingKey
from .layer import INT_TOKEN

_DIGITS = '0123456789'


def find_key(text: str, key: str, start: int = 0) -> int:
    """Return the index just past ``"key":`` or -1 when it is not present."""
    needle = f'"{key}":'
    idx = text.find(needle, start)
    if idx == -1:
        return -1
    return idx + len(needle)


def skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def scan_digits(text: str, pos: int) -> tuple[str, int]:
    """Consume the maximal run of ASCII digits starting at ``pos``."""
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return text[pos:end], end


def read_int(text: str, key: str) -> int:
    pos = find_key(text, key)
    if pos == -1:
        raise MissingKey(f'key "{key}" not found')
    digits, _ = scan_digits(text, skip_whitespace(text, pos))
    if not digits:
        raise MalformedNumber(f'value of "{key}" is not a number')
    return int(digits)


def find_matching_bracket(text: str, open_pos: int) -> int:
    """Index of the ``]`` closing the ``[`` at ``open_pos``, or -1 if unbalanced."""
    depth = 0
    for i in range(open_pos, len(text)):
        ch = text[i]
        if ch == '[':
            depth += 1
        elif ch == ']':
            depth -= 1
            if depth == 0:
                return i
    return -1


def iter_rows(span: str) -> Iterator[str]:
    """Yield the inside of each flat ``[...]`` found in ``span``.

    Only whitespace and commas may sit between rows.
    """
    pos = 0
    while True:
        start = span.find('[', pos)
        gap = span[pos:] if start == -1 else span[pos:start]
        if gap.strip(' \t\r\n,'):
            raise MalformedBody(f"unexpected {gap.strip()!r} between rows")
        if start == -1:
            return
        end = span.find(']', start)
        if end == -1:
            raise MalformedBody("unterminated row")
        yield span[start + 1:end]
        pos = end + 1


def parse_row(row_text: str) -> list[int]:
    if not row_text.strip():
        return []
    values = []
    for token in row_text.split(','):
        token = token.strip()
        if not INT_TOKEN.fullmatch(token):
            raise MalformedNumber(f"bad tile value {token!r}")
        values.append(int(token))
    return values
