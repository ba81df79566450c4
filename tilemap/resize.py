def overlap(old_width: int, old_height: int, new_width: int, new_height: int) -> tuple[int, int]:
    """Size of the top-left block that survives a resize."""
    return min(old_width, new_width), min(old_height, new_height)


def copy_clipped(rows: list[list[int]], new_width: int, new_height: int, fill: int = 0) -> list[list[int]]:
    """Copy ``rows`` into a fresh ``new_height`` x ``new_width`` grid.

    Values are anchored at (0, 0). Anything past the new edges is dropped and
    newly exposed cells get ``fill``.
    """
    old_height = len(rows)
    old_width = len(rows[0]) if rows else 0
    keep_w, keep_h = overlap(old_width, old_height, new_width, new_height)

    new_rows = [[fill] * new_width for _ in range(new_height)]
    for r in range(keep_h):
        new_rows[r][:keep_w] = rows[r][:keep_w]
    return new_rows
