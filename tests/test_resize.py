from tilemap.resize import copy_clipped, overlap


def test_overlap():
    assert overlap(10, 10, 5, 5) == (5, 5)
    assert overlap(5, 8, 10, 2) == (5, 2)


def test_copy_clipped_shrink():
    rows = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert copy_clipped(rows, 2, 2) == [[1, 2], [4, 5]]


def test_copy_clipped_grow():
    rows = [[1, 2], [3, 4]]
    assert copy_clipped(rows, 3, 3) == [[1, 2, 0], [3, 4, 0], [0, 0, 0]]


def test_copy_clipped_mixed_and_fill():
    rows = [[1, 2, 3]]
    assert copy_clipped(rows, 2, 2, fill=9) == [[1, 2], [9, 9]]


def test_copy_clipped_does_not_alias():
    rows = [[1, 2], [3, 4]]
    out = copy_clipped(rows, 2, 2)
    out[0][0] = 0
    assert rows[0][0] == 1
