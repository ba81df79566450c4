from tilemap.grid import create_grid
from tilemap.undo import UndoEntry, UndoLedger


def test_undo_empty_is_noop():
    grid = create_grid(3, 3)
    ledger = UndoLedger()
    assert ledger.undo(grid) is False
    assert grid.is_empty()
    assert not ledger


def test_undo_reverse_order():
    grid = create_grid(3, 3)
    ledger = UndoLedger()
    before = grid.snapshot()
    edits = [(0, 0, 0, 1), (0, 0, 0, 5), (2, 1, 2, 1), (1, 2, 2, 3)]
    states = []
    for layer, row, col, value in edits:
        states.append(grid.snapshot())
        ledger.record(layer, row, col, grid.set(layer, row, col, value), value)
    assert len(ledger) == 4

    for expected in reversed(states):
        assert ledger.undo(grid) is True
        assert grid.snapshot() == expected
    assert grid.snapshot() == before
    assert ledger.undo(grid) is False


def test_peek_and_clear():
    ledger = UndoLedger()
    assert ledger.peek() is None
    ledger.record(1, 2, 3, 0, 1)
    assert ledger.peek() == UndoEntry(1, 2, 3, 0, 1)
    ledger.clear()
    assert len(ledger) == 0


def test_stale_entry_is_dropped():
    grid = create_grid(5, 5)
    ledger = UndoLedger()
    ledger.record(0, 4, 4, 1)
    small = grid.resized(2, 2)
    assert ledger.undo(small) is False
    assert small.is_empty()
    assert not ledger
