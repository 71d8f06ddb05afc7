from tower_of_hanoi.history import History


def make_history():
    history = History([[3, 2, 1], [], []])
    history.record([[3, 2], [], [1]], 1)
    history.record([[3], [2], [1]], 2)
    return history


def test_reset_leaves_single_entry():
    history = make_history()
    history.reset([[4, 3, 2, 1], [], []])
    assert len(history) == 1
    assert history.cursor == 0
    assert history.current.board == [[4, 3, 2, 1], [], []]
    assert history.current.move_count == 0
    assert not history.can_undo
    assert not history.can_redo


def test_undo_then_redo_restores_entry():
    history = make_history()
    before = history.current
    entry = history.undo()
    assert entry.board == [[3, 2], [], [1]]
    assert entry.move_count == 1
    assert history.redo() == before


def test_undo_at_start_is_noop():
    history = History([[3, 2, 1], [], []])
    assert history.undo() is None
    assert history.cursor == 0


def test_redo_unavailable_after_fresh_move():
    history = make_history()
    history.undo()
    history.record([[3, 2], [1], []], 2)
    assert not history.can_redo
    assert history.redo() is None
    assert len(history) == 3


def test_record_truncates_future():
    history = make_history()
    history.undo()
    history.undo()
    history.record([[3, 2], [1], []], 1)
    assert len(history) == 2
    assert history.cursor == 1


def test_entry_board_is_a_copy():
    history = History([[3, 2, 1], [], []])
    board = history.current.board
    board[0].pop()
    assert history.current.board == [[3, 2, 1], [], []]
