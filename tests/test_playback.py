from tower_of_hanoi.playback import CancellationToken, Playback


def recorder(reject=()):
    applied = []

    def apply(src, dst):
        if (src, dst) in reject:
            return False
        applied.append((src, dst))
        return True

    return applied, apply


def test_steps_through_all_moves():
    applied, apply = recorder()
    playback = Playback([(0, 1), (1, 2)], apply, delay=0.5)
    assert playback.running
    assert playback.step() == (0, 1)
    assert playback.step() == (1, 2)
    assert playback.step() is None
    assert playback.finished
    assert not playback.running
    assert applied == [(0, 1), (1, 2)]


def test_cancel_between_steps():
    applied, apply = recorder()
    token = CancellationToken()
    playback = Playback([(0, 1), (1, 2), (0, 2)], apply, delay=0.1, token=token)
    playback.step()
    token.cancel()
    assert playback.step() is None
    assert applied == [(0, 1)]
    assert playback.remaining == 2
    assert not playback.running


def test_rejected_move_cancels():
    applied, apply = recorder(reject={(1, 2)})
    playback = Playback([(0, 1), (1, 2), (0, 2)], apply, delay=0.1)
    playback.step()
    assert playback.step() is None
    assert playback.token.cancelled
    assert playback.position == 1
