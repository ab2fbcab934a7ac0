from towerdefence.timer import Timer


def _counter():
    calls = []
    return calls, lambda: calls.append(1)


def test_fires_after_wait_time():
    calls, callback = _counter()
    timer = Timer(1.0, False, callback)
    timer.update(0.5)
    assert (len(calls), timer.paused) == (0, False)
    timer.update(0.5)
    assert (len(calls), timer.paused) == (1, False)


def test_repeating_timer_fires_each_period():
    calls, callback = _counter()
    timer = Timer(1.0, False, callback)
    for _ in range(6):
        timer.update(0.5)
    assert (len(calls), timer.paused) == (3, False)


def test_one_shot_fires_once_until_restart():
    calls, callback = _counter()
    timer = Timer(1.0, True, callback)
    for _ in range(5):
        timer.update(1.0)
    assert (len(calls), timer.paused) == (1, False)
    timer.restart()
    timer.update(1.0)
    assert (len(calls), timer.paused) == (2, False)


def test_excess_time_carries_over():
    calls, callback = _counter()
    timer = Timer(1.0, False, callback)
    timer.update(1.5)
    assert (len(calls), timer.paused) == (1, False)
    timer.update(0.5)
    assert (len(calls), timer.paused) == (2, False)


def test_pause_and_resume():
    calls, callback = _counter()
    timer = Timer(1.0, False, callback)
    timer.pause()
    assert timer.paused
    timer.update(5.0)
    assert len(calls) == 0
    timer.resume()
    assert not timer.paused
    timer.update(1.0)
    assert len(calls) == 1


def test_restart_clears_elapsed_time():
    calls, callback = _counter()
    timer = Timer(1.0, False, callback)
    timer.update(0.9)
    timer.restart()
    timer.update(0.9)
    assert (len(calls), timer.paused) == (0, False)


def test_callback_can_be_replaced():
    first, first_cb = _counter()
    second, second_cb = _counter()
    timer = Timer(1.0, False, first_cb)
    timer.on_timeout = second_cb
    assert timer.on_timeout is second_cb
    timer.update(1.0)
    assert (len(first), len(second), timer.paused) == (0, 1, False)