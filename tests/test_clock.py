import time

from paxcore.clock import Clock


def _timer(values):
    iterator = iter(values)
    return lambda: next(iterator)


def test_elapsed_since_creation():
    clock = Clock(_timer([10.0, 12.0]))
    assert clock.elapsed() == 2.0


def test_elapsed_between_calls():
    clock = Clock(_timer([1.0, 1.5, 4.0]))
    assert clock.elapsed() == 0.5
    assert clock.elapsed() == 2.5


def test_no_time_passing_gives_zero():
    clock = Clock(_timer([7.0, 7.0, 7.0]))
    assert clock.elapsed() == 0.0
    assert clock.elapsed() == 0.0


def test_real_clock_is_monotonic():
    clock = Clock()
    time.sleep(0.01)
    first = clock.elapsed()
    second = clock.elapsed()
    assert first >= 0.009
    assert second >= 0.0


def test_elapsed_sums_to_total_span():
    values = [0.0, 0.25, 0.75, 2.0, 3.0]
    clock = Clock(_timer(values))
    total = sum(clock.elapsed() for _ in range(len(values) - 1))
    assert total == values[-1] - values[0]