import pytest
from chromapick.utils import Signal, round_half_up, in_bounds
from chromapick.converter.transaction import ReentrancyGuard


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(-0.5) == 0
    assert round_half_up(148.75) == 149


def test_in_bounds_accepts_either_order():
    assert in_bounds(50, 0, 100)
    assert in_bounds(50, 100, 0)
    assert in_bounds(0, 100, 0)
    assert not in_bounds(101, 100, 0)


def test_signal_emits_in_order_and_deduplicates():
    calls = []
    first = lambda value: calls.append(("first", value))
    second = lambda value: calls.append(("second", value))

    signal = Signal("test")
    signal.connect(first)
    signal.connect(second)
    signal.connect(first)
    assert len(signal) == 2

    signal.emit(7)
    assert calls == [("first", 7), ("second", 7)]


def test_signal_disconnect():
    calls = []
    callback = calls.append
    signal = Signal()
    signal.connect(callback)
    assert callback in signal
    assert signal.disconnect(callback)
    assert not signal.disconnect(callback)
    signal.emit(1)
    assert calls == []


def test_signal_allows_unsubscribing_while_emitting():
    calls = []
    signal = Signal()

    def once(value):
        calls.append(value)
        signal.disconnect(once)

    signal.connect(once)
    signal.emit(1)
    signal.emit(2)
    assert calls == [1]


def test_signal_rejects_non_callables():
    with pytest.raises(TypeError):
        Signal().connect(42)


def test_reentrancy_guard_yields_false_when_nested():
    guard = ReentrancyGuard("test")
    seen = []
    with guard.acquire() as outer:
        seen.append(outer)
        assert guard.active
        with guard.acquire() as inner:
            seen.append(inner)
        # the nested scope does not release the guard
        assert guard.active
    assert seen == [True, False]
    assert not guard.active


def test_reentrancy_guard_released_on_exception():
    guard = ReentrancyGuard()
    with pytest.raises(RuntimeError):
        with guard.acquire():
            raise RuntimeError("boom")
    assert not guard.active
