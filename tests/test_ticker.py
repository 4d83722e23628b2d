import pytest

from engine.app.ticker import IntervalTicker


def test_fires_once_per_full_period() -> None:
    calls = []
    ticker = IntervalTicker(1000)
    ticker.arm(lambda: calls.append(1))

    assert ticker.advance(600) == 0
    assert ticker.advance(600) == 1
    assert ticker.advance(2700) == 2
    assert len(calls) == 3
    # 900 ms carried over: the next 100 ms completes a period
    assert ticker.advance(99) == 0
    assert ticker.advance(1) == 1
    assert len(calls) == 4


def test_unarmed_ticker_never_fires() -> None:
    ticker = IntervalTicker(1000)
    assert not ticker.armed
    assert ticker.advance(10_000) == 0


def test_cancel_drops_partial_period() -> None:
    calls = []
    ticker = IntervalTicker(1000)
    ticker.arm(lambda: calls.append("a"))
    ticker.advance(900)
    ticker.cancel()
    ticker.arm(lambda: calls.append("b"))
    ticker.advance(900)
    assert calls == []
    ticker.advance(100)
    assert calls == ["b"]


def test_callback_cancelling_stops_remaining_ticks() -> None:
    calls = []
    ticker = IntervalTicker(1000)

    def once():
        calls.append(1)
        ticker.cancel()

    ticker.arm(once)
    assert ticker.advance(5000) == 1
    assert calls == [1]
    assert not ticker.armed


def test_rejects_non_positive_period() -> None:
    with pytest.raises(ValueError):
        IntervalTicker(0)
