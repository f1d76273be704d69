from __future__ import annotations

import pytest

from engine.core.tick_clock import TickClock, hz_to_nanosec_period


def test_hz_to_nanosec_period() -> None:
    assert hz_to_nanosec_period(60) == 16_666_666
    assert hz_to_nanosec_period(1) == 1_000_000_000


@pytest.mark.parametrize("tps", [0, -5])
def test_non_positive_rate_raises(tps: int) -> None:
    with pytest.raises(ValueError):
        TickClock(tps)


def test_tick_interval_is_inverse_of_rate() -> None:
    clock = TickClock(50)
    assert clock.ticks_per_second == 50
    assert clock.tick_interval == pytest.approx(0.02)


@pytest.mark.parametrize("tps", [1, 30, 60, 144])
@pytest.mark.parametrize("n", [0, 1, 3, 7, 60])
def test_exact_multiple_of_interval_yields_exactly_n_ticks(tps: int, n: int) -> None:
    clock = TickClock(tps)
    ticks = list(clock.due_ticks(n * clock.tick_interval))
    assert ticks == list(range(n))
    assert clock.accumulated == 0.0


def test_leftover_time_carries_to_next_poll() -> None:
    clock = TickClock(10)
    assert list(clock.due_ticks(0.15)) == [0]
    assert clock.accumulated == pytest.approx(0.05)
    assert list(clock.due_ticks(0.05)) == [0]
    assert clock.accumulated == pytest.approx(0.0)


def test_poll_consumes_one_interval_at_a_time() -> None:
    clock = TickClock(4)
    clock.advance(0.6)
    assert clock.poll() is True
    assert clock.poll() is True
    assert clock.poll() is False
    assert clock.accumulated == pytest.approx(0.1)


def test_negative_elapsed_is_ignored() -> None:
    clock = TickClock(10)
    clock.advance(-1.0)
    assert clock.accumulated == 0.0
    assert clock.poll() is False


def test_reset_drops_leftover() -> None:
    clock = TickClock(10)
    clock.advance(0.35)
    clock.reset()
    assert clock.accumulated == 0.0
    assert list(clock.due_ticks(0.0)) == []
