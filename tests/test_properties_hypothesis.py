import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from engine.core.keys import KeyStateTracker, LogicalKey
from engine.core.pixel_buffer import Color, PixelBuffer, get_pixel, put_pixel
from engine.core.tick_clock import TickClock, hz_to_nanosec_period

_u8 = st.integers(0, 255)


@st.composite
def _buffer_and_point(draw):
    w = draw(st.integers(1, 16))
    h = draw(st.integers(1, 16))
    x = draw(st.integers(0, w - 1))
    y = draw(st.integers(0, h - 1))
    fill = draw(st.tuples(_u8, _u8, _u8, _u8))
    return w, h, x, y, fill


@given(bp=_buffer_and_point(), color=st.tuples(_u8, _u8, _u8, _u8))
def test_put_then_get_only_touches_one_pixel(bp, color):
    w, h, x, y, fill = bp
    buf = PixelBuffer(w, h)
    buf.fill(Color(*fill))
    before = buf.frame.copy()
    put_pixel(buf.frame, w, x, y, Color(*color))
    assert get_pixel(buf.frame, w, x, y) == Color(*color)
    idx = (y * w + x) * 4
    mask = np.ones(before.shape, dtype=bool)
    mask[idx : idx + 4] = False
    np.testing.assert_array_equal(buf.frame[mask], before[mask])


@given(
    tps=st.integers(1, 240),
    steps=st.lists(st.integers(0, 50_000_000), min_size=1, max_size=30),
)
def test_tick_count_matches_total_elapsed(tps, steps):
    clock = TickClock(tps)
    total = 0
    for ns in steps:
        total += sum(1 for _ in clock.due_ticks(ns / 1_000_000_000))
    period = hz_to_nanosec_period(tps)
    assert total == sum(steps) // period


@given(events=st.lists(st.tuples(st.sampled_from(list(LogicalKey)), st.booleans()), max_size=40))
def test_sample_reports_every_key_pressed_since_last_sample(events):
    tracker = KeyStateTracker()
    tracker.sample_for_tick()
    held: set = set()
    pressed: set = set()
    for key, down in events:
        if down:
            tracker.on_key_down(key)
            held.add(key)
            pressed.add(key)
        else:
            tracker.on_key_up(key)
            held.discard(key)
    assert tracker.sample_for_tick() == frozenset(held | pressed)
    assert tracker.sample_for_tick() == frozenset(held)
