from __future__ import annotations

import sys
import types

import pytest

from engine.core.lifecycle import DoneStatus
from pixloop import PixelRunner, PresentationError, run


def _install_pyglet_stub(monkeypatch: pytest.MonkeyPatch, window_factory) -> dict:  # noqa: ANN001
    """pyglet と PixelWindow を差し替え、`app.run` でスケジュール済み関数を回す。"""
    state: dict = {"scheduled": [], "windows": [], "run_interval": None}

    def schedule_interval(fn, interval):  # noqa: ANN001
        state["scheduled"].append((fn, interval))

    def unschedule(fn):  # noqa: ANN001
        state["scheduled"] = [s for s in state["scheduled"] if s[0] != fn]

    def app_run(interval=None):  # noqa: ANN001
        state["run_interval"] = interval
        window = state["windows"][-1]
        for _ in range(100):
            if window.is_closed or not state["scheduled"]:
                break
            fn, iv = state["scheduled"][0]
            fn(iv)

    pyglet_mod = types.ModuleType("pyglet")
    pyglet_mod.clock = types.SimpleNamespace(
        schedule_interval=schedule_interval, unschedule=unschedule
    )
    pyglet_mod.app = types.SimpleNamespace(run=app_run, exit=lambda: None)

    def _factory(width, height, *, caption, bg_color):  # noqa: ANN001
        w = window_factory(width, height, caption=caption, bg_color=bg_color)
        state["windows"].append(w)
        return w

    rw_mod = types.ModuleType("engine.core.render_window")
    rw_mod.PixelWindow = _factory
    monkeypatch.setitem(sys.modules, "pyglet", pyglet_mod)
    monkeypatch.setitem(sys.modules, "engine.core.render_window", rw_mod)
    return state


def test_run_drives_loop_until_exit_and_closes_window(monkeypatch, make_app, make_surface) -> None:
    created: list[dict] = []

    def window(width, height, *, caption, bg_color):  # noqa: ANN001
        created.append({"size": (width, height), "caption": caption, "bg": bg_color})
        return make_surface(width, height)

    state = _install_pyglet_stub(monkeypatch, window)
    app = make_app(status=lambda n: DoneStatus.EXIT if n >= 3 else DoneStatus.NOT_DONE)
    runner = PixelRunner(app, (16, 8), 10, title="Test", background="#102030")
    runner.set_always_tick(True)
    runner.run()

    assert created == [{"size": (16, 8), "caption": "Test", "bg": (0x10, 0x20, 0x30, 255)}]
    assert len(app.ticks) == 3
    assert runner.orchestrator is not None and runner.orchestrator.closed
    assert state["scheduled"] == []
    assert state["run_interval"] == pytest.approx(0.1)
    assert state["windows"][0].is_closed


def test_run_can_only_be_called_once(monkeypatch, make_app, make_surface) -> None:
    _install_pyglet_stub(monkeypatch, lambda w, h, **_: make_surface(w, h))
    runner = PixelRunner(make_app(status=DoneStatus.EXIT), (4, 4), 10)
    runner.set_always_tick(True)
    runner.run()
    with pytest.raises(RuntimeError):
        runner.run()


def test_window_creation_failure_raises_presentation_error(monkeypatch, make_app) -> None:
    def broken(*_a, **_k):  # noqa: ANN002, ANN003
        raise OSError("no display")

    _install_pyglet_stub(monkeypatch, broken)
    app = make_app()
    runner = PixelRunner(app, (4, 4), 10)
    with pytest.raises(PresentationError) as ex:
        runner.run()
    assert isinstance(ex.value.__cause__, OSError)
    assert app.ticks == [] and app.draws == 0


def test_callback_exception_propagates_and_window_is_closed(monkeypatch, make_surface) -> None:
    state = _install_pyglet_stub(monkeypatch, lambda w, h, **_: make_surface(w, h))

    class _Boom:
        def on_tick(self, keys):  # noqa: ANN001
            raise ZeroDivisionError("tick failed")

        def draw(self, frame, width):  # noqa: ANN001
            pass

        def done(self):
            return DoneStatus.NOT_DONE

    runner = PixelRunner(_Boom(), (4, 4), 10)
    runner.set_always_tick(True)
    with pytest.raises(ZeroDivisionError):
        runner.run()
    assert state["windows"][0].is_closed
    assert state["scheduled"] == []


def test_init_only_returns_without_importing_pyglet(monkeypatch, make_app) -> None:
    # pyglet の import が起きたら失敗させる
    monkeypatch.setitem(sys.modules, "pyglet", None)
    app = make_app()
    assert run(app, (100, 100), 30, init_only=True) is None
    assert app.ticks == [] and app.draws == 0


@pytest.mark.parametrize("size", [(0, 10), (10, -1), ("a", 3)])
def test_invalid_window_size_raises(make_app, size) -> None:  # noqa: ANN001
    with pytest.raises(ValueError):
        PixelRunner(make_app(), size, 60)


def test_invalid_ticks_per_second_raises(make_app) -> None:
    with pytest.raises(ValueError):
        PixelRunner(make_app(), (10, 10), 0)
