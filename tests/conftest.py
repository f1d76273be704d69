"""共通フィクスチャ。

- 偽サーフェス（イベント注入/提示回数の記録）
- 記録つきユーザアプリ
- `PXL_*` 環境変数の隔離
"""

from __future__ import annotations

from typing import Callable, Iterator

import pytest

from common import settings
from engine.core.events import CloseEvent, InputEvent, KeyEvent
from engine.core.keys import LogicalKey
from engine.core.lifecycle import DoneStatus
from engine.core.pixel_buffer import PixelBuffer


class FakeSurface:
    """`PresentationSurface` のテスト用実装。"""

    def __init__(self, width: int = 8, height: int = 4):
        self.buffer = PixelBuffer(width, height)
        self.pending: list[InputEvent] = []
        self.presented = 0
        self.close_calls = 0

    @property
    def is_closed(self) -> bool:
        return self.close_calls > 0

    def drain_events(self) -> list[InputEvent]:
        events, self.pending = self.pending, []
        return events

    def present(self) -> None:
        self.presented += 1

    def close(self) -> None:
        self.close_calls += 1

    # ---- 注入ヘルパ ----
    def press(self, key: LogicalKey) -> None:
        self.pending.append(KeyEvent(key, pressed=True))

    def release(self, key: LogicalKey) -> None:
        self.pending.append(KeyEvent(key, pressed=False))

    def request_close(self) -> None:
        self.pending.append(CloseEvent())


class RecordingApp:
    """呼び出しを記録し、`done()`/`on_tick()` の戻り値をスクリプトで差し替えられるアプリ。"""

    def __init__(
        self,
        *,
        redraw: bool | Callable[[int], bool] = True,
        status: DoneStatus | Callable[[int], DoneStatus] = DoneStatus.NOT_DONE,
    ):
        self.redraw = redraw
        self.status = status
        self.ticks: list[frozenset[LogicalKey]] = []
        self.draws = 0
        self.done_calls = 0

    def on_tick(self, pressed_keys: frozenset[LogicalKey]) -> bool:
        self.ticks.append(pressed_keys)
        if callable(self.redraw):
            return self.redraw(len(self.ticks))
        return self.redraw

    def draw(self, frame, width: int) -> None:  # noqa: ANN001
        self.draws += 1

    def done(self) -> DoneStatus:
        self.done_calls += 1
        if callable(self.status):
            return self.status(len(self.ticks))
        return self.status


@pytest.fixture()
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture()
def app() -> RecordingApp:
    return RecordingApp()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`PXL_*` を外して設定を再読込し、テスト後にも戻す。"""
    for name in ("PXL_LOG_LEVEL", "PXL_TRACE_TICKS", "PXL_ALWAYS_TICK", "PXL_TICKS_PER_SECOND"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def make_surface() -> Callable[..., FakeSurface]:
    return FakeSurface


@pytest.fixture()
def make_app() -> Callable[..., RecordingApp]:
    return RecordingApp
