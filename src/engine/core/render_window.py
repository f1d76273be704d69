"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ（提示層の実体）。
何を: Pyglet Window 上に RGBA ピクセルバッファを提示し、キー/クローズ/リサイズをイベント列として溜める。
なぜ: ループ本体（`engine.runtime.loop`）から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = PixelWindow(500, 500, caption="Box", bg_color=(0, 0, 255, 255))
    orchestrator = LoopOrchestrator(app, win, 60)
    pyglet.clock.schedule_interval(orchestrator.tick, 1 / 60)
    pyglet.app.run()
"""

from __future__ import annotations

import logging

import pyglet
from pyglet.gl import glClearColor
from pyglet.window import key, mouse

from util.color import to_unit_rgba

from .events import CloseEvent, InputEvent, KeyEvent, ResizeEvent
from .keys import LogicalKey
from .pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

# pyglet のキーシンボル → 論理キー（未登録キーは無視）
KEY_MAP: dict[int, LogicalKey] = {
    key.LEFT: LogicalKey.LEFT,
    key.RIGHT: LogicalKey.RIGHT,
    key.UP: LogicalKey.UP,
    key.DOWN: LogicalKey.DOWN,
    key.Q: LogicalKey.Q,
    key.D: LogicalKey.D,
    key.Z: LogicalKey.Z,
    key.S: LogicalKey.S,
    key.A: LogicalKey.A,
    key.E: LogicalKey.E,
    key.ESCAPE: LogicalKey.ESCAPE,
}


class PixelWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "Box",
        bg_color: object = (0, 0, 255, 255),
        resizable: bool = True,
    ):
        """ウィンドウとバッファを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。バッファ幅と一致する。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトル。
            bg_color: バッファ外の余白のクリア色（Hex / 0..1 / 0..255）。
        """
        # pyglet は生成中に on_resize を送ることがあるため先に用意する
        self.buffer = PixelBuffer(width, height)
        self._events: list[InputEvent] = []
        self._image: pyglet.image.ImageData | None = None
        self._bg_color = to_unit_rgba(bg_color)
        self._surface_closed = False
        self.cursor_pos: tuple[float, float] = (0.0, 0.0)
        super().__init__(
            width=width, height=height, caption=caption, resizable=resizable, vsync=True
        )

    # ---- PresentationSurface ----
    @property
    def is_closed(self) -> bool:
        return self._surface_closed

    def drain_events(self) -> list[InputEvent]:
        events, self._events = self._events, []
        return events

    def present(self) -> None:
        """バッファを ImageData へ転送する。実際の描画は次の `on_draw` で行う。"""
        w, h = self.buffer.width, self.buffer.height
        # 行 0 が上端なので負のピッチで上から下へ並べる
        self._image = pyglet.image.ImageData(w, h, "RGBA", self.buffer.tobytes(), pitch=-w * 4)

    def close(self) -> None:  # type: ignore[override]
        if self._surface_closed:
            return
        self._surface_closed = True
        super().close()
        pyglet.app.exit()

    # ---- Pyglet 既定のイベント名 ----
    def on_draw(self):
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        # REMAIN 待機中も最後に提示した画像を描き続ける
        if self._image is not None:
            self._image.blit(0, 0)

    def on_key_press(self, symbol, modifiers):  # noqa: ANN001
        logical = KEY_MAP.get(symbol)
        if logical is not None:
            self._events.append(KeyEvent(logical, pressed=True))
        return pyglet.event.EVENT_HANDLED

    def on_key_release(self, symbol, modifiers):  # noqa: ANN001
        logical = KEY_MAP.get(symbol)
        if logical is not None:
            self._events.append(KeyEvent(logical, pressed=False))
        return pyglet.event.EVENT_HANDLED

    def on_close(self):
        # 既定動作（即クローズ）を抑止し、判断はループに任せる
        self._events.append(CloseEvent())
        return pyglet.event.EVENT_HANDLED

    def on_resize(self, width, height):  # noqa: ANN001
        super().on_resize(width, height)
        if width <= 0 or height <= 0 or (width, height) == self.buffer.size:
            return
        self.buffer.resize(width, height)
        # 次の present まで（REMAIN 待機中はクローズまで）直前の画像を表示し続ける
        self._events.append(ResizeEvent(width, height))

    def on_mouse_motion(self, x, y, dx, dy):  # noqa: ANN001
        # pyglet は左下原点。バッファと同じ左上原点へ変換して保持する
        self.cursor_pos = (float(x), float(self.height - y))

    def on_mouse_press(self, x, y, button, modifiers):  # noqa: ANN001
        if button == mouse.LEFT:
            self.cursor_pos = (float(x), float(self.height - y))
            logger.info("clicked at x: %s, y: %s", self.cursor_pos[0], self.cursor_pos[1])
