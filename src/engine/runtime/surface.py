"""
どこで: `engine.runtime` の提示層インターフェース。
何を: ループが提示層に要求する最小契約 `PresentationSurface` を Protocol で定義。
なぜ: ウィンドウ生成/OS イベント/バッファ提示を外部協調者として切り離すため（実体は `PixelWindow`）。
"""

from __future__ import annotations

from typing import Protocol

from engine.core.events import InputEvent
from engine.core.pixel_buffer import PixelBuffer


class PresentationSurface(Protocol):
    buffer: PixelBuffer

    @property
    def is_closed(self) -> bool: ...

    def drain_events(self) -> list[InputEvent]:
        """前回以降に溜まった入力イベントを到着順に返し、内部キューを空にする。"""
        ...

    def present(self) -> None:
        """現在のバッファ内容を画面へ反映する。"""
        ...

    def close(self) -> None:
        """ウィンドウを閉じ、イベントループを止める（冪等）。"""
        ...


__all__ = ["PresentationSurface"]
