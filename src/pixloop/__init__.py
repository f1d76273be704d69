"""
どこで: `pixloop` 入口（高レベル公開 API）。
何を: ランナー・ピクセルアクセサ・論理キー・終了ステータス・アプリ契約を再輸出。
なぜ: 利用者が単一名前空間から「アプリ定義 → 実行」まで完結できるようにするため。

Usage:
    from pixloop import Color, DoneStatus, LogicalKey, PixelRunner, put_pixel

    class Dot:
        def on_tick(self, keys):
            return LogicalKey.RIGHT in keys
        def draw(self, frame, width):
            put_pixel(frame, width, 10, 10, Color(255, 0, 0, 255))
        def done(self):
            return DoneStatus.NOT_DONE

    PixelRunner(Dot(), (320, 240), 60).run()
"""

from engine.core.app import GfxApp
from engine.core.keys import LogicalKey
from engine.core.lifecycle import DoneStatus
from engine.core.pixel_buffer import Color, PixelBuffer, get_pixel, put_pixel

from .runner import PixelRunner, PresentationError
from .runner import run as run

__all__ = [
    "PixelRunner",
    "PresentationError",
    "run",
    "GfxApp",
    "LogicalKey",
    "DoneStatus",
    "Color",
    "PixelBuffer",
    "get_pixel",
    "put_pixel",
]

__version__ = "0.1.0"
