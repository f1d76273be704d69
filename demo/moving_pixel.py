from __future__ import annotations

import logging

from common.logging import setup_default_logging
from pixloop import Color, DoneStatus, LogicalKey, PixelRunner, put_pixel

logger = logging.getLogger(__name__)

RED = Color(255, 0, 0, 255)

_MOVES = {
    LogicalKey.LEFT: (-1, 0),
    LogicalKey.RIGHT: (1, 0),
    LogicalKey.UP: (0, -1),
    LogicalKey.DOWN: (0, 1),
}


class MovingPixel:
    """矢印キーで動く 1 ピクセルだけのデモアプリ。"""

    def __init__(self, x: int = 0, y: int = 0):
        self.pos = (x, y)

    def on_tick(self, pressed_keys: frozenset[LogicalKey]) -> bool:
        needs_redraw = False
        x, y = self.pos
        for k in pressed_keys:
            move = _MOVES.get(k)
            if move is None:
                continue
            x, y = x + move[0], y + move[1]
            needs_redraw = True
        self.pos = (max(0, x), max(0, y))
        return needs_redraw

    def draw(self, frame, width: int) -> None:  # noqa: ANN001
        x, y = self.pos
        # put_pixel は境界チェックをしないため呼び出し側で確認する
        if x < width and (y * width + x) * 4 + 3 < len(frame):
            put_pixel(frame, width, x, y, RED)

    def done(self) -> DoneStatus:
        """x が 50 未満で REMAIN（画面を残す）、y が 50 未満で EXIT、それ以外は継続。"""
        x, y = self.pos
        if x < 50:
            return DoneStatus.REMAIN
        if y < 50:
            return DoneStatus.EXIT
        return DoneStatus.NOT_DONE


if __name__ == "__main__":
    setup_default_logging()
    logger.info("Hello, world!")
    runner = PixelRunner(MovingPixel(50, 100), (500, 500), 60)
    # 物理/アニメーションは無いので False で性能を優先
    runner.set_always_tick(False)
    runner.run()
