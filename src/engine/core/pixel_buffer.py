"""
どこで: `engine.core` のピクセルバッファ。
何を: フラットな RGBA バイト列への 1 ピクセル読み書き（`get_pixel`/`put_pixel`）と、
      サーフェスが所有する管理バッファ `PixelBuffer` を提供。
なぜ: ユーザの `draw` から最小コストで画素を書き換え、提示層へそのまま渡すため。

レイアウト:
    1 ピクセル = 4 バイト (R, G, B, A)、行優先、行 0 が画面上端。
    オフセット = (y * width + x) * 4。高さは `len(frame) // (width * 4)`。

注意:
    `get_pixel`/`put_pixel` は境界チェックを行わない。`x < width` かつ
    オフセット+3 がバッファ内に収まることは呼び出し側の責務（範囲外は未定義動作）。
"""

from __future__ import annotations

from typing import MutableSequence, NamedTuple, Sequence

import numpy as np


class Color(NamedTuple):
    """8bit RGBA（プリマルチプライなし）。"""

    r: int
    g: int
    b: int
    a: int


def get_pixel(frame: Sequence[int], width: int, x: int, y: int) -> Color:
    """(x, y) の 4 バイトを読み出して `Color` で返す。"""
    idx = (y * width + x) * 4
    return Color(int(frame[idx]), int(frame[idx + 1]), int(frame[idx + 2]), int(frame[idx + 3]))


def put_pixel(frame: MutableSequence[int], width: int, x: int, y: int, color: Sequence[int]) -> None:
    """(x, y) の 4 バイトだけを `color` で上書きする。"""
    idx = (y * width + x) * 4
    frame[idx : idx + 4] = tuple(color)


class PixelBuffer:
    """`width x height` の RGBA8 バッファ（0 初期化）。

    `frame` は 1 次元 `np.uint8` 配列で、`get_pixel`/`put_pixel` にそのまま渡せる。
    """

    def __init__(self, width: int, height: int):
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"buffer size must be positive, got: {(width, height)}")
        self.width = int(width)
        self.height = int(height)
        self.frame: np.ndarray = np.zeros(self.width * self.height * 4, dtype=np.uint8)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def get_pixel(self, x: int, y: int) -> Color:
        return get_pixel(self.frame, self.width, x, y)

    def put_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        put_pixel(self.frame, self.width, x, y, color)

    def fill(self, color: Sequence[int]) -> None:
        """全ピクセルを `color` で塗りつぶす。"""
        self.as_array()[:, :] = np.asarray(tuple(color), dtype=np.uint8)

    def resize(self, width: int, height: int) -> None:
        """サイズを変更する。内容は破棄され 0 で再確保される。"""
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"buffer size must be positive, got: {(width, height)}")
        self.width = int(width)
        self.height = int(height)
        self.frame = np.zeros(self.width * self.height * 4, dtype=np.uint8)

    def as_array(self) -> np.ndarray:
        """`(height, width, 4)` のビュー（コピーなし）を返す。"""
        return self.frame.reshape(self.height, self.width, 4)

    def tobytes(self) -> bytes:
        return self.frame.tobytes()


__all__ = ["Color", "get_pixel", "put_pixel", "PixelBuffer"]
