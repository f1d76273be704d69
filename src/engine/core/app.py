"""
どこで: `engine.core` のユーザアプリ契約。
何を: ユーザが実装する 3 つのコールバック（`on_tick`/`draw`/`done`）を `GfxApp` Protocol で定義。
なぜ: 継承階層を要求せず、3 メソッドを持つ任意のオブジェクトをループに渡せるようにするため。
"""

from __future__ import annotations

from typing import MutableSequence, Protocol

from .keys import LogicalKey
from .lifecycle import DoneStatus


class GfxApp(Protocol):
    def on_tick(self, pressed_keys: frozenset[LogicalKey]) -> bool:
        """tick ごとに現在のキー集合を受け取る。True を返すと描画を要求する。

        tick 中に離されたキーも、この呼び出しでは押されたものとして含まれる。
        """
        ...

    def draw(self, frame: MutableSequence[int], width: int) -> None:
        """描画前に RGBA バッファを書き換える（戻り値なし）。"""
        ...

    def done(self) -> DoneStatus:
        """アプリが完了したか、ウィンドウを残すか閉じるかを返す（副作用なし）。

        一度きりの描画なら `DoneStatus.REMAIN` を返すと結果が画面に残る。
        """
        ...


__all__ = ["GfxApp"]
