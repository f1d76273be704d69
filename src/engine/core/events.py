"""
どこで: `engine.core` の入力イベント型。
何を: 提示層からループへ渡すイベント（キー押下/解放・クローズ要求・リサイズ）を表す。
なぜ: pyglet 等の具体的なイベント形式からループ本体を切り離し、テストで偽サーフェスを使えるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .keys import LogicalKey


@dataclass(frozen=True)
class KeyEvent:
    key: LogicalKey
    pressed: bool


@dataclass(frozen=True)
class CloseEvent:
    """クローズボタン等によるクローズ要求。"""


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


InputEvent = Union[KeyEvent, CloseEvent, ResizeEvent]


__all__ = ["KeyEvent", "CloseEvent", "ResizeEvent", "InputEvent"]
