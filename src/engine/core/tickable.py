"""
どこで: `engine.core` の更新インターフェース。
何を: プラットフォーム反復 1 回ぶんの `tick(dt)` を持つ `Tickable` Protocol を定義。
なぜ: pyglet の `clock.schedule_interval` から駆動される対象を一様に扱うため。
"""

from typing import Optional, Protocol


class Tickable(Protocol):
    """プラットフォーム反復 1 回ぶんの処理を行うインターフェース。"""

    def tick(self, dt: Optional[float] = None) -> None:
        """前回呼び出しから `dt` 秒経過したものとして処理する（None なら自前で計測）。"""
