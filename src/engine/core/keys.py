"""
どこで: `engine.core` のキー入力集約。
何を: 論理キー `LogicalKey` と、tick 間の押下/解放を集約する `KeyStateTracker` を定義。
なぜ: tick 間隔より短いタップ（押して離す）を取りこぼさずに tick へ渡すため。

モデル:
    held  … 現在物理的に押されているキー
    since … 前回サンプル以降に一瞬でも押されたキー（解放済みも含む）
    tick に渡すのは held ∪ since。渡した後 since のみクリアする。
"""

from __future__ import annotations

from enum import Enum


class LogicalKey(Enum):
    """アプリに意味のある抽象キー（物理スキャンコードからの変換は提示層の責務）。"""

    A = "a"
    Z = "z"
    E = "e"
    Q = "q"
    S = "s"
    D = "d"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"


class KeyStateTracker:
    """押下中集合と「前回サンプル以降」集合の 2 つを保持する。"""

    def __init__(self) -> None:
        self._held: set[LogicalKey] = set()
        self._since_last_sample: set[LogicalKey] = set()

    def on_key_down(self, key: LogicalKey) -> None:
        self._held.add(key)
        self._since_last_sample.add(key)

    def on_key_up(self, key: LogicalKey) -> None:
        # since 側は残す: 次の tick でタップとして見える
        self._held.discard(key)

    def sample_for_tick(self) -> frozenset[LogicalKey]:
        """tick 1 回分のキー集合を返し、`since` をクリアする（`held` は保持）。"""
        keys = frozenset(self._held | self._since_last_sample)
        self._since_last_sample.clear()
        return keys

    def has_activity(self) -> bool:
        """押下中、または未サンプルのタップがあれば True。"""
        return bool(self._held or self._since_last_sample)

    @property
    def held(self) -> frozenset[LogicalKey]:
        return frozenset(self._held)

    def clear(self) -> None:
        self._held.clear()
        self._since_last_sample.clear()


__all__ = ["LogicalKey", "KeyStateTracker"]
