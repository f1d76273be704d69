"""
どこで: `engine.core` の固定レート tick スケジューラ。
何を: 経過時間を蓄積し、固定間隔 `tick_interval` ごとの tick 境界列へ変換する `TickClock`。
なぜ: 描画（リフレッシュ）から状態更新レートを切り離し、入力解像度を落とさないため。

実装メモ:
    時間は整数ナノ秒で保持する。浮動小数の引き算を繰り返すと
    「ちょうど N * tick_interval 進めたのに N-1 回しか発火しない」誤差が出るため。
"""

from __future__ import annotations

from typing import Iterator

_NANOS_PER_SECOND = 1_000_000_000


def hz_to_nanosec_period(hz: int) -> int:
    """周波数 [Hz] を周期 [ns] へ変換する（切り捨て）。

    例: 60 → 16_666_666, 1 → 1_000_000_000
    """
    if int(hz) <= 0:
        raise ValueError(f"ticks_per_second must be > 0, got {hz}")
    return int(1.0 / int(hz) * _NANOS_PER_SECOND)


def _seconds_to_nanos(seconds: float) -> int:
    return int(round(float(seconds) * _NANOS_PER_SECOND))


class TickClock:
    """蓄積時間と固定 tick 間隔を持つ時計。生成後に間隔は変更しない。"""

    def __init__(self, ticks_per_second: int):
        self._ticks_per_second = int(ticks_per_second)
        self._period_ns = hz_to_nanosec_period(ticks_per_second)
        self._accumulated_ns = 0

    @property
    def ticks_per_second(self) -> int:
        return self._ticks_per_second

    @property
    def tick_interval(self) -> float:
        """tick 間隔 [秒]（`1 / ticks_per_second` を ns 精度に丸めた値）。"""
        return self._period_ns / _NANOS_PER_SECOND

    @property
    def accumulated(self) -> float:
        """未消費の蓄積時間 [秒]。"""
        return self._accumulated_ns / _NANOS_PER_SECOND

    def advance(self, elapsed: float) -> None:
        """前回ポーリングからの経過時間 [秒] を加算する（負値は無視）。"""
        ns = _seconds_to_nanos(elapsed)
        if ns > 0:
            self._accumulated_ns += ns

    def poll(self) -> bool:
        """tick が 1 回ぶん期限到来していれば消費して True を返す。"""
        if self._accumulated_ns >= self._period_ns:
            self._accumulated_ns -= self._period_ns
            return True
        return False

    def due_ticks(self, elapsed: float) -> Iterator[int]:
        """`elapsed` を加算し、期限到来した tick ごとに通し番号を 1 回ずつ返す。

        複数到来しても 1 回にまとめない（実時間で発火した場合と同じ順序・回数）。
        """
        self.advance(elapsed)
        n = 0
        while self.poll():
            yield n
            n += 1

    def reset(self) -> None:
        """蓄積時間を捨てる（アイドル中にスキップした tick の追いつき暴走を防ぐ）。"""
        self._accumulated_ns = 0


__all__ = ["TickClock", "hz_to_nanosec_period"]
