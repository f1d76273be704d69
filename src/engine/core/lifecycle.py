"""
どこで: `engine.core` のアプリ終了判定。
何を: ユーザの `done()` が返す `DoneStatus` と外部のクローズ要求から、
      継続/待機/終了を決める純関数 `decide` と状態遷移 `next_state`。
なぜ: 「結果を画面に残したまま止まる」と「即座に閉じる」を明示的な状態機械で扱うため。

決定表:
    NOT_DONE + クローズなし → CONTINUE
    NOT_DONE + クローズあり → CLOSE
    REMAIN   + クローズなし → LINGER（tick/draw を止め、ウィンドウは残す）
    REMAIN   + クローズあり → CLOSE
    EXIT     + （いずれも） → CLOSE
"""

from __future__ import annotations

from enum import Enum


class DoneStatus(Enum):
    """アプリが 1 tick ごとに返す終了シグナル。"""

    NOT_DONE = "not_done"
    """継続する。"""
    REMAIN = "remain"
    """アプリは完了したが、結果を表示したままクローズ要求を待つ。"""
    EXIT = "exit"
    """即座に終了してウィンドウを閉じる。"""


class LifecycleAction(Enum):
    CONTINUE = "continue"
    LINGER = "linger"
    CLOSE = "close"


class LifecycleState(Enum):
    RUNNING = "running"
    WAITING_FOR_CLOSE = "waiting_for_close"
    CLOSED = "closed"


def decide(status: DoneStatus, close_requested: bool) -> LifecycleAction:
    if status is DoneStatus.EXIT or close_requested:
        return LifecycleAction.CLOSE
    if status is DoneStatus.REMAIN:
        return LifecycleAction.LINGER
    return LifecycleAction.CONTINUE


def next_state(state: LifecycleState, action: LifecycleAction) -> LifecycleState:
    """`action` を適用した次状態を返す。CLOSED は終端。"""
    if state is LifecycleState.CLOSED or action is LifecycleAction.CLOSE:
        return LifecycleState.CLOSED
    if action is LifecycleAction.LINGER:
        return LifecycleState.WAITING_FOR_CLOSE
    return state


__all__ = ["DoneStatus", "LifecycleAction", "LifecycleState", "decide", "next_state"]
