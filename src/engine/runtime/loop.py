"""
どこで: `engine.runtime` のアプリケーションループ。
何を: 入力イベント → KeyStateTracker → `on_tick` → （必要時）`draw` → 提示 を 1 反復ぶん進める
      `LoopOrchestrator`。
なぜ: 時間管理・入力集約・終了判定をフレームワーク側で持ち、ユーザは 3 コールバックだけ書けば済むようにするため。

1 反復（`tick(dt)`）の流れ:
    1) サーフェスのイベントを排出。キーは tracker へ、クローズ/ESC はクローズ要求、リサイズは再描画要求。
    2) クローズ要求があれば状態に関わらず閉じて終了。
    3) RUNNING 以外（REMAIN 待機中/CLOSED）ならここで戻る（クローズ監視のみ継続）。
    4) 期限到来した tick をすべて順に処理。各 tick で `sample_for_tick` → `on_tick` → `done` → 判定。
       `always_tick` が False で入力が無く直前の tick も変化なしを返していれば tick をスキップし蓄積時間を捨てる。
    5) 再描画要求（最後の tick の戻り値・初回・リサイズ）または `always_tick` なら `draw` → `present`。

スレッド:
    単一スレッド・協調的。コールバックはブロックしてはならない。
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from common.settings import get as get_settings
from engine.core.app import GfxApp
from engine.core.events import CloseEvent, InputEvent, KeyEvent, ResizeEvent
from engine.core.keys import KeyStateTracker, LogicalKey
from engine.core.lifecycle import LifecycleAction, LifecycleState, decide, next_state
from engine.core.tick_clock import TickClock
from engine.core.tickable import Tickable

from .surface import PresentationSurface

logger = logging.getLogger(__name__)


class LoopOrchestrator(Tickable):
    """ユーザアプリ・tick 時計・キー集約・提示層を結線する。

    Parameters
    ----------
    app : GfxApp
        ループ存続中はオーケストレータが占有する。
    surface : PresentationSurface
        バッファの所有者。`draw` の間だけバッファを借用する。
    ticks_per_second : int
        固定 tick レート（生成後は不変）。
    always_tick : bool, default False
        True なら入力が無くても毎 tick を処理し、毎反復描画する（物理/アニメーション向け）。
    """

    def __init__(
        self,
        app: GfxApp,
        surface: PresentationSurface,
        ticks_per_second: int,
        *,
        always_tick: bool = False,
    ):
        self._app = app
        self._surface = surface
        self._clock = TickClock(ticks_per_second)
        self._keys = KeyStateTracker()
        self.always_tick = bool(always_tick)
        self._state = LifecycleState.RUNNING
        # 初回フレームは tick 前に 1 度描画する（初回・リサイズ・request_redraw の強制描画）
        self._needs_render = True
        # 直前の tick の戻り値。False ならアイドル判定の対象になる
        self._last_tick_redraw = False
        self._last_perf: float | None = None
        self._trace = get_settings().TRACE_TICKS
        self.ticks_serviced = 0
        self.frames_drawn = 0

    # ---- 状態参照 ----
    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is LifecycleState.RUNNING

    @property
    def closed(self) -> bool:
        return self._state is LifecycleState.CLOSED

    @property
    def clock(self) -> TickClock:
        return self._clock

    @property
    def keys(self) -> KeyStateTracker:
        return self._keys

    # -------- Tickable interface --------
    def tick(self, dt: Optional[float] = None) -> None:
        """プラットフォーム反復 1 回ぶんを処理する。

        `dt` は前回からの経過秒（pyglet は渡してくれる）。None の場合は `perf_counter` で計測する。
        """
        if dt is None:
            now = time.perf_counter()
            dt = 0.0 if self._last_perf is None else now - self._last_perf
            self._last_perf = now

        if self._state is LifecycleState.CLOSED:
            return

        if self._drain_events():
            logger.info("close requested; stopping")
            self._apply(LifecycleAction.CLOSE)
            return

        if self._state is not LifecycleState.RUNNING:
            # REMAIN 待機中: 時間は消費するが user code は呼ばない
            self._clock.reset()
            return

        if not self._service_ticks(dt):
            return

        if self._needs_render or self.always_tick:
            self._draw()

    def request_redraw(self) -> None:
        """次の反復で 1 度描画させる。"""
        self._needs_render = True

    # ---- 内部 ----
    def _drain_events(self) -> bool:
        """イベントを tracker へ流し込み、クローズ要求の有無を返す。"""
        close_requested = False
        events: list[InputEvent] = self._surface.drain_events()
        for ev in events:
            if isinstance(ev, KeyEvent):
                if ev.key is LogicalKey.ESCAPE:
                    if ev.pressed:
                        logger.info("escape pressed")
                        close_requested = True
                    continue
                if ev.pressed:
                    self._keys.on_key_down(ev.key)
                else:
                    self._keys.on_key_up(ev.key)
            elif isinstance(ev, CloseEvent):
                logger.info("the close button was pressed")
                close_requested = True
            elif isinstance(ev, ResizeEvent):
                logger.debug("surface resized to %dx%d", ev.width, ev.height)
                self._needs_render = True
        return close_requested

    def _should_service(self) -> bool:
        return self.always_tick or self._last_tick_redraw or self._keys.has_activity()

    def _service_ticks(self, dt: float) -> bool:
        """期限到来した tick を処理する。ループを閉じた場合は False を返す。"""
        if not self._should_service():
            # アイドル: 蓄積時間を捨て、次のイベントまで user code を呼ばない
            self._clock.advance(dt)
            self._clock.reset()
            return True

        serviced = False
        for _ in self._clock.due_ticks(dt):
            pressed = self._keys.sample_for_tick()
            # 複数 tick が到来した場合は最後の tick の戻り値が次の描画を決める
            self._last_tick_redraw = bool(self._app.on_tick(pressed))
            serviced = True
            self.ticks_serviced += 1
            if self._trace:
                logger.debug(
                    "tick #%d keys=%s redraw=%s",
                    self.ticks_serviced,
                    sorted(k.value for k in pressed),
                    self._last_tick_redraw,
                )

            status = self._app.done()
            action = decide(status, close_requested=False)
            if action is LifecycleAction.CLOSE:
                logger.info("app reported %s; exiting", status.name)
                self._apply(action)
                return False
            if action is LifecycleAction.LINGER:
                logger.info("app reported %s; keeping window open until closed", status.name)
                self._apply(action)
                self._clock.reset()
                # 待機に入る tick の描画要求は最後のフレームとして 1 度だけ反映する
                if self._needs_render or self._last_tick_redraw:
                    self._draw()
                return False
        # 強制描画（初回/リサイズ）は tick の戻り値で打ち消さない
        if serviced and self._last_tick_redraw:
            self._needs_render = True
        return True

    def _draw(self) -> None:
        buf = self._surface.buffer
        self._app.draw(buf.frame, buf.width)
        self._surface.present()
        self._needs_render = False
        self.frames_drawn += 1

    def _apply(self, action: LifecycleAction) -> None:
        prev = self._state
        self._state = next_state(prev, action)
        if self._state is prev:
            return
        logger.info("lifecycle %s -> %s", prev.name, self._state.name)
        if self._state is LifecycleState.CLOSED:
            self._surface.close()


__all__ = ["LoopOrchestrator"]
