"""
どこで: `pixloop.runner`（実行ランナー）。
何を: ユーザアプリ（`on_tick`/`draw`/`done`）と pyglet ウィンドウを結線し、クローズまでループを回す。
なぜ: 利用者が 3 コールバックと「サイズ・tick レート」だけでリアルタイム描画アプリを書けるようにするため。

実行フロー（概要）:
1) 設定解決: tick レート/always_tick/タイトル/背景色/ログレベルを
   「明示引数 > 環境変数 > 設定ファイル > 既定」で確定。
2) ロギング: `common.logging.setup_default_logging` を 1 度だけ適用。
3) ウィンドウ: `PixelWindow` を生成（失敗時は `PresentationError`。ループは開始しない）。
4) ループ: `LoopOrchestrator.tick` を `pyglet.clock.schedule_interval` で tick 間隔ごとに駆動。
5) 終了: ライフサイクルが CLOSED になるとウィンドウを閉じ `pyglet.app` を止める。

例:
    from pixloop import PixelRunner

    runner = PixelRunner(MovingPixel(50, 100), (500, 500), 60)
    runner.set_always_tick(False)
    runner.run()

注意/制限:
- ヘッドレス/仮想環境では pyglet の初期化に失敗する場合がある（`PresentationError`）。
- コールバック内の例外は `run()` からそのまま伝播する（ウィンドウは閉じる）。
"""

from __future__ import annotations

import logging

from common.logging import setup_default_logging
from engine.core.app import GfxApp
from engine.runtime.loop import LoopOrchestrator
from util.utils import load_config

from .runner_utils import (
    resolve_always_tick,
    resolve_background,
    resolve_log_level,
    resolve_ticks_per_second,
    resolve_title,
    resolve_window_size,
)

logger = logging.getLogger(__name__)


class PresentationError(RuntimeError):
    """ウィンドウ/サーフェス生成の失敗（環境起因・再試行なし）。"""


class PixelRunner:
    """アプリ・ウィンドウサイズ・tick レートを受け取り、`run()` で実行する。

    Parameters
    ----------
    app : GfxApp
        `on_tick`/`draw`/`done` を持つオブジェクト。ループ中はランナーが占有する。
    size : tuple[int, int]
        ウィンドウ（= バッファ）サイズ `(width, height)` [px]。
    ticks_per_second : int | None
        固定 tick レート。None で環境変数/設定ファイルから解決（既定 60）。
    title : str | None
        ウィンドウタイトル。None で設定/既定 "Box"。
    background : object | None
        バッファ外の余白色（Hex / 0..1 / 0..255）。None で設定/既定の青。
    """

    def __init__(
        self,
        app: GfxApp,
        size: tuple[int, int],
        ticks_per_second: int | None = None,
        *,
        title: str | None = None,
        background: object | None = None,
    ):
        self._cfg = load_config() or {}
        self._app = app
        self.width, self.height = resolve_window_size(size)
        self.ticks_per_second = resolve_ticks_per_second(ticks_per_second, self._cfg)
        self.title = resolve_title(title, self._cfg)
        self.background = resolve_background(background, self._cfg)
        self._always_tick: bool | None = None
        self._used = False
        self.orchestrator: LoopOrchestrator | None = None

    def set_always_tick(self, val: bool) -> None:
        """入力が無くても毎 tick を処理するなら True（物理/アニメーション向け）。

        既定は False（性能優先）。未指定時は環境変数/設定ファイルに従う。
        """
        self._always_tick = bool(val)

    @property
    def always_tick(self) -> bool:
        return resolve_always_tick(self._always_tick, self._cfg)

    def run(self, *, init_only: bool = False) -> None:
        """ライフサイクルが閉じるまでブロックする。

        `init_only=True` の場合は設定解決とロギング初期化だけ行い、pyglet を import せずに戻る。

        Raises
        ------
        PresentationError
            ウィンドウ生成に失敗した場合（ループは開始しない）。
        """
        setup_default_logging(resolve_log_level(self._cfg))
        always_tick = self.always_tick
        if init_only:
            return None
        if self._used:
            raise RuntimeError("PixelRunner.run() can only be called once")
        self._used = True

        # 遅延インポート（ヘッドレス環境での import/ウィンドウ生成を避ける）
        import pyglet

        window = self._create_window()
        orchestrator = LoopOrchestrator(
            self._app, window, self.ticks_per_second, always_tick=always_tick
        )
        self.orchestrator = orchestrator
        interval = orchestrator.clock.tick_interval
        logger.info(
            "starting loop: %dx%d @ %d ticks/s (always_tick=%s)",
            self.width,
            self.height,
            self.ticks_per_second,
            always_tick,
        )
        pyglet.clock.schedule_interval(orchestrator.tick, interval)
        try:
            pyglet.app.run(interval)
        finally:
            pyglet.clock.unschedule(orchestrator.tick)
            window.close()
        logger.info("loop finished (%s)", orchestrator.state.name)
        return None

    def _create_window(self):  # type: ignore[no-untyped-def]
        logger.info("creating window %dx%d", self.width, self.height)
        try:
            from engine.core.render_window import PixelWindow

            return PixelWindow(
                self.width, self.height, caption=self.title, bg_color=self.background
            )
        except Exception as e:  # pyglet の各種例外（ディスプレイ無し/Config 不一致等）
            logger.error("failed to create window: %s", e)
            raise PresentationError(f"failed to create window: {e}") from e


def run(
    app: GfxApp,
    size: tuple[int, int] = (500, 500),
    ticks_per_second: int | None = None,
    *,
    always_tick: bool | None = None,
    title: str | None = None,
    background: object | None = None,
    init_only: bool = False,
) -> None:
    """`PixelRunner` の簡易エントリ。"""
    runner = PixelRunner(app, size, ticks_per_second, title=title, background=background)
    if always_tick is not None:
        runner.set_always_tick(always_tick)
    runner.run(init_only=init_only)


__all__ = ["PixelRunner", "PresentationError", "run"]
