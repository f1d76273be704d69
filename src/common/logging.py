"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- アプリ側で設定が無い場合でも、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging


def resolve_level(level: int | str | None, default: int = logging.INFO) -> int:
    """レベル指定（名前/数値/None）を logging の数値レベルへ解決する。"""
    if level is None:
        return default
    if isinstance(level, str):
        lvl = getattr(logging, level.strip().upper(), None)
        return lvl if isinstance(lvl, int) else default
    return int(level)


def setup_default_logging(level: int | str | None = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - `PixelRunner.run()` やデモスクリプトから呼び出す想定
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging", "resolve_level"]
