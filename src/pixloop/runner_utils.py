"""
どこで: `pixloop.runner_utils`（純粋関数/小ヘルパ）。
何を: tick レート・always_tick・ウィンドウサイズ/タイトル/背景色・ログレベルの解決を提供。
なぜ: `pixloop.runner` を薄く保ち、「明示引数 > 環境変数 > 設定ファイル > 既定」の優先順をテスト可能にするため。
"""

from __future__ import annotations

from typing import Any, Mapping

from common.settings import get as get_settings
from util.color import to_rgba8
from util.utils import config_section

DEFAULT_TICKS_PER_SECOND = 60
DEFAULT_TITLE = "Box"
DEFAULT_BACKGROUND = (0, 0, 255, 255)


def resolve_ticks_per_second(
    requested: int | None, cfg: Mapping[str, Any], *, default: int = DEFAULT_TICKS_PER_SECOND
) -> int:
    """tick レートを解決して 1 以上の int を返す。

    - 明示指定は検証して優先（数値化できない/<=0 は `ValueError`）。
    - 未指定なら環境変数 `PXL_TICKS_PER_SECOND`、次に `loop.ticks_per_second`、最後に既定値。
    """
    if requested is not None:
        try:
            v = int(requested)
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid ticks_per_second: {requested!r}") from e
        if v <= 0:
            raise ValueError(f"ticks_per_second must be > 0, got {requested}")
        return v
    env_v = get_settings().TICKS_PER_SECOND
    if env_v is not None:
        return max(1, int(env_v))
    raw = config_section(dict(cfg), "loop").get("ticks_per_second", default)
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        return max(1, int(default))


def resolve_always_tick(requested: bool | None, cfg: Mapping[str, Any]) -> bool:
    """always_tick を解決する（明示 > `PXL_ALWAYS_TICK` > `loop.always_tick` > False）。"""
    if requested is not None:
        return bool(requested)
    env_v = get_settings().ALWAYS_TICK
    if env_v is not None:
        return env_v
    return bool(config_section(dict(cfg), "loop").get("always_tick", False))


def resolve_window_size(size: tuple[int, int]) -> tuple[int, int]:
    """ウィンドウサイズ `(width, height)` を検証して返す。"""
    try:
        w, h = int(size[0]), int(size[1])
    except Exception as e:  # noqa: BLE001 - 入力検証のため簡潔に
        raise ValueError(f"invalid window size: {size!r}") from e
    if w <= 0 or h <= 0:
        raise ValueError(f"window size must be positive, got: {(w, h)}")
    return w, h


def resolve_title(requested: str | None, cfg: Mapping[str, Any]) -> str:
    if requested is not None:
        return str(requested)
    title = config_section(dict(cfg), "window").get("title")
    return str(title) if isinstance(title, str) and title.strip() else DEFAULT_TITLE


def resolve_background(requested: object | None, cfg: Mapping[str, Any]) -> tuple[int, int, int, int]:
    """背景色を RGBA8 で返す。設定値が不正なら既定色へフォールバック（明示指定の不正は例外）。"""
    if requested is not None:
        return to_rgba8(requested)
    cfg_bg = config_section(dict(cfg), "window").get("background_color")
    if cfg_bg is None:
        return DEFAULT_BACKGROUND
    try:
        return to_rgba8(cfg_bg)
    except ValueError:
        return DEFAULT_BACKGROUND


def resolve_log_level(cfg: Mapping[str, Any]) -> str:
    """ログレベル名（`PXL_LOG_LEVEL` > `logging.level` > INFO）。"""
    env_v = get_settings().LOG_LEVEL
    if env_v:
        return env_v
    level = config_section(dict(cfg), "logging").get("level")
    return str(level).upper() if isinstance(level, str) and level.strip() else "INFO"


__all__ = [
    "resolve_ticks_per_second",
    "resolve_always_tick",
    "resolve_window_size",
    "resolve_title",
    "resolve_background",
    "resolve_log_level",
]
