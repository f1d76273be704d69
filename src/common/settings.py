"""
どこで: `common.settings`
何を: `PXL_*` 環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_optional_bool, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str | None = None
    TRACE_TICKS: bool = False

    # Loop
    ALWAYS_TICK: bool | None = None
    TICKS_PER_SECOND: int | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `PXL_LOG_LEVEL`: ロギングレベル名（未設定なら設定ファイル/既定に委ねる）。
    - `PXL_TRACE_TICKS`: 1 tick ごとの DEBUG トレースを出す。
    - `PXL_ALWAYS_TICK`: `always_tick` の既定を上書き（未設定なら None）。
    - `PXL_TICKS_PER_SECOND`: tick レートの既定を上書き（1 未満は 1 に丸める）。
    """
    level = env_str("PXL_LOG_LEVEL")
    _settings.LOG_LEVEL = level.upper() if level is not None else None
    _settings.TRACE_TICKS = env_bool("PXL_TRACE_TICKS", False)
    _settings.ALWAYS_TICK = env_optional_bool("PXL_ALWAYS_TICK")
    _settings.TICKS_PER_SECOND = env_int("PXL_TICKS_PER_SECOND", None, min_value=1)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
