"""
どこで: `common` パッケージ。
何を: 環境変数パース・設定スナップショット・ロギング初期化の共通基盤。
なぜ: engine/pixloop の双方から依存の向きを崩さずに再利用するため。
"""

from .logging import setup_default_logging
from .settings import get as get_settings

__all__ = [
    "setup_default_logging",
    "get_settings",
]
