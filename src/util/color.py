"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex, RGBA 0–1, RGBA 0–255）を 8bit RGBA へ一元化。
なぜ: 設定ファイル（背景色）とユーザ API で同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence


def _clamp_u8(x: int) -> int:
    return 0 if x < 0 else 255 if x > 255 else int(x)


def parse_hex_color_str(s: str) -> tuple[int, int, int, int]:
    """Hex 文字列から RGBA(0–255) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。アルファ省略時は 255。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r, g, b, a)


def _as_sequence(value: object) -> Sequence[float | int] | None:
    if isinstance(value, (list, tuple)):
        return value  # type: ignore[return-value]
    return None


def to_rgba8(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) の int 4 つ組へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a])
    - 要素がすべて int なら 0–255 とみなす（範囲外はクランプ）。
    - float を含む場合は 0–1 とみなして 255 倍・丸めする。
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    seq = _as_sequence(value)
    if seq is None:
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    if any(isinstance(v, bool) for v in seq):
        raise ValueError(f"invalid color tuple/list: {value!r}")
    if all(isinstance(v, int) for v in seq):
        chans = [_clamp_u8(int(v)) for v in seq]
        if len(chans) == 3:
            chans.append(255)
        r, g, b, a = chans
        return (r, g, b, a)
    try:
        fchans = [float(v) for v in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(fchans) == 3:
        fchans.append(1.0)
    r, g, b, a = (_clamp_u8(int(round(v * 255.0))) for v in fchans)
    return (r, g, b, a)


def to_unit_rgba(value: object) -> tuple[float, float, float, float]:
    """色を RGBA(0–1) へ変換する（`glClearColor` 用）。"""
    r, g, b, a = to_rgba8(value)
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


__all__ = [
    "parse_hex_color_str",
    "to_rgba8",
    "to_unit_rgba",
]
