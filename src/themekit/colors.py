"""Deterministic colours for tags and categories."""

from __future__ import annotations

from typing import Sequence

# Tailwind 500 shades, red through rose.
PALETTE: tuple[str, ...] = (
    "#ef4444",
    "#f97316",
    "#f59e0b",
    "#eab308",
    "#84cc16",
    "#22c55e",
    "#10b981",
    "#14b8a6",
    "#06b6d4",
    "#0ea5e9",
    "#3b82f6",
    "#6366f1",
    "#8b5cf6",
    "#a855f7",
    "#d946ef",
    "#ec4899",
    "#f43f5e",
)


def random_color(text: str | None, palette: Sequence[str] | None = None) -> str:
    """Pick a palette colour from a hash of ``text``.

    Despite the name the choice is stable: the same text always maps to the
    same colour, while different texts may share one.
    """
    colors = palette or PALETTE
    return colors[abs(string_hash(text or "")) % len(colors)]


def string_hash(text: str) -> int:
    """Polynomial ``hash * 31 + code`` over UTF-16 code units.

    The shift operates on the 32-bit wrapped hash while the subtraction uses
    the full value.
    """
    encoded = text.encode("utf-16-le")
    value = 0
    for index in range(0, len(encoded), 2):
        code = int.from_bytes(encoded[index : index + 2], "little")
        value = code + (_to_int32(_to_int32(value) << 5) - value)
    return value


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value
