"""Greedy word wrapping against an estimated width."""

from __future__ import annotations


def estimate_width(text: str, avg_char_width: float) -> float:
    """Estimated rendered width of *text* at a fixed per-character advance."""
    return len(text) * avg_char_width


def wrap(text: str, max_width_units: float, avg_char_width_units: float) -> list[str]:
    """Greedily wrap *text* into lines no wider than *max_width_units*.

    Tokens are whitespace-separated words. A token that alone exceeds the
    width is emitted on its own line and never split, so the only lines
    allowed to overflow are single over-long tokens. Whitespace runs
    collapse to a single space; empty input yields no lines.
    """
    lines: list[str] = []
    current = ""
    for token in text.split():
        if not current:
            current = token
            continue
        if (len(current) + 1 + len(token)) * avg_char_width_units <= max_width_units:
            current = f"{current} {token}"
        else:
            lines.append(current)
            current = token
    if current:
        lines.append(current)
    return lines
