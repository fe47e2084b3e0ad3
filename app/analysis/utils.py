from __future__ import annotations

from collections.abc import Iterable


def unique_in_order(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        output.append(item)
    return output


def word_count(text: str) -> int:
    return len(text.split())


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; bucket sums land on .25/.5/.75.
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)
