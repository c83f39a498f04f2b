from __future__ import annotations

import math
from dataclasses import dataclass

GREEN = (0x22, 0xC5, 0x5E)
ORANGE = (0xF9, 0x73, 0x16)
RED = (0xEF, 0x44, 0x44)

DUE_LABEL = "Due"


@dataclass(frozen=True)
class CountdownState:
    remaining_ms: int
    ratio_remaining: float
    ratio_elapsed: float


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def ring_circumference(radius: float) -> float:
    return 2 * math.pi * radius


def compute_countdown_state(now_ms: int, end_at_ms: int, total_ms: int) -> CountdownState:
    if total_ms <= 0:
        # A non-positive window counts as already elapsed.
        return CountdownState(remaining_ms=0, ratio_remaining=0.0, ratio_elapsed=1.0)
    remaining_ms = max(0, end_at_ms - now_ms)
    ratio_remaining = clamp(remaining_ms / total_ms, 0.0, 1.0)
    return CountdownState(
        remaining_ms=remaining_ms,
        ratio_remaining=ratio_remaining,
        ratio_elapsed=1.0 - ratio_remaining,
    )


def format_duration_label(remaining_ms: float) -> str:
    if remaining_ms <= 0:
        return DUE_LABEL
    total_minutes = int(remaining_ms // 60_000)
    hours, minutes = divmod(total_minutes, 60)
    if hours == 0:
        return f"{minutes}m"
    return f"{hours}h {minutes:02d}m"


def compute_ring_dash_offset(circumference: float, ratio_remaining: float) -> float:
    return circumference * (1 - clamp(ratio_remaining, 0.0, 1.0))


def _lerp_channel(a: int, b: int, t: float) -> int:
    # Half-up, not banker's rounding.
    value = math.floor(a + (b - a) * t + 0.5)
    return int(clamp(value, 0, 255))


def ring_colour_from_ratio(ratio: float) -> str:
    """Hex colour from green (ratio 1) through orange (0.5) to red (0)."""
    r = clamp(ratio, 0.0, 1.0)
    if r >= 0.5:
        t = (r - 0.5) * 2
        low, high = ORANGE, GREEN
    else:
        t = r * 2
        low, high = RED, ORANGE
    channels = [_lerp_channel(a, b, t) for a, b in zip(low, high)]
    return "#" + "".join(f"{c:02x}" for c in channels)
