from __future__ import annotations

from docket_view.config import DAY_MS
from docket_view.timeutil import parse_iso_ms

POLICY_WINDOW_MS = 30 * DAY_MS

POLICY_BADGE_LABEL = "Policy exception"
POLICY_BADGE_TITLE = (
    "Hearing date is outside the standard 7-30 day scheduling window. Policy exception active."
)


def is_out_of_policy_ms(scheduled_ms: int | None, now_ms: int, *, window_ms: int = POLICY_WINDOW_MS) -> bool:
    if scheduled_ms is None:
        return False
    return scheduled_ms - now_ms > window_ms


def is_out_of_policy_window(
    scheduled_for_iso: str | None,
    now_ms: int,
    *,
    window_ms: int = POLICY_WINDOW_MS,
) -> bool:
    """True when the hearing is scheduled strictly more than the policy window ahead."""
    return is_out_of_policy_ms(parse_iso_ms(scheduled_for_iso), now_ms, window_ms=window_ms)
