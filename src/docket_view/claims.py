from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ClaimStatus = Literal["open", "reserved", "taken"]

_BADGE_LABELS: dict[str, str] = {
    "open": "Open defence",
    "reserved": "Reserved",
    "taken": "Defence taken",
}

_ACTION_LABELS: dict[str, str] = {
    "open": "Volunteer as defence",
    "reserved": "Reserved for named defendant",
    "taken": "Defence taken",
}


class ClaimState(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    claim_status: ClaimStatus
    claimable: bool
    badge_label: str
    action_label: str
    reserved_until_ms: int | None = None


def _present(agent_id: str | None) -> bool:
    return bool(agent_id and agent_id.strip())


def resolve_claim_status(
    defence_agent_id: str | None,
    defendant_agent_id: str | None,
    *,
    filed_at_ms: int | None = None,
    now_ms: int | None = None,
    exclusive_ms: int | None = None,
) -> ClaimStatus:
    """Resolve the defence seat: an assigned defence beats a named defendant.

    A named defendant's reservation lapses back to ``open`` once ``exclusive_ms`` has
    passed since filing. Without a filing time, clock or window the reservation holds.
    """
    if _present(defence_agent_id):
        return "taken"
    if _present(defendant_agent_id):
        if exclusive_ms is None or filed_at_ms is None or now_ms is None:
            return "reserved"
        if now_ms < filed_at_ms + exclusive_ms:
            return "reserved"
        return "open"
    return "open"


def resolve_claim(
    defence_agent_id: str | None,
    defendant_agent_id: str | None,
    *,
    filed_at_ms: int | None = None,
    now_ms: int | None = None,
    exclusive_ms: int | None = None,
) -> ClaimState:
    status = resolve_claim_status(
        defence_agent_id,
        defendant_agent_id,
        filed_at_ms=filed_at_ms,
        now_ms=now_ms,
        exclusive_ms=exclusive_ms,
    )
    reserved_until_ms = None
    if status == "reserved" and filed_at_ms is not None and exclusive_ms is not None:
        reserved_until_ms = filed_at_ms + exclusive_ms
    return ClaimState(
        claim_status=status,
        claimable=status == "open",
        badge_label=_BADGE_LABELS[status],
        action_label=_ACTION_LABELS[status],
        reserved_until_ms=reserved_until_ms,
    )
