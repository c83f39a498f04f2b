from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from docket_view.countdown import clamp


class VoteView(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    votes_cast: int
    jury_size: int
    ratio: float
    fill_width: str
    copy_label: str


def resolve_votes(case_id: str, authoritative_votes_cast: int, live_overrides: Mapping[str, int] | None) -> int:
    if live_overrides is None:
        return authoritative_votes_cast
    override = live_overrides.get(case_id)
    return authoritative_votes_cast if override is None else override


def vote_ratio(votes_cast: int, jury_size: int) -> float:
    if jury_size <= 0:
        return 0.0
    return clamp(votes_cast / jury_size, 0.0, 1.0)


def build_vote_view(
    case_id: str,
    authoritative_votes_cast: int,
    jury_size: int,
    live_overrides: Mapping[str, int] | None = None,
) -> VoteView:
    votes = resolve_votes(case_id, authoritative_votes_cast, live_overrides)
    ratio = vote_ratio(votes, jury_size)
    return VoteView(
        votes_cast=votes,
        jury_size=jury_size,
        ratio=ratio,
        fill_width=f"{ratio * 100:.1f}%",
        copy_label=f"{votes}/{jury_size} votes cast",
    )
