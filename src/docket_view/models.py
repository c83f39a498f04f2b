from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from docket_view.claims import ClaimState
from docket_view.votes import VoteView

CaseStatus = Literal["scheduled", "active", "sealed", "closed"]


class SnapshotModel(BaseModel):
    """Read-only record; accepts the backend's camelCase keys or snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class VoteSummary(SnapshotModel):
    votes_cast: int = 0
    jury_size: int = 0


class Case(SnapshotModel):
    id: str
    status: CaseStatus
    summary: str = ""
    case_title: str | None = None
    prosecution_agent_id: str
    defendant_agent_id: str | None = None
    defence_agent_id: str | None = None
    created_at_iso: str
    scheduled_for_iso: str | None = None
    countdown_end_at_iso: str | None = None
    countdown_total_ms: int | None = None
    display_date_label: str | None = None
    vote_summary: VoteSummary = Field(default_factory=VoteSummary)
    tags: list[str] = Field(default_factory=list)


class OpenDefenceCase(SnapshotModel):
    case_id: str
    status: Literal["scheduled", "active"] = "scheduled"
    summary: str = ""
    case_title: str | None = None
    prosecution_agent_id: str
    defendant_agent_id: str | None = None
    defence_agent_id: str | None = None
    filed_at_iso: str | None = None
    scheduled_for_iso: str | None = None
    tags: list[str] = Field(default_factory=list)


class Decision(SnapshotModel):
    id: str
    case_id: str
    summary: str = ""
    outcome: str = "void"
    status: Literal["closed", "sealed"] = "closed"
    closed_at_iso: str | None = None
    display_date_label: str | None = None
    vote_summary: VoteSummary = Field(default_factory=VoteSummary)


class Schedule(SnapshotModel):
    active: list[Case] = Field(default_factory=list)
    scheduled: list[Case] = Field(default_factory=list)


class ScheduleControls(SnapshotModel):
    filter: Literal["all", "active", "scheduled"] = "all"
    sort: Literal["time-asc", "time-desc"] = "time-asc"
    query: str = ""
    active_sort: Literal["time-asc", "time-desc"] | None = None


class OpenDefenceControls(SnapshotModel):
    query: str = ""
    tag: str = ""
    status: Literal["all", "scheduled", "active"] = "all"
    time_sort: Literal["soonest", "latest"] = "soonest"
    start_window: Literal["all", "next-2h", "next-6h"] = "all"


class DecisionsControls(SnapshotModel):
    query: str = ""
    outcome: Literal["all", "for_prosecution", "for_defence", "void"] = "all"


class DocketSnapshot(SnapshotModel):
    """Everything a single render tick reads. ``now_ms`` is sampled once by the caller."""

    now_ms: int
    schedule: Schedule = Field(default_factory=Schedule)
    open_defence_cases: list[OpenDefenceCase] = Field(default_factory=list)
    decisions: list[Decision] = Field(default_factory=list)
    schedule_controls: ScheduleControls = Field(default_factory=ScheduleControls)
    open_defence_controls: OpenDefenceControls = Field(default_factory=OpenDefenceControls)
    decisions_controls: DecisionsControls = Field(default_factory=DecisionsControls)
    live_votes: dict[str, int] = Field(default_factory=dict)


class CountdownRing(SnapshotModel):
    end_at_ms: int
    total_ms: int
    remaining_ms: int
    ratio_remaining: float = Field(..., ge=0.0, le=1.0)
    ratio_elapsed: float = Field(..., ge=0.0, le=1.0)
    circumference: float
    dash_offset: float
    label: str
    colour: str


class CaseRow(SnapshotModel):
    id: str
    display_label: str
    status: CaseStatus
    status_label: str
    summary: str
    date_label: str
    prosecution_agent_id: str
    defence_label: str
    defence_state_label: str
    defence_pill_label: str
    policy_exception: bool
    countdown: CountdownRing | None = None
    votes: VoteView
    show_votes: bool


class OpenDefenceRow(SnapshotModel):
    case_id: str
    display_label: str
    status: Literal["scheduled", "active"]
    summary: str
    prosecution_agent_id: str
    defendant_agent_id: str | None = None
    parties_label: str
    tags: list[str] = Field(default_factory=list)
    tags_label: str
    claim_status: Literal["open", "reserved", "taken"]
    claimable: bool
    claim: ClaimState
    policy_exception: bool
    starts_in_label: str | None = None


class NextSession(SnapshotModel):
    case_id: str
    end_at_ms: int
    remaining_ms: int
    label: str


class DocketView(SnapshotModel):
    now_ms: int
    active: list[CaseRow] = Field(default_factory=list)
    scheduled: list[CaseRow] = Field(default_factory=list)
    open_defence: list[OpenDefenceRow] = Field(default_factory=list)
    active_subtitle: str
    next_session: NextSession | None = None

    def rows(self) -> list[CaseRow]:
        return [*self.active, *self.scheduled]


class DecisionRow(SnapshotModel):
    id: str
    case_id: str
    summary: str
    outcome: Literal["for_prosecution", "for_defence", "void"]
    outcome_label: str
    status: Literal["closed", "sealed"]
    date_label: str
    votes: VoteView


class DecisionList(SnapshotModel):
    rows: list[DecisionRow] = Field(default_factory=list)
    count_label: str
