"""Filter, sort and row composition for the public docket.

The snapshot is never mutated: each call normalizes the input collections, selects
and orders the records, then assembles one row view model per record.
"""

from __future__ import annotations

import logging
from typing import Iterable, Literal, Mapping, Sequence

from docket_view.claims import resolve_claim, resolve_claim_status
from docket_view.config import Config
from docket_view.countdown import (
    compute_countdown_state,
    compute_ring_dash_offset,
    format_duration_label,
    ring_circumference,
    ring_colour_from_ratio,
)
from docket_view.models import (
    CaseRow,
    CountdownRing,
    DocketSnapshot,
    DocketView,
    NextSession,
    OpenDefenceControls,
    OpenDefenceRow,
    ScheduleControls,
)
from docket_view.normalize import (
    OPEN_DEFENCE_LABEL,
    CaseRecord,
    OpenDefenceRecord,
    normalize_cases,
    normalize_open_defence_cases,
)
from docket_view.policy_window import is_out_of_policy_ms
from docket_view.timeutil import format_dashboard_date_label
from docket_view.votes import build_vote_view

logger = logging.getLogger(__name__)

ScheduleSort = Literal["time-asc", "time-desc"]
TimeSort = Literal["soonest", "latest"]

DATE_PENDING_LABEL = "Date pending"

_STATUS_LABELS = {
    "scheduled": "Scheduled",
    "active": "Active",
    "sealed": "Sealed",
    "closed": "Closed",
}

_DEFENCE_STATE_LABELS = {
    "taken": "Defence taken",
    "reserved": "Invited",
    "open": OPEN_DEFENCE_LABEL,
}

_DEFENCE_PILL_LABELS = {
    "taken": "Appointed",
    "reserved": "Defence served",
    "open": "Open to defence",
}


def matches_query(search_text: str, query: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return needle in search_text


def matches_tag(tags: Iterable[str], tag: str) -> bool:
    needle = tag.strip().lower()
    if not needle:
        return True
    return any(needle in t.lower() for t in tags)


def in_start_window(scheduled_ms: int | None, now_ms: int, window: str, config: Config | None = None) -> bool:
    if window == "all":
        return True
    cfg = config or Config()
    bound_ms = cfg.windows.bound_ms(window)
    if bound_ms is None:
        logger.debug("Unknown start window %r; passing everything", window)
        return True
    if scheduled_ms is None:
        return False
    delta_ms = scheduled_ms - now_ms
    if delta_ms < 0:
        return False
    return delta_ms <= bound_ms


def _split_by_time(records: Sequence, attr: str) -> tuple[list, list]:
    timed = [r for r in records if getattr(r, attr) is not None]
    untimed = [r for r in records if getattr(r, attr) is None]
    return timed, untimed


def sort_case_records(records: Sequence[CaseRecord], sort: ScheduleSort) -> list[CaseRecord]:
    """Order by scheduled time, falling back to creation time. Timeless records go last."""
    timed, untimed = _split_by_time(records, "effective_ms")
    ordered = sorted(timed, key=lambda r: r.effective_ms, reverse=sort == "time-desc")
    return ordered + untimed


def sort_open_defence_records(records: Sequence[OpenDefenceRecord], time_sort: TimeSort) -> list[OpenDefenceRecord]:
    """Order by scheduled time only. Unscheduled records go last in either direction."""
    timed, untimed = _split_by_time(records, "scheduled_ms")
    ordered = sorted(timed, key=lambda r: r.scheduled_ms, reverse=time_sort == "latest")
    return ordered + untimed


def build_countdown_ring(end_at_ms: int, total_ms: int, now_ms: int, config: Config | None = None) -> CountdownRing:
    cfg = config or Config()
    state = compute_countdown_state(now_ms, end_at_ms, total_ms)
    circumference = ring_circumference(cfg.countdown.ring_radius)
    return CountdownRing(
        end_at_ms=end_at_ms,
        total_ms=total_ms,
        remaining_ms=state.remaining_ms,
        ratio_remaining=state.ratio_remaining,
        ratio_elapsed=state.ratio_elapsed,
        circumference=circumference,
        dash_offset=compute_ring_dash_offset(circumference, state.ratio_remaining),
        label=format_duration_label(state.remaining_ms),
        colour=ring_colour_from_ratio(state.ratio_remaining),
    )


def _date_label(record: CaseRecord, config: Config) -> str:
    if record.case.display_date_label:
        return record.case.display_date_label
    if record.effective_ms is None:
        return DATE_PENDING_LABEL
    return format_dashboard_date_label(record.effective_ms, config.display.timezone) or DATE_PENDING_LABEL


def build_case_row(
    record: CaseRecord,
    *,
    now_ms: int,
    live_votes: Mapping[str, int] | None = None,
    show_countdown: bool = False,
    config: Config | None = None,
) -> CaseRow:
    cfg = config or Config()
    case = record.case

    countdown = None
    if show_countdown and record.countdown_end_ms is not None:
        total_ms = record.countdown_total_ms
        if total_ms is None:
            total_ms = cfg.countdown.default_total_ms
        countdown = build_countdown_ring(record.countdown_end_ms, total_ms, now_ms, cfg)

    defence_status = resolve_claim_status(record.defence_agent_id, record.defendant_agent_id)
    if defence_status == "taken":
        defence_label = record.defence_agent_id or OPEN_DEFENCE_LABEL
    elif defence_status == "reserved":
        defence_label = f"Invited: {record.defendant_agent_id}"
    else:
        defence_label = OPEN_DEFENCE_LABEL

    return CaseRow(
        id=case.id,
        display_label=record.display_label,
        status=case.status,
        status_label=_STATUS_LABELS[case.status],
        summary=case.summary,
        date_label=_date_label(record, cfg),
        prosecution_agent_id=case.prosecution_agent_id,
        defence_label=defence_label,
        defence_state_label=_DEFENCE_STATE_LABELS[defence_status],
        defence_pill_label=_DEFENCE_PILL_LABELS[defence_status],
        policy_exception=is_out_of_policy_ms(record.scheduled_ms, now_ms, window_ms=cfg.policy.window_ms),
        countdown=countdown,
        votes=build_vote_view(
            case.id,
            case.vote_summary.votes_cast,
            case.vote_summary.jury_size,
            live_votes,
        ),
        show_votes=case.status != "scheduled",
    )


def build_open_defence_row(record: OpenDefenceRecord, *, now_ms: int, config: Config | None = None) -> OpenDefenceRow:
    cfg = config or Config()
    item = record.item
    claim = resolve_claim(
        record.defence_agent_id,
        record.defendant_agent_id,
        filed_at_ms=record.filed_ms,
        now_ms=now_ms,
        exclusive_ms=cfg.claims.exclusive_ms,
    )
    if record.defendant_agent_id:
        parties_label = f"Prosecution {item.prosecution_agent_id} · Defendant {record.defendant_agent_id}"
    else:
        parties_label = f"Prosecution {item.prosecution_agent_id} · Open defendant"
    tags_label = f"Tags: {', '.join(record.tags)}" if record.tags else "Tags: none"
    starts_in_label = None
    if record.scheduled_ms is not None:
        starts_in_label = format_duration_label(record.scheduled_ms - now_ms)

    return OpenDefenceRow(
        case_id=item.case_id,
        display_label=record.display_label,
        status=record.status,
        summary=item.summary,
        prosecution_agent_id=item.prosecution_agent_id,
        defendant_agent_id=record.defendant_agent_id,
        parties_label=parties_label,
        tags=list(record.tags),
        tags_label=tags_label,
        claim_status=claim.claim_status,
        claimable=claim.claimable,
        claim=claim,
        policy_exception=is_out_of_policy_ms(record.scheduled_ms, now_ms, window_ms=cfg.policy.window_ms),
        starts_in_label=starts_in_label,
    )


def select_schedule_records(
    records: Sequence[CaseRecord],
    *,
    bucket: Literal["active", "scheduled"],
    controls: ScheduleControls,
) -> list[CaseRecord]:
    if controls.filter != "all" and controls.filter != bucket:
        return []
    sort = controls.sort
    if bucket == "active" and controls.active_sort is not None:
        sort = controls.active_sort
    matched = [r for r in records if matches_query(r.search_text, controls.query)]
    return sort_case_records(matched, sort)


def select_open_defence_records(
    records: Sequence[OpenDefenceRecord],
    *,
    controls: OpenDefenceControls,
    now_ms: int,
    config: Config | None = None,
) -> list[OpenDefenceRecord]:
    selected = [
        r
        for r in records
        if (controls.status == "all" or r.status == controls.status)
        and matches_query(r.search_text, controls.query)
        and matches_tag(r.tags, controls.tag)
        and in_start_window(r.scheduled_ms, now_ms, controls.start_window, config)
    ]
    return sort_open_defence_records(selected, controls.time_sort)


def find_next_session(records: Sequence[CaseRecord], *, now_ms: int, config: Config | None = None) -> NextSession | None:
    cfg = config or Config()
    for record in records:
        if record.scheduled_ms is not None and record.scheduled_ms > now_ms:
            state = compute_countdown_state(now_ms, record.scheduled_ms, cfg.countdown.next_session_total_ms)
            return NextSession(
                case_id=record.case.id,
                end_at_ms=record.scheduled_ms,
                remaining_ms=state.remaining_ms,
                label=f"Next session in - {format_duration_label(state.remaining_ms)}",
            )
    return None


def derive_open_defence_rows(snapshot: DocketSnapshot, config: Config | None = None) -> list[OpenDefenceRow]:
    cfg = config or Config()
    records = normalize_open_defence_cases(snapshot.open_defence_cases)
    selected = select_open_defence_records(
        records, controls=snapshot.open_defence_controls, now_ms=snapshot.now_ms, config=cfg
    )
    return [build_open_defence_row(r, now_ms=snapshot.now_ms, config=cfg) for r in selected]


def derive_docket_view(snapshot: DocketSnapshot, config: Config | None = None) -> DocketView:
    """Project one snapshot into the rows the docket renders, in display order."""
    cfg = config or Config()
    now_ms = snapshot.now_ms
    controls = snapshot.schedule_controls

    active = select_schedule_records(
        normalize_cases(snapshot.schedule.active), bucket="active", controls=controls
    )
    scheduled = select_schedule_records(
        normalize_cases(snapshot.schedule.scheduled), bucket="scheduled", controls=controls
    )

    active_rows = [
        build_case_row(r, now_ms=now_ms, live_votes=snapshot.live_votes, show_countdown=False, config=cfg)
        for r in active
    ]
    scheduled_rows = [
        build_case_row(r, now_ms=now_ms, live_votes=snapshot.live_votes, show_countdown=True, config=cfg)
        for r in scheduled
    ]

    return DocketView(
        now_ms=now_ms,
        active=active_rows,
        scheduled=scheduled_rows,
        open_defence=derive_open_defence_rows(snapshot, cfg),
        active_subtitle=f"{len(active_rows)} live",
        next_session=find_next_session(scheduled, now_ms=now_ms, config=cfg),
    )
