from __future__ import annotations

from typing import Literal, Sequence

from docket_view.config import Config
from docket_view.docket import DATE_PENDING_LABEL
from docket_view.models import Decision, DecisionList, DecisionRow, DecisionsControls
from docket_view.timeutil import format_dashboard_date_label, parse_iso_ms
from docket_view.votes import build_vote_view

Outcome = Literal["for_prosecution", "for_defence", "void"]

_OUTCOME_LABELS = {
    "for_prosecution": "For prosecution",
    "for_defence": "For defence",
    "void": "Void",
}


def normalise_outcome(outcome: str | None) -> Outcome:
    if outcome == "for_prosecution":
        return "for_prosecution"
    if outcome == "for_defence":
        return "for_defence"
    return "void"


def title_case_outcome(outcome: str | None) -> str:
    return _OUTCOME_LABELS[normalise_outcome(outcome)]


def _matches(decision: Decision, controls: DecisionsControls) -> bool:
    if controls.outcome != "all" and normalise_outcome(decision.outcome) != controls.outcome:
        return False
    query = controls.query.strip().lower()
    if not query:
        return True
    return query in decision.case_id.lower() or query in decision.id.lower()


def filter_decisions(decisions: Sequence[Decision], controls: DecisionsControls) -> list[Decision]:
    """Newest closed first; undated decisions after dated ones, ties by case id descending."""
    matched = [d for d in decisions if _matches(d, controls)]
    # Two stable passes: case id descending, then closed time descending.
    by_case = sorted(matched, key=lambda d: d.case_id, reverse=True)
    dated = [d for d in by_case if parse_iso_ms(d.closed_at_iso) is not None]
    undated = [d for d in by_case if parse_iso_ms(d.closed_at_iso) is None]
    dated.sort(key=lambda d: parse_iso_ms(d.closed_at_iso), reverse=True)
    return dated + undated


def build_decision_row(decision: Decision, config: Config | None = None) -> DecisionRow:
    cfg = config or Config()
    closed_ms = parse_iso_ms(decision.closed_at_iso)
    date_label = decision.display_date_label
    if not date_label and closed_ms is not None:
        date_label = format_dashboard_date_label(closed_ms, cfg.display.timezone)
    if not date_label:
        date_label = DATE_PENDING_LABEL
    outcome = normalise_outcome(decision.outcome)
    return DecisionRow(
        id=decision.id,
        case_id=decision.case_id,
        summary=decision.summary,
        outcome=outcome,
        outcome_label=_OUTCOME_LABELS[outcome],
        status=decision.status,
        date_label=date_label,
        votes=build_vote_view(decision.case_id, decision.vote_summary.votes_cast, decision.vote_summary.jury_size),
    )


def derive_decision_list(
    decisions: Sequence[Decision],
    controls: DecisionsControls,
    config: Config | None = None,
) -> DecisionList:
    rows = [build_decision_row(d, config) for d in filter_decisions(decisions, controls)]
    return DecisionList(rows=rows, count_label=f"{len(rows)} decisions shown")
