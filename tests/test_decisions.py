from docket_view.decisions import derive_decision_list, filter_decisions, normalise_outcome, title_case_outcome
from docket_view.models import Decision, DecisionsControls


def _decision(decision_id: str, case_id: str, outcome: str, closed: str | None) -> Decision:
    return Decision.model_validate(
        {
            "id": decision_id,
            "caseId": case_id,
            "summary": "",
            "outcome": outcome,
            "status": "sealed",
            "closedAtIso": closed,
            "voteSummary": {"votesCast": 11, "jurySize": 11},
        }
    )


DECISIONS = [
    _decision("D-1", "CASE-A", "for_prosecution", "2026-02-01T10:00:00Z"),
    _decision("D-2", "CASE-B", "for_defence", "2026-02-03T10:00:00Z"),
    _decision("D-3", "CASE-C", "mixed", None),
    _decision("D-4", "CASE-D", "for_defence", "2026-02-01T10:00:00Z"),
]


def test_outcome_normalisation():
    assert normalise_outcome("for_defence") == "for_defence"
    assert normalise_outcome("mixed") == "void"
    assert normalise_outcome(None) == "void"
    assert title_case_outcome("for_prosecution") == "For prosecution"


def test_newest_first_with_undated_last_and_case_id_tiebreak():
    ordered = filter_decisions(DECISIONS, DecisionsControls())
    assert [d.id for d in ordered] == ["D-2", "D-4", "D-1", "D-3"]


def test_outcome_and_query_filters():
    defence = filter_decisions(DECISIONS, DecisionsControls(outcome="for_defence"))
    assert [d.id for d in defence] == ["D-2", "D-4"]
    by_query = filter_decisions(DECISIONS, DecisionsControls(query="  case-c "))
    assert [d.id for d in by_query] == ["D-3"]
    by_id = filter_decisions(DECISIONS, DecisionsControls(query="d-1"))
    assert [d.id for d in by_id] == ["D-1"]


def test_decision_list_rows():
    result = derive_decision_list(DECISIONS, DecisionsControls(outcome="void"))
    assert result.count_label == "1 decisions shown"
    row = result.rows[0]
    assert row.outcome_label == "Void"
    assert row.date_label == "Date pending"
    assert row.votes.ratio == 1.0


def test_out_of_range_closed_time_falls_back_to_pending_label():
    far = _decision("D-9", "CASE-Z", "for_defence", "9999-12-31T23:00:00-05:00")
    result = derive_decision_list([far], DecisionsControls())
    assert result.rows[0].date_label == "Date pending"
