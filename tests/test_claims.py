from docket_view.claims import resolve_claim, resolve_claim_status

NOW_MS = 1_772_366_400_000


def test_defence_takes_priority_over_named_defendant():
    state = resolve_claim("X", "Y")
    assert state.claim_status == "taken"
    assert state.claimable is False
    assert state.badge_label == "Defence taken"


def test_no_parties_is_open_and_claimable():
    state = resolve_claim(None, None)
    assert state.claim_status == "open"
    assert state.claimable is True
    assert state.action_label == "Volunteer as defence"


def test_named_defendant_reserves_seat():
    state = resolve_claim(None, "agent-y")
    assert state.claim_status == "reserved"
    assert state.claimable is False
    assert state.action_label == "Reserved for named defendant"
    assert state.reserved_until_ms is None


def test_blank_identities_count_as_missing():
    assert resolve_claim_status("  ", "") == "open"
    assert resolve_claim_status("", "agent-y") == "reserved"


def test_reservation_expires_after_exclusive_window():
    filed = NOW_MS - 900_000
    assert resolve_claim_status(None, "agent-y", filed_at_ms=filed, now_ms=NOW_MS, exclusive_ms=900_000) == "open"
    assert (
        resolve_claim_status(None, "agent-y", filed_at_ms=filed, now_ms=NOW_MS - 1, exclusive_ms=900_000)
        == "reserved"
    )


def test_reservation_holds_without_filing_time():
    assert resolve_claim_status(None, "agent-y", filed_at_ms=None, now_ms=NOW_MS, exclusive_ms=900_000) == "reserved"


def test_reserved_until_reported():
    state = resolve_claim(None, "agent-y", filed_at_ms=NOW_MS, now_ms=NOW_MS, exclusive_ms=900_000)
    assert state.claim_status == "reserved"
    assert state.reserved_until_ms == NOW_MS + 900_000


def test_expiry_never_reopens_taken_seat():
    assert resolve_claim_status("X", "Y", filed_at_ms=0, now_ms=NOW_MS, exclusive_ms=1) == "taken"
