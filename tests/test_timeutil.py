from docket_view.timeutil import format_dashboard_date_label, parse_iso_ms

NOW_MS = 1_772_366_400_000


def test_parse_iso_variants():
    assert parse_iso_ms("2026-03-01T12:00:00Z") == NOW_MS
    assert parse_iso_ms("2026-03-01T12:00:00+00:00") == NOW_MS
    assert parse_iso_ms("2026-03-01T13:00:00+01:00") == NOW_MS
    assert parse_iso_ms("2026-03-01T12:00:00") == NOW_MS
    assert parse_iso_ms("2026-03-01T12:00:00.250Z") == NOW_MS + 250


def test_parse_iso_degrades_to_none():
    assert parse_iso_ms(None) is None
    assert parse_iso_ms("") is None
    assert parse_iso_ms("   ") is None
    assert parse_iso_ms("not-a-date") is None


def test_dashboard_label():
    assert format_dashboard_date_label(NOW_MS) == "March 1, 12:00 pm"
    assert format_dashboard_date_label(NOW_MS - 12 * 3_600_000 + 5 * 60_000) == "March 1, 12:05 am"
    assert format_dashboard_date_label(NOW_MS + 3 * 3_600_000 + 7 * 60_000) == "March 1, 3:07 pm"


def test_dashboard_label_in_zone():
    assert format_dashboard_date_label(NOW_MS, "Europe/Berlin") == "March 1, 1:00 pm"
    assert format_dashboard_date_label(NOW_MS, "Not/AZone") == "March 1, 12:00 pm"


def test_out_of_range_instants_parse_but_have_no_label():
    late = parse_iso_ms("9999-12-31T23:00:00-05:00")
    early = parse_iso_ms("0001-01-01T00:00:00+01:00")
    assert late is not None and early is not None
    assert format_dashboard_date_label(late) is None
    assert format_dashboard_date_label(early) is None
    assert format_dashboard_date_label(early, "Europe/Berlin") is None
