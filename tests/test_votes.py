from docket_view.votes import build_vote_view, resolve_votes, vote_ratio


def test_zero_jury_gives_zero_ratio():
    assert vote_ratio(12, 0) == 0
    assert vote_ratio(3, -4) == 0


def test_ratio_clamps_to_one():
    assert vote_ratio(12, 10) == 1.0
    assert vote_ratio(-2, 10) == 0.0
    assert vote_ratio(5, 10) == 0.5


def test_live_override_wins():
    assert resolve_votes("c1", 3, {"c1": 7}) == 7
    assert resolve_votes("c1", 3, {"c2": 7}) == 3
    assert resolve_votes("c1", 3, None) == 3
    assert resolve_votes("c1", 3, {"c1": 0}) == 0


def test_vote_view_labels():
    view = build_vote_view("c1", 4, 11, {"c1": 5})
    assert view.votes_cast == 5
    assert view.copy_label == "5/11 votes cast"
    assert view.fill_width == "45.5%"
