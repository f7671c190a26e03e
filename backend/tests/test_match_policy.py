import pytest

from services.match_policy import determine_match_status, should_shortlist


@pytest.mark.parametrize("score,status", [
    (10, "excellent"),
    (9.5, "excellent"),
    (8.5, "excellent"),
    (8.49, "good"),
    (7, "good"),
    (6.99, "average"),
    (5, "average"),
    (4.99, "poor"),
    (1, "poor"),
])
def test_determine_match_status(score, status):
    assert determine_match_status(score) == status


def test_shortlist_by_score():
    assert should_shortlist(7.0, "average")


def test_no_shortlist_below_threshold():
    assert not should_shortlist(6.9, "average")


def test_shortlist_by_overridden_status():
    assert should_shortlist(3.0, "good")
