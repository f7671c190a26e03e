"""Map an overall match score to a status tier and a shortlist decision."""

EXCELLENT_THRESHOLD = 8.5
GOOD_THRESHOLD = 7
AVERAGE_THRESHOLD = 5
SHORTLIST_THRESHOLD = 7
SHORTLIST_STATUSES = frozenset({"excellent", "good"})


def determine_match_status(score: float) -> str:
    if score >= EXCELLENT_THRESHOLD:
        return "excellent"
    if score >= GOOD_THRESHOLD:
        return "good"
    if score >= AVERAGE_THRESHOLD:
        return "average"
    return "poor"


def should_shortlist(score: float, match_status: str) -> bool:
    """Shortlist on score alone or on a (possibly caller-overridden) status."""
    return score >= SHORTLIST_THRESHOLD or match_status in SHORTLIST_STATUSES
