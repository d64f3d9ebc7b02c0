"""Test suite for review lookups on the profile page."""
import pandas as pd

from src.data.preparation import prepare_reviews
from src.utils.reviews import ReviewSummary, reviews_for_provider, summarize_reviews


def _reviews():
    return prepare_reviews(
        pd.DataFrame(
            [
                {"id": "r1", "doctorId": "doc-1", "rating": 5, "createdAt": "2024-01-01T00:00:00Z"},
                {"id": "r2", "doctorId": "doc-1", "rating": 4, "createdAt": "2024-06-01T00:00:00Z"},
                {"id": "r3", "doctorId": "doc-1", "rating": 4},
                {"id": "r4", "doctorId": "doc-2", "rating": 2, "createdAt": "2024-02-01T00:00:00Z"},
            ]
        )
    )


def test_reviews_newest_first_with_undated_last():
    result = reviews_for_provider(_reviews(), "doc-1")

    assert list(result["ID"]) == ["r2", "r1", "r3"]


def test_unknown_provider_has_no_reviews():
    assert reviews_for_provider(_reviews(), "doc-404").empty
    assert reviews_for_provider(_reviews(), None).empty
    assert reviews_for_provider(pd.DataFrame(), "doc-1").empty


def test_summary_average_is_rounded():
    summary = summarize_reviews(reviews_for_provider(_reviews(), "doc-1"))

    assert summary == ReviewSummary(count=3, average_rating=4.3)


def test_summary_without_reviews():
    assert summarize_reviews(pd.DataFrame()) == ReviewSummary(count=0, average_rating=None)


def test_summary_ignores_missing_ratings():
    df = pd.DataFrame({"Rating": [None, 3.0]})

    assert summarize_reviews(df) == ReviewSummary(count=2, average_rating=3.0)


def test_stored_rating_is_not_changed_by_reviews(two_city_corpus):
    """Reviews are displayed next to the stored rating, never folded into it."""
    before = two_city_corpus["Rating"].tolist()

    summarize_reviews(reviews_for_provider(_reviews(), "alice"))

    assert two_city_corpus["Rating"].tolist() == before
