"""Review lookups for the doctor profile page.

The discovery engine ranks and displays the ``Rating`` stored on each
provider record. Reviews are never rolled up into that field; the profile
page shows the review average next to it instead.
"""
from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd


@dataclass(frozen=True)
class ReviewSummary:
    count: int
    average_rating: Optional[float]


def reviews_for_provider(reviews_df: pd.DataFrame, provider_id: Any) -> pd.DataFrame:
    """Reviews written for ``provider_id``, newest first (undated reviews last)."""
    if reviews_df is None or reviews_df.empty or "Doctor ID" not in reviews_df.columns or provider_id is None:
        return pd.DataFrame(columns=reviews_df.columns if reviews_df is not None else [])

    matched = reviews_df[reviews_df["Doctor ID"].astype(str) == str(provider_id)]
    if "Created At" in matched.columns:
        matched = matched.sort_values(by="Created At", ascending=False, na_position="last", kind="stable")
    return matched.reset_index(drop=True)


def summarize_reviews(reviews_df: pd.DataFrame) -> ReviewSummary:
    if reviews_df is None or reviews_df.empty:
        return ReviewSummary(count=0, average_rating=None)

    count = len(reviews_df)
    if "Rating" not in reviews_df.columns:
        return ReviewSummary(count=count, average_rating=None)

    ratings = pd.to_numeric(reviews_df["Rating"], errors="coerce").dropna()
    average = round(float(ratings.mean()), 1) if not ratings.empty else None
    return ReviewSummary(count=count, average_rating=average)
