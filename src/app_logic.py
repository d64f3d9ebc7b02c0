import logging
from enum import Enum
from typing import Optional, Tuple

import pandas as pd
import streamlit as st

from src.data.ingestion import load_provider_data, load_reviews, load_specialties
from src.utils.addressing import coerce_coordinate_pair
from src.utils.cleaning import validate_provider_data
from src.utils.distance import calculate_distances, haversine_km
from src.utils.facets import FilterState, build_facet_index, facet_mask

__all__ = [
    "DISTANCE_COLUMN",
    "DiscoveryStatus",
    "discovery_status",
    "load_application_data",
    "get_city_index",
    "get_specialty_index",
    "within_radius",
    "filter_providers_by_radius",
    "filter_providers_by_facets",
    "run_radius_search",
    "run_faceted_search",
    "result_count_label",
    "validate_provider_data",
]

logger = logging.getLogger(__name__)

DISTANCE_COLUMN = "Distance (km)"

Coordinate = Tuple[float, float]


class DiscoveryStatus(Enum):
    """What a discovery page should render."""

    LOADING = "loading"
    READY = "ready"
    LOCATION_UNAVAILABLE = "location_unavailable"


def discovery_status(
    provider_df: Optional[pd.DataFrame], reference: Optional[Coordinate] = None, *, spatial: bool = False
) -> DiscoveryStatus:
    """Page state for the current corpus and reference location.

    A corpus that loaded empty is READY: it renders as zero results. Only
    spatial pages need a usable reference location.
    """
    if provider_df is None:
        return DiscoveryStatus.LOADING
    if spatial and (reference is None or coerce_coordinate_pair(*reference) is None):
        return DiscoveryStatus.LOCATION_UNAVAILABLE
    return DiscoveryStatus.READY


@st.cache_data(ttl=3600)
def load_application_data():
    """Load the provider corpus and its companion collections.

    Returns:
        Tuple[pd.DataFrame, pd.DataFrame, pd.DataFrame]:
            (provider_df, specialties_df, reviews_df); any of them may be
            empty when the export is missing or unreadable.
    """
    provider_df = load_provider_data()
    specialties_df = load_specialties()
    reviews_df = load_reviews()

    if provider_df.empty:
        logger.warning("Provider corpus is empty; searches will return no results")
    else:
        logger.info(
            f"Loaded {len(provider_df)} providers, {len(specialties_df)} specialties, {len(reviews_df)} reviews"
        )
    return provider_df, specialties_df, reviews_df


def get_city_index(provider_df: pd.DataFrame) -> list[str]:
    """City chips, derived from the provider corpus in first-seen order."""
    return build_facet_index(provider_df, "City")


def get_specialty_index(specialties_df: pd.DataFrame, provider_df: Optional[pd.DataFrame] = None) -> list[str]:
    """Specialty chips from the specialties collection.

    Falls back to the specialties seen on providers when the collection is
    empty (for example when its export failed to load).
    """
    index = build_facet_index(specialties_df, "Name")
    if not index and provider_df is not None:
        index = build_facet_index(provider_df, "Specialty")
    return index


def within_radius(reference: Coordinate, radius_km: float, latitude, longitude) -> bool:
    """Single-record form of :func:`run_radius_search`.

    Records without a usable location never match; "usable" is the rule in
    :func:`src.utils.addressing.valid_coordinate_mask`.
    """
    point = coerce_coordinate_pair(latitude, longitude)
    if point is None:
        return False
    return haversine_km(reference[0], reference[1], point[0], point[1]) <= radius_km


def filter_providers_by_radius(df: pd.DataFrame, max_radius_km: float) -> pd.DataFrame:
    """Filter providers by maximum radius distance.

    Args:
        df: Provider DataFrame with "Distance (km)" column
        max_radius_km: Maximum distance threshold in kilometers, used as given

    Returns:
        pd.DataFrame: Providers with a known distance within the radius
    """
    if df is None or df.empty or DISTANCE_COLUMN not in df.columns:
        return df
    distances = pd.to_numeric(df[DISTANCE_COLUMN], errors="coerce")
    return df[distances.notna() & (distances <= max_radius_km)].copy()


def filter_providers_by_facets(df: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """Filter providers by the text, specialty and city selections.

    Every active selection must match (logical AND). Corpus order is kept.

    Args:
        df: Provider DataFrame
        state: Current filter selections; the radius is ignored here

    Returns:
        pd.DataFrame: Providers passing every active facet
    """
    if df is None or df.empty:
        return df
    return df[facet_mask(df, state)].copy()


def run_radius_search(
    provider_df: pd.DataFrame, reference: Optional[Coordinate], radius_km: float
) -> pd.DataFrame:
    """Map search: providers within ``radius_km`` of ``reference``.

    Only the radius applies here; text, specialty and city selections belong
    to the list search. Rows keep corpus order and gain a distance column.

    Args:
        provider_df: Provider corpus snapshot
        reference: User location as (lat, lon)
        radius_km: Search radius, already clamped by the caller

    Returns:
        pd.DataFrame: Matching providers with "Distance (km)"; empty when
        there is no corpus or no usable reference location
    """
    columns = list(provider_df.columns) if provider_df is not None else []
    if DISTANCE_COLUMN not in columns:
        columns.append(DISTANCE_COLUMN)
    empty = pd.DataFrame(columns=columns)

    if provider_df is None or provider_df.empty:
        return empty

    point = coerce_coordinate_pair(*reference) if reference is not None else None
    if point is None:
        logger.warning("Radius search requested without a usable reference location")
        return empty

    working = provider_df.copy()
    working[DISTANCE_COLUMN] = pd.Series(
        calculate_distances(point[0], point[1], working), index=working.index, dtype=float
    )
    return filter_providers_by_radius(working, radius_km)


def run_faceted_search(provider_df: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """List search: text, specialty and city selections combined with AND.

    No distance is computed. Rows keep corpus order.
    """
    if provider_df is None:
        return pd.DataFrame()
    if provider_df.empty:
        return provider_df.copy()
    return filter_providers_by_facets(provider_df, state)


def result_count_label(count: int, noun: str = "Doctor") -> str:
    return f"{count} {noun if count == 1 else noun + 's'} Found"
