"""Utilities package for Doctor Finder.

Re-export stable helper functions from the utility submodules.
"""
# This module intentionally re-exports symbols from submodules. Flake8 F401
# warnings are expected for re-exported names and are silenced locally.
# flake8: noqa: F401

from .addressing import coerce_coordinate_pair, validate_address, validate_coordinates, valid_coordinate_mask
from .cleaning import (
    clean_text_column,
    clean_text_fields,
    clean_text_value,
    safe_numeric_conversion,
    validate_and_clean_coordinates,
    validate_provider_data,
)
from .distance import EARTH_RADIUS_KM, calculate_distances, haversine_km
from .facets import FilterState, build_facet_index, clamp_radius, facet_mask, matches_filters
from .io_utils import directions_url, email_link, format_phone_number, handle_streamlit_error, phone_link
from .reviews import ReviewSummary, reviews_for_provider, summarize_reviews

__all__ = [
    "EARTH_RADIUS_KM",
    "FilterState",
    "ReviewSummary",
    "build_facet_index",
    "calculate_distances",
    "clamp_radius",
    "clean_text_column",
    "clean_text_fields",
    "clean_text_value",
    "coerce_coordinate_pair",
    "directions_url",
    "email_link",
    "facet_mask",
    "format_phone_number",
    "handle_streamlit_error",
    "haversine_km",
    "matches_filters",
    "phone_link",
    "reviews_for_provider",
    "safe_numeric_conversion",
    "summarize_reviews",
    "validate_address",
    "validate_and_clean_coordinates",
    "validate_coordinates",
    "validate_provider_data",
    "valid_coordinate_mask",
]
