"""Filter state, facet indexes and the facet predicate.

The discovery pages keep one :class:`FilterState` per session. Specialty
and city are single-select: choosing the value that is already active
clears it. The predicate helpers here never raise on missing fields; an
absent name, specialty or city simply fails whichever predicate is active.
"""
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

import pandas as pd

from .cleaning import clean_text_value

RADIUS_MIN_KM = 10
RADIUS_MAX_KM = 200
RADIUS_STEP_KM = 10
RADIUS_DEFAULT_KM = 100


def clamp_radius(value: Union[int, float], min_km: int = RADIUS_MIN_KM, max_km: int = RADIUS_MAX_KM) -> int:
    return int(max(min_km, min(max_km, int(value))))


@dataclass
class FilterState:
    """The query a user builds on the discovery pages."""

    text_query: str = ""
    specialty: Optional[str] = None
    city: Optional[str] = None
    radius_km: int = RADIUS_DEFAULT_KM

    def toggle_specialty(self, value: str) -> None:
        self.specialty = None if self.specialty == value else value

    def toggle_city(self, value: str) -> None:
        self.city = None if self.city == value else value

    def set_radius(self, value: Union[int, float], min_km: int = RADIUS_MIN_KM, max_km: int = RADIUS_MAX_KM) -> None:
        self.radius_km = clamp_radius(value, min_km, max_km)

    def step_radius(
        self, direction: int, step_km: int = RADIUS_STEP_KM, min_km: int = RADIUS_MIN_KM, max_km: int = RADIUS_MAX_KM
    ) -> None:
        """Move the radius one step up (``direction > 0``) or down, staying in bounds."""
        delta = step_km if direction > 0 else -step_km
        self.set_radius(self.radius_km + delta, min_km, max_km)

    def clear(self) -> None:
        self.text_query = ""
        self.specialty = None
        self.city = None

    @property
    def has_active_facets(self) -> bool:
        return bool(self.text_query) or self.specialty is not None or self.city is not None


def build_facet_index(provider_df: pd.DataFrame, column: str) -> List[str]:
    """Distinct non-empty values of ``column`` in order of first appearance."""
    if provider_df is None or provider_df.empty or column not in provider_df.columns:
        return []

    seen = set()
    index = []
    for raw in provider_df[column]:
        value = clean_text_value(raw)
        if value is None or value in seen:
            continue
        seen.add(value)
        index.append(value)
    return index


def _field(record: Union[Mapping[str, Any], pd.Series], key: str) -> Optional[str]:
    value = record.get(key) if hasattr(record, "get") else None
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return str(value)


def matches_text(name: Optional[str], text_query: str) -> bool:
    if not text_query:
        return True
    if not name:
        return False
    return text_query.casefold() in name.casefold()


def matches_filters(record: Union[Mapping[str, Any], pd.Series], state: FilterState) -> bool:
    """True when the record passes every active facet predicate.

    Single-record form of :func:`facet_mask`; the two must agree.
    """
    if not matches_text(_field(record, "Name"), state.text_query):
        return False
    if state.specialty is not None and _field(record, "Specialty") != state.specialty:
        return False
    if state.city is not None and _field(record, "City") != state.city:
        return False
    return True


def facet_mask(provider_df: pd.DataFrame, state: FilterState) -> pd.Series:
    """Vectorised form of :func:`matches_filters` over a provider frame."""
    mask = pd.Series(True, index=provider_df.index)

    if state.text_query:
        if "Name" in provider_df.columns:
            names = provider_df["Name"].astype(object).where(provider_df["Name"].notna(), None)
            needle = state.text_query.casefold()
            mask &= names.map(lambda n: n is not None and needle in str(n).casefold()).astype(bool)
        else:
            mask &= False

    for column, selected in (("Specialty", state.specialty), ("City", state.city)):
        if selected is None:
            continue
        if column in provider_df.columns:
            mask &= provider_df[column].map(lambda v: v is not None and not pd.isna(v) and str(v) == selected).astype(bool)
        else:
            mask &= False

    return mask
