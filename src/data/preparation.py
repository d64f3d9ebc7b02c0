"""Normalise raw document collections into the frames the discovery engine reads."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd

from src.utils.cleaning import (
    clean_text_column,
    clean_text_fields,
    safe_numeric_conversion,
    validate_and_clean_coordinates,
)

logger = logging.getLogger(__name__)

PROVIDER_FIELD_MAP: Dict[str, str] = {
    "id": "ID",
    "name": "Name",
    "specialty": "Specialty",
    "city": "City",
    "latitude": "Latitude",
    "longitude": "Longitude",
    "rating": "Rating",
    "photoUrl": "Photo URL",
    "phone": "Phone",
    "email": "Email",
    "address": "Address",
    "about": "About",
    "education": "Education",
    "experience": "Experience",
}

PROVIDER_COLUMNS: List[str] = list(PROVIDER_FIELD_MAP.values())

REVIEW_FIELD_MAP: Dict[str, str] = {
    "id": "ID",
    "doctorId": "Doctor ID",
    "userName": "User Name",
    "rating": "Rating",
    "text": "Text",
    "createdAt": "Created At",
}


@dataclass(slots=True)
class PreparationSummary:
    """Counts describing one provider corpus load."""

    total_records: int
    kept_records: int
    duplicate_ids: int = 0
    missing_ids: int = 0
    missing_coordinates: int = 0
    missing_names: int = 0
    warnings: List[str] = field(default_factory=list)


def _rename_fields(raw_df: pd.DataFrame, field_map: Dict[str, str]) -> pd.DataFrame:
    # Both document field names and display names are accepted
    rename = {src: dst for src, dst in field_map.items() if src in raw_df.columns and dst not in raw_df.columns}
    df = raw_df.rename(columns=rename)
    for col in field_map.values():
        if col not in df.columns:
            df[col] = np.nan if col in ("Latitude", "Longitude", "Rating") else None
    return df


def prepare_provider_records_with_summary(raw_df: pd.DataFrame) -> Tuple[pd.DataFrame, PreparationSummary]:
    """Rename, clean and de-duplicate a raw provider collection.

    Columns outside the known document fields are kept after the known ones.
    Rows without an id are dropped; for repeated ids the first row wins.
    """
    if raw_df is None or raw_df.empty:
        return pd.DataFrame(columns=PROVIDER_COLUMNS), PreparationSummary(total_records=0, kept_records=0)

    total = len(raw_df)
    df = _rename_fields(raw_df, PROVIDER_FIELD_MAP)

    df["ID"] = clean_text_column(df["ID"])
    missing_ids = int(df["ID"].isna().sum())
    df = df[df["ID"].notna()]

    duplicated = df["ID"].duplicated(keep="first")
    duplicate_ids = int(duplicated.sum())
    df = df[~duplicated].copy()

    df = clean_text_fields(df)
    df["Rating"] = df["Rating"].map(lambda v: safe_numeric_conversion(v, 0.0)).astype(float)
    df = validate_and_clean_coordinates(df)

    extra = [c for c in df.columns if c not in PROVIDER_COLUMNS]
    df = df[PROVIDER_COLUMNS + extra].reset_index(drop=True)

    summary = PreparationSummary(
        total_records=total,
        kept_records=len(df),
        duplicate_ids=duplicate_ids,
        missing_ids=missing_ids,
        missing_coordinates=int(df["Latitude"].isna().sum()) if len(df) else 0,
        missing_names=int(df["Name"].isna().sum()) if len(df) else 0,
    )
    if missing_ids:
        summary.warnings.append(f"Dropped {missing_ids} provider records without an id")
    if duplicate_ids:
        summary.warnings.append(f"Dropped {duplicate_ids} provider records with a repeated id")
    for message in summary.warnings:
        logger.warning(message)

    logger.info(
        "Prepared %d of %d provider records (%d without coordinates)",
        summary.kept_records,
        summary.total_records,
        summary.missing_coordinates,
    )
    return df, summary


def prepare_provider_records(raw_df: pd.DataFrame) -> pd.DataFrame:
    df, _ = prepare_provider_records_with_summary(raw_df)
    return df


def prepare_specialties(raw_df: pd.DataFrame) -> pd.DataFrame:
    """Normalise the specialties collection to ``ID`` / ``Name`` columns."""
    if raw_df is None or raw_df.empty:
        return pd.DataFrame(columns=["ID", "Name"])

    df = _rename_fields(raw_df, {"id": "ID", "name": "Name"})
    df = df[["ID", "Name"]].copy()
    df["ID"] = clean_text_column(df["ID"])
    df["Name"] = clean_text_column(df["Name"])
    return df[df["Name"].notna()].reset_index(drop=True)


def prepare_reviews(raw_df: pd.DataFrame) -> pd.DataFrame:
    """Normalise the reviews collection; ``Created At`` becomes a UTC timestamp."""
    columns = list(REVIEW_FIELD_MAP.values())
    if raw_df is None or raw_df.empty:
        return pd.DataFrame(columns=columns)

    df = _rename_fields(raw_df, REVIEW_FIELD_MAP)
    df = df[columns].copy()
    for col in ("ID", "Doctor ID", "User Name", "Text"):
        df[col] = clean_text_column(df[col])
    df["Rating"] = pd.to_numeric(df["Rating"], errors="coerce")
    df["Created At"] = pd.to_datetime(df["Created At"], errors="coerce", utc=True)
    return df[df["Doctor ID"].notna()].reset_index(drop=True)
