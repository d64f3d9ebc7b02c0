"""Field cleaning and provider data validation helpers."""
import logging
from typing import Any, Optional

import numpy as np
import pandas as pd

from .addressing import valid_coordinate_mask

logger = logging.getLogger(__name__)

TEXT_COLUMNS = (
    "Name",
    "Specialty",
    "City",
    "Photo URL",
    "Phone",
    "Email",
    "Address",
    "About",
    "Education",
    "Experience",
)


def safe_numeric_conversion(value: Any, default: float = 0.0) -> float:
    try:
        if value is None or pd.isna(value):
            return default
        if isinstance(value, bool):
            return default
        return float(value)
    except (ValueError, TypeError):
        return default


def clean_text_value(value: Any) -> Optional[str]:
    """Strip a free-form label; missing and whitespace-only values become None.

    The strings "None" and "Nan" are kept as labels.
    """
    if value is None or value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, (float, np.floating)) and np.isnan(value):
        return None
    text = str(value).strip()
    return text or None


def clean_text_column(values: pd.Series) -> pd.Series:
    """Apply :func:`clean_text_value` keeping an object column, so missing stays None."""
    return pd.Series([clean_text_value(v) for v in values], index=values.index, dtype=object)


def clean_text_fields(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    for col in TEXT_COLUMNS:
        if col in df.columns:
            df[col] = clean_text_column(df[col])
    return df


def validate_and_clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Coerce coordinates to floats and blank out unusable pairs.

    A pair is blanked (both set to NaN) when either half is missing,
    non-numeric or out of range. Such providers keep their row but have
    no location.
    """
    if df.empty:
        return df

    df = df.copy()
    for col in ("Latitude", "Longitude"):
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce").astype(float)
        else:
            df[col] = np.nan

    valid = valid_coordinate_mask(df)
    invalid = ~valid
    if invalid.any():
        invalid_count = int(invalid.sum())
        logger.warning(
            "%d providers have invalid or missing coordinates; they are excluded from radius searches.",
            invalid_count,
        )
        df.loc[invalid, ["Latitude", "Longitude"]] = np.nan

    return df


def validate_provider_data(df: pd.DataFrame) -> tuple[bool, str]:
    if df.empty:
        return False, "❌ **Error**: No provider data available. Please check data files."

    issues = []
    info = []

    required_cols = ["ID", "Name"]
    missing_cols = [col for col in required_cols if col not in df.columns]
    if missing_cols:
        issues.append(f"Missing required columns: {', '.join(missing_cols)}")

    if "Name" in df.columns:
        missing_names = int(df["Name"].isna().sum())
        if missing_names > 0:
            issues.append(f"{missing_names} providers have no name and will not match name searches")

    if "Latitude" in df.columns and "Longitude" in df.columns:
        missing_coords = int((df["Latitude"].isna() | df["Longitude"].isna()).sum())
        if missing_coords > 0:
            info.append(f"{missing_coords} providers have no map location")
    else:
        info.append("Geographic columns missing: map search will return no providers")

    if "Rating" in df.columns and len(df):
        info.append(f"Average stored rating: {df['Rating'].mean():.1f}")

    info.append(f"Total providers in directory: {len(df)}")

    message_parts = []
    if issues:
        message_parts.append("⚠️ **Data Quality Issues**: " + "; ".join(issues))
    if info:
        message_parts.append("ℹ️ **Data Summary**: " + "; ".join(info))

    is_valid = len(issues) == 0
    message = "\n\n".join(message_parts)
    return is_valid, message
