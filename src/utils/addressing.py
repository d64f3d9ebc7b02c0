"""Address and coordinate validation helpers."""
import math
from typing import Any, Optional, Tuple

import numpy as np
import pandas as pd


def validate_address(address: str) -> Tuple[bool, str]:
    if not address or not address.strip():
        return False, "Address cannot be empty"

    addr = address.strip()
    if len(addr) < 5:
        return False, "Address appears too short. Please provide a street, suburb or city."

    if "," not in addr:
        return True, "Consider adding the city and country for better accuracy"

    return True, ""


LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def validate_coordinates(lat: float, lon: float) -> Tuple[bool, str]:
    if isinstance(lat, bool) or isinstance(lon, bool):
        return False, "Coordinates must be numeric"
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return False, "Coordinates must be numeric"
    if math.isnan(lat) or math.isnan(lon):
        return False, "Coordinates must be numeric"
    if not (LATITUDE_RANGE[0] <= lat <= LATITUDE_RANGE[1]):
        return False, "Latitude must be between -90 and 90"
    if not (LONGITUDE_RANGE[0] <= lon <= LONGITUDE_RANGE[1]):
        return False, "Longitude must be between -180 and 180"
    return True, "Valid coordinates"


def coerce_coordinate_pair(lat: Any, lon: Any) -> Optional[Tuple[float, float]]:
    """Return ``(lat, lon)`` as floats, or None when either value is unusable.

    Scalar form of :func:`valid_coordinate_mask`; both apply the same rule.
    """
    try:
        if lat is None or lon is None or pd.isna(lat) or pd.isna(lon):
            return None
        if isinstance(lat, (bool, np.bool_)) or isinstance(lon, (bool, np.bool_)):
            return None
        lat_f = float(lat)
        lon_f = float(lon)
    except (TypeError, ValueError):
        return None

    ok, _ = validate_coordinates(lat_f, lon_f)
    return (lat_f, lon_f) if ok else None


def valid_coordinate_mask(df: pd.DataFrame) -> pd.Series:
    """Boolean mask of rows holding an in-range latitude/longitude pair.

    Booleans, missing and non-numeric values are never a usable coordinate.
    """
    if "Latitude" not in df.columns or "Longitude" not in df.columns:
        return pd.Series(False, index=df.index)

    lat = _numeric_coordinates(df["Latitude"])
    lon = _numeric_coordinates(df["Longitude"])
    return lat.between(*LATITUDE_RANGE) & lon.between(*LONGITUDE_RANGE)


def _numeric_coordinates(values: pd.Series) -> pd.Series:
    if pd.api.types.is_bool_dtype(values):
        return pd.Series(np.nan, index=values.index)
    numeric = pd.to_numeric(values, errors="coerce").astype(float)
    is_bool = values.map(lambda v: isinstance(v, (bool, np.bool_)))
    return numeric.mask(is_bool.astype(bool))
