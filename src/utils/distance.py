"""Great-circle distance helpers."""
import math
from typing import List, Optional

import numpy as np
import pandas as pd

from .addressing import valid_coordinate_mask

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the haversine distance in kilometers between two points.

    Inputs are decimal degrees and are not validated; callers must make sure
    both points have usable coordinates.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def calculate_distances(user_lat: float, user_lon: float, provider_df: pd.DataFrame) -> List[Optional[float]]:
    """Distance in km from the user to every row; None where the row has no usable location.

    Rows failing :func:`valid_coordinate_mask` (missing, non-numeric or out of
    range) never get a distance, so they never match a radius.
    """
    if provider_df.empty:
        return []
    if "Latitude" not in provider_df.columns or "Longitude" not in provider_df.columns:
        return [None] * len(provider_df)

    lat_arr = np.radians(pd.to_numeric(provider_df["Latitude"], errors="coerce").to_numpy(dtype=float))
    lon_arr = np.radians(pd.to_numeric(provider_df["Longitude"], errors="coerce").to_numpy(dtype=float))
    user_lat_rad = np.radians(user_lat)
    user_lon_rad = np.radians(user_lon)

    valid = valid_coordinate_mask(provider_df).to_numpy(dtype=bool)
    dlat = lat_arr[valid] - user_lat_rad
    dlon = lon_arr[valid] - user_lon_rad
    a = np.sin(dlat / 2) ** 2 + np.cos(user_lat_rad) * np.cos(lat_arr[valid]) * np.sin(dlon / 2) ** 2
    # Clip guards sqrt(1 - a) against tiny negative rounding errors
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    distances = np.full(len(provider_df), np.nan)
    distances[valid] = EARTH_RADIUS_KM * c

    return [None if np.isnan(d) else float(d) for d in distances]
