"""Reference-location lookup: geocoding with caching and rate limiting."""
import logging
from typing import Callable, Optional, Tuple

import streamlit as st
from geopy.exc import GeocoderServiceError, GeocoderTimedOut, GeocoderUnavailable
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from .addressing import coerce_coordinate_pair
from .config import get_api_config

logger = logging.getLogger(__name__)

# Cached factory
_RATE_LIMITED_GEOCODER: Optional[Callable] = None


def _get_rate_limited_geocoder() -> Callable:
    global _RATE_LIMITED_GEOCODER
    if _RATE_LIMITED_GEOCODER is not None:
        return _RATE_LIMITED_GEOCODER

    config = get_api_config("geocoding")
    geolocator = Nominatim(user_agent=config["nominatim_user_agent"])
    rate_limited = RateLimiter(
        geolocator.geocode,
        min_delay_seconds=float(config["rate_limit_delay"]),
        max_retries=int(config["max_retries"]),
    )
    timeout = config["request_timeout"]

    def geocode_fn(q):
        return rate_limited(q, timeout=timeout)

    _RATE_LIMITED_GEOCODER = geocode_fn
    return _RATE_LIMITED_GEOCODER


@st.cache_data(ttl=3600)
def geocode_address_with_cache(address: str) -> Optional[Tuple[float, float]]:
    """Resolve an address to ``(lat, lon)``; None means the location is unavailable."""
    try:
        geocode_fn = _get_rate_limited_geocoder()
        location = geocode_fn(address)
        if location:
            return coerce_coordinate_pair(location.latitude, location.longitude)
        logger.info("No geocoding match for address '%s'", address)
        return None
    except (GeocoderTimedOut, GeocoderServiceError, GeocoderUnavailable) as e:
        logger.warning("Geocoding service error for '%s': %s", address, e)
        st.warning(handle_geocoding_error(address, e))
        return None
    except Exception as e:
        logger.exception("Unexpected geocoding failure for '%s'", address)
        st.error(handle_geocoding_error(address, e))
        return None


def handle_geocoding_error(address: str, error: Exception) -> str:
    et = str(error).lower()
    if "timeout" in et:
        return "⏱️ **Geocoding Timeout**: The address lookup service is taking too long. Please try again in a moment."
    if "unavailable" in et or "service" in et:
        return "🔌 **Service Unavailable**: The geocoding service is temporarily unavailable. Please try again later."
    if "rate" in et or "limit" in et:
        return "🚦 **Rate Limited**: Too many requests to the geocoding service. Please wait a moment and try again."
    if "network" in et or "connection" in et:
        return "🌐 **Network Error**: Cannot connect to the geocoding service. Please check your internet connection."
    return f"❌ **Geocoding Error**: Unable to find location for '{address}'. (Error: {type(error).__name__})"
