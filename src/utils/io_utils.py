"""Display helpers: phone formatting, contact links and the streamlit error handler."""
from typing import Any, Optional
from urllib.parse import quote, urlencode

import pandas as pd
import streamlit as st

from .addressing import coerce_coordinate_pair

DIRECTIONS_BASE_URL = "https://www.google.com/maps/dir/"


def format_phone_number(phone):
    """
    Format a phone number for display.

    Ten-digit local numbers become "XXX XXX XXXX". Numbers entered with a
    leading "+" are normalised to "+" followed by digits only. Anything else is
    returned unchanged.

    Args:
        phone: Phone number as float, int, or string

    Returns:
        Formatted phone string, the original value, or None when missing
    """
    if phone is None or pd.isna(phone):
        return None

    if isinstance(phone, float):
        phone = int(phone)

    raw = str(phone).strip()
    if not raw:
        return None

    digits = "".join(filter(str.isdigit, raw))

    if raw.startswith("+") and 8 <= len(digits) <= 15:
        return "+" + digits
    if len(digits) == 10:
        return f"{digits[:3]} {digits[3:6]} {digits[6:]}"
    return phone


def phone_link(phone: Any) -> Optional[str]:
    """``tel:`` URL for a stored phone number, or None when there is nothing to dial."""
    if phone is None or (not isinstance(phone, str) and pd.isna(phone)):
        return None
    raw = str(int(phone) if isinstance(phone, float) else phone).strip()
    digits = "".join(filter(str.isdigit, raw))
    if not digits:
        return None
    return f"tel:{'+' if raw.startswith('+') else ''}{digits}"


def email_link(email: Any) -> Optional[str]:
    if not isinstance(email, str) or "@" not in email.strip():
        return None
    return "mailto:" + quote(email.strip(), safe="@")


def directions_url(latitude: Any, longitude: Any) -> Optional[str]:
    """Google Maps directions to the doctor, or None without a usable location."""
    point = coerce_coordinate_pair(latitude, longitude)
    if point is None:
        return None
    return DIRECTIONS_BASE_URL + "?" + urlencode({"api": 1, "destination": f"{point[0]},{point[1]}"}, safe=",")


def handle_streamlit_error(error: Exception, context: str = "operation") -> None:
    err = str(error)
    if "geocod" in err.lower():
        st.error(
            (
                "❌ **Geocoding Error**: Unable to find coordinates for the provided address. "
                "Please check the address and try again."
            )
        )
    elif "network" in err.lower() or "connection" in err.lower():
        st.error("❌ **Network Error**: Unable to reach the directory service. Please check your internet connection.")
    elif "timeout" in err.lower():
        st.error("❌ **Timeout Error**: The service is taking too long to respond. Please try again.")
    elif "file" in err.lower() or "not found" in err.lower():
        st.error("❌ **Data Error**: Directory data files are missing. Please contact support.")
    else:
        st.error(f"❌ **Error during {context}**: {err}")

    st.exception(error)
