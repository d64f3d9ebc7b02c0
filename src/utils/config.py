"""
Configuration and secrets management for the Doctor Finder app.

Values are read from Streamlit's secrets (``.streamlit/secrets.toml``)
with fallbacks for every key, so the app runs with no secrets file at all.

Usage:
    from src.utils.config import get_search_config, get_data_config

    search_config = get_search_config()
    max_radius = search_config["radius_max_km"]

    data_config = get_data_config()
    doctors_path = data_config["data_dir"] / data_config["doctors_file"]
"""

import logging
from pathlib import Path
from typing import Any, Dict

import streamlit as st

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_secret(key_path: str, default: Any = None) -> Any:
    """
    Safely retrieve a secret from Streamlit's secrets management.

    Args:
        key_path: Dot-notation path to the secret (e.g., 'search.radius_max_km')
        default: Default value if secret is not found

    Returns:
        The secret value or default if not found

    Examples:
        >>> get_secret('search.radius_max_km', 200)
        >>> get_secret('app.debug_mode', False)
    """
    try:
        keys = key_path.split(".")
        value = st.secrets

        for key in keys:
            try:
                value = value[key]
            except Exception:
                # Missing section, missing key, or no secrets file at all
                return default

        return value
    except Exception as e:
        logger.warning(f"Failed to retrieve secret '{key_path}': {e}")
        return default


def get_app_config() -> Dict[str, Any]:
    return {
        "environment": get_secret("app.environment", "production"),
        "debug_mode": get_secret("app.debug_mode", False),
        "log_level": get_secret("app.log_level", "INFO"),
    }


def get_search_config() -> Dict[str, int]:
    """
    Get radius search bounds.

    Returns:
        Dictionary with the min, max, step and default search radius in km
    """
    return {
        "radius_min_km": int(get_secret("search.radius_min_km", 10)),
        "radius_max_km": int(get_secret("search.radius_max_km", 200)),
        "radius_step_km": int(get_secret("search.radius_step_km", 10)),
        "radius_default_km": int(get_secret("search.radius_default_km", 100)),
    }


def get_data_config() -> Dict[str, Any]:
    """
    Get the location of the exported document collections.

    Returns:
        Dictionary with the data directory (as a Path) and collection file names
    """
    return {
        "data_dir": Path(get_secret("data.data_dir", "data/sample")),
        "doctors_file": get_secret("data.doctors_file", "doctors.json"),
        "specialties_file": get_secret("data.specialties_file", "specialties.json"),
        "reviews_file": get_secret("data.reviews_file", "reviews.json"),
    }


def get_api_config(api_name: str) -> Dict[str, Any]:
    if api_name == "geocoding":
        return {
            "nominatim_user_agent": get_secret("geocoding.nominatim_user_agent", "doctor_finder"),
            "request_timeout": get_secret("geocoding.request_timeout", 10),
            "rate_limit_delay": get_secret("geocoding.rate_limit_delay", 1.0),
            "max_retries": get_secret("geocoding.max_retries", 3),
        }
    else:
        return {}


def configure_logging() -> None:
    """Apply the configured log level to the root logger."""
    level_name = str(get_app_config()["log_level"]).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{level_name}', falling back to INFO")
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def validate_configuration() -> Dict[str, str]:
    """
    Validate the application configuration and return any warnings or errors.

    Returns:
        Dictionary with configuration validation results
    """
    issues = {}

    search_config = get_search_config()
    if search_config["radius_min_km"] <= 0:
        issues["search"] = "Minimum search radius must be positive"
    elif search_config["radius_min_km"] > search_config["radius_max_km"]:
        issues["search"] = "Minimum search radius is larger than the maximum"
    elif not (search_config["radius_min_km"] <= search_config["radius_default_km"] <= search_config["radius_max_km"]):
        issues["search"] = "Default search radius is outside the configured bounds"
    elif search_config["radius_step_km"] <= 0:
        issues["search"] = "Search radius step must be positive"

    data_config = get_data_config()
    if not data_config["data_dir"].exists():
        issues["data"] = f"Data directory not found: {data_config['data_dir']}"

    app_config = get_app_config()
    if app_config["environment"] not in ["development", "staging", "production"]:
        issues["app"] = f"Unknown environment: {app_config['environment']}"

    return issues


if __name__ == "__main__":
    print("Doctor Finder - Configuration Status")
    print("=" * 50)

    issues = validate_configuration()
    if issues:
        print("⚠️  Configuration Issues Found:")
        for component, issue in issues.items():
            print(f"  - {component}: {issue}")
    else:
        print("✅ Configuration validation passed")

    search = get_search_config()
    print(f"\n📍 Radius: {search['radius_min_km']}-{search['radius_max_km']} km (default {search['radius_default_km']})")
    print(f"🔧 Environment: {get_app_config()['environment']}")
