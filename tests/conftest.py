"""Pytest configuration helpers.

Ensure the project root is on sys.path so tests can import the `src` package
when pytest is invoked from the repository root or an isolated test runner.
"""

import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest


def pytest_configure():
    # Insert the repository root (parent of the tests directory) at the front
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def two_city_corpus():
    """Alice in Gaborone and Bob in Francistown, already in display columns."""
    return pd.DataFrame(
        [
            {
                "ID": "alice",
                "Name": "Alice Smith",
                "Specialty": "Cardiology",
                "City": "Gaborone",
                "Latitude": -24.6,
                "Longitude": 25.9,
                "Rating": 4.5,
            },
            {
                "ID": "bob",
                "Name": "Bob Jones",
                "Specialty": "Dermatology",
                "City": "Francistown",
                "Latitude": -21.2,
                "Longitude": 27.5,
                "Rating": 0.0,
            },
        ]
    )


@pytest.fixture
def mixed_corpus(two_city_corpus):
    """The two-city corpus plus records with missing fields."""
    extra = pd.DataFrame(
        [
            {
                "ID": "nameless",
                "Name": None,
                "Specialty": "Cardiology",
                "City": "Gaborone",
                "Latitude": -24.65,
                "Longitude": 25.91,
                "Rating": 3.0,
            },
            {
                "ID": "nowhere",
                "Name": "Carol Nowhere",
                "Specialty": "Cardiology",
                "City": "Gaborone",
                "Latitude": np.nan,
                "Longitude": np.nan,
                "Rating": 4.0,
            },
            {
                "ID": "cityless",
                "Name": "Dan Roamer",
                "Specialty": None,
                "City": None,
                "Latitude": -24.61,
                "Longitude": 25.92,
                "Rating": 2.5,
            },
        ]
    )
    return pd.concat([two_city_corpus, extra], ignore_index=True)


@pytest.fixture
def override_secrets(monkeypatch):
    """Serve config values from a dict instead of Streamlit secrets.

    Usage: ``override_secrets({"search.radius_max_km": 50})``.
    """

    def _apply(values):
        def fake_get_secret(key_path, default=None):
            return values.get(key_path, default)

        monkeypatch.setattr("src.utils.config.get_secret", fake_get_secret)

    return _apply


@pytest.fixture
def sample_data_dir():
    """Return the path to the bundled sample collections."""
    return Path(__file__).resolve().parents[1] / "data" / "sample"
