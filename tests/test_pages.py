"""Page-level tests using Streamlit's in-process AppTest runner.

Data loading is replaced with a stub so the pages run without exports.
"""
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

PAGES_DIR = Path(__file__).resolve().parents[1] / "pages"


def _failing_loader():
    raise RuntimeError("directory export is corrupt")


@pytest.fixture
def broken_data(monkeypatch):
    monkeypatch.setattr("src.app_logic.load_application_data", _failing_loader)


@pytest.mark.parametrize("page", ["1_🔎_Search.py", "2_🗺️_Map.py"])
def test_load_failure_shows_one_error_and_stops(broken_data, page):
    at = AppTest.from_file(str(PAGES_DIR / page), default_timeout=30)

    at.run()

    assert len(at.error) == 1
    assert "loading doctors" in at.error[0].value
    assert not any("not available yet" in info.value for info in at.info)
    assert not any("Location unavailable" in error.value for error in at.error)
