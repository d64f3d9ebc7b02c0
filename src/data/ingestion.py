"""
Data Ingestion Module - Loading the directory collections.

The hosted document store exports three collections that the app reads:
doctors, specialties and reviews. This module locates the exported files
from configuration, parses them with the shared I/O utilities, normalises
them with the preparation helpers, and caches the results with Streamlit's
cache system. Cache entries are keyed on the file's modification time so
a re-export is picked up without a manual refresh.

A collection that cannot be read is logged and comes back as an empty
DataFrame; the discovery pages treat that the same as "no results".
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

import pandas as pd
import streamlit as st

from src.data.io_utils import load_dataframe
from src.data.preparation import prepare_provider_records, prepare_reviews, prepare_specialties
from src.utils.config import get_data_config

logger = logging.getLogger(__name__)


class DataSource(Enum):
    """Enumeration of the exported collections."""

    DOCTORS = "doctors"
    SPECIALTIES = "specialties"
    REVIEWS = "reviews"


_PREPARERS = {
    DataSource.DOCTORS: prepare_provider_records,
    DataSource.SPECIALTIES: prepare_specialties,
    DataSource.REVIEWS: prepare_reviews,
}


class DataIngestionManager:
    """
    Resolve, load and normalise the exported collections.

    Usage:
        manager = DataIngestionManager()
        doctors = manager.load_data(DataSource.DOCTORS)
    """

    def __init__(self, data_dir: Optional[Path] = None):
        config = get_data_config()
        self.data_dir = Path(data_dir) if data_dir is not None else config["data_dir"]
        self.file_names = {
            DataSource.DOCTORS: config["doctors_file"],
            DataSource.SPECIALTIES: config["specialties_file"],
            DataSource.REVIEWS: config["reviews_file"],
        }

    def get_file_path(self, source: DataSource) -> Path:
        return self.data_dir / self.file_names[source]

    @st.cache_data(ttl=3600, show_spinner=False)
    def _load_and_process_data_cached(_self, source_value: str, path_str: str, last_modified: float) -> pd.DataFrame:
        """
        Parse and normalise one collection file.

        ``last_modified`` is only part of the cache key: a newer export
        invalidates the cached frame.
        """
        raw_df = load_dataframe(path_str)
        df = _PREPARERS[DataSource(source_value)](raw_df)
        logger.info(f"Processed {len(df)} records for {source_value}")
        return df

    def load_data(self, source: DataSource) -> pd.DataFrame:
        path = self.get_file_path(source)
        if not path.exists():
            logger.warning(f"No export found for {source.value} at {path}")
            return _PREPARERS[source](pd.DataFrame())

        try:
            return self._load_and_process_data_cached(source.value, str(path), path.stat().st_mtime)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to load {source.value} from {path}: {e}")
            return _PREPARERS[source](pd.DataFrame())

    def get_data_status(self) -> Dict[str, Dict[str, object]]:
        status = {}
        for source in DataSource:
            path = self.get_file_path(source)
            status[source.value] = {
                "path": str(path),
                "exists": path.exists(),
                "last_modified": pd.Timestamp(path.stat().st_mtime, unit="s") if path.exists() else None,
            }
        return status


def get_data_manager() -> DataIngestionManager:
    return DataIngestionManager()


def load_provider_data() -> pd.DataFrame:
    return get_data_manager().load_data(DataSource.DOCTORS)


def load_specialties() -> pd.DataFrame:
    return get_data_manager().load_data(DataSource.SPECIALTIES)


def load_reviews() -> pd.DataFrame:
    return get_data_manager().load_data(DataSource.REVIEWS)


def refresh_data_cache() -> None:
    """Drop every cached collection so the next load re-reads the exports."""
    st.cache_data.clear()
    logger.info("Cleared cached directory data")


def get_data_ingestion_status() -> Dict[str, Dict[str, object]]:
    return get_data_manager().get_data_status()
