"""Data loading package for Doctor Finder."""

from .ingestion import (
    DataIngestionManager,
    DataSource,
    get_data_ingestion_status,
    load_provider_data,
    load_reviews,
    load_specialties,
    refresh_data_cache,
)
from .preparation import (
    PreparationSummary,
    prepare_provider_records,
    prepare_provider_records_with_summary,
    prepare_reviews,
    prepare_specialties,
)

__all__ = [
    "DataIngestionManager",
    "DataSource",
    "get_data_ingestion_status",
    "load_provider_data",
    "load_reviews",
    "load_specialties",
    "refresh_data_cache",
    "PreparationSummary",
    "prepare_provider_records",
    "prepare_provider_records_with_summary",
    "prepare_reviews",
    "prepare_specialties",
]
