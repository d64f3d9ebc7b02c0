"""
Shared I/O utilities for loading exported document collections.

The directory collections (doctors, specialties, reviews) are exported
from the hosted document store as JSON. CSV and Parquet copies are also
accepted so the same loader serves hand-edited fixtures and cached
snapshots.

Key Functions:
- detect_file_format: Determine file format from filename or bytes
- documents_to_dataframe: Flatten a JSON document export into a DataFrame
- load_dataframe: Universal data loader supporting multiple input types

Supported Formats:
- JSON (.json) - A list of documents, or an object keyed by document id
- CSV (.csv) - Text-based, fast parsing
- Parquet (.parquet) - Columnar format for cached snapshots
- In-memory buffers (BytesIO, bytes, memoryview, bytearray)
- pandas DataFrames (pass-through with column normalization)
"""

from __future__ import annotations

import json
import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

import pandas as pd

logger = logging.getLogger(__name__)

PARQUET_MAGIC = b"PAR1"


def looks_like_json_bytes(buffer: BytesIO) -> bool:
    """Quick heuristic: does the buffer start (after whitespace) with ``[`` or ``{``?"""
    try:
        buffer.seek(0)
        head = buffer.read(64)
        buffer.seek(0)
    except Exception:
        return False
    stripped = head.lstrip()
    if stripped.startswith(b"\xef\xbb\xbf"):
        stripped = stripped[3:].lstrip()
    return stripped[:1] in (b"[", b"{")


def detect_file_format(filename: Optional[str] = None, buffer: Optional[BytesIO] = None) -> Optional[str]:
    """Detect file format from filename extension or buffer content.

    Args:
        filename: Optional filename to check for extension
        buffer: Optional BytesIO buffer to inspect

    Returns:
        'json', 'csv', 'parquet', or None when the format is unknown
    """
    if filename:
        fname_lower = filename.lower()
        if fname_lower.endswith(".json"):
            return "json"
        if fname_lower.endswith(".csv"):
            return "csv"
        if fname_lower.endswith(".parquet"):
            return "parquet"

    if buffer is not None:
        buffer.seek(0)
        head = buffer.read(4)
        buffer.seek(0)
        if head == PARQUET_MAGIC:
            return "parquet"
        if looks_like_json_bytes(buffer):
            return "json"

    return None


def documents_to_dataframe(payload: Union[Sequence[Mapping[str, Any]], Mapping[str, Any]]) -> pd.DataFrame:
    """Flatten a document export into one row per document.

    An object keyed by document id is accepted as well as a plain list; in
    the keyed form the key becomes the ``id`` field unless the document
    already carries one.
    """
    if isinstance(payload, Mapping):
        if "documents" in payload and isinstance(payload["documents"], list):
            records = list(payload["documents"])
        else:
            records = []
            for doc_id, doc in payload.items():
                if not isinstance(doc, Mapping):
                    raise ValueError(f"Document '{doc_id}' is not an object")
                record = dict(doc)
                record.setdefault("id", doc_id)
                records.append(record)
    elif isinstance(payload, list):
        records = list(payload)
    else:
        raise ValueError(f"Unsupported document payload: {type(payload).__name__}")

    bad = [i for i, rec in enumerate(records) if not isinstance(rec, Mapping)]
    if bad:
        raise ValueError(f"Entries at positions {bad[:5]} are not documents")

    return pd.DataFrame.from_records(records)


def load_dataframe(
    raw_input: Union[Path, str, BytesIO, bytes, pd.DataFrame, Any],
    *,
    filename: Optional[str] = None,
) -> pd.DataFrame:
    """Universal data loader supporting multiple input types and formats.

    Args:
        raw_input: Data source (file path, buffer, or DataFrame)
        filename: Optional filename for logging and format detection

    Returns:
        pd.DataFrame with normalized column names (whitespace stripped)

    Raises:
        FileNotFoundError: If file path doesn't exist
        TypeError: If input type is not supported
        ValueError: If the data cannot be read in any supported format
    """
    # Handle DataFrame input (pass-through with normalization)
    if isinstance(raw_input, pd.DataFrame):
        logger.info("Processing DataFrame with %d rows (source: %s)", len(raw_input), filename or "unknown")
        df = raw_input.copy()
        df.columns = [str(c).strip() for c in df.columns]
        return df

    # Handle file path input
    if isinstance(raw_input, (Path, str)):
        raw_path = Path(raw_input)
        if not raw_path.exists():
            raise FileNotFoundError(f"File not found: {raw_path}")

        logger.info("Loading data from %s", raw_path)
        buffer = BytesIO(raw_path.read_bytes())
        return _load_from_buffer(buffer, filename or raw_path.name)

    logger.info("Loading data from memory (source: %s)", filename or "uploaded file")

    if isinstance(raw_input, BytesIO):
        buffer = raw_input
    elif isinstance(raw_input, (bytes, bytearray, memoryview)):
        buffer = BytesIO(bytes(raw_input))
    else:
        raise TypeError(f"Cannot load data from {type(raw_input).__name__}")

    return _load_from_buffer(buffer, filename)


def _load_from_buffer(buffer: BytesIO, filename: Optional[str]) -> pd.DataFrame:
    format_type = detect_file_format(filename, buffer)
    buffer.seek(0)

    try:
        if format_type == "json":
            payload = json.loads(buffer.getvalue().decode("utf-8-sig"))
            df = documents_to_dataframe(payload)
        elif format_type == "parquet":
            df = pd.read_parquet(buffer)
        else:
            # CSV is the fallback for unknown extensions
            df = pd.read_csv(buffer)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not parse JSON data (source: {filename}): {e}") from e
    except pd.errors.ParserError as e:
        raise ValueError(f"Could not parse CSV data (source: {filename}): {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    return df


__all__ = [
    "detect_file_format",
    "documents_to_dataframe",
    "load_dataframe",
    "looks_like_json_bytes",
]
