"""Readers for CSV and JSON test-data resources."""

from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Type, TypeVar

import pandas as pd
from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from utils.config import get_settings
from utils.exceptions import MalformedDataError, ResourceNotFoundError

RESOURCES_DIR = Path(__file__).parent / "resources"

Row = Tuple[Optional[str], ...]
ModelT = TypeVar("ModelT", bound=BaseModel)


def resources_root() -> Path:
    """Directory resource names are resolved against (``TESTDATA_DIR`` overrides)."""
    return get_settings().testdata_dir or RESOURCES_DIR


def resolve_resource(resource: str | Path) -> Path:
    """Resolve a resource name or absolute path to an existing file.

    Raises:
        ResourceNotFoundError: if the resource does not resolve to a file
    """
    path = Path(resource)
    if not path.is_absolute():
        path = resources_root() / path
    if not path.is_file():
        logger.error(f"Resource not found: {resource} (looked in {path})")
        raise ResourceNotFoundError(f"Resource not found: {resource}", resource=str(resource))
    return path


def _normalize(value) -> Optional[str]:
    # pandas yields NaN for fields missing at the end of a short row
    if value is None or pd.isna(value) or value == "":
        return None
    return value


def read_csv_rows(resource: str | Path, skip_header: bool = True) -> List[Row]:
    """Read a CSV resource into rows of fields.

    Empty fields come back as ``None`` so callers can tell an absent value from
    a present one.

    Args:
        resource: Resource name under the data directory, or an absolute path
        skip_header: Treat the first line as a header and leave it out of the result

    Returns:
        List of row tuples in file order

    Raises:
        ResourceNotFoundError: if the resource does not exist
        MalformedDataError: if the content cannot be parsed
    """
    path = resolve_resource(resource)
    logger.info(f"Reading CSV data from resource: {resource}")

    # header read as data: the first line fixes the row width
    try:
        data = pd.read_csv(
            path,
            header=None,
            index_col=False,
            dtype=str,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"CSV file is empty: {resource}")
        return []
    except (pd.errors.ParserError, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Failed to parse CSV data from resource {resource}: {e}")
        raise MalformedDataError(f"Failed to parse CSV data from: {resource}", resource=str(resource)) from e

    if skip_header:
        data = data.iloc[1:]

    if data.empty:
        logger.warning(f"No data rows found in CSV: {resource}")
        return []

    rows = [tuple(_normalize(value) for value in record) for record in data.itertuples(index=False, name=None)]
    logger.info(f"Successfully read {len(rows)} data rows from {resource}")
    return rows


def read_json_records(resource: str | Path, model: Type[ModelT]) -> List[ModelT]:
    """Read a JSON array resource into validated records.

    Every element must satisfy ``model``; a single invalid element fails the
    whole read instead of producing a partially-populated record.

    Raises:
        ResourceNotFoundError: if the resource does not exist
        MalformedDataError: if the content is not valid JSON or fails validation
    """
    path = resolve_resource(resource)
    logger.info(f"Reading JSON data from resource: {resource}")

    try:
        records = TypeAdapter(List[model]).validate_json(path.read_bytes())  # type: ignore[valid-type]
    except ValidationError as e:
        logger.error(f"Failed to read JSON data from resource {resource}: {e}")
        raise MalformedDataError(f"Failed to read JSON data from: {resource}", resource=str(resource)) from e

    logger.info(f"Successfully read {len(records)} records from {resource}")
    return records


def read_json_as_rows(
    resource: str | Path,
    model: Type[ModelT],
    converter: Callable[[ModelT], Sequence],
) -> List[tuple]:
    """Read JSON records and convert each one to a parameter row."""
    records = read_json_records(resource, model)
    if not records:
        logger.warning(f"No test data found in: {resource}")
        return []

    rows = [tuple(converter(record)) for record in records]
    logger.info(f"Converted {len(rows)} records to parameter rows")
    return rows
