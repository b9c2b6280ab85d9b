"""Record loading utilities for gesturemap.

Reads gesture recordings from a CSV file whose axis columns hold bracketed,
comma-separated numeric lists:

    id,user,gesture,x,y,z
    1,3,2,"[0.1, 0.4]","[1.0, 1.2]","[0.0, -0.3]"

With y and z present every record is a 3-D sequence; with only x it is a
scalar sequence. Any malformed value aborts the whole load.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from . import config
from .errors import MalformedInputError
from .records import DataRecord

logger = logging.getLogger(__name__)


def parse_vector(text: str) -> List[float]:
    """Parse "[1.0, 2.5, 3]" into [1.0, 2.5, 3.0]."""
    if not isinstance(text, str):
        raise MalformedInputError(f"Expected a bracketed list, got {text!r}")

    body = text.replace('[', '').replace(']', '').strip()
    if not body:
        return []

    values = []
    for item in body.split(','):
        try:
            values.append(float(item.strip()))
        except ValueError:
            raise MalformedInputError(f"Cannot parse {item.strip()!r} as a number in {text!r}") from None
        if not np.isfinite(values[-1]):
            raise MalformedInputError(f"Non-finite value {item.strip()!r} in {text!r}")
    return values


def zip_axes(x: List[float], y: List[float], z: List[float]) -> np.ndarray:
    """Combine per-axis lists into an (n, 3) point sequence."""
    if not (len(x) == len(y) == len(z)):
        raise MalformedInputError(
            f"Axis lists have unequal lengths: x={len(x)}, y={len(y)}, z={len(z)}"
        )
    return np.column_stack([x, y, z]).astype(np.float64).reshape(-1, 3)


def _parse_int(value, column: str, row: int) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        raise MalformedInputError(f"Row {row}: column '{column}' is not an integer: {value!r}") from None


def _optional_int(value, column: str, row: int) -> Optional[int]:
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return None
    return _parse_int(value, column, row)


def records_from_dataframe(df: pd.DataFrame, axis_columns: Iterable[str] = config.AXIS_COLUMNS) -> List[DataRecord]:
    """
    Convert a raw (string-typed) DataFrame into DataRecords.

    Returns:
        Records in row order.
    """
    axis_columns = tuple(axis_columns)
    required = [config.ID_COLUMN, config.GESTURE_COLUMN, axis_columns[0]]
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise MalformedInputError(f"Missing required columns: {', '.join(missing)}")

    is_3d = all(col in df.columns for col in axis_columns)
    has_user = config.USER_COLUMN in df.columns

    records = []
    for row, raw in enumerate(df.to_dict('records'), start=1):
        try:
            if is_3d:
                sequence = zip_axes(*(parse_vector(raw[col]) for col in axis_columns))
            else:
                sequence = np.asarray(parse_vector(raw[axis_columns[0]]), dtype=np.float64)
        except MalformedInputError as e:
            raise MalformedInputError(f"Row {row}: {e}") from None

        records.append(DataRecord(
            id=_parse_int(raw[config.ID_COLUMN], config.ID_COLUMN, row),
            gesture=_parse_int(raw[config.GESTURE_COLUMN], config.GESTURE_COLUMN, row),
            sequence=sequence,
            user=_optional_int(raw[config.USER_COLUMN], config.USER_COLUMN, row) if has_user else None,
        ))

    return records


def load_records(csv_path) -> List[DataRecord]:
    """
    Load gesture records from a CSV file.

    Returns:
        Records in file order.
    """
    path = Path(csv_path)
    if not path.is_file():
        raise MalformedInputError(f"Data file does not exist: {path}")

    try:
        df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Cannot read {path}: {e}") from e

    records = records_from_dataframe(df)
    dims = "3-D" if records and records[0].is_3d else "1-D"
    logger.info(f"Loaded {len(records)} {dims} records from {path.name}")
    return records
