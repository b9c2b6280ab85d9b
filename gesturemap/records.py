"""Gesture records and the train/test split."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from . import config


@dataclass
class DataRecord:
    """One gesture recording."""
    id: int
    gesture: int
    sequence: np.ndarray
    user: Optional[int] = None

    @property
    def is_3d(self) -> bool:
        return self.sequence.ndim == 2


def train_test_split(records: Sequence[DataRecord], train_size: float = None) -> Tuple[List[DataRecord], List[DataRecord]]:
    """
    Split records into train and test subsets.

    The first int(len(records) * train_size) records train, the rest test.
    No shuffling.

    Args:
        records: Records in file order
        train_size: Fraction in (0, 1); defaults to config.TRAIN_SIZE

    Returns:
        (train, test)
    """
    if train_size is None:
        train_size = config.TRAIN_SIZE
    if not 0.0 < train_size < 1.0:
        raise ValueError(f"train_size must be between 0 and 1 (exclusive), got {train_size}")

    records = list(records)
    n_train = int(len(records) * train_size)
    return records[:n_train], records[n_train:]
