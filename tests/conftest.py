"""Shared test fixtures and helpers."""

import os
import sys

import numpy as np
import pytest

# Ensure the project root is in the Python path for module imports
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from gesturemap.records import DataRecord
from tests.data_utils import synthetic_gestures, write_gesture_csv


@pytest.fixture
def example_1d():
    """The hand-worked scalar example."""
    return [1.0, 2.0, 3.0], [2.0, 2.0, 3.0, 4.0]


@pytest.fixture
def example_3d():
    return (
        np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]]),
        np.array([[1.0, 0.0, 0.0], [1.0, 1.0, 1.0], [2.0, 2.0, 2.0]]),
    )


@pytest.fixture
def synthetic_records():
    return [
        DataRecord(id=rec_id, gesture=gesture, sequence=np.array(seq, dtype=float), user=user)
        for rec_id, user, gesture, seq in synthetic_gestures()
    ]


@pytest.fixture
def gesture_csv(tmp_path):
    """A small, well-separated 3-D gesture dataset on disk."""
    return write_gesture_csv(tmp_path / "gestures.csv", synthetic_gestures())
