# gesturemap - DTW gesture recognition

# DTW exports
from .dtw import (
    as_sequence, cost_matrix, warp_matrix, total_cost, normalized_cost,
    dtw_distance, reconstruct_path, align_sequences, DTWAlignment, DTW3DAlignment
)

# Classification exports
from .recognizers import GestureClassifier, EvaluationReport, Prediction

# Data exports
from .records import DataRecord, train_test_split
from .data_loader import load_records, parse_vector, zip_axes

# Error exports
from .errors import (
    GestureMapError, MalformedInputError, EmptySequenceError, NoTemplatesError, EmptyDatasetError
)

__version__ = "0.1.0"
