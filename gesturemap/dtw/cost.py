"""Pairwise cost matrix between two sequences."""

import numpy as np
from scipy.spatial.distance import cdist

from ..errors import EmptySequenceError, MalformedInputError


def as_sequence(values) -> np.ndarray:
    """
    Coerce values to a float sequence.

    Scalars become shape (n,), 3-D points shape (n, 3). A single point given
    as a flat array of length 3 is NOT reinterpreted; pass it as [[x, y, z]].
    """
    seq = np.asarray(values, dtype=np.float64)
    if seq.ndim == 2 and seq.shape[1] == 1:
        seq = seq.reshape(-1)
    if seq.ndim not in (1, 2):
        raise ValueError(f"Sequence must be 1-D or (n, 3), got shape {seq.shape}")
    if seq.ndim == 2 and seq.shape[1] != 3:
        raise ValueError(f"Vector points must have 3 components, got {seq.shape[1]}")
    if not np.all(np.isfinite(seq)):
        raise MalformedInputError("Sequence contains NaN or infinite values")
    return seq


def cost_matrix(seq1, seq2) -> np.ndarray:
    """
    Compute the pairwise cost matrix.

    Args:
        seq1: First sequence (m,) or (m, 3)
        seq2: Second sequence (n,) or (n, 3)

    Returns:
        (m, n) array where cell (i, j) = distance(seq1[i], seq2[j])
    """
    seq1 = as_sequence(seq1)
    seq2 = as_sequence(seq2)

    if len(seq1) == 0 or len(seq2) == 0:
        raise EmptySequenceError(
            f"Cannot build a cost matrix from empty sequences (lengths {len(seq1)}, {len(seq2)})"
        )
    if seq1.ndim != seq2.ndim:
        raise ValueError("Cannot compare scalar sequences with 3-D sequences")

    if seq1.ndim == 1:
        # cityblock on single-column inputs is |a - b|
        return cdist(seq1.reshape(-1, 1), seq2.reshape(-1, 1), metric='cityblock')

    # Vector cost is the squared Euclidean distance, not square-rooted
    return cdist(seq1, seq2, metric='sqeuclidean')
