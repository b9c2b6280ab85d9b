"""Dynamic Time Warping engine."""

from typing import List, Tuple

import numpy as np

from ..errors import EmptySequenceError
from .cost import as_sequence, cost_matrix
from .path import reconstruct_path


# =============================================================================
# Warp Matrix
# =============================================================================

def warp_matrix(cost: np.ndarray) -> np.ndarray:
    """
    Accumulate a cost matrix into a warp matrix.

    Args:
        cost: (m, n) pairwise cost matrix

    Returns:
        (m+1, n+1) matrix where W[0, 0] = 0, the rest of row 0 and column 0
        are +inf and W[i, j] = C[i-1, j-1] + min(W[i-1, j], W[i, j-1], W[i-1, j-1])
    """
    m, n = cost.shape
    if m == 0 or n == 0:
        raise EmptySequenceError("Cannot warp an empty cost matrix")

    warp = np.full((m + 1, n + 1), np.inf)
    warp[0, 0] = 0.0

    for i in range(1, m + 1):
        prev_row = warp[i - 1]
        row = warp[i]
        cost_row = cost[i - 1]
        for j in range(1, n + 1):
            row[j] = cost_row[j - 1] + min(prev_row[j], row[j - 1], prev_row[j - 1])

    return warp


def total_cost(warp: np.ndarray) -> float:
    """Accumulated cost of the full alignment (the last cell)."""
    return float(warp[-1, -1])


def normalized_cost(total: float, m: int, n: int) -> float:
    """Divide by the integer average of the two sequence lengths."""
    divisor = (m + n) // 2
    if divisor == 0:
        raise EmptySequenceError("Cannot normalize the cost of empty sequences")
    return total / float(divisor)


# =============================================================================
# DTW Alignment
# =============================================================================

class DTWAlignment:
    """Aligns two sequences eagerly on construction.

    Usage:
        dtw = DTWAlignment([1.0, 2.0, 3.0], [2.0, 2.0, 3.0, 4.0])
        dtw.cost            # 2.0
        dtw.path            # [(1, 1), (2, 1), (2, 2), (3, 3), (3, 4)]
    """

    def __init__(self, seq1, seq2):
        self.seq1 = as_sequence(seq1)
        self.seq2 = as_sequence(seq2)

        self.cost_matrix = cost_matrix(self.seq1, self.seq2)
        self.warp_matrix = warp_matrix(self.cost_matrix)
        self.cost = total_cost(self.warp_matrix)
        self.normalized_cost = normalized_cost(self.cost, len(self.seq1), len(self.seq2))
        self.path: List[Tuple[int, int]] = reconstruct_path(self.warp_matrix)

    def get_cost(self, normalized: bool = False) -> float:
        return self.normalized_cost if normalized else self.cost

    def __repr__(self):
        return (f"{type(self).__name__}(len1={len(self.seq1)}, len2={len(self.seq2)}, "
                f"cost={self.cost:.4f})")


def dtw_distance(seq1, seq2, normalized: bool = False) -> float:
    """
    Compute the DTW cost between two sequences without backtracking a path.

    Args:
        seq1, seq2: Scalar (n,) or 3-D (n, 3) sequences
        normalized: Divide by the integer average of the two lengths

    Returns:
        DTW cost
    """
    seq1 = as_sequence(seq1)
    seq2 = as_sequence(seq2)
    total = total_cost(warp_matrix(cost_matrix(seq1, seq2)))
    if normalized:
        return normalized_cost(total, len(seq1), len(seq2))
    return total
