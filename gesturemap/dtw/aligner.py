"""3-D sequence alignment: averages the two sequences along the DTW path."""

from typing import List, Optional, Tuple

import numpy as np

from .engine import DTWAlignment


def align_sequences(seq1: np.ndarray, seq2: np.ndarray, path: List[Tuple[int, int]]) -> np.ndarray:
    """
    Merge two aligned sequences into one.

    Args:
        seq1: (m, 3) first sequence
        seq2: (n, 3) second sequence
        path: 1-based (x, y) warp-matrix coordinates

    Returns:
        (len(path), 3) array where step k is the midpoint of seq1[x-1] and seq2[y-1]
    """
    if not path:
        raise ValueError("Cannot align sequences along an empty path")

    rows = np.fromiter((x - 1 for x, _ in path), dtype=np.intp, count=len(path))
    cols = np.fromiter((y - 1 for _, y in path), dtype=np.intp, count=len(path))
    return (seq1[rows] + seq2[cols]) / 2.0


class DTW3DAlignment(DTWAlignment):
    """DTW alignment of 3-D point sequences that also yields an averaged sequence.

    The averaged sequence can be taken out once with consume_aligned_sequence();
    call produce_aligned_sequence() to build it again.
    """

    def __init__(self, seq1, seq2):
        super().__init__(seq1, seq2)
        if self.seq1.ndim != 2:
            raise ValueError("DTW3DAlignment requires (n, 3) point sequences")
        self._aligned_sequence: Optional[np.ndarray] = None
        self.produce_aligned_sequence()

    def produce_aligned_sequence(self) -> None:
        self._aligned_sequence = align_sequences(self.seq1, self.seq2, self.path)

    @property
    def has_aligned_sequence(self) -> bool:
        return self._aligned_sequence is not None

    def consume_aligned_sequence(self) -> np.ndarray:
        """Hand out the aligned sequence and forget it."""
        if self._aligned_sequence is None:
            raise RuntimeError(
                "Aligned sequence was already consumed; call produce_aligned_sequence() first"
            )
        aligned, self._aligned_sequence = self._aligned_sequence, None
        return aligned
