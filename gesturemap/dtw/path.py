"""Backtracking of a warp matrix into an alignment path."""

from typing import List, Tuple

import numpy as np

from ..errors import EmptySequenceError


def reconstruct_path(warp: np.ndarray) -> List[Tuple[int, int]]:
    """
    Reconstruct one optimal alignment path from a warp matrix.

    Walks backward from the last cell. At each step the cheapest of the
    up (x-1, y), left (x, y-1) and diagonal (x-1, y-1) neighbours is taken;
    ties go up first, then left, then diagonal.

    Args:
        warp: (m+1, n+1) accumulated cost matrix with sentinel row/column 0

    Returns:
        1-based (row, col) pairs ordered from (1, 1) to (m, n)
    """
    rows, cols = warp.shape
    if rows < 2 or cols < 2:
        raise EmptySequenceError("Warp matrix has no real cells to backtrack from")

    pos = (rows - 1, cols - 1)
    path = [pos]
    while pos != (1, 1):
        x, y = pos
        # Row 1 and column 1 can only be left along the other axis
        if x == 1:
            pos = (1, y - 1)
            path.append(pos)
            continue
        if y == 1:
            pos = (x - 1, 1)
            path.append(pos)
            continue

        up = warp[x - 1, y]
        left = warp[x, y - 1]
        diagonal = warp[x - 1, y - 1]
        min_cost = min(up, left, diagonal)

        if up == min_cost:
            pos = (x - 1, y)
        elif left == min_cost:
            pos = (x, y - 1)
        else:
            pos = (x - 1, y - 1)
        path.append(pos)

    path.reverse()
    return path
