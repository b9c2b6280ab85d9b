"""Diagnostic rendering of DTW matrices and alignment paths."""

from typing import Optional

import numpy as np

from . import config
from .dtw import DTWAlignment

HIGHLIGHT = "\033[42m"
RESET = "\033[0m"


def _cell(value: float, width: int, precision: int) -> str:
    return f"{value:{width}.{precision}f}"


def format_matrix(matrix: np.ndarray, width: int = None, precision: int = None) -> str:
    """Render a 2-D matrix as fixed-width rows."""
    width = width or config.PRINT_WIDTH
    precision = config.PRINT_PRECISION if precision is None else precision
    return "\n".join(
        " ".join(_cell(v, width, precision) for v in row) for row in np.asarray(matrix)
    )


def format_warp_matrix(alignment: DTWAlignment, width: int = None, precision: int = None) -> str:
    """Warp matrix without its sentinel row and column, preceded by the cost."""
    body = format_matrix(alignment.warp_matrix[1:, 1:], width, precision)
    return f"Cost: {alignment.cost}\n{body}"


def format_path(alignment: DTWAlignment, color: bool = True, width: int = None, precision: int = None) -> str:
    """
    Render the warp matrix with the alignment path highlighted.

    Scalar sequences are printed along the edges: seq2 across the top and
    seq1 down the side. Path cells get a green background, or square
    brackets when color is False.
    """
    width = width or config.PRINT_WIDTH
    precision = config.PRINT_PRECISION if precision is None else precision
    on_path = set(alignment.path)
    scalar = alignment.seq1.ndim == 1

    lines = []
    if scalar:
        lines.append(" " * width + "".join(_cell(v, width, precision) for v in alignment.seq2))

    warp = alignment.warp_matrix
    for i in range(1, warp.shape[0]):
        line = _cell(alignment.seq1[i - 1], width, precision) if scalar else ""
        for j in range(1, warp.shape[1]):
            text = _cell(warp[i, j], width, precision)
            if (i, j) in on_path:
                text = f"{HIGHLIGHT}{text}{RESET}" if color else f"[{text.strip():>{width - 2}}]"
            line += text
        lines.append(line)
    return "\n".join(lines)


def plot_alignment(alignment: DTWAlignment, ax=None, title: Optional[str] = None):
    """
    Plot the warp matrix as a heat map with the path overlaid.

    Returns:
        The matplotlib Axes drawn on.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 5))

    warp = alignment.warp_matrix[1:, 1:]
    im = ax.imshow(warp, origin='lower', aspect='auto', cmap='viridis')
    ax.figure.colorbar(im, ax=ax, label='Accumulated cost')

    rows = [x - 1 for x, _ in alignment.path]
    cols = [y - 1 for _, y in alignment.path]
    ax.plot(cols, rows, color='red', linewidth=2, marker='o', markersize=3)

    ax.set_xlabel('seq2 index')
    ax.set_ylabel('seq1 index')
    ax.set_title(title or f'DTW alignment (cost {alignment.cost:.2f})')
    return ax
