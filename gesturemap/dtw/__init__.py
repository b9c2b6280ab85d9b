# Dynamic Time Warping modules
from .cost import as_sequence, cost_matrix
from .engine import warp_matrix, total_cost, normalized_cost, dtw_distance, DTWAlignment
from .path import reconstruct_path
from .aligner import align_sequences, DTW3DAlignment
