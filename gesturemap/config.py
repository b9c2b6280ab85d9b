"""Global configuration for gesturemap."""

from pathlib import Path

# Path settings
# Resolve the project root relative to this config file (gesturemap/config.py -> gesturemap/ -> root)
BASE_DIR = Path(__file__).resolve().parent.parent
REPORT_DIR = BASE_DIR / "record"

# Dataset settings
# Expected columns of the gesture CSV. Axis columns hold bracketed lists, e.g. "[0.1, 0.2]".
ID_COLUMN = "id"
USER_COLUMN = "user"
GESTURE_COLUMN = "gesture"
AXIS_COLUMNS = ("x", "y", "z")

# Fraction of records (taken from the head of the file) used for training
TRAIN_SIZE = 0.8

# DTW settings
# 'total' compares templates by accumulated warp cost, 'normalized' divides by the
# integer average of the two sequence lengths
DTW_COST = 'total'

# Diagnostics
PRINT_WIDTH = 8
PRINT_PRECISION = 2
PROGRESS_INTERVAL = 5  # Log evaluation progress every N test records

# Logging
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(levelname)s: %(message)s'
