"""Shared helpers for writing gesture CSV files in tests."""

import pandas as pd


def format_vector(values):
    """Render values the way the dataset stores them: "[1.0, 2.0]"."""
    return "[" + ", ".join(str(float(v)) for v in values) + "]"


def write_gesture_csv(path, records, dims=3):
    """
    Write (id, user, gesture, sequence) tuples as a gesture CSV.

    3-D sequences are lists of (x, y, z) points; 1-D sequences are lists of floats.
    """
    rows = []
    for rec_id, user, gesture, sequence in records:
        row = {"id": rec_id, "user": user, "gesture": gesture}
        if dims == 3:
            for k, axis in enumerate("xyz"):
                row[axis] = format_vector(p[k] for p in sequence)
        else:
            row["x"] = format_vector(sequence)
        rows.append(row)
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


def synthetic_gestures(n_records=10, length=6):
    """Alternate two well-separated 3-D gestures: 1 near the origin, 2 near (5, 5, 5)."""
    records = []
    for i in range(n_records):
        gesture = 1 if i % 2 == 0 else 2
        base = 0.0 if gesture == 1 else 5.0
        jitter = 0.05 * (i % 3)
        sequence = [(base + jitter + 0.1 * t, base - jitter, base + 0.05 * t) for t in range(length + i % 2)]
        records.append((i + 1, i % 3, gesture, sequence))
    return records
