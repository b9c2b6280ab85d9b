"""Pairwise DTW distances between the trained gesture templates."""

import sys
import os
import argparse
import itertools

# Ensure the project root is in the Python path for module imports
_current_dir = os.path.dirname(os.path.abspath(__file__))
_project_root = os.path.dirname(_current_dir)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from gesturemap import config
from gesturemap.data_loader import load_records
from gesturemap.dtw import dtw_distance
from gesturemap.records import train_test_split
from gesturemap.recognizers import GestureClassifier


def template_distances(templates, normalized=False):
    """Yield (label1, label2, distance) for every unordered pair of templates."""
    for label1, label2 in itertools.combinations(sorted(templates), 2):
        yield label1, label2, dtw_distance(templates[label1], templates[label2], normalized=normalized)


def main(argv=None):
    parser = argparse.ArgumentParser(description='DTW distances between class templates')
    parser.add_argument('input', help='Gesture CSV file')
    parser.add_argument('--train-size', type=float, default=config.TRAIN_SIZE)
    parser.add_argument('--normalized', action='store_true')
    parser.add_argument('--output', default='template_distances.txt')
    args = parser.parse_args(argv)

    train, _ = train_test_split(load_records(args.input), args.train_size)
    classifier = GestureClassifier()
    classifier.train(train)

    print(f"Found {len(classifier.templates)} templates.")
    print(f"Calculating distances for {len(classifier.templates) * (len(classifier.templates) - 1) // 2} pairs...")

    with open(args.output, "w", encoding="utf-8") as f:
        f.write("Gesture1,Gesture2,Distance\n")
        for label1, label2, dist in template_distances(classifier.templates, args.normalized):
            f.write(f"{label1},{label2},{dist:.4f}\n")

    print(f"Done. Results written to {args.output}")


if __name__ == "__main__":
    main()
