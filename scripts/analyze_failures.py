"""Analyze which gestures are failing and what they are confused with."""
import sys
import os
import glob
import json

# Ensure the project root is in the Python path for module imports
_current_dir = os.path.dirname(os.path.abspath(__file__))
_project_root = os.path.dirname(_current_dir)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from gesturemap import config


def latest_report(record_dir):
    json_files = sorted(glob.glob(os.path.join(record_dir, "*.json")))
    return json_files[-1] if json_files else None


def summarize(result, top=10):
    print("=" * 80)
    print(f"FAILURE ANALYSIS: {result.get('timestamp', 'unknown')}")
    print("=" * 80)
    print(f"\nOverall accuracy: {result['accuracy']*100:.1f}% ({result['correct']}/{result['total']})")

    print("\nPer-Gesture Performance (weakest first):")
    print("-" * 80)
    print(f"{'Gesture':<10} {'Accuracy':>10} {'Correct/Total':>15}")
    per_class = sorted(result['per_class'].items(), key=lambda kv: kv[1]['accuracy'])
    for label, stats in per_class:
        print(f"{label:<10} {stats['accuracy']*100:>9.1f}% {stats['correct']:>7}/{stats['total']:<7}")

    print("\nMost Frequent Confusions:")
    print("-" * 80)
    if not result['confusions']:
        print("None")
    for c in result['confusions'][:top]:
        print(f"{c['expected']:>4} -> {c['predicted']:<4} x{c['count']}")


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else latest_report(str(config.REPORT_DIR))
    if not path:
        print("No results found!")
        sys.exit(1)

    with open(path, 'r', encoding='utf-8') as f:
        result = json.load(f)
    summarize(result)


if __name__ == "__main__":
    main()
