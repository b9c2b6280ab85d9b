"""
gesturemap - Main Entry Point
Loads gesture recordings, trains per-class DTW templates and reports accuracy
"""

import argparse
import logging
import sys

from gesturemap import config
from gesturemap.errors import GestureMapError
from gesturemap.main import run

logger = logging.getLogger("gesturemap")


def build_parser():
    parser = argparse.ArgumentParser(
        description='gesturemap - DTW nearest-template gesture recognition',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python app.py gestures.csv                      # 80/20 split, total DTW cost
  python app.py gestures.csv --train-size 0.6     # Use the first 60% for training
  python app.py gestures.csv --normalized         # Compare by normalized DTW cost
  python app.py gestures.csv --show-paths         # Print alignment paths of correct matches
  python app.py gestures.csv --report record/run.json
        """
    )

    parser.add_argument('input', type=str,
                        help='CSV file with id,user,gesture,x,y,z columns')
    parser.add_argument('--train-size', type=float, default=config.TRAIN_SIZE,
                        help=f'Fraction of records used for training (Default: {config.TRAIN_SIZE})')
    parser.add_argument('--normalized', action='store_true',
                        help='Classify by normalized instead of total DTW cost')
    parser.add_argument('--show-paths', action='store_true',
                        help='Print the warp matrix and path for every correct classification')
    parser.add_argument('--report', type=str, default=None,
                        help='Write a JSON evaluation report to this file')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv=None):
    """Main Program"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.LOG_LEVEL),
        format=config.LOG_FORMAT
    )

    try:
        report = run(
            args.input,
            train_size=args.train_size,
            normalized=True if args.normalized else None,
            show_paths=args.show_paths,
            report_path=args.report,
        )
    except (GestureMapError, ValueError) as e:
        logger.error(str(e))
        return 1

    print(f"Accuracy: {report.accuracy}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
