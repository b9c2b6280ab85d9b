"""gesturemap - load, split, train and evaluate."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List

from . import config
from .data_loader import load_records
from .dtw import DTW3DAlignment, DTWAlignment
from .errors import EmptyDatasetError
from .presentation import format_path
from .records import DataRecord, train_test_split
from .recognizers import EvaluationReport, GestureClassifier

logger = logging.getLogger(__name__)


class GestureMap:
    """Train/test driver around a GestureClassifier."""

    def __init__(self, train_data: List[DataRecord], test_data: List[DataRecord], normalized: bool = None):
        self.train_data = train_data
        self.test_data = test_data
        self.classifier = GestureClassifier(normalized=normalized)

    def train(self):
        self.classifier.train(self.train_data)
        for label, template in sorted(self.classifier.templates.items()):
            logger.debug(f"  gesture {label}: template of {len(template)} points")

    def test(self, show_paths: bool = False) -> EvaluationReport:
        """
        Evaluate on the test records.

        Args:
            show_paths: Print the alignment path of every correctly classified record
        """
        if not self.test_data:
            raise EmptyDatasetError("No test records; lower the train size or add data")

        report = self.classifier.evaluate(self.test_data)
        if show_paths:
            for record, p in zip(self.test_data, report.predictions):
                if p.correct:
                    self.print_path(record)
        return report

    def print_path(self, record: DataRecord):
        template = self.classifier.templates[record.gesture]
        if record.is_3d:
            dtw = DTW3DAlignment(template, record.sequence)
        else:
            dtw = DTWAlignment(template, record.sequence)
        print(f"Record {record.id} (gesture {record.gesture}), cost {dtw.cost:.4f}")
        print(format_path(dtw))
        print()


def write_report(report: EvaluationReport, output_path, **meta) -> Path:
    """Write an evaluation report as JSON and return its path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {'timestamp': datetime.now().isoformat(timespec='seconds'), **meta, **report.to_dict()}
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2)
    logger.info(f"Report written to {output_path}")
    return output_path


def run(csv_path, train_size: float = None, normalized: bool = None,
        show_paths: bool = False, report_path=None) -> EvaluationReport:
    """Run the full pipeline on a CSV file."""
    if train_size is None:
        train_size = config.TRAIN_SIZE

    records = load_records(csv_path)
    train, test = train_test_split(records, train_size)
    logger.info(f"Split {len(records)} records into {len(train)} train / {len(test)} test")

    model = GestureMap(train, test, normalized=normalized)
    model.train()
    report = model.test(show_paths=show_paths)

    if report_path:
        write_report(
            report, report_path,
            source=str(csv_path),
            train_size=train_size,
            normalized=model.classifier.normalized,
        )
    return report
