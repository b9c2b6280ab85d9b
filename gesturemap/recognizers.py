"""Nearest-template gesture classification with DTW."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

import numpy as np

from . import config
from .dtw import as_sequence, dtw_distance
from .errors import EmptyDatasetError, EmptySequenceError, NoTemplatesError
from .records import DataRecord

logger = logging.getLogger(__name__)


# =============================================================================
# Evaluation Report
# =============================================================================

@dataclass
class Prediction:
    record_id: int
    expected: int
    predicted: int
    cost: float

    @property
    def correct(self) -> bool:
        return self.expected == self.predicted


@dataclass
class EvaluationReport:
    """Outcome of classifying a test set."""
    predictions: List[Prediction] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.predictions)

    @property
    def correct(self) -> int:
        return sum(1 for p in self.predictions if p.correct)

    @property
    def accuracy(self) -> float:
        if not self.predictions:
            raise EmptyDatasetError("Accuracy is undefined for an empty test set")
        return self.correct / self.total

    def per_class(self) -> Dict[int, Dict[str, float]]:
        """Correct/total/accuracy per expected label."""
        stats = defaultdict(lambda: {'correct': 0, 'total': 0})
        for p in self.predictions:
            stats[p.expected]['total'] += 1
            if p.correct:
                stats[p.expected]['correct'] += 1
        return {
            label: {**s, 'accuracy': s['correct'] / s['total']}
            for label, s in sorted(stats.items())
        }

    def confusions(self) -> List[Tuple[int, int, int]]:
        """(expected, predicted, count) for every misclassification, most frequent first."""
        counts = defaultdict(int)
        for p in self.predictions:
            if not p.correct:
                counts[(p.expected, p.predicted)] += 1
        return sorted(((e, pr, c) for (e, pr), c in counts.items()), key=lambda x: (-x[2], x[0], x[1]))

    def to_dict(self) -> Dict:
        return {
            'correct': self.correct,
            'total': self.total,
            'accuracy': self.accuracy,
            'per_class': {str(label): s for label, s in self.per_class().items()},
            'confusions': [
                {'expected': e, 'predicted': pr, 'count': c} for e, pr, c in self.confusions()
            ],
            'predictions': [
                {
                    'id': p.record_id,
                    'expected': p.expected,
                    'predicted': p.predicted,
                    'cost': p.cost,
                }
                for p in self.predictions
            ],
        }


# =============================================================================
# Gesture Classifier
# =============================================================================

class GestureClassifier:
    """Keeps one template sequence per gesture label and matches queries by DTW cost."""

    def __init__(self, normalized: bool = None):
        """
        Args:
            normalized: Compare by normalized instead of total DTW cost
                        (None for config.DTW_COST)
        """
        if normalized is None:
            normalized = config.DTW_COST == 'normalized'
        self.normalized = normalized
        self.templates: Dict[int, np.ndarray] = {}

    def set_template(self, label: int, sequence) -> None:
        """Store the template for a label, replacing any previous one."""
        sequence = as_sequence(sequence)
        if len(sequence) == 0:
            raise EmptySequenceError(f"Template for gesture {label} is empty")
        if label in self.templates:
            logger.debug(f"Replacing template for gesture {label}")
        self.templates[label] = sequence

    def train(self, records: Iterable[DataRecord]) -> None:
        """Build templates from training records. The last record of each label wins."""
        count = 0
        for record in records:
            self.set_template(record.gesture, record.sequence)
            count += 1
        logger.info(f"Trained {len(self.templates)} gesture templates from {count} records")

    def distances(self, sequence) -> List[Tuple[int, float]]:
        """DTW cost from the query to every template, in ascending label order."""
        if not self.templates:
            raise NoTemplatesError("No gesture templates; call train() before classifying")

        sequence = as_sequence(sequence)
        if len(sequence) == 0:
            raise EmptySequenceError("Cannot classify an empty sequence")

        return [
            (label, dtw_distance(self.templates[label], sequence, normalized=self.normalized))
            for label in sorted(self.templates)
        ]

    def classify(self, sequence) -> Tuple[int, float]:
        """
        Find the nearest template.

        Returns:
            (label, cost); equal costs resolve to the lowest label
        """
        best_label = None
        best_cost = float('inf')
        for label, cost in self.distances(sequence):
            if best_label is None or cost < best_cost:
                best_label = label
                best_cost = cost
        return best_label, best_cost

    def evaluate(self, records: Iterable[DataRecord]) -> EvaluationReport:
        """Classify every test record and collect the outcome."""
        report = EvaluationReport()
        for i, record in enumerate(records, start=1):
            label, cost = self.classify(record.sequence)
            report.predictions.append(Prediction(record.id, record.gesture, label, cost))
            if i % config.PROGRESS_INTERVAL == 0:
                logger.info(f"Classified {i} records ({report.correct} correct)")

        if report.total:
            logger.info(f"Accuracy: {report.accuracy:.4f} ({report.correct}/{report.total})")
        return report

    def accuracy(self, records: Iterable[DataRecord]) -> float:
        """Fraction of test records whose nearest template has the right label."""
        return self.evaluate(records).accuracy
