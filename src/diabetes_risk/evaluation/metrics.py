"""
Holdout metrics for binary classifiers.

Counts are taken by exact equality against the labels 0 and 1; every ratio
whose denominator is zero is reported as 0 so single-class holdouts never
raise.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from ..errors import DimensionError


@dataclass(frozen=True)
class Metrics:
    """Accuracy, precision, recall, F1 and the [[TN, FP], [FN, TP]] matrix."""

    accuracy: float
    precision: float
    recall: float
    f1_score: float
    confusion_matrix: tuple[tuple[int, int], tuple[int, int]] = ((0, 0), (0, 0))

    @property
    def true_negatives(self) -> int:
        return self.confusion_matrix[0][0]

    @property
    def false_positives(self) -> int:
        return self.confusion_matrix[0][1]

    @property
    def false_negatives(self) -> int:
        return self.confusion_matrix[1][0]

    @property
    def true_positives(self) -> int:
        return self.confusion_matrix[1][1]

    @property
    def support(self) -> int:
        return sum(sum(row) for row in self.confusion_matrix)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload['confusion_matrix'] = [list(row) for row in self.confusion_matrix]
        return payload


def _safe_ratio(numerator: float, denominator: float) -> float:
    return float(numerator / denominator) if denominator else 0.0


def compute_metrics(y_true, y_pred) -> Metrics:
    """
    Compute metrics from parallel label and prediction arrays.

    Args:
        y_true: True labels (0 or 1).
        y_pred: Predicted labels (0 or 1).

    Returns:
        Metrics for the pair.

    Raises:
        DimensionError: If the arrays differ in length.
    """
    labels = np.asarray(y_true).ravel()
    preds = np.asarray(y_pred).ravel()
    if labels.shape[0] != preds.shape[0]:
        raise DimensionError(labels.shape[0], preds.shape[0])

    tp = int(np.sum((labels == 1) & (preds == 1)))
    fp = int(np.sum((labels == 0) & (preds == 1)))
    tn = int(np.sum((labels == 0) & (preds == 0)))
    fn = int(np.sum((labels == 1) & (preds == 0)))

    accuracy = _safe_ratio(tp + tn, tp + fp + tn + fn)
    precision = _safe_ratio(tp, tp + fp)
    recall = _safe_ratio(tp, tp + fn)
    f1 = _safe_ratio(2 * precision * recall, precision + recall)

    return Metrics(
        accuracy=accuracy,
        precision=precision,
        recall=recall,
        f1_score=f1,
        confusion_matrix=((tn, fp), (fn, tp)),
    )
