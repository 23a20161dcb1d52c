"""Logistic regression fitted by full-batch gradient descent."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ..errors import DimensionError, NoDataError
from ..utils import get_logger, json_log

log = get_logger(__name__)

SIGMOID_CLIP = 250.0
DECISION_THRESHOLD = 0.5


def sigmoid(z, clip: float = SIGMOID_CLIP):
    """Logistic function with ``z`` clamped to ``[-clip, clip]`` before exponentiation."""
    return 1.0 / (1.0 + np.exp(-np.clip(z, -clip, clip)))


def as_feature_matrix(X, n_features: int | None = None) -> np.ndarray:
    """
    Convert ``X`` to a float matrix, checking every row has ``n_features`` values.

    When ``n_features`` is None the first row sets the expected width.
    """
    if isinstance(X, np.ndarray) and X.ndim == 2:
        matrix = X.astype(float, copy=False)
        if n_features is not None and matrix.shape[1] != n_features:
            raise DimensionError(n_features, matrix.shape[1])
        return matrix

    rows = [np.asarray(row, dtype=float).ravel() for row in X]
    if not rows:
        return np.empty((0, n_features or 0), dtype=float)
    expected = rows[0].shape[0] if n_features is None else n_features
    for row in rows:
        if row.shape[0] != expected:
            raise DimensionError(expected, row.shape[0])
    return np.vstack(rows)


def as_feature_vector(x, n_features: int) -> np.ndarray:
    vector = np.asarray(x, dtype=float).ravel()
    if vector.shape[0] != n_features:
        raise DimensionError(n_features, vector.shape[0])
    return vector


class TrainerState(str, Enum):
    UNINITIALIZED = 'uninitialized'
    TRAINING = 'training'
    TRAINED = 'trained'


@dataclass(frozen=True, eq=False)
class FittedWeights:
    """Result of one training run: weights in feature order plus bias."""

    weights: np.ndarray
    bias: float
    loss_history: tuple[float, ...] = ()


class LogisticRegressionTrainer:
    """
    Batch gradient-descent trainer.

    Weights and bias start at zero and the update loop always runs exactly
    ``iterations`` times; there is no regularization, momentum or early stop.
    Each instance owns its own buffers, so independent trainers never share
    state.

    Args:
        learning_rate: Step size applied to the averaged gradient.
        iterations: Number of full-batch updates.
        record_loss_every: When set, the mean squared error between predicted
            probability and label is recorded after every N-th update.
    """

    def __init__(
        self,
        learning_rate: float = 0.01,
        iterations: int = 1000,
        record_loss_every: int | None = None,
    ) -> None:
        if learning_rate <= 0:
            raise ValueError('learning_rate must be positive')
        if iterations < 0:
            raise ValueError('iterations must be non-negative')
        if record_loss_every is not None and record_loss_every <= 0:
            raise ValueError('record_loss_every must be positive')

        self.learning_rate = learning_rate
        self.iterations = iterations
        self.record_loss_every = record_loss_every
        self.state = TrainerState.UNINITIALIZED
        self._fitted: FittedWeights | None = None

    @property
    def n_features(self) -> int | None:
        return None if self._fitted is None else int(self._fitted.weights.shape[0])

    @property
    def weights(self) -> np.ndarray:
        return self._require_fitted().weights

    @property
    def bias(self) -> float:
        return self._require_fitted().bias

    def fit(self, X, y: Sequence[int] | np.ndarray) -> FittedWeights:
        """Fit weights on an already-normalized matrix ``X`` and labels ``y``."""
        matrix = as_feature_matrix(X)
        labels = np.asarray(y, dtype=float).ravel()
        n_samples, n_features = matrix.shape
        if n_samples == 0:
            raise NoDataError('Cannot train on an empty feature matrix')
        if labels.shape[0] != n_samples:
            raise DimensionError(n_samples, labels.shape[0])

        self.state = TrainerState.TRAINING
        log.debug(
            json_log(
                'trainer.start',
                component='training.logreg',
                samples=n_samples,
                features=n_features,
                learning_rate=self.learning_rate,
                iterations=self.iterations,
            )
        )

        weights = np.zeros(n_features, dtype=float)
        bias = 0.0
        losses: list[float] = []

        for step in range(self.iterations):
            predictions = sigmoid(matrix @ weights + bias)
            errors = predictions - labels
            grad_w = matrix.T @ errors
            grad_b = float(errors.sum())

            weights -= self.learning_rate * grad_w / n_samples
            bias -= self.learning_rate * grad_b / n_samples

            if self.record_loss_every and (step + 1) % self.record_loss_every == 0:
                losses.append(_mean_squared_error(matrix, labels, weights, bias))

        weights.setflags(write=False)
        self._fitted = FittedWeights(weights=weights, bias=float(bias), loss_history=tuple(losses))
        self.state = TrainerState.TRAINED
        log.debug(
            json_log(
                'trainer.completed',
                component='training.logreg',
                bias=self._fitted.bias,
                final_loss=losses[-1] if losses else None,
            )
        )
        return self._fitted

    def predict_probability(self, x) -> float:
        fitted = self._require_fitted()
        vector = as_feature_vector(x, fitted.weights.shape[0])
        return float(sigmoid(float(vector @ fitted.weights) + fitted.bias))

    def predict(self, x) -> int:
        return int(self.predict_probability(x) >= DECISION_THRESHOLD)

    def _require_fitted(self) -> FittedWeights:
        if self._fitted is None:
            raise RuntimeError('Trainer has not been fitted yet; call fit() first')
        return self._fitted


def _mean_squared_error(matrix: np.ndarray, labels: np.ndarray, weights: np.ndarray, bias: float) -> float:
    probabilities = sigmoid(matrix @ weights + bias)
    return float(np.mean((probabilities - labels) ** 2))
