"""Immutable trained model returned by a training run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..data.variants import DatasetVariant
from ..errors import DimensionError
from ..evaluation import Metrics
from ..features import NormalizationParameters
from .logreg import DECISION_THRESHOLD, as_feature_matrix, as_feature_vector, sigmoid


@dataclass(frozen=True, eq=False)
class TrainedModel:
    """
    Logistic regression model bound to the feature layout it was trained on.

    ``predict`` and ``predict_probability`` take raw feature values in the order
    of ``features`` and apply the stored normalization before scoring.
    """

    weights: np.ndarray
    bias: float
    features: tuple[str, ...]
    target_column: str
    normalization: NormalizationParameters
    metrics: Metrics
    variant: DatasetVariant | None = None
    learning_rate: float = 0.01
    iterations: int = 1000
    n_train: int = 0
    n_test: int = 0
    loss_history: tuple[float, ...] = field(default=())

    def __post_init__(self) -> None:
        weights = np.array(self.weights, dtype=float).ravel()
        weights.setflags(write=False)
        object.__setattr__(self, 'weights', weights)
        object.__setattr__(self, 'features', tuple(self.features))
        if len(self.features) != weights.shape[0]:
            raise DimensionError(len(self.features), weights.shape[0])
        if self.normalization.n_features != weights.shape[0]:
            raise DimensionError(weights.shape[0], self.normalization.n_features)

    @property
    def n_features(self) -> int:
        return len(self.features)

    def predict_probability(self, features) -> float:
        """Probability of the positive class for one raw feature vector."""
        vector = as_feature_vector(features, self.n_features)
        z = float(self.normalization.transform_row(vector) @ self.weights) + self.bias
        return float(sigmoid(z))

    def predict(self, features) -> int:
        return int(self.predict_probability(features) >= DECISION_THRESHOLD)

    def predict_probabilities(self, X) -> np.ndarray:
        """Vectorized ``predict_probability`` over a raw feature matrix."""
        matrix = as_feature_matrix(X, self.n_features)
        return sigmoid(self.normalization.transform(matrix) @ self.weights + self.bias)

    def coefficients(self) -> dict[str, float]:
        return {name: float(weight) for name, weight in zip(self.features, self.weights)}

    def summary(self) -> dict[str, Any]:
        return {
            'variant': self.variant.value if self.variant else None,
            'features': list(self.features),
            'target_column': self.target_column,
            'weights': self.coefficients(),
            'bias': self.bias,
            'normalization': self.normalization.as_dict(self.features),
            'learning_rate': self.learning_rate,
            'iterations': self.iterations,
            'n_train': self.n_train,
            'n_test': self.n_test,
            'metrics': self.metrics.to_dict(),
        }
