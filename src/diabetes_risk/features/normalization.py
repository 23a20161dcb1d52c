"""Z-score normalization with parameters fixed at training time."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..errors import DimensionError, NoDataError


def normalize_value(value: float, mean: float, std: float) -> float:
    """Map a raw value to its z-score; a zero std maps everything to 0."""
    if std == 0:
        return 0.0
    return (value - mean) / std


@dataclass(frozen=True)
class NormalizationParameters:
    """Per-feature (mean, std) pairs, in feature order."""

    means: tuple[float, ...]
    stds: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.means) != len(self.stds):
            raise DimensionError(len(self.means), len(self.stds))

    @property
    def n_features(self) -> int:
        return len(self.means)

    def transform_row(self, row) -> np.ndarray:
        values = np.asarray(row, dtype=float).ravel()
        if values.shape[0] != self.n_features:
            raise DimensionError(self.n_features, values.shape[0])
        return np.array(
            [normalize_value(v, m, s) for v, m, s in zip(values, self.means, self.stds)],
            dtype=float,
        )

    def transform(self, X) -> np.ndarray:
        """Normalize a 2-D matrix column by column."""
        matrix = np.asarray(X, dtype=float)
        if matrix.ndim == 1:
            matrix = matrix.reshape(1, -1)
        if matrix.shape[1] != self.n_features:
            raise DimensionError(self.n_features, matrix.shape[1])
        means = np.asarray(self.means, dtype=float)
        stds = np.asarray(self.stds, dtype=float)
        safe = np.where(stds == 0, 1.0, stds)
        return np.where(stds == 0, 0.0, (matrix - means) / safe)

    def as_dict(self, features: tuple[str, ...] | list[str]) -> dict[str, dict[str, float]]:
        if len(features) != self.n_features:
            raise DimensionError(self.n_features, len(features))
        return {
            name: {'mean': mean, 'std': std}
            for name, mean, std in zip(features, self.means, self.stds)
        }


def fit_normalization(X) -> NormalizationParameters:
    """
    Compute per-column mean and population standard deviation.

    A column with zero spread gets std 1, so its normalized values are exactly
    ``0`` instead of NaN.
    """
    matrix = np.asarray(X, dtype=float)
    if matrix.ndim != 2:
        raise DimensionError(2, matrix.ndim)
    if matrix.shape[0] == 0:
        raise NoDataError('Cannot fit normalization on an empty matrix')

    means = matrix.mean(axis=0)
    stds = matrix.std(axis=0, ddof=0)
    # Summation error can leave a constant column with a tiny non-zero spread
    constant = np.all(matrix == matrix[0], axis=0)
    means = np.where(constant, matrix[0], means)
    stds = np.where(constant | (stds == 0), 1.0, stds)
    return NormalizationParameters(
        means=tuple(float(m) for m in means),
        stds=tuple(float(s) for s in stds),
    )
