"""Exception taxonomy for the diabetes risk core."""

from __future__ import annotations


class DiabetesRiskError(Exception):
    """Base class for all errors raised by the core."""


class ConfigurationError(DiabetesRiskError):
    """Dataset shape unrecognized, target column unresolved, or invalid scorer input."""


class NoDataError(DiabetesRiskError):
    """No valid rows survived filtering."""


class DimensionError(DiabetesRiskError, ValueError):
    """Feature-vector length does not match the model's feature count."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f'Expected {expected} features, got {actual}')
        self.expected = expected
        self.actual = actual
