"""Diabetes risk assessment: logistic-regression trainer, evaluator and static scorer."""

from .errors import ConfigurationError, DiabetesRiskError, DimensionError, NoDataError

__version__ = '0.1.0'

__all__ = [
    'ConfigurationError',
    'DiabetesRiskError',
    'DimensionError',
    'NoDataError',
    '__version__',
]
