"""Feature transformations."""

from .normalization import NormalizationParameters, fit_normalization, normalize_value

__all__ = ['NormalizationParameters', 'fit_normalization', 'normalize_value']
