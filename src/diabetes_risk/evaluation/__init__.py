"""Model evaluation."""

from .metrics import Metrics, compute_metrics

__all__ = ['Metrics', 'compute_metrics']
