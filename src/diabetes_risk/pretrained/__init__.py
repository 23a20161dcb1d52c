"""Fixed-coefficient ("pretrained") scorer."""

from .scorer import (
    BIAS,
    DEFAULTS,
    FEATURES,
    NORMALIZATION,
    REFERENCE_METRICS,
    WEIGHTS,
    StaticPrediction,
    clean_inputs,
    interaction_terms,
    linear_score,
    predict_diabetes,
)

__all__ = [
    'BIAS',
    'DEFAULTS',
    'FEATURES',
    'NORMALIZATION',
    'REFERENCE_METRICS',
    'WEIGHTS',
    'StaticPrediction',
    'clean_inputs',
    'interaction_terms',
    'linear_score',
    'predict_diabetes',
]
