"""Model training."""

from .logreg import (
    DECISION_THRESHOLD,
    FittedWeights,
    LogisticRegressionTrainer,
    TrainerState,
    sigmoid,
)
from .model import TrainedModel
from .pipeline import train_diabetes_model, train_from_config

__all__ = [
    'DECISION_THRESHOLD',
    'FittedWeights',
    'LogisticRegressionTrainer',
    'TrainerState',
    'sigmoid',
    'TrainedModel',
    'train_diabetes_model',
    'train_from_config',
]
