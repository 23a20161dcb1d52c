"""Configuration utilities for diabetes_risk."""

from .serving import (
    BatchConfig,
    LoggingConfig,
    ScorerConfig,
    ServerConfig,
    ServingConfig,
    load_serving_config,
)
from .training import (
    DataConfig,
    SplitConfig,
    TrainerConfig,
    TrainingConfig,
    load_training_config,
)

__all__ = [
    'BatchConfig',
    'LoggingConfig',
    'ScorerConfig',
    'ServerConfig',
    'ServingConfig',
    'load_serving_config',
    'DataConfig',
    'SplitConfig',
    'TrainerConfig',
    'TrainingConfig',
    'load_training_config',
]
