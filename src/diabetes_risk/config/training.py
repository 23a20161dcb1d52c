"""Config models and loaders for training."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

VALID_VARIANTS = ('auto', 'basic', 'comprehensive')


@dataclass(frozen=True)
class DataConfig:
    variant: str = 'auto'


@dataclass(frozen=True)
class TrainerConfig:
    learning_rate: float = 0.01
    iterations: int = 1000
    record_loss_every: int | None = None


@dataclass(frozen=True)
class SplitConfig:
    train_fraction: float = 0.8
    shuffle_seed: int | None = None


@dataclass(frozen=True)
class TrainingConfig:
    data: DataConfig = field(default_factory=DataConfig)
    trainer: TrainerConfig = field(default_factory=TrainerConfig)
    split: SplitConfig = field(default_factory=SplitConfig)


def load_training_config(config_path: str | Path) -> TrainingConfig:
    """Load a training config YAML file."""
    cfg_path = Path(config_path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f'Config file not found: {cfg_path}')

    with cfg_path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh) or {}

    data_section = data.get('data') or {}
    trainer_section = data.get('trainer') or {}
    split_section = data.get('split') or {}

    variant = str(data_section.get('variant', 'auto')).lower()
    if variant not in VALID_VARIANTS:
        raise ValueError(f"data.variant must be one of {', '.join(VALID_VARIANTS)}, got '{variant}'")

    learning_rate = float(trainer_section.get('learning_rate', 0.01))
    if learning_rate <= 0:
        raise ValueError('trainer.learning_rate must be positive')

    iterations = int(trainer_section.get('iterations', 1000))
    if iterations < 0:
        raise ValueError('trainer.iterations must be non-negative')

    record_every = trainer_section.get('record_loss_every')

    train_fraction = float(split_section.get('train_fraction', 0.8))
    if not 0.0 < train_fraction < 1.0:
        raise ValueError('split.train_fraction must be between 0 and 1')

    shuffle_seed = split_section.get('shuffle_seed')

    return TrainingConfig(
        data=DataConfig(variant=variant),
        trainer=TrainerConfig(
            learning_rate=learning_rate,
            iterations=iterations,
            record_loss_every=int(record_every) if record_every else None,
        ),
        split=SplitConfig(
            train_fraction=train_fraction,
            shuffle_seed=int(shuffle_seed) if shuffle_seed is not None else None,
        ),
    )
