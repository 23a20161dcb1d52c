"""End-to-end training: extract, normalize, split, fit, evaluate."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..config import TrainingConfig
from ..data import DatasetVariant, extract_features, holdout_split, parse_variant
from ..evaluation import compute_metrics
from ..features import fit_normalization
from ..utils import get_logger, json_log
from .logreg import LogisticRegressionTrainer
from .model import TrainedModel

log = get_logger(__name__)


def train_diabetes_model(
    columns: Sequence[str],
    rows: Iterable[Mapping[str, Any]],
    variant: DatasetVariant | str | None = None,
    learning_rate: float = 0.01,
    iterations: int = 1000,
    train_fraction: float = 0.8,
    shuffle_seed: int | None = None,
    record_loss_every: int | None = None,
) -> TrainedModel:
    """
    Train a fresh model on a dataset and score it on the holdout rows.

    Normalization parameters are fitted on every valid row before the split,
    then kept on the returned model for all later predictions.

    Raises:
        ConfigurationError: Unsupported dataset format or missing target column.
        NoDataError: No valid rows, or too few rows to form a training partition.
    """
    extracted = extract_features(columns, rows, variant=parse_variant(variant))

    normalization = fit_normalization(extracted.X)
    X_normalized = normalization.transform(extracted.X)

    split = holdout_split(
        X_normalized,
        extracted.y,
        train_fraction=train_fraction,
        shuffle_seed=shuffle_seed,
    )

    log.info(
        json_log(
            'train.start',
            component='training',
            variant=extracted.variant.value,
            features=list(extracted.features),
            target=extracted.target_column,
            train_rows=int(split.X_train.shape[0]),
            test_rows=int(split.X_test.shape[0]),
        )
    )

    trainer = LogisticRegressionTrainer(
        learning_rate=learning_rate,
        iterations=iterations,
        record_loss_every=record_loss_every,
    )
    fitted = trainer.fit(split.X_train, split.y_train)

    predictions = [trainer.predict(row) for row in split.X_test]
    metrics = compute_metrics(split.y_test, predictions)

    log.info(
        json_log(
            'train.completed',
            component='training',
            accuracy=metrics.accuracy,
            precision=metrics.precision,
            recall=metrics.recall,
            f1_score=metrics.f1_score,
        )
    )

    return TrainedModel(
        weights=fitted.weights,
        bias=fitted.bias,
        features=extracted.features,
        target_column=extracted.target_column,
        normalization=normalization,
        metrics=metrics,
        variant=extracted.variant,
        learning_rate=learning_rate,
        iterations=iterations,
        n_train=int(split.X_train.shape[0]),
        n_test=int(split.X_test.shape[0]),
        loss_history=fitted.loss_history,
    )


def train_from_config(
    columns: Sequence[str],
    rows: Iterable[Mapping[str, Any]],
    config: TrainingConfig,
) -> TrainedModel:
    """Train with hyperparameters taken from a :class:`TrainingConfig`."""
    return train_diabetes_model(
        columns,
        rows,
        variant=config.data.variant,
        learning_rate=config.trainer.learning_rate,
        iterations=config.trainer.iterations,
        train_fraction=config.split.train_fraction,
        shuffle_seed=config.split.shuffle_seed,
        record_loss_every=config.trainer.record_loss_every,
    )
