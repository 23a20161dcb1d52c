"""Train/holdout splitting."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..errors import DimensionError
from ..utils import get_logger, json_log

log = get_logger(__name__)


@dataclass(frozen=True)
class HoldoutSplit:
    X_train: np.ndarray
    y_train: np.ndarray
    X_test: np.ndarray
    y_test: np.ndarray


def split_index(n_rows: int, train_fraction: float = 0.8) -> int:
    """Number of leading rows that go to the training partition."""
    return math.floor(n_rows * train_fraction)


def holdout_split(
    X: np.ndarray,
    y: np.ndarray,
    train_fraction: float = 0.8,
    shuffle_seed: int | None = None,
) -> HoldoutSplit:
    """
    Split rows into a leading training partition and a trailing holdout.

    Rows keep the order they were supplied in, so a label-sorted input yields a
    single-class training set. ``shuffle_seed`` opts into a seeded permutation
    applied before cutting; the default keeps the order untouched.
    """
    X = np.asarray(X, dtype=float)
    y = np.asarray(y)
    if X.shape[0] != y.shape[0]:
        raise DimensionError(X.shape[0], y.shape[0])

    if shuffle_seed is not None:
        order = np.random.default_rng(shuffle_seed).permutation(X.shape[0])
        X = X[order]
        y = y[order]

    cut = split_index(X.shape[0], train_fraction)
    split = HoldoutSplit(X_train=X[:cut], y_train=y[:cut], X_test=X[cut:], y_test=y[cut:])

    if split.y_train.size and np.unique(split.y_train).size < 2:
        log.warning(
            json_log(
                'split.single_class_train',
                component='data.split',
                train_rows=int(cut),
                label=int(split.y_train[0]),
            )
        )
    return split
