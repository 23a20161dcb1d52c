from __future__ import annotations

import logging

import numpy as np
import pytest

from diabetes_risk.data.split import holdout_split, split_index
from diabetes_risk.errors import DimensionError


@pytest.mark.parametrize('n_rows', [1, 2, 5, 7, 10, 11, 99])
def test_partition_sizes(n_rows):
    X = np.arange(n_rows * 2, dtype=float).reshape(n_rows, 2)
    y = np.arange(n_rows) % 2

    split = holdout_split(X, y)

    assert split.X_train.shape[0] == int(np.floor(0.8 * n_rows))
    assert split.X_test.shape[0] == n_rows - int(np.floor(0.8 * n_rows))
    assert split.y_train.shape[0] == split.X_train.shape[0]
    assert split.y_test.shape[0] == split.X_test.shape[0]


def test_concatenation_reproduces_order():
    X = np.arange(20, dtype=float).reshape(10, 2)
    y = np.array([0, 1, 1, 0, 1, 0, 0, 1, 1, 0])

    split = holdout_split(X, y)

    np.testing.assert_array_equal(np.vstack([split.X_train, split.X_test]), X)
    np.testing.assert_array_equal(np.concatenate([split.y_train, split.y_test]), y)


def test_split_index_floor():
    assert split_index(10) == 8
    assert split_index(9) == 7
    assert split_index(1) == 0


def test_shuffle_seed_is_reproducible_and_preserves_rows():
    X = np.arange(40, dtype=float).reshape(20, 2)
    y = np.arange(20) % 2

    first = holdout_split(X, y, shuffle_seed=7)
    second = holdout_split(X, y, shuffle_seed=7)

    np.testing.assert_array_equal(first.X_train, second.X_train)
    combined = np.vstack([first.X_train, first.X_test])
    assert sorted(combined[:, 0].tolist()) == X[:, 0].tolist()


def test_mismatched_lengths_raise():
    with pytest.raises(DimensionError):
        holdout_split(np.zeros((4, 2)), np.zeros(3))


def test_single_class_training_partition_logs_warning(caplog):
    X = np.arange(20, dtype=float).reshape(10, 2)
    y = np.array([0] * 8 + [1] * 2)

    with caplog.at_level(logging.WARNING, logger='diabetes_risk.data.split'):
        split = holdout_split(X, y)

    assert split.y_train.tolist() == [0] * 8
    warnings = [record for record in caplog.records if 'split.single_class_train' in record.getMessage()]
    assert len(warnings) == 1
    assert warnings[0].levelno == logging.WARNING


def test_mixed_training_partition_does_not_warn(caplog):
    X = np.arange(20, dtype=float).reshape(10, 2)
    y = np.arange(10) % 2

    with caplog.at_level(logging.WARNING, logger='diabetes_risk.data.split'):
        holdout_split(X, y)

    assert 'split.single_class_train' not in caplog.text
