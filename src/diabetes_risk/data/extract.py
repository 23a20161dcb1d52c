"""Feature extraction: dataset rows to a numeric matrix and label vector."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from ..errors import ConfigurationError, NoDataError
from ..utils import get_logger, json_log
from .variants import DatasetVariant, detect_variant, normalize_column_name

log = get_logger(__name__)


@dataclass(frozen=True)
class ExtractedDataset:
    """Parallel feature matrix and labels plus the resolved column layout."""

    X: np.ndarray
    y: np.ndarray
    features: tuple[str, ...]
    target_column: str
    variant: DatasetVariant
    dropped_rows: int = 0

    @property
    def n_samples(self) -> int:
        return int(self.X.shape[0])


def coerce_numeric(value: Any) -> float:
    """
    Return ``value`` as a finite float, or NaN when it is not one.

    Booleans count as 1.0 and 0.0; blank strings are NaN.
    """
    if value is None:
        return math.nan
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return math.nan
        try:
            number = float(text)
        except ValueError:
            return math.nan
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return math.nan
    return number if math.isfinite(number) else math.nan


def extract_features(
    columns: Sequence[str],
    rows: Iterable[Mapping[str, Any]],
    variant: DatasetVariant | None = None,
) -> ExtractedDataset:
    """
    Select the predictor columns for a dataset and build X / y.

    Args:
        columns: Raw column names as supplied by ingestion.
        rows: Row mappings keyed by raw column name.
        variant: Force a dataset variant; detected from ``columns`` when None.

    Returns:
        ExtractedDataset with only the rows whose features and target are all
        finite numbers.

    Raises:
        ConfigurationError: Unsupported dataset format or missing target column.
        NoDataError: No row survived filtering.
    """
    if variant is None:
        variant = detect_variant(columns)

    column_mapping = {normalize_column_name(col): col for col in columns}
    normalized = list(column_mapping)

    features = variant.resolve_features(normalized)
    if not features:
        raise ConfigurationError('Unsupported dataset format')

    target_key = variant.resolve_target(normalized)
    if target_key is None:
        expected = ', '.join(variant.spec.targets)
        raise ConfigurationError(f'Missing target column (expected one of: {expected})')
    target_column = column_mapping[target_key]

    selected = [column_mapping[feature] for feature in features]
    frame = pd.DataFrame(list(rows), columns=list(columns))
    total_rows = len(frame)

    numeric = frame[selected].map(coerce_numeric).astype(float)
    labels = frame[target_column].map(coerce_numeric).astype(float)
    labels = labels.map(
        lambda value: value if math.isnan(value) else variant.encode_target(target_key, value)
    )
    # Labels outside {0, 1} are treated like non-numeric values
    valid = numeric.notna().all(axis=1) & labels.isin([0.0, 1.0])

    if not valid.any():
        raise NoDataError('No valid data found for training')

    X = numeric[valid].to_numpy(dtype=float)
    y = labels[valid].to_numpy(dtype=float).astype(int)

    dropped = total_rows - int(valid.sum())
    log.info(
        json_log(
            'extract.completed',
            component='data.extract',
            variant=variant.value,
            features=features,
            target=target_column,
            rows=total_rows,
            valid_rows=int(X.shape[0]),
            dropped_rows=dropped,
        )
    )

    return ExtractedDataset(
        X=X,
        y=y,
        features=tuple(features),
        target_column=target_column,
        variant=variant,
        dropped_rows=dropped,
    )
