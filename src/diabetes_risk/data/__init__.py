"""Data handling: ingestion, variant detection, feature extraction and splitting."""

from .extract import ExtractedDataset, coerce_numeric, extract_features
from .loading import Dataset, load_dataset_csv
from .split import HoldoutSplit, holdout_split, split_index
from .variants import (
    DatasetVariant,
    VariantSpec,
    detect_variant,
    normalize_column_name,
    parse_variant,
)

__all__ = [
    'ExtractedDataset',
    'coerce_numeric',
    'extract_features',
    'Dataset',
    'load_dataset_csv',
    'HoldoutSplit',
    'holdout_split',
    'split_index',
    'DatasetVariant',
    'VariantSpec',
    'detect_variant',
    'normalize_column_name',
    'parse_variant',
]
