"""Supported dataset variants and column-name matching."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..errors import ConfigurationError

_NON_ALNUM = re.compile(r'[^a-z0-9]')


def normalize_column_name(name: str) -> str:
    """Lower-case, trim and strip everything outside ``[a-z0-9]``."""
    return _NON_ALNUM.sub('', str(name).strip().lower())


@dataclass(frozen=True)
class VariantSpec:
    """Static declaration of one dataset variant."""

    features: tuple[str, ...]
    # Candidate target columns in order of preference
    targets: tuple[str, ...]
    # Targets whose non-zero states collapse to 1
    multiclass_targets: frozenset[str]
    # Detection: at least ``min_markers`` of ``markers`` must be present
    markers: tuple[str, ...]
    min_markers: int


class DatasetVariant(str, Enum):
    """Closed set of dataset shapes the feature extractor understands."""

    COMPREHENSIVE = 'comprehensive'
    BASIC = 'basic'

    @property
    def spec(self) -> VariantSpec:
        return _VARIANT_SPECS[self]

    @property
    def features(self) -> tuple[str, ...]:
        return self.spec.features

    def resolve_features(self, normalized_columns: Iterable[str]) -> list[str]:
        """Return the declared features present in the dataset, in declared order."""
        present = set(normalized_columns)
        return [feature for feature in self.spec.features if feature in present]

    def resolve_target(self, normalized_columns: Iterable[str]) -> str | None:
        present = set(normalized_columns)
        for target in self.spec.targets:
            if target in present:
                return target
        return None

    def encode_target(self, target: str, value: float) -> float:
        if target in self.spec.multiclass_targets:
            return 1.0 if value > 0 else 0.0
        return value

    def matches(self, normalized_columns: Iterable[str]) -> bool:
        present = set(normalized_columns)
        hits = sum(1 for marker in self.spec.markers if marker in present)
        return hits >= self.spec.min_markers


_VARIANT_SPECS: dict[DatasetVariant, VariantSpec] = {
    DatasetVariant.COMPREHENSIVE: VariantSpec(
        features=(
            'highbp',
            'highchol',
            'cholcheck',
            'bmi',
            'smoker',
            'stroke',
            'heartdiseaseorattack',
            'physactivity',
            'fruits',
            'veggies',
            'hvyalcoholconsump',
            'anyhealthcare',
            'nodocbccost',
            'genhlth',
            'menthlth',
            'physhlth',
            'diffwalk',
            'sex',
            'age',
            'education',
            'income',
        ),
        targets=('diabetesbinary', 'diabetes012'),
        multiclass_targets=frozenset({'diabetes012'}),
        markers=(
            'highbp',
            'highchol',
            'cholcheck',
            'bmi',
            'smoker',
            'stroke',
            'heartdiseaseorattack',
            'physactivity',
            'fruits',
            'veggies',
        ),
        min_markers=5,
    ),
    DatasetVariant.BASIC: VariantSpec(
        features=('glucose', 'bloodpressure', 'bmi', 'age'),
        targets=('outcome',),
        multiclass_targets=frozenset(),
        markers=('glucose', 'bloodpressure', 'bmi'),
        min_markers=2,
    ),
}


def detect_variant(columns: Iterable[str]) -> DatasetVariant:
    """
    Detect the dataset variant from raw column names.

    Variants are tried in declaration order, so a dataset carrying enough
    lifestyle indicators is treated as comprehensive even if it also has
    glucose/blood-pressure columns.

    Raises:
        ConfigurationError: If no variant matches.
    """
    normalized = [normalize_column_name(col) for col in columns]
    for variant in DatasetVariant:
        if variant.matches(normalized):
            return variant
    raise ConfigurationError('Unsupported dataset format')


def parse_variant(value: str | DatasetVariant | None) -> DatasetVariant | None:
    """Map a config value (``auto``/``basic``/``comprehensive``) to a variant."""
    if value is None or isinstance(value, DatasetVariant):
        return value
    text = value.strip().lower()
    if text in ('', 'auto'):
        return None
    try:
        return DatasetVariant(text)
    except ValueError as exc:
        raise ConfigurationError(f"Unknown dataset variant '{value}'") from exc
