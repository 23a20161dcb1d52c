from __future__ import annotations

import pytest

from diabetes_risk.data.variants import (
    DatasetVariant,
    detect_variant,
    normalize_column_name,
    parse_variant,
)
from diabetes_risk.errors import ConfigurationError

PIMA_COLUMNS = [
    'Pregnancies',
    'Glucose',
    'BloodPressure',
    'SkinThickness',
    'Insulin',
    'BMI',
    'DiabetesPedigreeFunction',
    'Age',
    'Outcome',
]

BRFSS_COLUMNS = [
    'Diabetes_012',
    'HighBP',
    'HighChol',
    'CholCheck',
    'BMI',
    'Smoker',
    'Stroke',
    'HeartDiseaseorAttack',
    'PhysActivity',
    'Age',
]


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [
        ('Blood Pressure', 'bloodpressure'),
        ('  Diabetes_binary ', 'diabetesbinary'),
        ('Diabetes_012', 'diabetes012'),
        ('BMI', 'bmi'),
    ],
)
def test_normalize_column_name(raw, expected):
    assert normalize_column_name(raw) == expected


def test_detect_basic():
    assert detect_variant(PIMA_COLUMNS) is DatasetVariant.BASIC


def test_detect_comprehensive():
    assert detect_variant(BRFSS_COLUMNS) is DatasetVariant.COMPREHENSIVE


def test_comprehensive_wins_when_both_match():
    columns = BRFSS_COLUMNS + ['Glucose', 'BloodPressure']
    assert detect_variant(columns) is DatasetVariant.COMPREHENSIVE


def test_basic_needs_two_markers():
    with pytest.raises(ConfigurationError, match='Unsupported dataset format'):
        detect_variant(['Glucose', 'Age', 'Outcome'])


def test_resolve_features_keeps_declared_order():
    normalized = ['age', 'bmi', 'glucose', 'outcome']
    assert DatasetVariant.BASIC.resolve_features(normalized) == ['glucose', 'bmi', 'age']


def test_resolve_target_prefers_binary():
    normalized = ['diabetes012', 'diabetesbinary', 'highbp']
    assert DatasetVariant.COMPREHENSIVE.resolve_target(normalized) == 'diabetesbinary'


def test_tri_state_target_collapses():
    variant = DatasetVariant.COMPREHENSIVE
    assert variant.encode_target('diabetes012', 0.0) == 0.0
    assert variant.encode_target('diabetes012', 1.0) == 1.0
    assert variant.encode_target('diabetes012', 2.0) == 1.0
    assert variant.encode_target('diabetesbinary', 1.0) == 1.0


def test_comprehensive_declares_21_features():
    assert len(DatasetVariant.COMPREHENSIVE.features) == 21


@pytest.mark.parametrize(
    ('value', 'expected'),
    [
        (None, None),
        ('auto', None),
        ('Basic', DatasetVariant.BASIC),
        ('comprehensive', DatasetVariant.COMPREHENSIVE),
        (DatasetVariant.BASIC, DatasetVariant.BASIC),
    ],
)
def test_parse_variant(value, expected):
    assert parse_variant(value) is expected


def test_parse_variant_unknown():
    with pytest.raises(ConfigurationError):
        parse_variant('weird')
