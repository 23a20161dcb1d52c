from __future__ import annotations

import pytest

BASIC_COLUMNS = [
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


def make_basic_rows(n_rows: int = 50) -> list[dict]:
    """Interleaved labels where glucose and BMI separate the classes."""
    rows = []
    for i in range(n_rows):
        outcome = i % 2
        rows.append(
            {
                'Pregnancies': i % 4,
                'Glucose': 150 + (i % 7) if outcome else 90 + (i % 5),
                'BloodPressure': 68 + (i % 3),
                'SkinThickness': 20,
                'Insulin': 80,
                'BMI': 35.0 + (i % 3) * 0.5 if outcome else 24.0 + (i % 4) * 0.5,
                'DiabetesPedigreeFunction': 0.4,
                'Age': 30 + (i % 10),
                'Outcome': outcome,
            }
        )
    return rows


@pytest.fixture
def basic_columns() -> list[str]:
    return list(BASIC_COLUMNS)


@pytest.fixture
def basic_rows() -> list[dict]:
    return make_basic_rows()


@pytest.fixture
def basic_csv(tmp_path, basic_rows):
    """Write the synthetic basic dataset to a CSV file."""
    import pandas as pd

    path = tmp_path / 'diabetes.csv'
    pd.DataFrame(basic_rows, columns=BASIC_COLUMNS).to_csv(path, index=False)
    return path
