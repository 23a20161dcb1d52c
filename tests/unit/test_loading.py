from __future__ import annotations

import pytest

from diabetes_risk.data import load_dataset_csv
from diabetes_risk.errors import NoDataError


def test_load_dataset_csv_reads_rows(basic_csv, basic_columns):
    dataset = load_dataset_csv(basic_csv)

    assert dataset.columns == basic_columns
    assert len(dataset.rows) == 50
    assert dataset.filename == 'diabetes.csv'
    assert dataset.rows[1]['Outcome'] == 1


def test_null_markers_become_none(tmp_path):
    path = tmp_path / 'nulls.csv'
    path.write_text('Glucose, BMI,Outcome\n120,N/A,1\nNULL,30.5,0\n,,\n', encoding='utf-8')

    dataset = load_dataset_csv(path)

    assert dataset.columns == ['Glucose', 'BMI', 'Outcome']
    assert len(dataset.rows) == 2
    assert dataset.rows[0]['BMI'] is None
    assert dataset.rows[1]['Glucose'] is None
    assert dataset.rows[1]['BMI'] == 30.5


def test_empty_file_raises(tmp_path):
    path = tmp_path / 'empty.csv'
    path.write_text('', encoding='utf-8')

    with pytest.raises(NoDataError):
        load_dataset_csv(path)


def test_header_only_raises(tmp_path):
    path = tmp_path / 'header.csv'
    path.write_text('Glucose,BMI,Outcome\n', encoding='utf-8')

    with pytest.raises(NoDataError):
        load_dataset_csv(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dataset_csv(tmp_path / 'missing.csv')


def test_malformed_file_raises(tmp_path):
    path = tmp_path / 'ragged.csv'
    path.write_text('Glucose,BMI,Outcome\n120,30.5,1\n1,2,3,4,5\n', encoding='utf-8')

    with pytest.raises(NoDataError, match='Malformed CSV'):
        load_dataset_csv(path)
