"""Unit tests for JSON logging helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np

from diabetes_risk.data import DatasetVariant
from diabetes_risk.utils import get_logger, json_log, resolve_level


class TestJsonLog:
    """Tests for json_log payloads."""

    def test_message_and_fields(self) -> None:
        payload = json.loads(json_log('train.start', component='training', rows=3))

        assert payload['msg'] == 'train.start'
        assert payload['component'] == 'training'
        assert payload['rows'] == 3
        assert isinstance(payload['ts'], float)

    def test_numpy_and_enum_values(self) -> None:
        payload = json.loads(
            json_log(
                'extract.completed',
                valid_rows=np.int64(4),
                bias=np.float64(-0.5),
                weights=np.array([0.25, 1.5]),
                variant=DatasetVariant.BASIC,
                input=Path('data.csv'),
            )
        )

        assert payload['valid_rows'] == 4
        assert payload['bias'] == -0.5
        assert payload['weights'] == [0.25, 1.5]
        assert payload['variant'] == 'basic'
        assert payload['input'] == 'data.csv'


class TestResolveLevel:
    """Tests for environment-driven log levels."""

    def test_default_is_info(self, monkeypatch) -> None:
        monkeypatch.delenv('DRK_DEBUG', raising=False)
        monkeypatch.delenv('DRK_LOG_LEVEL', raising=False)
        assert resolve_level() == logging.INFO

    def test_named_level(self, monkeypatch) -> None:
        monkeypatch.delenv('DRK_DEBUG', raising=False)
        monkeypatch.setenv('DRK_LOG_LEVEL', 'warning')
        assert resolve_level() == logging.WARNING

    def test_unknown_name_falls_back_to_info(self, monkeypatch) -> None:
        monkeypatch.delenv('DRK_DEBUG', raising=False)
        monkeypatch.setenv('DRK_LOG_LEVEL', 'chatty')
        assert resolve_level() == logging.INFO

    def test_debug_flag_wins(self, monkeypatch) -> None:
        monkeypatch.setenv('DRK_DEBUG', '1')
        monkeypatch.setenv('DRK_LOG_LEVEL', 'ERROR')
        assert resolve_level() == logging.DEBUG


def test_get_logger_configures_once(monkeypatch) -> None:
    monkeypatch.setenv('DRK_LOG_LEVEL', 'ERROR')
    monkeypatch.delenv('DRK_DEBUG', raising=False)

    logger = get_logger('diabetes_risk.tests.logging_once')
    again = get_logger('diabetes_risk.tests.logging_once')

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR
