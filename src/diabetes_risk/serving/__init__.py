"""Serving module for diabetes_risk."""

from .app import app
from .schemas import (
    BatchPredictRequest,
    BatchPredictResponse,
    ErrorResponse,
    HealthResponse,
    ModelInfoResponse,
    PatientInput,
    PredictResponse,
    ReadyResponse,
)

__all__ = [
    'app',
    'BatchPredictRequest',
    'BatchPredictResponse',
    'ErrorResponse',
    'HealthResponse',
    'ModelInfoResponse',
    'PatientInput',
    'PredictResponse',
    'ReadyResponse',
]
