"""FastAPI application serving the fixed-coefficient diabetes scorer."""

from __future__ import annotations

import os
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException

from ..config import ServingConfig, load_serving_config
from ..errors import ConfigurationError
from ..pretrained import BIAS, FEATURES, REFERENCE_METRICS, WEIGHTS, StaticPrediction, predict_diabetes
from ..utils import get_logger, json_log
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

_config: ServingConfig | None = None

log = get_logger(__name__)


def _get_config_path() -> Path:
    """Get the config path from environment or default."""
    return Path(os.getenv('DRK_SERVING_CONFIG', 'configs/serving.yaml'))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load serving config on startup."""
    global _config

    config_path = _get_config_path()
    log.info(
        json_log(
            'serving.startup',
            component='serving.app',
            config_path=str(config_path),
        )
    )

    try:
        _config = load_serving_config(config_path)
    except FileNotFoundError:
        _config = ServingConfig()
        log.warning(
            json_log(
                'serving.default_config',
                component='serving.app',
                config_path=str(config_path),
            )
        )

    log.info(
        json_log(
            'serving.ready',
            component='serving.app',
            strict=_config.scorer.strict,
        )
    )

    yield

    log.info(json_log('serving.shutdown', component='serving.app'))


app = FastAPI(
    title='Diabetes Risk API',
    description='Diabetes risk scoring with fixed logistic-regression coefficients.',
    version='0.1.0',
    lifespan=lifespan,
)


def _require_config() -> ServingConfig:
    if _config is None:
        raise HTTPException(status_code=503, detail='Service not ready')
    return _config


def _score(patient: PatientInput, strict: bool) -> PredictResponse:
    try:
        result: StaticPrediction = predict_diabetes(patient.model_dump(), strict=strict)
    except ConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return PredictResponse(**result.to_dict())


def _log_request(endpoint: str, n_items: int, risk: str | None, latency_ms: float) -> None:
    """Log request if request logging is enabled."""
    if _config and _config.logging.mode == 'requests':
        log.info(
            json_log(
                'serving.request',
                component='serving.app',
                endpoint=endpoint,
                n_items=n_items,
                risk=risk,
                latency_ms=round(latency_ms, 2),
            )
        )


@app.get('/health', response_model=HealthResponse, tags=['Health'])
def health() -> HealthResponse:
    """Liveness check endpoint."""
    return HealthResponse(status='ok')


@app.get('/ready', response_model=ReadyResponse, tags=['Health'])
def ready() -> ReadyResponse:
    """Readiness check endpoint."""
    loaded = _config is not None
    return ReadyResponse(status='ready' if loaded else 'not_ready', config_loaded=loaded)


@app.get('/model/info', response_model=ModelInfoResponse, tags=['Model'])
def model_info() -> ModelInfoResponse:
    """Describe the fixed coefficients being served."""
    config = _require_config()
    return ModelInfoResponse(
        features=list(FEATURES),
        weights=dict(WEIGHTS),
        bias=BIAS,
        strict=config.scorer.strict,
        reference_metrics=dict(REFERENCE_METRICS),
    )


@app.post(
    '/predict',
    response_model=PredictResponse,
    responses={400: {'model': ErrorResponse}, 503: {'model': ErrorResponse}},
    tags=['Prediction'],
)
def predict(patient: PatientInput) -> PredictResponse:
    """Score a single patient."""
    config = _require_config()
    start_time = time.perf_counter()

    response = _score(patient, strict=config.scorer.strict)

    latency_ms = (time.perf_counter() - start_time) * 1000
    _log_request('/predict', 1, response.risk, latency_ms)
    return response


@app.post(
    '/predict/batch',
    response_model=BatchPredictResponse,
    responses={400: {'model': ErrorResponse}, 503: {'model': ErrorResponse}},
    tags=['Prediction'],
)
def predict_batch(request: BatchPredictRequest) -> BatchPredictResponse:
    """Score several patients."""
    config = _require_config()
    start_time = time.perf_counter()

    if len(request.patients) > config.batch.max_items:
        raise HTTPException(
            status_code=400,
            detail=f'Batch size {len(request.patients)} exceeds maximum of {config.batch.max_items}',
        )

    predictions = [_score(patient, strict=config.scorer.strict) for patient in request.patients]

    latency_ms = (time.perf_counter() - start_time) * 1000
    _log_request('/predict/batch', len(request.patients), None, latency_ms)
    return BatchPredictResponse(predictions=predictions)
