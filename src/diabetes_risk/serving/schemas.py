"""Pydantic request/response schemas for the serving API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PatientInput(BaseModel):
    """Clinical inputs for one patient; omitted fields fall back to defaults."""

    pregnancies: float | None = Field(default=None, description='Number of pregnancies.')
    glucose: float | None = Field(default=None, description='Plasma glucose concentration.')
    bloodpressure: float | None = Field(default=None, description='Diastolic blood pressure.')
    skinthickness: float | None = Field(default=None, description='Triceps skin fold thickness.')
    insulin: float | None = Field(default=None, description='2-hour serum insulin.')
    bmi: float | None = Field(default=None, description='Body mass index.')
    diabetespedigreefunction: float | None = Field(
        default=None,
        description='Diabetes pedigree function.',
    )
    age: float | None = Field(default=None, description='Age in years.')

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'pregnancies': 1,
                    'glucose': 120,
                    'bloodpressure': 80,
                    'skinthickness': 20,
                    'insulin': 80,
                    'bmi': 25,
                    'diabetespedigreefunction': 0.5,
                    'age': 30,
                }
            ]
        }
    }


class BatchPredictRequest(BaseModel):
    """Request schema for batch prediction."""

    patients: list[PatientInput] = Field(
        ...,
        min_length=1,
        description='Patients to score.',
    )


class PredictResponse(BaseModel):
    """Response schema for a single prediction."""

    prediction: int = Field(..., ge=0, le=1, description='1 when diabetes risk is high.')
    probability: float = Field(..., ge=0.0, le=1.0, description='Probability of diabetes.')
    risk: str = Field(..., description='"low" or "high".')
    confidence: float = Field(..., ge=0.0, le=1.0, description='Distance from the boundary.')


class BatchPredictResponse(BaseModel):
    """Response schema for batch prediction."""

    predictions: list[PredictResponse]


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str = Field(default='ok', description='Service health status.')


class ReadyResponse(BaseModel):
    """Response schema for readiness check endpoint."""

    status: str = Field(..., description='Readiness status.')
    config_loaded: bool = Field(..., description='Whether serving config is loaded.')


class ModelInfoResponse(BaseModel):
    """Response schema for model information endpoint."""

    features: list[str] = Field(..., description='Input features in scoring order.')
    weights: dict[str, float] = Field(..., description='Per-feature coefficients.')
    bias: float = Field(..., description='Intercept.')
    strict: bool = Field(..., description='Whether invalid inputs are rejected.')
    reference_metrics: dict[str, float] = Field(..., description='Published holdout metrics.')


class ErrorResponse(BaseModel):
    """Response schema for error responses."""

    detail: str = Field(..., description='Error message.')
