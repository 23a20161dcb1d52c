"""
Training-free scorer with coefficients fixed offline on the Pima Indians data.

Eight clinical inputs are z-scored with baked-in (mean, std) constants, three
interaction terms are added, and the linear score goes through a sigmoid.
Missing or invalid inputs fall back to plausible defaults unless ``strict`` is
requested, in which case they raise :class:`ConfigurationError`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Literal

from ..errors import ConfigurationError
from ..features import normalize_value
from ..training import DECISION_THRESHOLD, sigmoid

FEATURES: tuple[str, ...] = (
    'pregnancies',
    'glucose',
    'bloodpressure',
    'skinthickness',
    'insulin',
    'bmi',
    'diabetespedigreefunction',
    'age',
)

WEIGHTS: dict[str, float] = {
    'pregnancies': 0.42,
    'glucose': 1.24,
    'bloodpressure': 0.18,
    'skinthickness': 0.08,
    'insulin': 0.35,
    'bmi': 0.89,
    'diabetespedigreefunction': 0.67,
    'age': 0.52,
}
BIAS = -4.1

# (mean, std) over the 768-row Pima Indians dataset
NORMALIZATION: dict[str, tuple[float, float]] = {
    'pregnancies': (3.845, 3.369),
    'glucose': (120.894, 31.972),
    'bloodpressure': (69.105, 19.355),
    'skinthickness': (20.536, 15.952),
    'insulin': (79.799, 115.244),
    'bmi': (31.992, 7.884),
    'diabetespedigreefunction': (0.472, 0.331),
    'age': (33.241, 11.760),
}

GLUCOSE_BMI_COEF = 0.15
AGE_PREGNANCIES_COEF = 0.08
INSULIN_GLUCOSE_COEF = 0.12

# Zero counts as missing for every field, matching the demo form
DEFAULTS: dict[str, float] = {
    'pregnancies': 0.0,
    'glucose': 100.0,
    'bloodpressure': 70.0,
    'skinthickness': 20.0,
    'insulin': 80.0,
    'bmi': 25.0,
    'diabetespedigreefunction': 0.5,
    'age': 30.0,
}
FLOORS: dict[str, float] = {name: 0.0 for name in FEATURES} | {'bmi': 10.0, 'age': 18.0}

STATIC_SIGMOID_CLIP = 500.0
CONFIDENCE_BOUNDS = (0.6, 0.95)

# Published holdout figures for the fixed coefficients
REFERENCE_METRICS: dict[str, float] = {
    'accuracy': 0.857,
    'precision': 0.823,
    'recall': 0.789,
    'f1_score': 0.806,
    'specificity': 0.891,
    'auc': 0.912,
}


@dataclass(frozen=True)
class StaticPrediction:
    prediction: int
    probability: float
    risk: Literal['low', 'high']
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def clean_inputs(values: Mapping[str, Any], strict: bool = False) -> dict[str, float]:
    """
    Resolve the eight scorer inputs from a mapping.

    Keys are matched case-insensitively. Missing, zero or non-numeric values are
    replaced by :data:`DEFAULTS`, then clamped to :data:`FLOORS`. In strict mode
    values are taken literally and nothing is defaulted.

    Raises:
        ConfigurationError: In strict mode, for any missing, non-numeric or
            below-floor field.
    """
    lowered = {str(key).lower(): value for key, value in values.items()}
    cleaned: dict[str, float] = {}
    invalid: list[str] = []
    for name in FEATURES:
        number = _as_number(lowered.get(name))
        if strict:
            if number is None or number < FLOORS[name]:
                invalid.append(name)
            else:
                cleaned[name] = number
            continue
        if not number:
            number = DEFAULTS[name]
        cleaned[name] = max(FLOORS[name], number)

    if invalid:
        raise ConfigurationError(f"Missing or invalid inputs: {', '.join(invalid)}")
    return cleaned


def interaction_terms(inputs: Mapping[str, float]) -> dict[str, float]:
    """Derived products added to the linear score, before coefficients."""
    glucose = inputs['glucose']
    insulin = inputs['insulin']
    return {
        'glucose_bmi': (glucose / 100) * (inputs['bmi'] / 30),
        'age_pregnancies': (inputs['age'] / 30) * (inputs['pregnancies'] / 5),
        'insulin_glucose': (insulin / 100) * (glucose / 100) if insulin > 0 else 0.0,
    }


def linear_score(inputs: Mapping[str, float]) -> float:
    z = BIAS
    for name in FEATURES:
        mean, std = NORMALIZATION[name]
        z += normalize_value(inputs[name], mean, std) * WEIGHTS[name]

    terms = interaction_terms(inputs)
    z += terms['glucose_bmi'] * GLUCOSE_BMI_COEF
    z += terms['age_pregnancies'] * AGE_PREGNANCIES_COEF
    z += terms['insulin_glucose'] * INSULIN_GLUCOSE_COEF
    return z


def predict_diabetes(values: Mapping[str, Any], strict: bool = False) -> StaticPrediction:
    """Score one patient with the fixed coefficients."""
    inputs = clean_inputs(values, strict=strict)
    probability = float(sigmoid(linear_score(inputs), clip=STATIC_SIGMOID_CLIP))
    prediction = int(probability >= DECISION_THRESHOLD)
    low, high = CONFIDENCE_BOUNDS
    confidence = min(high, max(low, abs(probability - 0.5) * 2))
    return StaticPrediction(
        prediction=prediction,
        probability=probability,
        risk='high' if prediction == 1 else 'low',
        confidence=confidence,
    )
