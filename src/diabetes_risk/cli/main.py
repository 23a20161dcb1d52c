"""Command-line interface for diabetes_risk."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from ..config import TrainingConfig, load_training_config
from ..data import detect_variant, load_dataset_csv
from ..errors import DiabetesRiskError
from ..pretrained import predict_diabetes
from ..training import train_from_config
from ..utils import get_logger, json_log

app = typer.Typer(help='Diabetes risk CLI', no_args_is_help=True)

log = get_logger(__name__)


def _fail(exc: Exception) -> NoReturn:
    log.error(json_log('cli.error', component='cli', error=str(exc), kind=type(exc).__name__))
    typer.echo(f'Error: {exc}', err=True)
    raise typer.Exit(code=1)


@app.command('train')
def train(
    input_csv: Annotated[
        Path,
        typer.Option(
            '--input',
            '-i',
            exists=True,
            readable=True,
            help='Path to dataset CSV file.',
        ),
    ],
    config: Annotated[
        Path | None,
        typer.Option(
            '--config',
            '-c',
            exists=True,
            readable=True,
            help='Optional training configuration YAML.',
        ),
    ] = None,
    variant: Annotated[
        str | None,
        typer.Option(
            '--variant',
            help='Override dataset variant: auto, basic or comprehensive.',
        ),
    ] = None,
) -> None:
    """Train a logistic regression model and report holdout metrics."""
    log.info(
        json_log(
            'cli.train.start',
            component='cli',
            input=str(input_csv),
            config=str(config) if config else None,
        )
    )
    try:
        cfg = load_training_config(config) if config else TrainingConfig()
        if variant is not None:
            cfg = replace(cfg, data=replace(cfg.data, variant=variant.lower()))
        dataset = load_dataset_csv(input_csv)
        model = train_from_config(dataset.columns, dataset.rows, cfg)
    except (DiabetesRiskError, ValueError) as exc:
        _fail(exc)

    metrics = model.metrics
    typer.echo(f'Features: {", ".join(model.features)}')
    typer.echo(f'Target column: {model.target_column}')
    typer.echo(f'Accuracy: {metrics.accuracy:.4f}')
    typer.echo(f'Precision: {metrics.precision:.4f}')
    typer.echo(f'Recall: {metrics.recall:.4f}')
    typer.echo(f'F1: {metrics.f1_score:.4f}')
    matrix = metrics.to_dict()['confusion_matrix']
    typer.echo(f'Confusion matrix: {matrix}')


@app.command('detect')
def detect(
    input_csv: Annotated[
        Path,
        typer.Option(
            '--input',
            '-i',
            exists=True,
            readable=True,
            help='Path to dataset CSV file.',
        ),
    ],
) -> None:
    """Print the dataset variant detected from the CSV header."""
    try:
        dataset = load_dataset_csv(input_csv)
        variant = detect_variant(dataset.columns)
    except DiabetesRiskError as exc:
        _fail(exc)
    typer.echo(f'Dataset variant: {variant.value}')


@app.command('predict')
def predict(
    pregnancies: Annotated[float | None, typer.Option(help='Number of pregnancies.')] = None,
    glucose: Annotated[float | None, typer.Option(help='Plasma glucose concentration.')] = None,
    bloodpressure: Annotated[float | None, typer.Option(help='Diastolic blood pressure.')] = None,
    skinthickness: Annotated[float | None, typer.Option(help='Triceps skin fold thickness.')] = None,
    insulin: Annotated[float | None, typer.Option(help='2-hour serum insulin.')] = None,
    bmi: Annotated[float | None, typer.Option(help='Body mass index.')] = None,
    diabetespedigreefunction: Annotated[
        float | None,
        typer.Option('--dpf', help='Diabetes pedigree function.'),
    ] = None,
    age: Annotated[float | None, typer.Option(help='Age in years.')] = None,
    strict: Annotated[
        bool,
        typer.Option('--strict/--lenient', help='Reject missing inputs instead of defaulting.'),
    ] = False,
) -> None:
    """Score one patient with the fixed-coefficient model and print JSON."""
    values = {
        'pregnancies': pregnancies,
        'glucose': glucose,
        'bloodpressure': bloodpressure,
        'skinthickness': skinthickness,
        'insulin': insulin,
        'bmi': bmi,
        'diabetespedigreefunction': diabetespedigreefunction,
        'age': age,
    }
    try:
        result = predict_diabetes(values, strict=strict)
    except DiabetesRiskError as exc:
        _fail(exc)
    typer.echo(json.dumps(result.to_dict()))


if __name__ == '__main__':
    app()
