"""CSV ingestion into the column/row shape the extractor consumes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd

from ..errors import NoDataError
from ..utils import get_logger, json_log

log = get_logger(__name__)

NULL_MARKERS = ('', 'NULL', 'null', 'N/A')


@dataclass(frozen=True)
class Dataset:
    """Raw tabular data: column names plus one mapping per row."""

    columns: list[str]
    rows: list[dict[str, Any]] = field(default_factory=list)
    filename: str | None = None


def load_dataset_csv(path: str | Path) -> Dataset:
    """
    Read a CSV file into a :class:`Dataset`.

    Blank cells and the usual null markers become ``None``; rows where every
    cell is empty are dropped.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        NoDataError: If the file is malformed or has no header or data rows.
    """
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f'CSV not found: {csv_path}')

    try:
        df = pd.read_csv(
            csv_path,
            na_values=list(NULL_MARKERS),
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError as exc:
        raise NoDataError(f'No data found in CSV file: {csv_path}') from exc
    except pd.errors.ParserError as exc:
        raise NoDataError(f'Malformed CSV file: {csv_path}') from exc

    df.columns = [str(col).strip() for col in df.columns]
    df = df.dropna(how='all')
    if df.empty:
        raise NoDataError(f'No data found in CSV file: {csv_path}')

    rows = df.astype(object).where(df.notna(), None).to_dict(orient='records')

    log.info(
        json_log(
            'csv.loaded',
            component='data.loading',
            input=str(csv_path),
            rows=len(rows),
            columns=len(df.columns),
        )
    )
    return Dataset(columns=list(df.columns), rows=rows, filename=csv_path.name)
