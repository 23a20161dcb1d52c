"""Config models and loaders for serving."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class ServerConfig:
    host: str = '0.0.0.0'  # noqa: S104
    port: int = 8001


@dataclass(frozen=True)
class ScorerConfig:
    strict: bool = False


@dataclass(frozen=True)
class BatchConfig:
    max_items: int = 100


@dataclass(frozen=True)
class LoggingConfig:
    mode: str = 'minimal'  # 'minimal' or 'requests'


@dataclass(frozen=True)
class ServingConfig:
    server: ServerConfig = field(default_factory=ServerConfig)
    scorer: ScorerConfig = field(default_factory=ScorerConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_serving_config(config_path: str | Path) -> ServingConfig:
    """Load a serving config YAML file."""
    cfg_path = Path(config_path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f'Config file not found: {cfg_path}')

    with cfg_path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh) or {}

    server_section = data.get('server') or {}
    scorer_section = data.get('scorer') or {}
    batch_section = data.get('batch') or {}
    logging_section = data.get('logging') or {}

    mode = logging_section.get('mode', 'minimal')
    if mode not in ('minimal', 'requests'):
        raise ValueError(f"logging.mode must be 'minimal' or 'requests', got '{mode}'")

    return ServingConfig(
        server=ServerConfig(
            host=server_section.get('host', '0.0.0.0'),  # noqa: S104
            port=int(server_section.get('port', 8001)),
        ),
        scorer=ScorerConfig(strict=bool(scorer_section.get('strict', False))),
        batch=BatchConfig(max_items=int(batch_section.get('max_items', 100))),
        logging=LoggingConfig(mode=mode),
    )
