"""Load and validate form config from YAML."""

from __future__ import annotations

from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from regform.config.models import FormConfig

logger = structlog.get_logger(__name__)


def load_config(path: str | Path) -> FormConfig:
    """
    Load YAML file and validate into FormConfig.
    Raises FileNotFoundError, yaml.YAMLError, or ValueError on invalid config.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if data is None:
        raise ValueError("Config file is empty")

    try:
        config = FormConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid config: {e}") from e
    logger.debug("config_loaded", path=str(path), trigger=config.validation_trigger)
    return config
