"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import ReportConfig
from infrastructure.constants import REPORT_CONFIG_FILE


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_report_config(path: Path = REPORT_CONFIG_FILE) -> ReportConfig:
    """
    Load report.yaml into a validated ReportConfig.

    Args:
        path: Path to the YAML file (default: configs/report.yaml)

    Returns:
        ReportConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is not a mapping
        pydantic.ValidationError: If values are invalid
    """
    data = _load_yaml(path)
    return ReportConfig(**data)
