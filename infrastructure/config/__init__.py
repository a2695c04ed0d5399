"""
Configuration management: models and loading.

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_report_config
from infrastructure.config.models import ReportConfig

__all__ = [
    "ReportConfig",
    "load_report_config",
]
