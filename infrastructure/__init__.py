"""
Infrastructure layer: configuration and observability.

Contains:
- Configuration loading (YAML) and validation
- Logging setup with contextvars-based metadata

This is the only layer that performs I/O operations.
"""

from infrastructure.config import ReportConfig, load_report_config
from infrastructure.observability import configure_logging, set_log_context

__all__ = [
    "ReportConfig",
    "load_report_config",
    "configure_logging",
    "set_log_context",
]
