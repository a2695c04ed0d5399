"""
Logging setup with contextvars-based metadata injection.

- Adds run_tag into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers.
"""

import contextvars
import hashlib
import logging
from collections.abc import Iterable
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_run_id_full = contextvars.ContextVar("run_id_full", default="-")

# pandas imports numexpr, which announces its thread count at INFO
NOISY_LOGGERS: tuple[str, ...] = ("numexpr", "numexpr.utils")


def make_run_tag(run_id_full: str, length: int = 8) -> str:
    """
    Stable short tag derived from the full run_id.
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(run_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or "-"
        return True


def set_log_context(*, run_id_full: str | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if run_id_full is not None:
        cv_run_id_full.set(str(run_id_full))
        cv_run_tag.set(make_run_tag(str(run_id_full)))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "run_tag": str(cv_run_tag.get() or "-"),
        "run_id_full": str(cv_run_id_full.get() or "-"),
    }


def clear_log_context() -> None:
    """Reset run context to defaults."""
    cv_run_tag.set("-")
    cv_run_id_full.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
    quiet_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Optional path to a rotating log file
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
        quiet_loggers: Third-party loggers raised to WARNING
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] r=%(run)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s | %(message)s"

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(console_fmt, datefmt="%H:%M:%S"))
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
