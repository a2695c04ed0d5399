from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config.loader import load_report_config
from infrastructure.config.models import ReportConfig


def test_defaults() -> None:
    cfg = ReportConfig()
    assert cfg.labels_order is None
    assert cfg.sort_labels is False
    assert cfg.decimals == 4
    assert cfg.log_confusion_matrix is True


def test_label_kinds_are_preserved() -> None:
    cfg = ReportConfig(labels_order=[1, "1", True])
    assert cfg.labels_order == [1, "1", True]
    assert [type(label) for label in cfg.labels_order] == [int, str, bool]


def test_duplicate_labels_are_rejected() -> None:
    with pytest.raises(ValidationError, match="duplicate"):
        ReportConfig(labels_order=["cat", "dog", "cat"])


def test_sort_labels_with_explicit_order_is_rejected() -> None:
    with pytest.raises(ValidationError, match="sort_labels"):
        ReportConfig(labels_order=["cat", "dog"], sort_labels=True)


def test_negative_decimals_are_rejected() -> None:
    with pytest.raises(ValidationError):
        ReportConfig(decimals=-1)


def test_load_report_config(tmp_path: Path) -> None:
    path = tmp_path / "report.yaml"
    path.write_text("labels_order: [LLQ, DRQ, GDQ]\ndecimals: 2\nlog_confusion_matrix: false\n", encoding="utf-8")

    cfg = load_report_config(path)

    assert cfg.labels_order == ["LLQ", "DRQ", "GDQ"]
    assert cfg.decimals == 2
    assert cfg.log_confusion_matrix is False


def test_load_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "report.yaml"
    path.write_text("", encoding="utf-8")
    assert load_report_config(path) == ReportConfig()


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_report_config(tmp_path / "missing.yaml")


def test_load_non_mapping_raises(tmp_path: Path) -> None:
    path = tmp_path / "report.yaml"
    path.write_text("- cat\n- dog\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_report_config(path)


def test_bundled_default_config_is_valid() -> None:
    path = Path(__file__).resolve().parents[2] / "configs" / "report.yaml"
    assert load_report_config(path) == ReportConfig()
