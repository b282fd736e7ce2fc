"""Tests for core.config."""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

import core.config as config
from core.config import AppSettings, write_user_env_vars
from core.domain.language import Language


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)
    assert settings.recursive_threshold == 20
    assert settings.max_rows == 30
    assert settings.batch_sizes == [5, 10, 15, 20, 25]
    assert settings.estimate_skipped is True
    assert settings.reveal_step_ms == 20
    assert settings.default_language is Language.ENGLISH


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PASCAL_BENCH_RECURSIVE_THRESHOLD", "15")
    monkeypatch.setenv("PASCAL_BENCH_BATCH_SIZES", "[1, 2, 3]")
    monkeypatch.setenv("PASCAL_BENCH_DEFAULT_LANGUAGE", "id")
    monkeypatch.setenv("PASCAL_BENCH_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)
    assert settings.recursive_threshold == 15
    assert settings.batch_sizes == [1, 2, 3]
    assert settings.default_language is Language.INDONESIAN
    assert settings.log_level == "DEBUG"


def test_rejects_negative_batch_sizes() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, batch_sizes=[5, -1])


def test_rejects_negative_threshold() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, recursive_threshold=-1)


def test_write_user_env_vars_merges(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "get_user_config_dir", lambda: tmp_path)

    write_user_env_vars({"PASCAL_BENCH_MAX_ROWS": "40"})
    path = write_user_env_vars({"PASCAL_BENCH_RECURSIVE_THRESHOLD": "18"})

    assert path == tmp_path / ".env"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "PASCAL_BENCH_MAX_ROWS=40" in lines
    assert "PASCAL_BENCH_RECURSIVE_THRESHOLD=18" in lines


def test_language_helpers() -> None:
    assert Language.from_bool(True) is Language.INDONESIAN
    assert Language.from_bool(False) is Language.default()
    assert Language.INDONESIAN.label() == "Indonesian"
