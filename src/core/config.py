"""Core configuration.

- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets the harness and the CLI read the safety policy the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language

# Largest size at which the recursive builder is still run for a real sample.
DEFAULT_RECURSIVE_THRESHOLD = 20
DEFAULT_MAX_ROWS = 30
DEFAULT_BATCH_SIZES: tuple[int, ...] = (5, 10, 15, 20, 25)


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pascal-bench"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pascal-bench"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pascal-bench"
    return Path.home() / ".config" / "pascal-bench"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pascal-bench user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PASCAL_BENCH_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    recursive_threshold: int = Field(
        default=DEFAULT_RECURSIVE_THRESHOLD,
        ge=0,
        description="Largest size at which the recursive builder is measured.",
    )
    max_rows: int = Field(
        default=DEFAULT_MAX_ROWS,
        ge=1,
        le=1000,
        description="Upper bound accepted by the CLI for a row count.",
    )
    batch_sizes: list[int] = Field(
        default_factory=lambda: list(DEFAULT_BATCH_SIZES),
        min_length=1,
        description="Sizes used by `batch` when none are given.",
    )
    estimate_skipped: bool = Field(
        default=True,
        description="Fill skipped recursive runs in a batch with a 2^n/1e6 estimate.",
    )
    reveal_step_ms: int = Field(
        default=20,
        ge=0,
        le=1000,
        description="Per-node delay unit for the triangle reveal animation.",
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Language for user-facing labels (en/id).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("batch_sizes")
    @classmethod
    def _non_negative_sizes(cls, value: list[int]) -> list[int]:
        if any(size < 0 for size in value):
            raise ValueError("batch sizes must be non-negative")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()
