# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for run settings. Every field can be set through a
``CLIQUEPERC_``-prefixed environment variable (e.g. ``CLIQUEPERC_CLIQUE_SIZE=4``)
or overridden per call with ``load_settings(**overrides)``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cliqueperc.core.errors import CliquePercError
from cliqueperc.logging.handlers import parse_size

MIN_CLIQUE_SIZE = 2


class ConfigurationError(CliquePercError):
    """Raised when configuration is invalid or internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CLIQUEPERC_",
        extra="ignore",
    )

    # === Percolation ===
    clique_size: int = 3
    label_separator: str = ","
    community_min_size: int = 1
    verify_invariants: bool = True

    # === Input ===
    symmetrize_edges: bool = True

    # === Graph export ===
    graph_export_formats: str = ""

    # === Output ===
    output_format: Literal["text", "json"] = "text"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("clique_size")
    @classmethod
    def validate_clique_size(cls, v: int) -> int:  # noqa: N805
        """Percolation is undefined below k=2."""
        if v < MIN_CLIQUE_SIZE:
            raise ConfigurationError(
                f"clique_size must be >= {MIN_CLIQUE_SIZE}, got {v}"
            )
        return v

    @field_validator("log_rotation")
    @classmethod
    def validate_log_rotation(cls, v: str) -> str:  # noqa: N805
        """Reject rotation sizes the file handler could not use."""
        try:
            parse_size(v)
        except ValueError as exc:
            raise ConfigurationError(f"log_rotation: {exc}") from exc
        return v

    @field_validator("community_min_size", "log_retention")
    @classmethod
    def validate_non_negative(cls, v: int, info) -> int:  # noqa: N805
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if not self.label_separator:
            errors.append("LABEL_SEPARATOR must not be empty")

        unknown = set(self.graph_export_formats_list) - {"json", "graphml"}
        if unknown:
            errors.append(
                f"GRAPH_EXPORT_FORMATS has unknown formats: {', '.join(sorted(unknown))}"
            )

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def graph_export_formats_list(self) -> list[str]:
        """Parse comma-separated graph export formats."""
        return [f.strip() for f in self.graph_export_formats.split(",") if f.strip()]


def check_clique_size(k: int) -> int:
    """Validate a clique size passed directly to the core.

    Raises:
        ConfigurationError: If k < 2.
    """
    if k < MIN_CLIQUE_SIZE:
        raise ConfigurationError(f"clique size k must be >= {MIN_CLIQUE_SIZE}, got {k}")
    return k


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-run config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
