"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ServiceSource:
    """SDL source of one configured service."""

    name: str
    sdl_text: str
    source_path: Path | None


@dataclass(frozen=True)
class OutputSettings:
    """Where composition results are written."""

    schema_path: Path | None
    metadata_path: Path | None
    fail_on_errors: bool


@dataclass(frozen=True)
class CompositionConfig:
    """Top-level configuration aggregate."""

    path: Path
    services: tuple[ServiceSource, ...]
    output: OutputSettings
