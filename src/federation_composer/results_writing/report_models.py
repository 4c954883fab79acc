"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CompositionReport:
    """Files written for one composition run."""

    schema_path: Path | None
    metadata_path: Path | None
    type_count: int
    error_count: int
