"""Composition report writer service."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from graphql import print_schema

from federation_composer.composition.composition_contracts import CompositionResult
from federation_composer.federation_metadata.metadata_models import FieldMetadata, SelectionSet
from federation_composer.federation_metadata.selection_parsing import print_selections

from .report_models import CompositionReport


class ReportWriteError(Exception):
    """Raised when composition outputs cannot be written."""


def render_composed_schema(result: CompositionResult) -> str:
    """Render the composed schema as SDL."""
    return print_schema(result.schema)


def build_metadata_report(result: CompositionResult) -> dict[str, Any]:
    """Build a JSON-serializable view of ownership metadata and errors."""
    types: dict[str, Any] = {}
    for type_name, type_metadata in sorted(result.metadata.types.items()):
        types[type_name] = {
            "serviceName": type_metadata.service_name,
            "keys": [print_selections(key) for key in type_metadata.keys],
            "fields": {
                field_name: _field_entry(field_metadata)
                for field_name, field_metadata in sorted(
                    result.metadata.fields_of(type_name).items()
                )
            },
        }
    return {"types": types, "errors": [error.message for error in result.errors]}


def write_composition_report(
    result: CompositionResult,
    *,
    schema_path: Path | str | None = None,
    metadata_path: Path | str | None = None,
) -> CompositionReport:
    """Write the composed SDL and the metadata report to the requested paths."""
    resolved_schema_path = Path(schema_path).resolve() if schema_path else None
    resolved_metadata_path = Path(metadata_path).resolve() if metadata_path else None
    try:
        if resolved_schema_path:
            resolved_schema_path.write_text(render_composed_schema(result) + "\n", encoding="utf-8")
        if resolved_metadata_path:
            resolved_metadata_path.write_text(
                json.dumps(build_metadata_report(result), indent=2) + "\n", encoding="utf-8"
            )
    except OSError as exc:
        raise ReportWriteError(f"Failed to write composition output: {exc}") from exc

    return CompositionReport(
        schema_path=resolved_schema_path,
        metadata_path=resolved_metadata_path,
        type_count=len(result.metadata.types),
        error_count=len(result.errors),
    )


def _field_entry(metadata: FieldMetadata) -> dict[str, Any]:
    return {
        "serviceName": metadata.service_name,
        "requires": _optional_selections(metadata.requires),
        "provides": _optional_selections(metadata.provides),
    }


def _optional_selections(selections: SelectionSet | None) -> str | None:
    return print_selections(selections) if selections is not None else None
