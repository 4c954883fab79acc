"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import CompositionConfig, OutputSettings, ServiceSource


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> CompositionConfig:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    services = _parse_services_section(parsed.get("services"), path.parent)
    output = _parse_output_section(parsed.get("output"), path.parent)
    return CompositionConfig(path=path, services=services, output=output)


def _parse_services_section(value: Any, base_path: Path) -> tuple[ServiceSource, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str) or not value:
        raise ConfigurationError("Configuration section 'services' must be a non-empty list.")

    services = []
    seen_names: set[str] = set()
    for index, entry in enumerate(value):
        label = f"services[{index}]"
        section = _require_mapping(entry, label)
        name = _require_non_empty_string(section.get("name"), f"{label}.name")
        if name in seen_names:
            raise ConfigurationError(f"Duplicate service name: {name}")
        seen_names.add(name)
        sdl_text, source_path = _load_sdl_definition(section, base_path, label)
        services.append(ServiceSource(name=name, sdl_text=sdl_text, source_path=source_path))
    return tuple(services)


def _load_sdl_definition(
    section: Mapping[str, Any], base_path: Path, label: str
) -> tuple[str, Path | None]:
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError(f"{label} must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError(f"{label}.inline must be a string.")
        return inline, None
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError(f"{label}.path must be a string.")
        sdl_path = _resolve_path(base_path, path_value)
        if not sdl_path.exists():
            raise ConfigurationError(f"SDL file not found: {sdl_path}")
        return sdl_path.read_text(encoding="utf-8"), sdl_path
    raise ConfigurationError(f"{label} requires either inline or path.")


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    if value is None:
        return OutputSettings(schema_path=None, metadata_path=None, fail_on_errors=False)
    section = _require_mapping(value, "output")
    schema_path = _optional_string(section.get("schema_path"), "output.schema_path")
    metadata_path = _optional_string(section.get("metadata_path"), "output.metadata_path")
    fail_on_errors = section.get("fail_on_errors", False)
    if not isinstance(fail_on_errors, bool):
        raise ConfigurationError("output.fail_on_errors must be a boolean.")
    return OutputSettings(
        schema_path=_resolve_path(base_path, schema_path) if schema_path else None,
        metadata_path=_resolve_path(base_path, metadata_path) if metadata_path else None,
        fail_on_errors=fail_on_errors,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
