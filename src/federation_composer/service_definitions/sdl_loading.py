"""SDL parsing service for service definitions."""

from __future__ import annotations

from pathlib import Path

from graphql import GraphQLSyntaxError, parse

from .service_models import ServiceDefinition


class ServiceDefinitionError(Exception):
    """Raised when a service definition cannot be created."""


def parse_service_definition(name: str, sdl_text: str) -> ServiceDefinition:
    """Parse SDL text into a named service definition."""
    service_name = name.strip() if isinstance(name, str) else ""
    if not service_name:
        raise ServiceDefinitionError("Service name must not be empty.")
    try:
        document = parse(sdl_text)
    except GraphQLSyntaxError as exc:
        raise ServiceDefinitionError(f"Invalid SDL for service '{service_name}': {exc}") from exc
    return ServiceDefinition(name=service_name, type_defs=document)


def load_service_definition(name: str, path: Path | str) -> ServiceDefinition:
    """Read an SDL file and parse it into a named service definition.

    Args:
      name: Service name recorded as owner of the file's declarations.
      path: Location of the UTF-8 encoded SDL file.

    Returns:
      The parsed service definition.

    Raises:
      ServiceDefinitionError: If the file is missing or the SDL is invalid.
    """
    sdl_path = Path(path)
    if not sdl_path.is_file():
        raise ServiceDefinitionError(f"SDL file not found: {sdl_path}")
    return parse_service_definition(name, sdl_path.read_text(encoding="utf-8"))
