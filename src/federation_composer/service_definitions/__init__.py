"""Service definition exports."""

from .sdl_loading import ServiceDefinitionError, load_service_definition, parse_service_definition
from .service_models import ServiceDefinition

__all__ = [
    "ServiceDefinition",
    "ServiceDefinitionError",
    "load_service_definition",
    "parse_service_definition",
]
