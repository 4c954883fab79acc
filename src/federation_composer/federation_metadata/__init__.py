"""Federation metadata exports."""

from .metadata_models import FederationMetadata, FieldCoordinate, FieldMetadata, TypeMetadata
from .selection_parsing import (
    find_directives,
    parse_directive_selections,
    parse_selections,
    print_selections,
)

__all__ = [
    "FederationMetadata",
    "FieldCoordinate",
    "FieldMetadata",
    "TypeMetadata",
    "find_directives",
    "parse_directive_selections",
    "parse_selections",
    "print_selections",
]
