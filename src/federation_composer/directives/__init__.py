"""Composition directive exports."""

from .federation_directives import (
    EXTERNAL_DIRECTIVE,
    FEDERATION_DIRECTIVES,
    KEY_DIRECTIVE,
    PROVIDES_DIRECTIVE,
    REQUIRES_DIRECTIVE,
    composition_directives,
)

__all__ = [
    "EXTERNAL_DIRECTIVE",
    "FEDERATION_DIRECTIVES",
    "KEY_DIRECTIVE",
    "PROVIDES_DIRECTIVE",
    "REQUIRES_DIRECTIVE",
    "composition_directives",
]
