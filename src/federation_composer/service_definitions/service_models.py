"""Service definition entities."""

from __future__ import annotations

from dataclasses import dataclass

from graphql import DocumentNode


@dataclass(frozen=True)
class ServiceDefinition:
    """One named SDL fragment contributed by a service."""

    name: str
    type_defs: DocumentNode
