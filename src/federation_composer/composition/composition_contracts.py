"""Composition entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from graphql import GraphQLError, GraphQLSchema

from federation_composer.federation_metadata.metadata_models import FederationMetadata


@dataclass(frozen=True)
class CompositionResult:
    """Composed schema with its structural errors and federation metadata."""

    schema: GraphQLSchema
    errors: list[GraphQLError] = field(default_factory=list)
    metadata: FederationMetadata = field(default_factory=FederationMetadata)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
