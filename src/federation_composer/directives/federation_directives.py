"""Directive declarations recognized during composition."""

from __future__ import annotations

from graphql import (
    DirectiveLocation,
    GraphQLArgument,
    GraphQLDirective,
    GraphQLNonNull,
    GraphQLString,
    specified_directives,
)

KEY_DIRECTIVE_NAME = "key"
EXTERNAL_DIRECTIVE_NAME = "external"
REQUIRES_DIRECTIVE_NAME = "requires"
PROVIDES_DIRECTIVE_NAME = "provides"
FIELDS_ARGUMENT_NAME = "fields"


def _fields_argument() -> dict[str, GraphQLArgument]:
    return {FIELDS_ARGUMENT_NAME: GraphQLArgument(GraphQLNonNull(GraphQLString))}


KEY_DIRECTIVE = GraphQLDirective(
    name=KEY_DIRECTIVE_NAME,
    locations=[DirectiveLocation.OBJECT],
    args=_fields_argument(),
    is_repeatable=True,
    description="Selection of fields that uniquely identifies an entity.",
)

EXTERNAL_DIRECTIVE = GraphQLDirective(
    name=EXTERNAL_DIRECTIVE_NAME,
    locations=[DirectiveLocation.OBJECT, DirectiveLocation.FIELD_DEFINITION],
    description="Field declared only as a dependency; owned by another service.",
)

REQUIRES_DIRECTIVE = GraphQLDirective(
    name=REQUIRES_DIRECTIVE_NAME,
    locations=[DirectiveLocation.FIELD_DEFINITION],
    args=_fields_argument(),
    description="External fields needed to resolve this field.",
)

PROVIDES_DIRECTIVE = GraphQLDirective(
    name=PROVIDES_DIRECTIVE_NAME,
    locations=[DirectiveLocation.FIELD_DEFINITION],
    args=_fields_argument(),
    description="Fields of the returned entity this service can resolve itself.",
)

FEDERATION_DIRECTIVES: tuple[GraphQLDirective, ...] = (
    KEY_DIRECTIVE,
    EXTERNAL_DIRECTIVE,
    REQUIRES_DIRECTIVE,
    PROVIDES_DIRECTIVE,
)


def composition_directives() -> tuple[GraphQLDirective, ...]:
    """Return the directives every composed schema is registered with."""
    return (*specified_directives, *FEDERATION_DIRECTIVES)
