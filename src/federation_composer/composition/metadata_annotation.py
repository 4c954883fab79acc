"""Federation metadata extraction from an assembled schema."""

from __future__ import annotations

from collections.abc import Mapping

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLObjectType,
    GraphQLSchema,
    is_enum_type,
    is_input_object_type,
    is_object_type,
)

from federation_composer.directives.federation_directives import (
    KEY_DIRECTIVE_NAME,
    PROVIDES_DIRECTIVE_NAME,
    REQUIRES_DIRECTIVE_NAME,
)
from federation_composer.federation_metadata.metadata_models import (
    FederationMetadata,
    FieldMetadata,
    SelectionSet,
    TypeMetadata,
)
from federation_composer.federation_metadata.selection_parsing import (
    find_directives,
    parse_directive_selections,
)

from .ledger_models import OwnershipRecord


def annotate_schema(
    schema: GraphQLSchema, ownership: Mapping[str, OwnershipRecord]
) -> FederationMetadata:
    """Build the federation metadata side table for every ledger type."""
    metadata = FederationMetadata()
    for type_name, record in ownership.items():
        named_type = schema.get_type(type_name)
        if named_type is None:
            continue

        if is_object_type(named_type):
            metadata.types[type_name] = TypeMetadata(
                service_name=record.owning_service, keys=_entity_keys(named_type)
            )
            _annotate_object_fields(metadata, named_type, record)
            continue

        metadata.types[type_name] = TypeMetadata(service_name=record.owning_service)
        if is_input_object_type(named_type) or is_enum_type(named_type):
            _annotate_extension_members(metadata, named_type, record)
    return metadata


def _entity_keys(object_type: GraphQLObjectType) -> tuple[SelectionSet, ...]:
    keys = []
    for directive in find_directives(object_type.ast_node, KEY_DIRECTIVE_NAME):
        selections = parse_directive_selections(directive)
        if selections is not None:
            keys.append(selections)
    return tuple(keys)


def _annotate_object_fields(
    metadata: FederationMetadata, object_type: GraphQLObjectType, record: OwnershipRecord
) -> None:
    for field_name, field in object_type.fields.items():
        service_name = record.extension_field_owners.get(field_name)
        provides = _first_directive_selections(field.ast_node, PROVIDES_DIRECTIVE_NAME)
        requires = None
        if service_name is not None:
            requires = _first_directive_selections(field.ast_node, REQUIRES_DIRECTIVE_NAME)
        if service_name is None and provides is None:
            continue
        metadata.fields[(object_type.name, field_name)] = FieldMetadata(
            service_name=service_name, requires=requires, provides=provides
        )


def _annotate_extension_members(
    metadata: FederationMetadata,
    named_type: GraphQLInputObjectType | GraphQLEnumType,
    record: OwnershipRecord,
) -> None:
    members = named_type.values if isinstance(named_type, GraphQLEnumType) else named_type.fields
    for member_name, service_name in record.extension_field_owners.items():
        if member_name in members:
            metadata.fields[(named_type.name, member_name)] = FieldMetadata(
                service_name=service_name
            )


def _first_directive_selections(node: object, directive_name: str) -> SelectionSet | None:
    directives = find_directives(node, directive_name)
    if not directives:
        return None
    return parse_directive_selections(directives[0])
