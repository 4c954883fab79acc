"""Two-pass schema assembly from composition ledgers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from itertools import chain

from graphql import (
    DefinitionNode,
    DocumentNode,
    EnumTypeExtensionNode,
    GraphQLError,
    GraphQLNamedType,
    GraphQLSchema,
    InputObjectTypeExtensionNode,
    InterfaceTypeExtensionNode,
    ObjectTypeExtensionNode,
    ScalarTypeExtensionNode,
    TypeDefinitionNode,
    TypeExtensionNode,
    UnionTypeExtensionNode,
    extend_schema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)
from graphql.validation.validate import validate_sdl

from federation_composer.directives.federation_directives import composition_directives


class CompositionError(Exception):
    """Raised when the composed documents cannot be built into a schema."""

    def __init__(self, message: str, errors: Sequence[GraphQLError] = ()) -> None:
        super().__init__(message)
        self.errors = list(errors)


_EXTENSION_TARGETS: dict[type, Callable[[GraphQLNamedType], bool]] = {
    ObjectTypeExtensionNode: is_object_type,
    InterfaceTypeExtensionNode: is_interface_type,
    InputObjectTypeExtensionNode: is_input_object_type,
    EnumTypeExtensionNode: is_enum_type,
    UnionTypeExtensionNode: is_union_type,
    ScalarTypeExtensionNode: is_scalar_type,
}

_ROOT_TYPE_NAMES = (("query", "Query"), ("mutation", "Mutation"), ("subscription", "Subscription"))


def assemble_schema(
    definitions: Mapping[str, Sequence[TypeDefinitionNode]],
    extensions: Mapping[str, Sequence[TypeExtensionNode]],
) -> tuple[GraphQLSchema, list[GraphQLError]]:
    """Merge base definitions, then extensions, into a new schema.

    Each pass is validated against the schema built so far. Validation errors
    are collected and returned; they never stop the merge.

    Raises:
      CompositionError: If the documents reference types that exist nowhere.
    """
    schema = GraphQLSchema(directives=composition_directives())

    definitions_document = _document(chain.from_iterable(definitions.values()))
    errors = list(validate_sdl(definitions_document, schema))
    schema = _extend(schema, definitions_document, errors)

    extensions_document = _document(chain.from_iterable(extensions.values()))
    errors.extend(validate_sdl(extensions_document, schema))
    applicable_extensions = _document(
        node for node in extensions_document.definitions if _extension_applies(schema, node)
    )
    schema = _extend(schema, applicable_extensions, errors)

    return with_root_operation_types(schema), errors


def with_root_operation_types(schema: GraphQLSchema) -> GraphQLSchema:
    """Wire conventionally named object types in as missing root operation types."""
    roots = {
        "query": schema.query_type,
        "mutation": schema.mutation_type,
        "subscription": schema.subscription_type,
    }
    missing = False
    for operation, type_name in _ROOT_TYPE_NAMES:
        candidate = schema.get_type(type_name)
        if roots[operation] is None and is_object_type(candidate):
            roots[operation] = candidate
            missing = True
    if not missing:
        return schema

    return GraphQLSchema(
        query=roots["query"],
        mutation=roots["mutation"],
        subscription=roots["subscription"],
        types=[
            named_type
            for type_name, named_type in schema.type_map.items()
            if not type_name.startswith("__")
        ],
        directives=schema.directives,
        description=schema.description,
        ast_node=schema.ast_node,
        extension_ast_nodes=schema.extension_ast_nodes,
    )


def _document(nodes: Iterable[DefinitionNode]) -> DocumentNode:
    return DocumentNode(definitions=tuple(nodes))


def _extend(
    schema: GraphQLSchema, document: DocumentNode, errors: list[GraphQLError]
) -> GraphQLSchema:
    if not document.definitions:
        return schema
    try:
        return extend_schema(schema, document, assume_valid_sdl=True)
    except TypeError as exc:
        raise CompositionError(f"Unable to build composed schema: {exc}", errors) from exc


def _extension_applies(schema: GraphQLSchema, node: DefinitionNode) -> bool:
    existing = schema.get_type(node.name.value)  # type: ignore[attr-defined]
    if existing is None:
        return True
    matches_kind = _EXTENSION_TARGETS.get(type(node))
    return matches_kind is None or matches_kind(existing)
