"""Field stripping tests."""

from __future__ import annotations

from graphql import EnumTypeDefinitionNode, ObjectTypeExtensionNode, parse

from federation_composer.composition.field_stripping import strip_external_fields


def _field_names(node) -> list[str]:
    return [field.name.value for field in node.fields]


def test_removes_external_fields_from_extension() -> None:
    extension = parse(
        """
        extend type Product {
          sku: String! @external
          price: Int! @requires(fields: "sku")
        }
        """
    ).definitions[0]

    stripped = strip_external_fields(extension)

    assert isinstance(stripped, ObjectTypeExtensionNode)
    assert _field_names(stripped) == ["price"]


def test_removes_external_fields_from_base_definition() -> None:
    definition = parse(
        """
        type Review {
          body: String
          author: User @external
        }
        """
    ).definitions[0]

    assert _field_names(strip_external_fields(definition)) == ["body"]


def test_does_not_modify_the_given_node() -> None:
    extension = parse("extend type Product { sku: String! @external price: Int! }").definitions[0]

    stripped = strip_external_fields(extension)

    assert stripped is not extension
    assert _field_names(extension) == ["sku", "price"]
    assert _field_names(stripped) == ["price"]


def test_returns_same_node_when_nothing_is_external() -> None:
    definition = parse("type Product { sku: String! @deprecated }").definitions[0]

    assert strip_external_fields(definition) is definition


def test_ignores_nodes_without_fields() -> None:
    extension = parse('extend type Product @key(fields: "sku")').definitions[0]
    enum_definition = parse("enum Color { RED }").definitions[0]

    assert strip_external_fields(extension) is extension
    assert strip_external_fields(enum_definition) is enum_definition
    assert isinstance(enum_definition, EnumTypeDefinitionNode)
