"""Synthesis of base declarations for extension-only types."""

from __future__ import annotations

import logging

from graphql import (
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    NameNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    TypeDefinitionNode,
    TypeExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
)

from .ledger_models import CompositionLedgers

logger = logging.getLogger(__name__)


def synthesize_phantom_bases(ledgers: CompositionLedgers) -> CompositionLedgers:
    """Add an empty base declaration for every type that is only extended.

    The synthesized declaration matches the kind of the first extension and
    the type is recorded without an owning service.
    """
    for type_name, extensions in ledgers.extensions.items():
        if type_name in ledgers.definitions:
            continue
        logger.debug("Synthesizing base declaration for extension-only type %s", type_name)
        ledgers.add_definition(empty_definition_for(extensions[0]))
        ledgers.ownership_for(type_name).mark_unowned()
    return ledgers


def empty_definition_for(extension: TypeExtensionNode) -> TypeDefinitionNode:
    """Build a member-less base declaration of the same kind as an extension."""
    name = NameNode(value=extension.name.value)
    if isinstance(extension, InputObjectTypeExtensionNode):
        return InputObjectTypeDefinitionNode(name=name, directives=(), fields=())
    if isinstance(extension, EnumTypeExtensionNode):
        return EnumTypeDefinitionNode(name=name, directives=(), values=())
    if isinstance(extension, InterfaceTypeExtensionNode):
        return InterfaceTypeDefinitionNode(name=name, interfaces=(), directives=(), fields=())
    if isinstance(extension, UnionTypeExtensionNode):
        return UnionTypeDefinitionNode(name=name, directives=(), types=())
    if isinstance(extension, ScalarTypeExtensionNode):
        return ScalarTypeDefinitionNode(name=name, directives=())
    return ObjectTypeDefinitionNode(name=name, interfaces=(), directives=(), fields=())
