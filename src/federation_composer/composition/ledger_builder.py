"""Ledger construction from service definitions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from graphql import (
    EnumTypeExtensionNode,
    InputObjectTypeExtensionNode,
    ObjectTypeExtensionNode,
    TypeDefinitionNode,
    TypeExtensionNode,
    is_type_definition_node,
    is_type_extension_node,
)

from federation_composer.service_definitions.service_models import ServiceDefinition

from .field_stripping import strip_external_fields
from .ledger_models import CompositionLedgers

logger = logging.getLogger(__name__)


def build_ledgers(services: Sequence[ServiceDefinition]) -> CompositionLedgers:
    """Partition every service declaration into definitions and extensions.

    Services are processed in the given order. A later base declaration of a
    type takes ownership from an earlier one, and a later extension field
    takes ownership of a same-named field from an earlier extension. All
    nodes are kept in the ledgers for validation.
    """
    ledgers = CompositionLedgers()
    for service in services:
        for definition in service.type_defs.definitions:
            stripped = strip_external_fields(definition)
            if is_type_definition_node(stripped):
                _record_definition(ledgers, stripped, service.name)
            elif is_type_extension_node(stripped):
                _record_extension(ledgers, stripped, service.name)
            else:
                logger.debug(
                    "Ignoring %s from service %s", type(stripped).__name__, service.name
                )
    return ledgers


def _record_definition(
    ledgers: CompositionLedgers, definition: TypeDefinitionNode, service_name: str
) -> None:
    type_name = definition.name.value
    record = ledgers.ownership_for(type_name)
    if record.owning_service is not None:
        logger.debug(
            "Type %s redeclared by %s, previously owned by %s",
            type_name,
            service_name,
            record.owning_service,
        )
    record.declare_base(service_name)
    ledgers.add_definition(definition)


def _record_extension(
    ledgers: CompositionLedgers, extension: TypeExtensionNode, service_name: str
) -> None:
    type_name = extension.name.value
    record = ledgers.ownership_for(type_name)

    members: tuple = ()
    if isinstance(extension, (ObjectTypeExtensionNode, InputObjectTypeExtensionNode)):
        members = tuple(extension.fields or ())
    elif isinstance(extension, EnumTypeExtensionNode):
        members = tuple(extension.values or ())

    for member in members:
        record.claim_extension_member(member.name.value, service_name)

    ledgers.add_extension(extension)
