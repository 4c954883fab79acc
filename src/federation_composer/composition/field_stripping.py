"""Removal of ``@external`` fields before merging."""

from __future__ import annotations

from copy import copy

from graphql import DefinitionNode, ObjectTypeDefinitionNode, ObjectTypeExtensionNode

from federation_composer.directives.federation_directives import EXTERNAL_DIRECTIVE_NAME
from federation_composer.federation_metadata.selection_parsing import find_directives


def strip_external_fields(definition: DefinitionNode) -> DefinitionNode:
    """Return the definition without fields marked ``@external``.

    External fields only declare a dependency on a field owned by another
    service. The given node is never modified; a copy is returned when fields
    were removed.
    """
    if not isinstance(definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode)):
        return definition
    if not definition.fields:
        return definition

    kept_fields = tuple(
        field for field in definition.fields if not find_directives(field, EXTERNAL_DIRECTIVE_NAME)
    )
    if len(kept_fields) == len(definition.fields):
        return definition

    stripped = copy(definition)
    stripped.fields = kept_fields
    return stripped
