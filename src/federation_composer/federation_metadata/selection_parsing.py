"""Helpers for reading composition directives from AST nodes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import cast

from graphql import (
    DirectiveNode,
    GraphQLSyntaxError,
    OperationDefinitionNode,
    SelectionNode,
    StringValueNode,
    parse,
    print_ast,
)

from federation_composer.directives.federation_directives import FIELDS_ARGUMENT_NAME

logger = logging.getLogger(__name__)


def find_directives(node: object, directive_name: str) -> list[DirectiveNode]:
    """Return every occurrence of a directive on a type or field node."""
    directives = getattr(node, "directives", None) or ()
    return [directive for directive in directives if directive.name.value == directive_name]


def parse_selections(source: str) -> tuple[SelectionNode, ...]:
    """Parse a ``fields`` argument into the selections of a synthetic query."""
    document = parse(f"query {{ {source} }}", no_location=True)
    operation = cast(OperationDefinitionNode, document.definitions[0])
    return tuple(operation.selection_set.selections)


def parse_directive_selections(directive: DirectiveNode) -> tuple[SelectionNode, ...] | None:
    """Parse the ``fields`` argument of a directive occurrence.

    Returns ``None`` when the argument is missing, not a string or not a valid
    selection set.
    """
    for argument in directive.arguments or ():
        if argument.name.value != FIELDS_ARGUMENT_NAME:
            continue
        if not isinstance(argument.value, StringValueNode):
            break
        try:
            return parse_selections(argument.value.value)
        except GraphQLSyntaxError as exc:
            logger.debug("Dropping @%s with unparseable fields: %s", directive.name.value, exc)
            return None
    logger.debug("Dropping @%s without a string fields argument", directive.name.value)
    return None


def print_selections(selections: Sequence[SelectionNode]) -> str:
    return " ".join(print_ast(selection) for selection in selections)
