"""Service composition use case."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from federation_composer.service_definitions.service_models import ServiceDefinition

from .composition_contracts import CompositionResult
from .ledger_builder import build_ledgers
from .metadata_annotation import annotate_schema
from .phantom_bases import synthesize_phantom_bases
from .schema_assembly import assemble_schema

_PACKAGE_LOGGER = logging.getLogger("federation_composer")
_PACKAGE_LOGGER.addHandler(logging.NullHandler())

logger = logging.getLogger(__name__)


def compose_services(services: Sequence[ServiceDefinition]) -> CompositionResult:
    """Compose service SDL fragments into one schema with ownership metadata.

    Service order decides every "last wins" tie-break. Structural collisions
    are returned as errors next to a best-effort schema.
    """
    ledgers = synthesize_phantom_bases(build_ledgers(services))
    schema, errors = assemble_schema(ledgers.definitions, ledgers.extensions)
    metadata = annotate_schema(schema, ledgers.ownership)
    logger.info(
        "Composed %d services into %d types with %d errors",
        len(services),
        len(metadata.types),
        len(errors),
    )
    return CompositionResult(schema=schema, errors=errors, metadata=metadata)
