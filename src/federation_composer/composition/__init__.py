"""Schema composition exports."""

from .composition_contracts import CompositionResult
from .field_stripping import strip_external_fields
from .ledger_builder import build_ledgers
from .ledger_models import CompositionLedgers, OwnershipRecord
from .metadata_annotation import annotate_schema
from .phantom_bases import synthesize_phantom_bases
from .schema_assembly import CompositionError, assemble_schema
from .service_composition import compose_services

__all__ = [
    "CompositionError",
    "CompositionLedgers",
    "CompositionResult",
    "OwnershipRecord",
    "annotate_schema",
    "assemble_schema",
    "build_ledgers",
    "compose_services",
    "strip_external_fields",
    "synthesize_phantom_bases",
]
