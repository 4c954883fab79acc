"""Results writing domain exports."""

from .composition_report_writer import (
    ReportWriteError,
    build_metadata_report,
    render_composed_schema,
    write_composition_report,
)
from .report_models import CompositionReport

__all__ = [
    "CompositionReport",
    "ReportWriteError",
    "build_metadata_report",
    "render_composed_schema",
    "write_composition_report",
]
