"""Composition report writer tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from federation_composer.composition import CompositionResult, compose_services
from federation_composer.results_writing import (
    ReportWriteError,
    build_metadata_report,
    render_composed_schema,
    write_composition_report,
)
from federation_composer.service_definitions import parse_service_definition


def _result() -> CompositionResult:
    return compose_services(
        [
            parse_service_definition(
                "products",
                """
                type Product @key(fields: "sku") { sku: String! name: String! }
                type Query { product(sku: String!): Product }
                """,
            ),
            parse_service_definition(
                "pricing",
                """
                extend type Product {
                  sku: String! @external
                  name: String!
                  price: Int! @requires(fields: "sku")
                }
                """,
            ),
        ]
    )


def test_render_composed_schema_prints_sdl() -> None:
    sdl = render_composed_schema(_result())

    assert "type Product {" in sdl
    assert "price: Int!" in sdl
    assert "directive @key(fields: String!) repeatable on OBJECT" in sdl


def test_build_metadata_report_lists_types_fields_and_errors() -> None:
    report = build_metadata_report(_result())

    product = report["types"]["Product"]
    assert product["serviceName"] == "products"
    assert product["keys"] == ["sku"]
    assert product["fields"]["price"] == {
        "serviceName": "pricing",
        "requires": "sku",
        "provides": None,
    }
    assert product["fields"]["name"]["serviceName"] == "pricing"
    assert "sku" not in product["fields"]
    assert report["types"]["Query"] == {"serviceName": "products", "keys": [], "fields": {}}
    assert len(report["errors"]) == 1
    assert "Product.name" in report["errors"][0]


def test_write_composition_report_writes_requested_files(tmp_path: Path) -> None:
    schema_path = tmp_path / "composed.graphql"
    metadata_path = tmp_path / "metadata.json"

    report = write_composition_report(
        _result(), schema_path=schema_path, metadata_path=metadata_path
    )

    assert report.schema_path == schema_path.resolve()
    assert report.metadata_path == metadata_path.resolve()
    assert report.type_count == 2
    assert report.error_count == 1
    assert "type Product {" in schema_path.read_text(encoding="utf-8")
    metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
    assert metadata["types"]["Product"]["fields"]["price"]["serviceName"] == "pricing"


def test_write_composition_report_skips_unrequested_files(tmp_path: Path) -> None:
    report = write_composition_report(_result())

    assert report.schema_path is None
    assert report.metadata_path is None
    assert list(tmp_path.iterdir()) == []


def test_write_composition_report_wraps_os_errors(tmp_path: Path) -> None:
    with pytest.raises(ReportWriteError, match="Failed to write composition output"):
        write_composition_report(_result(), schema_path=tmp_path / "missing" / "composed.graphql")
