"""Ledger builder tests."""

from __future__ import annotations

from graphql import parse

from federation_composer.composition.ledger_builder import build_ledgers
from federation_composer.composition.ledger_models import OwnershipRecord
from federation_composer.service_definitions.service_models import ServiceDefinition


def _service(name: str, sdl: str) -> ServiceDefinition:
    return ServiceDefinition(name=name, type_defs=parse(sdl))


def test_partitions_definitions_and_extensions_in_service_order() -> None:
    ledgers = build_ledgers(
        [
            _service("serviceA", "type Product { sku: String! }"),
            _service("serviceB", "extend type Product { price: Int! }"),
            _service("serviceC", "type Product { upc: String! }"),
        ]
    )

    assert [node.fields[0].name.value for node in ledgers.definitions["Product"]] == [
        "sku",
        "upc",
    ]
    assert len(ledgers.extensions["Product"]) == 1
    assert list(ledgers.ownership) == ["Product"]


def test_last_base_declaration_owns_the_type() -> None:
    ledgers = build_ledgers(
        [
            _service("serviceA", "type Product { sku: String! }"),
            _service("serviceB", "type Product { sku: String! }"),
        ]
    )

    record = ledgers.ownership["Product"]
    assert record.owning_service == "serviceB"
    assert record.base_services == ["serviceA", "serviceB"]


def test_base_declaration_after_extension_sets_owner() -> None:
    ledgers = build_ledgers(
        [
            _service("serviceA", "extend type Product { price: Int! }"),
            _service("serviceB", "type Product { sku: String! }"),
        ]
    )

    record = ledgers.ownership["Product"]
    assert record.owning_service == "serviceB"
    assert record.extension_field_owners == {"price": "serviceA"}


def test_last_extension_claim_owns_the_field() -> None:
    ledgers = build_ledgers(
        [
            _service("serviceA", "extend type Product { price: Int! }"),
            _service("serviceB", "extend type Product { price: Float! color: String }"),
        ]
    )

    record = ledgers.ownership["Product"]
    assert record.extension_field_owners == {"price": "serviceB", "color": "serviceB"}
    assert record.extension_claims["price"] == ["serviceA", "serviceB"]
    assert len(ledgers.extensions["Product"]) == 2


def test_records_input_fields_and_enum_values_from_extensions() -> None:
    ledgers = build_ledgers(
        [
            _service(
                "serviceA",
                """
                input ProductInput { sku: String! }
                enum Category { BED }
                """,
            ),
            _service(
                "serviceB",
                """
                extend input ProductInput { color: String }
                extend enum Category { BEYOND }
                """,
            ),
        ]
    )

    assert ledgers.ownership["ProductInput"].extension_field_owners == {"color": "serviceB"}
    assert ledgers.ownership["Category"].extension_field_owners == {"BEYOND": "serviceB"}


def test_base_declared_fields_never_appear_as_extension_owners() -> None:
    ledgers = build_ledgers([_service("serviceA", "type Product { sku: String! }")])

    assert ledgers.ownership["Product"].extension_field_owners == {}


def test_external_fields_are_not_claimed() -> None:
    ledgers = build_ledgers(
        [
            _service("serviceA", "type Product { sku: String! }"),
            _service(
                "serviceB",
                'extend type Product { sku: String! @external price: Int! @requires(fields: "sku") }',
            ),
        ]
    )

    assert ledgers.ownership["Product"].extension_field_owners == {"price": "serviceB"}
    assert [field.name.value for field in ledgers.extensions["Product"][0].fields] == ["price"]


def test_extension_without_fields_is_queued_without_claims() -> None:
    ledgers = build_ledgers(
        [
            _service(
                "serviceA",
                """
                extend type Product @key(fields: "sku")
                extend type Review { body: String }
                """,
            )
        ]
    )

    assert len(ledgers.extensions["Product"]) == 1
    assert ledgers.ownership["Product"].extension_field_owners == {}
    assert ledgers.ownership["Review"].extension_field_owners == {"body": "serviceA"}


def test_extension_only_type_has_no_owner_before_synthesis() -> None:
    ledgers = build_ledgers([_service("serviceA", "extend type Product { price: Int! }")])

    assert "Product" not in ledgers.definitions
    assert ledgers.ownership["Product"].owning_service is None


def test_ignores_non_type_definitions() -> None:
    ledgers = build_ledgers(
        [
            _service(
                "serviceA",
                """
                directive @custom on FIELD_DEFINITION
                schema { query: Query }
                type Query { ping: String }
                """,
            )
        ]
    )

    assert list(ledgers.definitions) == ["Query"]
    assert list(ledgers.ownership) == ["Query"]


def test_ownership_record_tracks_winner_separately_from_history() -> None:
    record = OwnershipRecord()

    record.declare_base("serviceA")
    record.claim_extension_member("price", "serviceB")
    record.claim_extension_member("price", "serviceC")
    record.declare_base("serviceD")

    assert record.owning_service == "serviceD"
    assert record.base_services == ["serviceA", "serviceD"]
    assert record.extension_field_owners == {"price": "serviceC"}
    assert record.extension_claims == {"price": ["serviceB", "serviceC"]}

    record.mark_unowned()
    assert record.owning_service is None
    assert record.base_services == ["serviceA", "serviceD"]
