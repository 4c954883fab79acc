"""Composition ledger entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from graphql import TypeDefinitionNode, TypeExtensionNode


@dataclass
class OwnershipRecord:
    """Ownership of one type name across all services.

    Every base declaration and every extension claim is kept in history; the
    current owner is always the most recent one (last declaration wins).
    """

    owning_service: str | None = None
    extension_field_owners: dict[str, str] = field(default_factory=dict)
    base_services: list[str] = field(default_factory=list)
    extension_claims: dict[str, list[str]] = field(default_factory=dict)

    def declare_base(self, service_name: str) -> None:
        self.base_services.append(service_name)
        self.owning_service = service_name

    def claim_extension_member(self, member_name: str, service_name: str) -> None:
        self.extension_claims.setdefault(member_name, []).append(service_name)
        self.extension_field_owners[member_name] = service_name

    def mark_unowned(self) -> None:
        """Record that no service declared a base type for this name."""
        self.owning_service = None


@dataclass
class CompositionLedgers:
    """Definitions, extensions and ownership collected from every service."""

    definitions: dict[str, list[TypeDefinitionNode]] = field(default_factory=dict)
    extensions: dict[str, list[TypeExtensionNode]] = field(default_factory=dict)
    ownership: dict[str, OwnershipRecord] = field(default_factory=dict)

    def ownership_for(self, type_name: str) -> OwnershipRecord:
        return self.ownership.setdefault(type_name, OwnershipRecord())

    def add_definition(self, definition: TypeDefinitionNode) -> None:
        self.definitions.setdefault(definition.name.value, []).append(definition)

    def add_extension(self, extension: TypeExtensionNode) -> None:
        self.extensions.setdefault(extension.name.value, []).append(extension)
