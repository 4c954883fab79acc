"""Federation metadata entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from graphql import SelectionNode

SelectionSet = tuple[SelectionNode, ...]
FieldCoordinate = tuple[str, str]


@dataclass(frozen=True)
class TypeMetadata:
    """Ownership and entity keys of one named type."""

    service_name: str | None
    keys: tuple[SelectionSet, ...] = ()


@dataclass(frozen=True)
class FieldMetadata:
    """Ownership and dependency selections of one field or enum value.

    ``requires`` and ``provides`` stay ``None`` when the directive is absent.
    """

    service_name: str | None = None
    requires: SelectionSet | None = None
    provides: SelectionSet | None = None


@dataclass
class FederationMetadata:
    """Metadata side table for a composed schema.

    Types are keyed by name, fields and enum values by ``(type name, member name)``.
    """

    types: dict[str, TypeMetadata] = field(default_factory=dict)
    fields: dict[FieldCoordinate, FieldMetadata] = field(default_factory=dict)

    def type_metadata(self, type_name: str) -> TypeMetadata | None:
        return self.types.get(type_name)

    def field_metadata(self, type_name: str, field_name: str) -> FieldMetadata | None:
        return self.fields.get((type_name, field_name))

    def type_owner(self, type_name: str) -> str | None:
        metadata = self.types.get(type_name)
        return metadata.service_name if metadata else None

    def field_owner(self, type_name: str, field_name: str) -> str | None:
        """Return the service resolving a field.

        Fields declared on the base type carry no owner of their own; they
        belong to the service owning the type.
        """
        metadata = self.fields.get((type_name, field_name))
        if metadata is not None and metadata.service_name is not None:
            return metadata.service_name
        return self.type_owner(type_name)

    def fields_of(self, type_name: str) -> dict[str, FieldMetadata]:
        return {
            member_name: metadata
            for (owner_name, member_name), metadata in self.fields.items()
            if owner_name == type_name
        }
