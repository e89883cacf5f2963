"""
Schema document model.

The API server publishes an OpenAPI document whose ``components.schemas``
mapping holds every type it knows about, keyed by a qualified name of the
form ``group.version.Kind``. Entries that describe a top-level resource
carry ``x-axway-*`` extension attributes; every other entry is a nested
type referenced from those resources.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .errors import SchemaDocumentError

# Extension attributes published on main resources
X_GROUP = "x-axway-group"
X_VERSION = "x-axway-version"
X_KIND = "x-axway-kind"
X_SCOPED = "x-axway-scoped"
X_SCOPES = "x-axway-scopes"
X_PLURAL = "x-axway-plural"

SYNTHETIC_INFO = {"title": "API Server specification.", "version": "SNAPSHOT"}


@dataclass(frozen=True)
class QualifiedName:
    """The group, version and kind coordinates of a schema entry."""

    group: str
    version: str
    kind: str

    @staticmethod
    def parse(name: str) -> QualifiedName:
        """Split a dotted ``group.version.Kind`` name.

        Anything after the second dot belongs to the kind.

        Raises:
            SchemaDocumentError: If the name has fewer than three parts
        """
        parts = name.split(".")
        if len(parts) < 3 or not all(parts[:3]):
            raise SchemaDocumentError(f"Schema name '{name}' is not of the form group.version.kind")
        return QualifiedName(parts[0], parts[1], ".".join(parts[2:]))

    @staticmethod
    def from_ref(ref: str) -> QualifiedName:
        """Resolve a ``#/components/schemas/group.version.Kind`` reference."""
        return QualifiedName.parse(ref.rsplit("/", 1)[-1])

    def __str__(self) -> str:
        return f"{self.group}.{self.version}.{self.kind}"


@dataclass(frozen=True)
class SchemaEntry:
    """One named type definition of the source document.

    The raw definition is kept untouched: it is what gets handed to the
    external type generator.
    """

    name: str
    definition: dict[str, Any] = field(default_factory=dict)

    @property
    def qualified_name(self) -> QualifiedName:
        return QualifiedName.parse(self.name)

    @property
    def properties(self) -> dict[str, Any]:
        return self.definition.get("properties") or {}

    def extension(self, key: str, default: Any = None) -> Any:
        """Read an ``x-axway-*`` extension attribute."""
        return self.definition.get(key, default)

    @property
    def is_main_resource(self) -> bool:
        """Whether the entry is a top-level resource (has a truthy group extension)."""
        return bool(self.definition.get(X_GROUP))


@dataclass
class SchemaDocument:
    """An OpenAPI document reduced to its version string and schema mapping.

    Used for the fetched source document and for the synthetic per
    group/version documents handed to the type generator.
    """

    openapi: str = ""
    schemas: dict[str, dict[str, Any]] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: Any) -> SchemaDocument:
        """Build a document from a decoded OpenAPI body.

        Raises:
            SchemaDocumentError: If ``components.schemas`` is missing
        """
        if not isinstance(d, dict):
            raise SchemaDocumentError(f"Expected a JSON object, got {type(d).__name__}")
        components = d.get("components")
        schemas = components.get("schemas") if isinstance(components, dict) else None
        if not isinstance(schemas, dict):
            raise SchemaDocumentError("Document has no components.schemas mapping")
        return SchemaDocument(openapi=d.get("openapi", ""), schemas=dict(schemas))

    @staticmethod
    def from_json(body: str) -> SchemaDocument:
        try:
            decoded = json.loads(body)
        except json.JSONDecodeError as e:
            raise SchemaDocumentError(f"Document is not valid JSON: {e}") from e
        return SchemaDocument.from_dict(decoded)

    def entries(self) -> list[SchemaEntry]:
        """Entries in document order."""
        return [SchemaEntry(name, definition) for name, definition in self.schemas.items()]

    def to_dict(self) -> dict[str, Any]:
        """Serialize as an OpenAPI document with no paths."""
        return {
            "openapi": self.openapi,
            "paths": {},
            "info": dict(SYNTHETIC_INFO),
            "components": {"schemas": self.schemas},
        }

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
