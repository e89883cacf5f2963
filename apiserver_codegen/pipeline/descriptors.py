"""
Template inputs built from main resources.

A ``ResourceDescriptor`` is the payload of one resource/client template
pair; the ``ResourceSet`` lists every main resource for the client set
template.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any

from .classifier import GroupVersionIndex
from .document import X_GROUP, X_KIND, X_PLURAL, X_SCOPED, X_SCOPES, X_VERSION


@dataclass
class ResourceDescriptor:
    """Flattened view of a main resource."""

    group: str | None = None
    kind: str | None = None
    version: str | None = None
    scoped: bool | None = None
    scope: str | None = None
    scopes: list[str] | None = None
    resource: str | None = None
    fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def sorted_scopes(definition: dict[str, Any]) -> list[str] | None:
    """Kinds of the declared scopes in ascending order, or None when none are declared."""
    scopes = definition.get(X_SCOPES)
    if scopes is None:
        return None
    return sorted(scope["kind"] for scope in scopes)


def build_descriptor(definition: dict[str, Any], fields: dict[str, Any]) -> ResourceDescriptor:
    """Build the descriptor of a main resource.

    Args:
        definition: The raw schema entry
        fields: The projected field map of the entry

    Returns:
        The resource descriptor
    """
    scopes = sorted_scopes(definition)
    return ResourceDescriptor(
        group=definition.get(X_GROUP),
        kind=definition.get(X_KIND),
        version=definition.get(X_VERSION),
        scoped=definition.get(X_SCOPED),
        # Templates only handle a single scope for now
        scope=scopes[0] if scopes else None,
        scopes=scopes,
        resource=definition.get(X_PLURAL),
        fields=fields,
    )


@dataclass
class ResourceKind:
    kind: str
    scoped: bool | None = None


@dataclass
class ResourceSetEntry:
    """All main resource kinds of one group/version."""

    group: str
    version: str
    kinds: list[ResourceKind] = field(default_factory=list)


@dataclass
class ResourceSet:
    entries: list[ResourceSetEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"set": [asdict(entry) for entry in self.entries]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def build_resource_set(main_resources: GroupVersionIndex) -> ResourceSet:
    """List every main resource, reading ``scoped`` off the raw entries."""
    resource_set = ResourceSet()
    for group, version, document in main_resources.items():
        kinds = [ResourceKind(kind, definition.get(X_SCOPED)) for kind, definition in document.schemas.items()]
        resource_set.entries.append(ResourceSetEntry(group, version, kinds))
    return resource_set
