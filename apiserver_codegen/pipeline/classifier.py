"""
Resource classification and group/version aggregation.

Main resources are passed to the resource templates; sub resources are
passed to the type generator. Both are bucketed by group and version so
that every bucket can be generated into its own package.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .document import QualifiedName, SchemaDocument, SchemaEntry
from .errors import DuplicateKindError

logger = logging.getLogger(__name__)


class GroupVersionIndex:
    """Two level mapping of group -> version -> synthetic schema document.

    Groups and versions keep the order in which they were first seen.
    """

    def __init__(self, openapi: str = "", strict: bool = False):
        """
        Args:
            openapi: OpenAPI version string copied into every synthetic document
            strict: Raise on a duplicate kind instead of overwriting it
        """
        self.openapi = openapi
        self.strict = strict
        self._groups: dict[str, dict[str, SchemaDocument]] = {}

    def add(self, entry: SchemaEntry) -> None:
        """Insert an entry into the bucket named by its qualified name.

        Raises:
            SchemaDocumentError: If the name is not ``group.version.kind``
            DuplicateKindError: In strict mode, if the kind is already present
        """
        name = entry.qualified_name
        versions = self._groups.setdefault(name.group, {})
        document = versions.get(name.version)
        if document is None:
            versions[name.version] = SchemaDocument(self.openapi, {name.kind: entry.definition})
            return

        if name.kind in document.schemas:
            if self.strict:
                raise DuplicateKindError(f"Kind '{name.kind}' is defined twice in {name.group}/{name.version}")
            logger.warning("Overwriting duplicate kind %s in %s/%s", name.kind, name.group, name.version)
        document.schemas[name.kind] = entry.definition

    def discard_group(self, group: str) -> bool:
        """Remove a whole group; returns whether it was present."""
        return self._groups.pop(group, None) is not None

    def groups(self) -> list[str]:
        return list(self._groups)

    def versions(self, group: str) -> dict[str, SchemaDocument]:
        return self._groups.get(group, {})

    def get(self, group: str, version: str) -> SchemaDocument | None:
        return self._groups.get(group, {}).get(version)

    def items(self) -> Iterator[tuple[str, str, SchemaDocument]]:
        """Yield ``(group, version, document)`` in insertion order."""
        for group, versions in self._groups.items():
            for version, document in versions.items():
                yield group, version, document

    def __contains__(self, group: object) -> bool:
        return group in self._groups

    def __len__(self) -> int:
        return sum(len(versions) for versions in self._groups.values())

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {
            group: {version: document.to_dict() for version, document in versions.items()}
            for group, versions in self._groups.items()
        }


@dataclass
class ClassificationPartition:
    """Every schema entry, split into sub and main resources."""

    sub_resources: GroupVersionIndex = field(default_factory=GroupVersionIndex)
    main_resources: GroupVersionIndex = field(default_factory=GroupVersionIndex)

    def main_entries(self) -> Iterator[tuple[QualifiedName, dict[str, Any]]]:
        """Yield every main resource with its bucket coordinates."""
        for group, version, document in self.main_resources.items():
            for kind, definition in document.schemas.items():
                yield QualifiedName(group, version, kind), definition


def classify_resources(document: SchemaDocument, strict: bool = False) -> ClassificationPartition:
    """Split the entries of ``document`` into sub and main resources.

    An entry is a main resource if and only if it carries a truthy
    ``x-axway-group`` extension. Missing kind or version extensions are not
    validated here.

    Args:
        document: The fetched API server document
        strict: Raise on duplicate kinds within a group/version

    Returns:
        The classification partition
    """
    partition = ClassificationPartition(
        sub_resources=GroupVersionIndex(document.openapi, strict),
        main_resources=GroupVersionIndex(document.openapi, strict),
    )
    for entry in document.entries():
        target = partition.main_resources if entry.is_main_resource else partition.sub_resources
        target.add(entry)

    logger.debug(
        "Classified %d main and %d sub resource buckets",
        len(partition.main_resources),
        len(partition.sub_resources),
    )
    return partition
