"""
Field projection for main resources.

Every main resource shares a set of common fields that are implemented by
hand in the resource base type. What remains are the resource specific
fields, mostly ``$ref`` links to sub resources generated by the type
generator.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..utils import model_file_name
from .document import QualifiedName
from .errors import ResourcePresenceError

logger = logging.getLogger(__name__)

COMMON_FIELDS = frozenset(
    {
        "group",
        "apiVersion",
        "kind",
        "name",
        "title",
        "metadata",
        "finalizers",
        "attributes",
        "tags",
    }
)


def filter_fields(properties: dict[str, Any]) -> dict[str, Any]:
    """Return the resource specific fields of a property map."""
    return {key: value for key, value in properties.items() if key not in COMMON_FIELDS}


def is_reference(schema: Any) -> bool:
    return isinstance(schema, dict) and isinstance(schema.get("$ref"), str)


class FieldPresenceResolver:
    """Replaces ``$ref`` fields with whether the referenced model was generated.

    openapi-generator does not create a file for an empty schema (for
    example ``MeshSpec``, an object with no keys). The only way to tell
    whether a sub resource has fields is to look for its generated file;
    a ``False`` value tells the templates to leave the field out.
    """

    def __init__(self, models_path: Path, namer: Callable[[str], str] = model_file_name):
        """
        Args:
            models_path: Root of the generated models tree
            namer: Maps a kind to the file name the type generator gives it
        """
        self.models_path = Path(models_path)
        self.namer = namer

    def model_path(self, name: QualifiedName) -> Path:
        return self.models_path / name.group / name.version / self.namer(name.kind)

    def exists(self, name: QualifiedName) -> bool:
        """Probe for the generated model of ``name``.

        Raises:
            ResourcePresenceError: If the probe fails for any reason but absence
        """
        path = self.model_path(name)
        try:
            path.stat()
        except FileNotFoundError:
            logger.debug("No model generated for %s (%s)", name, path)
            return False
        except OSError as e:
            raise ResourcePresenceError(f"Unable to check for generated model {path}: {e}") from e
        return True

    def resolve(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of ``fields`` with every ``$ref`` replaced by a bool.

        Inline schemas are kept as they are.
        """
        resolved = {}
        for key, schema in fields.items():
            if is_reference(schema):
                resolved[key] = self.exists(QualifiedName.from_ref(schema["$ref"]))
            else:
                resolved[key] = schema
        return resolved


def project_fields(properties: dict[str, Any], resolver: FieldPresenceResolver) -> dict[str, Any]:
    """Filter the common fields out, then resolve sub resource presence."""
    return resolver.resolve(filter_fields(properties))
