"""
Pipeline - API server resource classification and code generation.

1. Phase 0 (Classifier): Split schema entries into main and sub resources,
   bucketed by group and version
2. Phase 1 (Type generator): Generate every sub resource bucket
3. Phase 2 (Projector/Renderer): Project main resource fields against the
   phase 1 output, render models and clients, then the client set
"""

from __future__ import annotations

from .classifier import ClassificationPartition, GroupVersionIndex, classify_resources
from .config import GeneratorConfig, RendererKind
from .descriptors import ResourceDescriptor, ResourceSet, build_descriptor, build_resource_set
from .document import QualifiedName, SchemaDocument, SchemaEntry
from .errors import (
    ApiServerCodegenError,
    DuplicateKindError,
    EmptyDocumentError,
    ExternalToolError,
    FetchError,
    ResourcePresenceError,
    SchemaDocumentError,
)
from .fetcher import fetch_schema_document
from .generator import GenerationReport, PipelineGenerator
from .projector import COMMON_FIELDS, FieldPresenceResolver, filter_fields, project_fields

__all__ = [
    "PipelineGenerator",
    "GenerationReport",
    "GeneratorConfig",
    "RendererKind",
    "SchemaDocument",
    "SchemaEntry",
    "QualifiedName",
    "ClassificationPartition",
    "GroupVersionIndex",
    "classify_resources",
    "COMMON_FIELDS",
    "FieldPresenceResolver",
    "filter_fields",
    "project_fields",
    "ResourceDescriptor",
    "ResourceSet",
    "build_descriptor",
    "build_resource_set",
    "fetch_schema_document",
    "ApiServerCodegenError",
    "FetchError",
    "EmptyDocumentError",
    "SchemaDocumentError",
    "DuplicateKindError",
    "ResourcePresenceError",
    "ExternalToolError",
]
