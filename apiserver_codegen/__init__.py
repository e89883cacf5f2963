"""API Server Code Generator

Fetches the API server OpenAPI document, splits its schemas into main
resources and sub resources, and drives the generators that turn them into
models, clients and the client set.
"""

__version__ = "1.0.0"

from .pipeline import (
    ApiServerCodegenError,
    GeneratorConfig,
    PipelineGenerator,
    SchemaDocument,
    classify_resources,
    fetch_schema_document,
)

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "SchemaDocument",
    "classify_resources",
    "fetch_schema_document",
    "ApiServerCodegenError",
]
