"""
Exceptions raised by the generation pipeline.
"""

from __future__ import annotations


class ApiServerCodegenError(Exception):
    """Base class for every failure that aborts a generation run."""


class FetchError(ApiServerCodegenError):
    """Raised when the API server document cannot be retrieved."""


class EmptyDocumentError(FetchError):
    """Raised when the API server answers with an empty body."""


class SchemaDocumentError(ApiServerCodegenError):
    """Raised when the schema document does not have the expected shape.

    This covers bodies that are not JSON, documents without a
    ``components.schemas`` mapping, and qualified names or ``$ref`` paths
    that do not carry a group, a version and a kind.
    """


class DuplicateKindError(SchemaDocumentError):
    """Raised in strict mode when two entries share a group, version and kind."""


class ResourcePresenceError(ApiServerCodegenError):
    """Raised when probing for a generated model file fails for a reason other than absence."""


class ExternalToolError(ApiServerCodegenError):
    """Raised when an external generator or renderer fails.

    Attributes:
        command: The command line that was run
        stderr: Captured standard error, if any
    """

    def __init__(self, message: str, command: list[str] | None = None, stderr: str = ""):
        super().__init__(message)
        self.command = command or []
        self.stderr = stderr

    def __str__(self) -> str:
        message = super().__str__()
        if self.stderr:
            return f"{message}\n{self.stderr.strip()}"
        return message
