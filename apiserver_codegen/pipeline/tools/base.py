"""
Base classes for the external collaborators of the pipeline.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from ..descriptors import ResourceDescriptor, ResourceSet
from ..document import SchemaDocument
from ..errors import ExternalToolError

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


def run_command(command: list[str], input: str, runner: Runner = subprocess.run) -> subprocess.CompletedProcess:
    """Run ``command`` with ``input`` on stdin and wait for it to finish.

    Raises:
        ExternalToolError: If the command cannot be started or exits non-zero
    """
    logger.debug("Running %s", " ".join(command))
    try:
        result = runner(command, input=input, capture_output=True, text=True)
    except (FileNotFoundError, PermissionError) as e:
        raise ExternalToolError(f"Unable to run {command[0]}: {e}", command) from e

    if result.returncode != 0:
        raise ExternalToolError(
            f"{command[0]} exited with status {result.returncode}",
            command,
            result.stderr or "",
        )
    return result


class TypeGenerator(ABC):
    """Generates source for the sub resources of one group/version."""

    @abstractmethod
    def generate(self, document: SchemaDocument, package: str, output: Path) -> None:
        """
        Generate the types of ``document``.

        Args:
            document: Synthetic document holding the sub resources
            package: Target package name (the version)
            output: Directory receiving the generated files
        """


class Renderer(ABC):
    """Renders descriptors into source files."""

    @abstractmethod
    def render_model(self, descriptor: ResourceDescriptor, path: Path) -> None:
        """Render the data model of a main resource to ``path``."""

    @abstractmethod
    def render_client(self, descriptor: ResourceDescriptor, path: Path) -> None:
        """Render the client of a main resource to ``path``."""

    @abstractmethod
    def render_set(self, resource_set: ResourceSet, path: Path) -> None:
        """Render the client set listing every main resource to ``path``."""
