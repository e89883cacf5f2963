"""
Rendering with the external gomplate binary.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from ..descriptors import ResourceDescriptor, ResourceSet
from .base import Renderer, Runner, run_command

JSON_STDIN = "stdin:?type=application/json"


class GomplateRenderer(Renderer):
    """Feeds JSON payloads to gomplate on stdin.

    Descriptors are exposed to the templates as ``res``, the resource set
    as ``input``.
    """

    def __init__(
        self,
        resources_template: str = "resources.tmpl",
        clients_template: str = "clients.tmpl",
        set_template: str = "set.tmpl",
        command: str = "gomplate",
        runner: Runner = subprocess.run,
    ):
        self.resources_template = resources_template
        self.clients_template = clients_template
        self.set_template = set_template
        self.command = command
        self.runner = runner

    def build_command(self, context: str, template: str, path: Path) -> list[str]:
        return [self.command, "--context", f"{context}={JSON_STDIN}", "-f", template, "--out", str(path)]

    def render_model(self, descriptor: ResourceDescriptor, path: Path) -> None:
        run_command(self.build_command("res", self.resources_template, path), descriptor.to_json(), self.runner)

    def render_client(self, descriptor: ResourceDescriptor, path: Path) -> None:
        run_command(self.build_command("res", self.clients_template, path), descriptor.to_json(), self.runner)

    def render_set(self, resource_set: ResourceSet, path: Path) -> None:
        run_command(self.build_command("input", self.set_template, path), resource_set.to_json(), self.runner)
