"""
Sub resource generation with openapi-generator.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from ..document import SchemaDocument
from .base import Runner, TypeGenerator, run_command


class OpenApiTypeGenerator(TypeGenerator):
    """Runs ``openapi-generator-cli generate`` with the document on stdin.

    Only models are generated, without their documentation.
    """

    def __init__(self, command: str = "openapi-generator-cli", language: str = "go", runner: Runner = subprocess.run):
        self.command = command
        self.language = language
        self.runner = runner

    def build_command(self, package: str, output: Path) -> list[str]:
        return [
            self.command,
            "generate",
            "-g",
            self.language,
            "-i",
            "/dev/stdin",
            "--package-name",
            package,
            "--output",
            str(output),
            "--global-property",
            "modelDocs=false,models",
        ]

    def generate(self, document: SchemaDocument, package: str, output: Path) -> None:
        run_command(self.build_command(package, output), document.to_json(), self.runner)
