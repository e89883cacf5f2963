"""
Configuration for a generation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path


class RendererKind(str, Enum):
    """Which renderer turns descriptors into source files."""

    GOMPLATE = "gomplate"  # Default: external gomplate with .tmpl files
    JINJA2 = "jinja2"  # Bundled jinja2 templates rendered in process


@dataclass
class GeneratorConfig:
    """Configuration options for generation."""

    # Root of all generated artifacts; models/ and clients/ live under it
    outdir: str = ""

    # Where the API server document is fetched from
    protocol: str = "https"
    host: str = ""
    port: int = 443
    docs_path: str = "/apis/docs"
    fetch_timeout: float | None = None

    # Renderer selection and gomplate template files
    renderer: RendererKind = RendererKind.GOMPLATE
    resources_template: str = "resources.tmpl"
    clients_template: str = "clients.tmpl"
    set_template: str = "set.tmpl"

    # External executables
    openapi_generator_command: str = "openapi-generator-cli"
    gomplate_command: str = "gomplate"

    # Sub resource groups that are written by hand
    skip_sub_resource_groups: list[str] = field(default_factory=lambda: ["api"])

    # Raise on duplicate kinds instead of keeping the last one
    strict_duplicate_kinds: bool = False

    # Write the group/version buckets next to the generated code
    dump_groups: bool = False

    @property
    def models_path(self) -> Path:
        return Path(self.outdir) / "models"

    @property
    def clients_path(self) -> Path:
        return Path(self.outdir) / "clients"

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = GeneratorConfig()
        names = {f.name for f in fields(GeneratorConfig)}
        for k, v in d.items():
            if k == "renderer":
                config.renderer = RendererKind(v)
            elif k == "port":
                config.port = int(v)
            elif k in names:
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "outdir": self.outdir,
            "protocol": self.protocol,
            "host": self.host,
            "port": self.port,
            "docs_path": self.docs_path,
            "fetch_timeout": self.fetch_timeout,
            "renderer": self.renderer.value,
            "resources_template": self.resources_template,
            "clients_template": self.clients_template,
            "set_template": self.set_template,
            "openapi_generator_command": self.openapi_generator_command,
            "gomplate_command": self.gomplate_command,
            "skip_sub_resource_groups": self.skip_sub_resource_groups,
            "strict_duplicate_kinds": self.strict_duplicate_kinds,
            "dump_groups": self.dump_groups,
        }
