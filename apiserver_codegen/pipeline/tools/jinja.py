"""
In process rendering with the bundled jinja2 templates.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ...utils import snake_to_pascal_case
from ..descriptors import ResourceDescriptor, ResourceSet
from ..writer import AtomicWriter
from .base import Renderer

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"


class JinjaRenderer(Renderer):
    """Renders ``templates/<language>/*.jinja2`` and writes the result atomically."""

    def __init__(self, language: str = "go", writer: AtomicWriter | None = None):
        self.language = language
        self.writer = writer or AtomicWriter()
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(TEMPLATES_DIR / language),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self.jinja_env.filters["snake_to_pascal"] = snake_to_pascal_case

    def render_template(self, name: str, **context) -> str:
        return self.jinja_env.get_template(f"{name}.{self.language}.jinja2").render(**context)

    def render_model(self, descriptor: ResourceDescriptor, path: Path) -> None:
        self.writer.write(path, self.render_template("resource", res=descriptor.to_dict()))

    def render_client(self, descriptor: ResourceDescriptor, path: Path) -> None:
        self.writer.write(path, self.render_template("client", res=descriptor.to_dict()))

    def render_set(self, resource_set: ResourceSet, path: Path) -> None:
        self.writer.write(path, self.render_template("set", input=resource_set.to_dict()))
