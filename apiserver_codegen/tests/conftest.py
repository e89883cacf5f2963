from __future__ import annotations

import json
from pathlib import Path

import pytest

from apiserver_codegen.pipeline import SchemaDocument
from apiserver_codegen.pipeline.tools import Renderer, TypeGenerator
from apiserver_codegen.utils import model_file_name

TEST_DATA = Path(__file__).parent / "test_data"


def load_docs() -> dict:
    with open(TEST_DATA / "apiserver_docs.json") as f:
        return json.load(f)


@pytest.fixture
def docs() -> dict:
    return load_docs()


@pytest.fixture
def document(docs) -> SchemaDocument:
    return SchemaDocument.from_dict(docs)


class FakeTypeGenerator(TypeGenerator):
    """Writes a file per schema with properties, like openapi-generator."""

    def __init__(self, events: list | None = None):
        self.events = events if events is not None else []
        self.calls = []

    def generate(self, document, package, output):
        self.calls.append((package, Path(output), document))
        self.events.append(("generate", package, Path(output)))
        output.mkdir(parents=True, exist_ok=True)
        for kind, definition in document.schemas.items():
            if definition.get("properties"):
                (output / model_file_name(kind)).write_text(f"package {package}\n")


class RecordingRenderer(Renderer):
    def __init__(self, events: list | None = None):
        self.events = events if events is not None else []
        self.models = []
        self.clients = []
        self.sets = []

    def render_model(self, descriptor, path):
        self.events.append(("model", descriptor.kind))
        self.models.append((descriptor, path))

    def render_client(self, descriptor, path):
        self.events.append(("client", descriptor.kind))
        self.clients.append((descriptor, path))

    def render_set(self, resource_set, path):
        self.events.append(("set",))
        self.sets.append((resource_set, path))


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def type_generator(events) -> FakeTypeGenerator:
    return FakeTypeGenerator(events)


@pytest.fixture
def renderer(events) -> RecordingRenderer:
    return RecordingRenderer(events)
