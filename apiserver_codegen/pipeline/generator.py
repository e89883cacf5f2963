"""
Pipeline generator.

Resources fetched from the API server are split into main and sub
resources, then generated in two phases:

1. Phase 1: every sub resource bucket goes through the type generator
2. Phase 2: every main resource is projected against the files written in
   phase 1 and rendered into a model and a client, then the client set is
   rendered from all main resources

Phase 2 reads what phase 1 wrote, so phase 1 must be complete before any
main resource field is projected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .classifier import ClassificationPartition, classify_resources
from .config import GeneratorConfig, RendererKind
from .descriptors import ResourceDescriptor, build_descriptor, build_resource_set
from .document import SchemaDocument
from .projector import FieldPresenceResolver, project_fields
from .tools import GomplateRenderer, JinjaRenderer, OpenApiTypeGenerator, Renderer, TypeGenerator
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """What a run produced."""

    sub_resources: list[tuple[str, str]] = field(default_factory=list)
    skipped_groups: list[str] = field(default_factory=list)
    descriptors: list[ResourceDescriptor] = field(default_factory=list)
    models: list[Path] = field(default_factory=list)
    clients: list[Path] = field(default_factory=list)
    set_path: Path | None = None


def make_renderer(config: GeneratorConfig) -> Renderer:
    if config.renderer == RendererKind.JINJA2:
        return JinjaRenderer()
    return GomplateRenderer(
        resources_template=config.resources_template,
        clients_template=config.clients_template,
        set_template=config.set_template,
        command=config.gomplate_command,
    )


class PipelineGenerator:
    """Generates models, clients and the client set from a schema document."""

    def __init__(
        self,
        config: GeneratorConfig,
        document: SchemaDocument,
        type_generator: TypeGenerator | None = None,
        renderer: Renderer | None = None,
        resolver: FieldPresenceResolver | None = None,
        writer: AtomicWriter | None = None,
    ):
        """
        Args:
            config: Run configuration
            document: The fetched API server document
            type_generator: Sub resource generator (openapi-generator by default)
            renderer: Main resource renderer (chosen from the config by default)
            resolver: Presence probe for generated sub resources
            writer: Writer used for the group dumps
        """
        self.config = config
        self.document = document
        self.type_generator = type_generator or OpenApiTypeGenerator(config.openapi_generator_command)
        self.renderer = renderer or make_renderer(config)
        self.resolver = resolver or FieldPresenceResolver(config.models_path)
        self.writer = writer or AtomicWriter()

    def classify(self) -> ClassificationPartition:
        partition = classify_resources(self.document, strict=self.config.strict_duplicate_kinds)
        if self.config.dump_groups:
            outdir = Path(self.config.outdir)
            self.writer.write_json(outdir / "sub-resources.json", partition.sub_resources.to_dict())
            self.writer.write_json(outdir / "main-resources.json", partition.main_resources.to_dict())
        return partition

    def run(self) -> GenerationReport:
        """Run both phases and return what was generated."""
        report = GenerationReport()
        partition = self.classify()

        self.generate_sub_resources(partition, report)
        logger.debug("Sub resources complete, projecting main resources")
        self.generate_main_resources(partition, report)
        self.generate_set(partition, report)
        return report

    def generate_sub_resources(self, partition: ClassificationPartition, report: GenerationReport) -> None:
        """Phase 1: one type generator run per sub resource group/version."""
        sub_resources = partition.sub_resources
        for group in self.config.skip_sub_resource_groups:
            if sub_resources.discard_group(group):
                logger.info("Skipping sub resources of group %s", group)
                report.skipped_groups.append(group)

        for group, version, document in sub_resources.items():
            output = self.config.models_path / group / version
            self.type_generator.generate(document, version, output)
            logger.info("Generated sub resources %s", output)
            report.sub_resources.append((group, version))

    def generate_main_resources(self, partition: ClassificationPartition, report: GenerationReport) -> None:
        """Phase 2: render a model and a client for every main resource."""
        for _, definition in partition.main_entries():
            fields = project_fields(definition.get("properties") or {}, self.resolver)
            descriptor = build_descriptor(definition, fields)
            report.descriptors.append(descriptor)

            file = Path(f"{descriptor.group}") / f"{descriptor.version}" / f"{descriptor.kind}.go"
            model = self.config.models_path / file
            client = self.config.clients_path / file
            model.parent.mkdir(parents=True, exist_ok=True)
            client.parent.mkdir(parents=True, exist_ok=True)

            self.renderer.render_model(descriptor, model)
            logger.info("Created model %s", model)
            report.models.append(model)

            self.renderer.render_client(descriptor, client)
            logger.info("Created client %s", client)
            report.clients.append(client)

    def generate_set(self, partition: ClassificationPartition, report: GenerationReport) -> None:
        """Render the client set from every main resource."""
        path = self.config.clients_path / "set.go"
        path.parent.mkdir(parents=True, exist_ok=True)
        self.renderer.render_set(build_resource_set(partition.main_resources), path)
        logger.info("Created client set %s", path)
        report.set_path = path
