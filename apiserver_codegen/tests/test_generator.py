"""
End to end tests of the two phase pipeline with fake external tools.
"""

from __future__ import annotations

import json

import pytest

from apiserver_codegen.pipeline import GeneratorConfig, PipelineGenerator, ResourcePresenceError, SchemaDocument
from apiserver_codegen.pipeline.tools import GomplateRenderer, JinjaRenderer


@pytest.fixture
def config(tmp_path) -> GeneratorConfig:
    return GeneratorConfig(outdir=str(tmp_path), host="localhost", port=8080, protocol="http")


def make_generator(config, document, type_generator, renderer) -> PipelineGenerator:
    return PipelineGenerator(config, document, type_generator=type_generator, renderer=renderer)


class TestPipelineGenerator:
    def test_sub_resources_are_generated_per_group_version(self, config, document, type_generator, renderer):
        report = make_generator(config, document, type_generator, renderer).run()

        assert report.sub_resources == [("management", "v1alpha1"), ("catalog", "v1alpha1")]
        package, output, sub_document = type_generator.calls[0]
        assert package == "v1alpha1"
        assert output == config.models_path / "management" / "v1alpha1"
        assert list(sub_document.schemas) == ["EnvironmentSpec", "APIServiceSpec", "APIServiceStatus"]

    def test_api_group_is_skipped(self, config, document, type_generator, renderer):
        report = make_generator(config, document, type_generator, renderer).run()
        assert report.skipped_groups == ["api"]
        assert all(package != "v1" for package, _, _ in type_generator.calls)

    def test_skipped_groups_are_configurable(self, config, document, type_generator, renderer):
        config.skip_sub_resource_groups = []
        report = make_generator(config, document, type_generator, renderer).run()
        assert ("api", "v1") in report.sub_resources

    def test_every_sub_resource_is_generated_before_any_main_resource(self, config, document, type_generator, renderer, events):
        make_generator(config, document, type_generator, renderer).run()

        kinds = [event[0] for event in events]
        last_generate = max(i for i, kind in enumerate(kinds) if kind == "generate")
        first_render = kinds.index("model")
        assert last_generate < first_render
        assert kinds[-1] == "set"

    def test_empty_sub_resource_is_marked_absent(self, config, document, type_generator, renderer):
        """APIServiceSpec has no properties, so no file is generated for it."""
        report = make_generator(config, document, type_generator, renderer).run()
        descriptors = {d.kind: d for d in report.descriptors}

        assert descriptors["APIService"].fields["spec"] is False
        assert descriptors["APIService"].fields["status"] is True
        assert descriptors["Environment"].fields == {"spec": True}
        assert descriptors["Product"].fields == {"spec": True}

    def test_model_and_client_paths(self, config, document, type_generator, renderer):
        report = make_generator(config, document, type_generator, renderer).run()

        assert config.models_path / "management" / "v1alpha1" / "APIService.go" in report.models
        assert config.clients_path / "catalog" / "v1alpha1" / "Product.go" in report.clients
        assert (config.clients_path / "management" / "v1alpha1").is_dir()
        assert report.set_path == config.clients_path / "set.go"

    def test_one_model_and_one_client_per_main_resource(self, config, document, type_generator, renderer):
        make_generator(config, document, type_generator, renderer).run()
        assert [d.kind for d, _ in renderer.models] == ["Environment", "APIService", "Product"]
        assert [d.kind for d, _ in renderer.clients] == ["Environment", "APIService", "Product"]
        assert renderer.models[1][0] is renderer.clients[1][0]

    def test_resource_set(self, config, document, type_generator, renderer):
        make_generator(config, document, type_generator, renderer).run()
        resource_set, path = renderer.sets[0]
        assert resource_set.to_dict()["set"][1] == {
            "group": "catalog",
            "version": "v1alpha1",
            "kinds": [{"kind": "Product", "scoped": False}],
        }

    def test_dump_groups(self, config, document, type_generator, renderer, tmp_path):
        config.dump_groups = True
        make_generator(config, document, type_generator, renderer).run()

        with open(tmp_path / "main-resources.json") as f:
            main = json.load(f)
        with open(tmp_path / "sub-resources.json") as f:
            sub = json.load(f)
        assert list(main["management"]["v1alpha1"]["components"]["schemas"]) == ["Environment", "APIService"]
        assert "api" in sub

    def test_presence_errors_abort_the_run(self, config, type_generator, renderer):
        config.models_path.mkdir(parents=True)
        (config.models_path / "g").write_text("not a directory")
        document = SchemaDocument(
            "3.0.1",
            {"g.v1.Thing": {"x-axway-group": "g", "properties": {"spec": {"$ref": "#/components/schemas/g.v1.ThingSpec"}}}},
        )
        with pytest.raises(ResourcePresenceError):
            make_generator(config, document, type_generator, renderer).run()

    def test_end_to_end_single_resource(self, config, type_generator, renderer):
        document = SchemaDocument(
            "3.0.1",
            {
                "management.v1alpha1.APIService": {
                    "x-axway-group": "management",
                    "x-axway-version": "v1alpha1",
                    "x-axway-kind": "APIService",
                    "x-axway-plural": "apiservices",
                    "properties": {"spec": {"$ref": "#/components/schemas/management.v1alpha1.APIServiceSpec"}},
                },
                "management.v1alpha1.APIServiceSpec": {"type": "object"},
            },
        )
        report = make_generator(config, document, type_generator, renderer).run()

        _, _, sub_document = type_generator.calls[0]
        assert list(sub_document.schemas) == ["APIServiceSpec"]
        assert len(report.descriptors) == 1
        assert report.descriptors[0].fields == {"spec": False}


class TestDefaultRenderers:
    def test_gomplate_is_the_default(self, config, document):
        generator = PipelineGenerator(config, document)
        assert isinstance(generator.renderer, GomplateRenderer)
        assert generator.renderer.resources_template == "resources.tmpl"

    def test_jinja_renderer_from_config(self, config, document):
        config = GeneratorConfig.from_dict({**config.to_dict(), "renderer": "jinja2"})
        assert isinstance(PipelineGenerator(config, document).renderer, JinjaRenderer)

    def test_jinja_renderer_end_to_end(self, config, document, type_generator):
        config = GeneratorConfig.from_dict({**config.to_dict(), "renderer": "jinja2"})
        report = PipelineGenerator(config, document, type_generator=type_generator).run()

        model = (config.models_path / "management" / "v1alpha1" / "APIService.go").read_text()
        assert "Status APIServiceStatus `json:\"status\"`" in model
        assert "APIServiceSpec" not in model
        assert report.set_path.read_text().count("New") >= 3
