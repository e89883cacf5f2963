import json
import logging
import sys

import click

from .pipeline import GeneratorConfig, PipelineGenerator, RendererKind, fetch_schema_document

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--outdir",
    envvar="OUTDIR",
    required=True,
    type=click.Path(file_okay=False, resolve_path=True),
    help="Root of the generated models and clients (defaults to $OUTDIR)",
)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--renderer", "-r", default=None, type=click.Choice([kind.value for kind in RendererKind]))
@click.option("--dump-groups", is_flag=True, default=False, help="Write the main and sub resource buckets as JSON")
@click.option("--strict", is_flag=True, default=False, help="Fail on duplicate kinds within a group/version")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("protocol", metavar="PROTOCOL", type=click.Choice(["http", "https"]))
@click.argument("host", type=str)
@click.argument("port", type=int)
def apiserver_codegen(outdir, config, renderer, dump_groups, strict, verbose, protocol, host, port):
    """Generate API server models and clients from PROTOCOL://HOST:PORT.

    Example: apiserver_codegen https apicentral.axway.com 443
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # Command line values override the config file
    config.outdir = outdir
    config.protocol = protocol
    config.host = host
    config.port = port
    if renderer is not None:
        config.renderer = RendererKind(renderer)
    if dump_groups:
        config.dump_groups = True
    if strict:
        config.strict_duplicate_kinds = True

    document = fetch_schema_document(config)
    report = PipelineGenerator(config, document).run()
    logger.info(
        "Generated %d sub resource packages, %d models and %d clients",
        len(report.sub_resources),
        len(report.models),
        len(report.clients),
    )


def main(argv: list[str] | None = None) -> int:
    """Console script entry point; every failure exits with status 1."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        apiserver_codegen.main(args=list(argv), prog_name="apiserver_codegen", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    except Exception as exc:
        logger.debug("Generation failed", exc_info=True)
        click.echo(f"ERROR: {exc}", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
