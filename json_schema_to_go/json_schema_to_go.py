import json
import logging

import click

from .pipeline import CodeGeneratorConfig, OutputMode, PipelineGenerator, StructGenError


@click.command()
@click.option("--package", "-p", "package_name", default=None, type=str, help="Generated package name")
@click.option("--prefix", default=None, type=str, help="Prefix for generated structs [default: Json]")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "--relative-refs",
    is_flag=True,
    default=False,
    help="Resolve $ref relative to the referencing document instead of the entry document",
)
@click.option("--generation-comment", is_flag=True, default=False, help="Start the output with a generated-code comment")
@click.option("--no-format", is_flag=True, default=False, help="Do not run gofmt on the output")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite OUTPUT if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution details to stderr")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(dir_okay=False, resolve_path=True))
def json_schema_to_go(package_name, prefix, config, relative_refs, generation_comment, no_format, force, verbose, path, output):
    """Generate Go structs from the JSON Schema document PATH.

    The code is written to OUTPUT, or printed when OUTPUT is omitted.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI values override the config file
    if package_name is not None:
        config.package_name = package_name
    if prefix is not None:
        config.struct_prefix = prefix
    if relative_refs:
        config.resolve_refs_relative_to_document = True
    if generation_comment:
        config.add_generation_comment = True
    if no_format:
        config.formatter.enabled = False
    if force:
        config.output.mode = OutputMode.FORCE

    codegen = PipelineGenerator(path, config)

    try:
        if output is None:
            click.echo(codegen.generate(), nl=False)
        else:
            codegen.write(output)
    except (StructGenError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e
