"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from federation_composer.composition import CompositionError, CompositionResult, compose_services
from federation_composer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    CompositionConfig,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from federation_composer.results_writing import (
    ReportWriteError,
    render_composed_schema,
    write_composition_report,
)
from federation_composer.service_definitions import (
    ServiceDefinitionError,
    parse_service_definition,
)


class CliError(Exception):
    """Custom CLI error."""


class CompositionFailed(Exception):
    """Raised when composition finished with structural errors and must fail."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="federation-composer")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log composition details.")
def cli(verbose: bool) -> None:
    """Compose service GraphQL schemas into one federated schema."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML composition configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML composition configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="compose")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON composition configuration file",
)
@click.option(
    "--schema-output",
    "schema_output",
    required=False,
    type=click.Path(path_type=str),
    help="Path for the composed SDL; printed to stdout when omitted",
)
@click.option(
    "--metadata-output",
    "metadata_output",
    required=False,
    type=click.Path(path_type=str),
    help="Path for the ownership metadata JSON report",
)
@click.option(
    "--fail-on-errors",
    is_flag=True,
    default=False,
    help="Exit with status 1 when composition reports structural errors.",
)
def compose(
    config_path: str,
    schema_output: str | None,
    metadata_output: str | None,
    fail_on_errors: bool,
) -> None:
    """Compose the configured services and write the composed schema."""
    configuration = _load(config_path)
    result = _compose(configuration)
    _echo_errors(result)

    schema_path = schema_output or configuration.output.schema_path
    metadata_path = metadata_output or configuration.output.metadata_path
    try:
        report = write_composition_report(
            result, schema_path=schema_path, metadata_path=metadata_path
        )
    except ReportWriteError as exc:
        raise CliError(str(exc)) from exc

    if report.schema_path is None:
        click.echo(render_composed_schema(result))
    else:
        click.echo(str(report.schema_path))
    if report.metadata_path is not None:
        click.echo(str(report.metadata_path))

    if result.has_errors and (fail_on_errors or configuration.output.fail_on_errors):
        raise CompositionFailed(f"Composition reported {len(result.errors)} error(s).")


@cli.command(name="validate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON composition configuration file",
)
def validate(config_path: str) -> None:
    """Compose the configured services and report structural errors only."""
    result = _compose(_load(config_path))
    _echo_errors(result)
    if result.has_errors:
        raise CompositionFailed(f"Composition reported {len(result.errors)} error(s).")
    click.echo(f"{len(result.metadata.types)} types composed without errors.")


def _load(config_path: str) -> CompositionConfig:
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _compose(configuration: CompositionConfig) -> CompositionResult:
    try:
        services = [
            parse_service_definition(source.name, source.sdl_text)
            for source in configuration.services
        ]
        return compose_services(services)
    except (ServiceDefinitionError, CompositionError) as exc:
        raise CliError(str(exc)) from exc


def _echo_errors(result: CompositionResult) -> None:
    for error in result.errors:
        click.echo(f"error: {error.message}", err=True)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except CompositionFailed as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
