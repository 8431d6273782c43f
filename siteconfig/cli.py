import json
import logging
from enum import Enum
from typing import Any

import typer
import yaml

from siteconfig.config import ConfigManager, LoaderConfig
from siteconfig.config.settings import DEFAULT_MAX_CONCURRENT, LOG_FORMAT
from siteconfig.exceptions import SiteConfigLoadError
from siteconfig.loader import LoaderRunner, load_config
from siteconfig.parser import BOOLEAN_COMMANDS, MULTI_VALUE_COMMANDS, SINGLE_STRING_COMMANDS

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="siteconfig CLI - Parse site content extraction rules")


class OutputFormat(str, Enum):
    """Serialization formats supported by the CLI."""

    json = "json"
    yaml = "yaml"


def _dump(data: Any, output_format: OutputFormat) -> str:
    """Serialize plain data in the requested format."""
    if output_format == OutputFormat.yaml:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


def _set_verbosity(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@app.command()
def parse(
    config_file: str = typer.Argument(..., help="Path to a single site config file"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Parse one site config file and print the resulting configuration.

    Example:
        $ siteconfig parse site_configs/example.com.txt --format yaml
    """
    _set_verbosity(verbose)

    try:
        site_config = load_config(config_file)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"❌ Error reading {config_file}: {str(e)}", err=True)
        raise typer.Exit(code=1)

    typer.echo(_dump(site_config.model_dump(mode="json"), output_format))


@app.command()
def load(
    config_dir: str = typer.Argument(..., help="Directory holding one config file per site"),
    concurrency: int = typer.Option(
        DEFAULT_MAX_CONCURRENT,
        "--concurrency",
        "-c",
        help=f"Maximum number of files read at the same time (default: {DEFAULT_MAX_CONCURRENT})",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with an error if any file fails to load",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Load every site config in a directory and print them keyed by file name.

    Files that fail to load are reported on stderr; the others are still printed.

    Example:
        $ siteconfig load site_configs --concurrency 5
    """
    _set_verbosity(verbose)

    try:
        loader_config = LoaderConfig(max_concurrent=concurrency)
    except ValueError as e:
        typer.echo(f"❌ Invalid loader settings: {str(e)}", err=True)
        raise typer.Exit(code=1)

    try:
        registry = LoaderRunner().run(config_dir, loader_config=loader_config)
    except (FileNotFoundError, NotADirectoryError) as e:
        typer.echo(f"❌ {str(e)}", err=True)
        raise typer.Exit(code=1)

    sites = {name: config.model_dump(mode="json") for name, config in registry.sites.items()}
    typer.echo(_dump(sites, output_format))

    for name, message in registry.errors.items():
        typer.echo(f"⚠️ Failed to load {name}: {message}", err=True)

    if strict and registry.errors:
        typer.echo(f"❌ {SiteConfigLoadError(registry.errors)}", err=True)
        raise typer.Exit(code=1)


@app.command()
def show(
    config_dir: str = typer.Argument(..., help="Directory holding one config file per site"),
    host: str = typer.Argument(..., help="Host name to look up (e.g., 'www.example.com')"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """
    Print the site config that applies to a host name.

    Example:
        $ siteconfig show site_configs www.example.com
    """
    try:
        config_manager = ConfigManager(config_dir)
    except (FileNotFoundError, NotADirectoryError) as e:
        typer.echo(f"❌ {str(e)}", err=True)
        raise typer.Exit(code=1)

    site_config = config_manager.get_config_for_host(host)
    if site_config is None:
        typer.echo(f"❌ No site config found for host: {host}")
        typer.echo(f"Available sites: {', '.join(config_manager.list_available_sites())}")
        raise typer.Exit(code=1)

    typer.echo(_dump(site_config.model_dump(mode="json"), output_format))


@app.command()
def info() -> None:
    """
    Show information about the siteconfig tool and the commands it understands.
    """
    typer.echo("📋 siteconfig - Site content extraction rules")
    typer.echo("\nAvailable commands:")
    typer.echo("  - parse: Parse a single site config file")
    typer.echo("  - load: Load every site config in a directory")
    typer.echo("  - show: Show the site config for a host name")
    typer.echo("  - list-sites: List the site configs of a directory")
    typer.echo("  - info: Show this information")
    typer.echo("\nConfig file directives:")
    typer.echo(f"  Multi-value: {', '.join(MULTI_VALUE_COMMANDS)}")
    typer.echo(f"  Boolean: {', '.join(BOOLEAN_COMMANDS)}")
    typer.echo(f"  Single value: {', '.join(SINGLE_STRING_COMMANDS)}")
    typer.echo("  Pairs: find_string: <text> followed by replace_string: <text>")
    typer.echo("  Calls: replace_string(<find>): <replace>, http_header(<name>): <value>")
    typer.echo("\nFor more information on a specific command, run:")
    typer.echo("  siteconfig [COMMAND] --help")


@app.command()
def list_sites(
    config_dir: str = typer.Argument(..., help="Directory holding one config file per site"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show a summary of each site configuration",
    ),
) -> None:
    """
    List the site configurations found in a directory.
    """
    try:
        config_manager = ConfigManager(config_dir)
    except (FileNotFoundError, NotADirectoryError) as e:
        typer.echo(f"❌ Error listing site configurations: {str(e)}", err=True)
        raise typer.Exit(code=1)

    typer.echo("📋 Available Site Configurations:")
    for site_name in config_manager.list_available_sites():
        if not verbose:
            typer.echo(f"  • {site_name}")
            continue

        site_config = config_manager.get_site_config(site_name)
        typer.echo(f"\n📄 {site_name}:")
        typer.echo(f"  Title selectors: {len(site_config.title)}")
        typer.echo(f"  Body selectors: {len(site_config.body)}")
        typer.echo(f"  Strip rules: {len(site_config.strip) + len(site_config.strip_id_or_class)}")
        typer.echo(f"  String replacements: {len(site_config.string_replacer)}")
        typer.echo(f"  HTTP headers: {len(site_config.http_headers)}")

    for name, message in config_manager.load_errors.items():
        typer.echo(f"\n❌ {name}: {message}")


if __name__ == "__main__":
    app()
