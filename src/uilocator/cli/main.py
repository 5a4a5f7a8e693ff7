"""uilocator CLI - Main entry point.

Authoring commands for locator configurations: validate a config file,
show an element's pattern, dump a live accessibility tree, and check
configured elements against a running application.

Exit codes:
    0: Success
    1: Check found missing elements
    2: Configuration error
    3: Accessibility/runtime error
"""

import sys
from pathlib import Path

import click

from .. import __version__
from ..accessibility_exceptions import AccessibilityError
from ..config.loader import load_config
from ..config.settings import MAX_TREE_DEPTH_LIMIT
from ..config_exceptions import AppConfigNotFound, ConfigurationException, LookupException
from ..diagnostics.element_check import check_elements
from ..diagnostics.tree_dump import dump_tree, write_tree_dump
from ..hal.implementations.accessibility import InMemoryTreeAccess, MacAXTreeAccess, TreeNode
from ..locators.engine import LocatorEngine
from ..locators.exceptions import LocatorException
from ..logging import setup_logging
from .formatters import format_check_results, format_pattern

# Exit codes
EXIT_SUCCESS = 0
EXIT_CHECK_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_RUNTIME_ERROR = 3


def _setup_logging(verbose: bool) -> None:
    setup_logging(
        level="DEBUG" if verbose else "WARNING",
        structured=False,
        add_caller_info=verbose,
        colorize=False,
    )


@click.group()
@click.version_option(version=__version__, prog_name="uilocator")
@click.pass_context
def main(ctx: click.Context) -> None:
    """uilocator CLI - Declarative accessibility-tree locators.

    Validate configurations, dump live trees, and check elements.
    """
    ctx.ensure_object(dict)


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, help="List apps and elements")
def validate(config_path: str, verbose: bool) -> None:
    """Validate a locator configuration file.

    CONFIG_PATH: Path to the YAML configuration file
    """
    _setup_logging(False)

    try:
        model = load_config(Path(config_path))
    except ConfigurationException as e:
        click.echo(f"Validation error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    click.echo(f"Configuration is valid: {config_path}")

    if verbose:
        click.echo(f"\nApps: {len(model)}")
        for app_name in model.app_names():
            app = model.apps[app_name]
            click.echo(f"  - {app_name} ({app.process_identifier}, {len(app.elements)} elements)")
            for element_name in app.elements:
                click.echo(f"      {element_name}")

    sys.exit(EXIT_SUCCESS)


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("app_name")
@click.argument("element_name")
def show(config_path: str, app_name: str, element_name: str) -> None:
    """Show the pattern configured for an element.

    CONFIG_PATH: Path to the YAML configuration file
    """
    _setup_logging(False)

    try:
        model = load_config(Path(config_path))
        pattern = model.require_pattern(app_name, element_name)
    except (ConfigurationException, LookupException) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    click.echo(f"{app_name}.{element_name}:")
    click.echo(format_pattern(pattern, indent=1))
    sys.exit(EXIT_SUCCESS)


@main.command()
@click.option("--pid", type=int, help="Process ID of a running macOS application")
@click.option(
    "--from-dump",
    "from_dump",
    type=click.Path(exists=True, dir_okay=False),
    help="Re-render a saved dump instead of a live process",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write dump to file")
@click.option(
    "--max-depth",
    type=click.IntRange(1, MAX_TREE_DEPTH_LIMIT),
    help="Deepest tree level to render",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def dump(
    pid: int | None,
    from_dump: str | None,
    output: str | None,
    max_depth: int | None,
    verbose: bool,
) -> None:
    """Dump an accessibility tree as a configuration-ready YAML outline."""
    _setup_logging(verbose)

    if (pid is None) == (from_dump is None):
        click.echo("Error: exactly one of --pid or --from-dump is required", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        if from_dump is not None:
            access: InMemoryTreeAccess | MacAXTreeAccess = InMemoryTreeAccess()
            root = TreeNode.from_dump(Path(from_dump).read_text(encoding="utf-8"), from_dump)
        else:
            access = MacAXTreeAccess()
            root = access.application_element(pid)

        if output:
            count = write_tree_dump(root, access, Path(output), max_depth)
            click.echo(f"Wrote {count} lines to {output}")
        else:
            click.echo(dump_tree(root, access, max_depth), nl=False)

    except ConfigurationException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except (AccessibilityError, LocatorException) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_RUNTIME_ERROR)

    sys.exit(EXIT_SUCCESS)


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("app_name")
@click.argument("element_names", nargs=-1)
@click.option("--pid", type=int, help="Process ID of a running macOS application")
@click.option(
    "--from-dump",
    "from_dump",
    type=click.Path(exists=True, dir_okay=False),
    help="Check against a saved dump instead of a live process",
)
@click.option(
    "--format",
    "format_type",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def check(
    config_path: str,
    app_name: str,
    element_names: tuple[str, ...],
    pid: int | None,
    from_dump: str | None,
    format_type: str,
    verbose: bool,
) -> None:
    """Check that configured elements resolve in a running application.

    CONFIG_PATH: Path to the YAML configuration file
    APP_NAME: Application name in the configuration
    ELEMENT_NAMES: Elements to check (all configured elements if omitted)
    """
    _setup_logging(verbose)

    if (pid is None) == (from_dump is None):
        click.echo("Error: exactly one of --pid or --from-dump is required", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        model = load_config(Path(config_path))
        if app_name not in model:
            raise AppConfigNotFound(app_name)
    except (ConfigurationException, LookupException) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        if from_dump is not None:
            access: InMemoryTreeAccess | MacAXTreeAccess = InMemoryTreeAccess()
            root = TreeNode.from_dump(Path(from_dump).read_text(encoding="utf-8"), from_dump)
        else:
            access = MacAXTreeAccess()
            root = access.application_element(pid)
    except ConfigurationException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except AccessibilityError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_RUNTIME_ERROR)

    engine = LocatorEngine(model, access)
    results = check_elements(engine, app_name, root, list(element_names) or None)
    click.echo(format_check_results(results, format_type))

    if all(r.found for r in results):
        sys.exit(EXIT_SUCCESS)
    sys.exit(EXIT_CHECK_FAILED)


if __name__ == "__main__":
    main()
