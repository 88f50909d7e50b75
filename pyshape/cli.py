"""Defines the command-line interface for pyshape.

This module uses the `click` library to expose a compiled schema to the
shell: `pyshape check` validates JSON or TOML documents against a schema
description imported from Python code and reports every error with its path.
"""
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import click
from halo import Halo
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .core.base_validator import Validator
from .core.config import Config
from .core.errors import SchemaError, format_path
from .utils.loader import LoadError, load_document, load_schema

console = Console(emoji=True)

logger = logging.getLogger(__name__)


class AliasedGroup(click.Group):
    """A click Group that resolves short command aliases."""

    aliases = {"c": "check"}

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))


@click.group(cls=AliasedGroup, invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="pyshape")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Validate JSON and TOML documents against pyshape schemas.

    A schema is any schema description (a validator, a dict of fields, a
    list, a pattern or a literal) stored in an attribute of a Python module.
    """
    verbose = verbose or bool(Config().get("verbose", False))
    log_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    logger.debug("Debug mode enabled.")

    if ctx.invoked_subcommand is None:
        console.print("Use 'pyshape check <module:attr> <file>...' to validate documents, or 'pyshape --help' for more commands.")


def _validate_document(validator: Validator, path: str) -> Dict[str, Any]:
    """Validates one document and describes the outcome as a plain dict."""
    try:
        document = load_document(path)
    except LoadError as e:
        logger.error(str(e))
        return {"document": path, "valid": False, "errors": [], "load_error": str(e)}

    error, _ = validator.destruct()(document)
    if error is None:
        return {"document": path, "valid": True, "errors": []}
    return {
        "document": path,
        "valid": False,
        "errors": [{"path": list(item.path), "message": item.message} for item in error.errors],
    }


@main.command()
@click.argument("schema_ref", metavar="SCHEMA")
@click.argument("documents", nargs=-1, required=True)
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
@click.option("--md", "md_output", is_flag=True, help="Output results in Markdown format.")
def check(schema_ref: str, documents: Tuple[str, ...], config_path: Optional[str], json_output: bool, md_output: bool) -> None:
    """Validate documents against the schema SCHEMA (module:attribute).

    Each DOCUMENT is a .json or .toml file, or '-' for JSON read from stdin.
    Every error in every document is reported with its location.

    The command exits with status 1 if any document is invalid, and 2 if the
    schema or a document cannot be loaded.
    """
    config_obj = Config(config_path=config_path)
    fmt = "json" if json_output else "md" if md_output else config_obj.output_format
    console.no_color = not config_obj.get("colors", True)

    try:
        validator = load_schema(schema_ref)
    except (LoadError, SchemaError) as e:
        console.print(f"[red]Could not load schema {schema_ref}: {e}[/red]")
        sys.exit(2)

    show_spinner = fmt == "table" and bool(config_obj.get("spinner", True))
    reports = []
    for path in documents:
        with Halo(text=f"Validating {path}...", spinner="dots", enabled=show_spinner) as spinner:
            report = _validate_document(validator, path)
            if report["valid"]:
                spinner.succeed(f"{path} is valid")
            else:
                spinner.fail(f"{path} is invalid")
        reports.append(report)

    if fmt == "json":
        click.echo(json.dumps(reports, indent=2))
    elif fmt == "md":
        click.echo(_format_reports_as_markdown(reports))
    else:
        _display_reports(reports, max_errors=int(config_obj.get("max_errors", 50) or 0))

    if any("load_error" in report for report in reports):
        sys.exit(2)
    if not all(report["valid"] for report in reports):
        sys.exit(1)


def _format_reports_as_markdown(reports: List[Dict[str, Any]]) -> str:
    """Formats a list of document reports into a Markdown string."""
    markdown = ""
    for report in reports:
        markdown += f"# Validation of `{report['document']}`\n\n"
        if "load_error" in report:
            markdown += f"Could not load document: {report['load_error']}\n"
        elif report["valid"]:
            markdown += "No errors found.\n"
        else:
            markdown += "| Path | Message |\n| --- | --- |\n"
            for error in report["errors"]:
                markdown += f"| `{format_path(error['path']) or '(root)'}` | {error['message']} |\n"
        markdown += "\n---\n"
    return markdown


def _display_reports(reports: List[Dict[str, Any]], max_errors: int = 50) -> None:
    """Displays document reports as tables, followed by a summary panel.

    Args:
        reports: The reports produced for each document.
        max_errors: Errors shown per document. 0 shows them all.
    """
    for report in reports:
        document = report["document"]
        if "load_error" in report:
            console.print(f"[red]{report['load_error']}[/red]")
            continue
        if report["valid"]:
            console.print(f"[green]{document}: valid[/green]")
            continue

        errors = report["errors"]
        shown = errors[:max_errors] if max_errors > 0 else errors
        table = Table(title=f"Errors in {document}")
        table.add_column("Path", style="cyan")
        table.add_column("Message")
        for error in shown:
            table.add_row(format_path(error["path"]) or "(root)", error["message"])
        console.print(table)
        if len(shown) < len(errors):
            console.print(f"[yellow]... {len(errors) - len(shown)} more error(s) not shown.[/yellow]")

    invalid = [r for r in reports if not r["valid"]]
    total_errors = sum(len(r["errors"]) for r in reports)
    if invalid:
        console.print(Panel(
            f"{len(invalid)} of {len(reports)} document(s) invalid, {total_errors} error(s) found.",
            style="red",
            title="Validation Complete",
        ))
    else:
        console.print(Panel(f"All {len(reports)} document(s) valid.", style="green", title="Validation Complete"))


@main.command()
@click.argument("action", type=click.Choice(["get", "list"]), required=True)
@click.argument("key", type=str, required=False)
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a config file.")
def config(action: str, key: Optional[str], config_path: Optional[str]) -> None:
    """Show the effective pyshape configuration.

    \b
    ACTION:
        get <key>       Get a configuration value.
        list            List all current configuration values.
    """
    config_obj = Config(config_path=config_path)
    if action == "list":
        console.print(Panel(json.dumps(config_obj.config, indent=2), title="Current Configuration"))
        return
    if not key:
        console.print("[red]Error: 'get' action requires a key.[/red]")
        sys.exit(1)
    click.echo(json.dumps(config_obj.get(key)))



if __name__ == "__main__":
    main()
