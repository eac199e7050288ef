"""engine-config CLI application -- Typer-based developer interface.

Two modes:

* ``engine-config -j JSON [JSON ...]`` prints each document normalised and
  normalised-and-sorted, for diffing configuration documents.
* ``engine-config`` resolves the configuration from ``SENZING_TOOLS_*``
  environment variables, prints and verifies it, then prints a resolution
  from a fixed demonstration map.

JSON goes to *stdout*; errors and the optional ``--summary`` go to *stderr*
via Rich.
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from cli.display import display_configuration_summary

app = typer.Typer(
    name="engine-config",
    help="Build, verify and normalise engine configuration JSON.",
    add_completion=False,
)
console = Console(stderr=True)

SEPARATOR = "- - - - - - - - - - - - - - - - - - - - "

DEMO_ATTRIBUTES: dict[str, str] = {
    "licenseStringBase64": "8BD296A26F2034AAB436045...",
    "senzingDirectory": "/path/to/senzing",
    "configPath": "/another/path/for/config",
    "resourcePath": "/yet/another/path/to/resources",
    "supportPath": "/final/path/to/support",
}

_LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _fail(exc: Exception) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return typer.Exit(code=1)


def _print_normalized(json_texts: list[str]) -> None:
    from engine_config.errors import InvalidJSONError
    from engine_config.jsonutil import normalize, normalize_and_sort

    for json_text in json_texts:
        try:
            normalized = normalize(json_text)
            norm_sorted = normalize_and_sort(json_text)
        except InvalidJSONError as exc:
            raise _fail(exc) from exc
        sys.stdout.write(f"{SEPARATOR}\n{normalized}\n\n{norm_sorted}\n\n")


def _print_resolved(summary: bool) -> None:
    from engine_config.config import load_settings
    from engine_config.errors import EngineConfigurationError
    from engine_config.parser import ConfigurationParser
    from engine_config.resolver import resolve, resolve_from_environment
    from engine_config.verifier import verify_configuration_json

    try:
        settings = load_settings()

        # 1. Environment variables only.
        document = resolve_from_environment(settings=settings)
        sys.stdout.write(document + "\n")

        # 2. Verify.
        verify_configuration_json(document)
        if summary:
            display_configuration_summary(console, ConfigurationParser(document))

        # 3. Explicit map of key/values.
        demo_document = resolve(DEMO_ATTRIBUTES, settings=settings)
        sys.stdout.write(demo_document + "\n")
    except EngineConfigurationError as exc:
        raise _fail(exc) from exc


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


@app.command()
def main(
    json_texts: list[str] | None = typer.Argument(
        None,
        metavar="[JSON]...",
        help="JSON documents to normalise (requires -j).",
        show_default=False,
    ),
    json_mode: bool = typer.Option(
        False,
        "-j",
        "--json-text",
        help="Normalise and sort each JSON argument instead of resolving.",
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        help="Render the environment-derived configuration as a table on stderr.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """Resolve, verify and print the engine configuration JSON."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
    )

    if json_mode:
        if not json_texts:
            console.print("[red]-j requires at least one JSON argument.[/red]")
            raise typer.Exit(code=2)
        _print_normalized(json_texts)
        return

    if json_texts:
        console.print("[red]JSON arguments are only accepted together with -j.[/red]")
        raise typer.Exit(code=2)

    _print_resolved(summary)
