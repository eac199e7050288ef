"""Rich output formatting for the engine-config CLI.

All functions write to a :class:`rich.console.Console` instance (typically
bound to *stderr*) so that the JSON documents printed on *stdout* are never
polluted with human-readable decoration.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from engine_config.parser import ConfigurationParser

_PASSWORD_RE = re.compile(r"(://[^:/@]*:)[^@]*@")


def mask_password(connection: str) -> str:
    """Replace the password in a connection string's user-info with ``***``."""
    return _PASSWORD_RE.sub(r"\1***@", connection, count=1)


def display_configuration_summary(console: Console, parser: ConfigurationParser) -> None:
    """Render the pipeline paths and the databases of a configuration document.

    Parameters
    ----------
    console:
        Rich console to write to (typically stderr).
    parser:
        Parser over the document to summarise.
    """
    configuration = parser.configuration()
    pipeline = configuration.pipeline

    header_lines = [
        f"[bold]Config path:[/bold]    {escape(pipeline.config_path) or '(none)'}",
        f"[bold]Resource path:[/bold]  {escape(pipeline.resource_path) or '(none)'}",
        f"[bold]Support path:[/bold]   {escape(pipeline.support_path) or '(none)'}",
        f"[bold]License:[/bold]        {'set' if pipeline.license_string_base64 else '(none)'}",
        f"[bold]Backend:[/bold]        {escape(configuration.sql.backend) or 'SQL'}",
    ]
    console.print(
        Panel(
            "\n".join(header_lines),
            title="Engine Configuration",
            border_style="blue",
        )
    )

    database_urls = parser.get_database_urls()
    table = Table(
        title="Databases",
        show_lines=False,
        pad_edge=True,
        expand=False,
    )
    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("Connection", style="bold")

    for idx, database_url in enumerate(database_urls, start=1):
        table.add_row(str(idx), escape(mask_password(database_url)) or "[dim](empty)[/dim]")

    console.print(table)
