"""CLI principal (Typer).

Comandos:
- `list`: carga el listado una vez y lo muestra como tabla.
- `doctor`: diagnósticos y configuración del endpoint.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.employee_fetcher import EmployeeFetcher
from adapters.json_exporter import export_employees_json
from cli import doctor
from cli.ui_components import EmployeeListView, print_banner
from core.config import AppSettings
from core.logging_setup import configure_logging
from core.services.employee_controller import EmployeeController
from core.services.employee_presenter import EmployeePresenter

app = typer.Typer(no_args_is_help=True, help="Fetch and display the remote employee list.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.command(name="list")
def list_employees(
    url: Optional[str] = typer.Option(None, "--url", help="Override the configured endpoint."),
    export_json: Optional[Path] = typer.Option(
        None,
        "--export-json",
        help="Write the loaded list to this JSON file.",
        dir_okay=False,
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Fetch the employee list once and render it."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, json_output=settings.log_json)

    if not no_banner:
        print_banner(_console)

    presenter = EmployeePresenter()
    view = EmployeeListView(presenter)
    controller = EmployeeController(presenter, EmployeeFetcher(settings, url=url))

    try:
        result = asyncio.run(controller.start())
        _console.print(view.render())

        if export_json is not None and result.response is not None:
            path = export_employees_json(response=result.response, output_path=export_json)
            _console.print(f"[green]Saved JSON to:[/green] {path}")
    finally:
        presenter.close()


def run() -> None:
    app()
