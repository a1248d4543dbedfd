"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La vista solo *lee* del presenter (count/row_at); nunca lo muta.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import EmployeeRecord
from core.services.employee_presenter import EmployeePresenter


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (se omite con `--no-banner`)."""

    title = Text("EMPLOYEE ROSTER", style="bold cyan")
    subtitle = Text("Listado de empleados • fuente remota", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


class EmployeeListView:
    """Vista pull-based del listado.

    Se registra como listener del presenter: cada `replace_all` la marca como
    inválida y el siguiente `render()` reconstruye la tabla pidiendo filas.
    """

    def __init__(self, presenter: EmployeePresenter, *, title: str = "Employees") -> None:
        self._presenter = presenter
        self._title = title
        self._table: Table | None = None
        presenter.add_listener(self._invalidate)

    @property
    def invalidated(self) -> bool:
        return self._table is None

    def _invalidate(self, _rows: tuple[EmployeeRecord, ...]) -> None:
        self._table = None

    def render(self) -> Table:
        if self._table is not None:
            return self._table

        table = Table(title=self._title)
        table.add_column("#", style="dim", justify="right", no_wrap=True)
        table.add_column("Name", style="cyan")
        table.add_column("Profile", style="white")
        for index in range(self._presenter.count()):
            name, profile = self._presenter.row_at(index)
            table.add_row(str(index + 1), name, profile)

        self._table = table
        return table
