"""Volcado del listado cargado a un archivo JSON con la misma forma del endpoint."""

from __future__ import annotations

from pathlib import Path

from core.domain.models import EmployeeCollectionResponse


def export_employees_json(*, response: EmployeeCollectionResponse, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(response.model_dump_json(indent=2) + "\n", encoding="utf-8")
    return output_path
