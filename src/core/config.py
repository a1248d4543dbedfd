"""Settings del cliente: endpoint, timeout HTTP y logging.

Se leen de variables `ROSTER_*`, del `.env` del directorio actual y del
`.env` por usuario que escribe `roster doctor set-endpoint`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EMPLOYEES_URL = "https://mocki.io/v1/1a44a28a-7c86-4738-8a03-1eafeffe38c8"
APP_DIR_NAME = "employee-roster"


def _user_config_dir() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_DIR_NAME


def get_user_env_file() -> Path:
    return _user_config_dir() / ".env"


def set_user_env_var(key: str, value: str) -> Path:
    """Fija `key=value` en el .env por usuario.

    Reemplaza la línea existente de `key` si la hay; el resto del archivo
    (comentarios y otras claves) queda intacto.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    lines = env_path.read_text(encoding="utf-8").splitlines() if env_path.exists() else []
    entry = f"{key}={value}"
    for i, line in enumerate(lines):
        if line.split("=", 1)[0].strip() == key:
            lines[i] = entry
            break
    else:
        lines.append(entry)

    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Settings validados; las variables de entorno ganan a ambos `.env`."""

    model_config = SettingsConfigDict(
        env_prefix="ROSTER_",
        extra="ignore",
        case_sensitive=False,
        # El .env por usuario (último) pisa al del directorio actual.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    employees_url: str = Field(
        default=DEFAULT_EMPLOYEES_URL,
        min_length=8,
        description="Endpoint que devuelve el listado de empleados (JSON).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="employee-roster/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para la petición HTTP.",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como JSON en lugar de formato consola.",
    )
