"""Contratos (Protocol) del Core.

El controlador depende de `EmployeeSource`, no del fetcher HTTP concreto.
"""

from core.interfaces.source import EmployeeSource

__all__ = ["EmployeeSource"]
