"""Jerarquía de errores de craftdash.

Por qué tan pocos:
- El núcleo de normalización no lanza nunca sobre JSON raro pero parseable;
  solo el transporte produce errores visibles para el usuario.
- Las "formas desconocidas" y los índices ambiguos no son errores: se
  resuelven con resultados vacíos o best-effort.
"""

from __future__ import annotations


class CraftDashError(Exception):
    """Base para todos los errores del proyecto."""


class TransportError(CraftDashError):
    """Fallo de red o respuesta HTTP no-2xx.

    `body` conserva el texto que devolvió el backend (si lo hubo) para que el
    orquestador y la UI puedan inspeccionarlo.
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RequestCancelled(CraftDashError):
    """Una carga de vista fue reemplazada antes de lanzar el fallback."""


class UnknownResourceError(CraftDashError, KeyError):
    """Nombre de recurso que no existe en el registro."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown resource"
