"""Contrato del transporte HTTP hacia el backend.

Por qué Protocol:
- El orquestador solo necesita `get/post/patch/put/delete` que devuelvan JSON
  decodificado o lancen `TransportError`.
- Permite sustituir httpx por un fake en tests sin herencia rígida.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ApiTransport(Protocol):
    """Contrato mínimo del transporte.

    Reglas de diseño:
    - Todos los métodos son asíncronos (I/O).
    - Respuestas no-2xx y fallos de red se convierten en `TransportError`,
      con el cuerpo del backend disponible para inspección.
    - Un cuerpo vacío se devuelve como `{}`.
    """

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        ...

    async def post(self, path: str, body: Any = None) -> Any:
        ...

    async def patch(self, path: str, body: Any = None) -> Any:
        ...

    async def put(self, path: str, body: Any = None) -> Any:
        ...

    async def delete(self, path: str, body: Any = None) -> Any:
        ...
