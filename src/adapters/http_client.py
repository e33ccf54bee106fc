"""Wrapper de httpx para el backend del dashboard.

Por qué un wrapper:
- Estandariza base URL, timeouts, headers y el token Bearer.
- Convierte fallos de red y respuestas no-2xx en `TransportError` con el
  cuerpo del backend, que es lo único que el orquestador necesita.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con
  `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from core.config import AppSettings
from core.exceptions import TransportError

log = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando al backend.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las vistas se comporten igual.
    - `transport` permite tests sin red (`httpx.MockTransport`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if settings.auth_token:
        headers["Authorization"] = f"Bearer {settings.auth_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _decode(response: httpx.Response) -> Any:
    # Algunos endpoints devuelven cuerpo vacío en PUT/DELETE.
    text = response.text
    if not text.strip():
        return {}
    try:
        return response.json()
    except ValueError as exc:
        # JSONDecodeError y UnicodeDecodeError (bytes que no son UTF-8).
        raise TransportError(
            f"Invalid JSON from {response.request.method} {response.request.url.path}",
            status_code=response.status_code,
            body=text,
        ) from exc


class HttpTransport:
    """Implementación de `ApiTransport` sobre `httpx.AsyncClient`.

    Uso:
        async with HttpTransport(settings) as api:
            payload = await api.get("/addons", params={"page": 1})
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_async_client(self._settings)

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        if body is not None:
            kwargs["json"] = body

        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            log.debug("%s %s failed: %s", method, path, exc)
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        if response.is_success:
            return _decode(response)

        error_text = response.text.strip()
        raise TransportError(
            error_text or f"HTTP error! status: {response.status_code}",
            status_code=response.status_code,
            body=error_text,
        )

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body=body)

    async def patch(self, path: str, body: Any = None) -> Any:
        return await self.request("PATCH", path, body=body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str, body: Any = None) -> Any:
        return await self.request("DELETE", path, body=body)
