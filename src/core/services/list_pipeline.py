"""List fetching orchestration.

This is the one place that talks to the transport for list views. It sends
the primary query with every known page-size alias, falls back exactly once
to the portable ``page``/``limit`` pair, and hands the payload to the pure
normalization leaves. No further retries: this is a UI-load path and repeated
attempts would only pile more requests on a struggling backend.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from core.domain.entities import CanonicalEntity
from core.domain.models import ExtractionResult, PageDescriptor
from core.domain.resources import ResourceSpec
from core.exceptions import RequestCancelled, TransportError
from core.interfaces.transport import ApiTransport
from core.normalization import map_records, normalize_response

log = logging.getLogger(__name__)

PAGE_SIZE_ALIASES: tuple[str, ...] = ("per_page", "perPage", "limit", "page_size", "pageSize")


@dataclass
class ListQuery:
    """Parameters for one list fetch."""

    page: int = 1
    per_page: int = 15
    filters: dict[str, Any] = field(default_factory=dict)


@dataclass
class ListPage:
    """Mapped result handed to the UI layer."""

    entities: list[CanonicalEntity]
    page: PageDescriptor
    result: ExtractionResult


def primary_params(query: ListQuery) -> dict[str, Any]:
    params: dict[str, Any] = {**query.filters, "page": query.page}
    for alias in PAGE_SIZE_ALIASES:
        params[alias] = query.per_page
    return params


def fallback_params(query: ListQuery) -> dict[str, Any]:
    return {"page": query.page, "limit": query.per_page}


async def fetch_list(
    transport: ApiTransport,
    path: str,
    query: ListQuery,
    *,
    array_keys: tuple[str, ...] = (),
    should_continue: Callable[[], bool] | None = None,
) -> ExtractionResult:
    """Fetch one page and normalize it.

    ``should_continue`` is consulted only between a failed primary attempt and
    the fallback; returning False raises `RequestCancelled` instead of issuing
    the fallback. If the fallback also fails, its error propagates.
    """

    try:
        payload = await transport.get(path, params=primary_params(query))
    except TransportError as exc:
        log.warning("Primary list query for %s failed (%s); retrying with page/limit", path, exc)
        if should_continue is not None and not should_continue():
            raise RequestCancelled(f"List load for {path} superseded") from exc
        payload = await transport.get(path, params=fallback_params(query))

    return normalize_response(
        payload,
        requested_page=query.page,
        requested_per_page=query.per_page,
        array_keys=array_keys,
    )


async def fetch_page(
    transport: ApiTransport,
    spec: ResourceSpec,
    query: ListQuery,
    *,
    should_continue: Callable[[], bool] | None = None,
) -> ListPage:
    result = await fetch_list(
        transport,
        spec.path,
        query,
        array_keys=spec.array_keys,
        should_continue=should_continue,
    )
    return ListPage(
        entities=map_records(result.items, spec),
        page=result.page,
        result=result,
    )
