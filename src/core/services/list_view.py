"""Per-view list state.

Each list view owns a small `ListViewState` and a monotonically increasing
request sequence number. Overlapping loads are not cancelled mid-flight;
instead a response is applied only if its sequence number is still the
latest one issued for that view, so a slow, older response can never
overwrite a newer page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Sequence

from core.domain.entities import CanonicalEntity
from core.domain.models import PageDescriptor
from core.domain.resources import ResourceSpec
from core.exceptions import RequestCancelled, TransportError
from core.interfaces.transport import ApiTransport
from core.services.list_pipeline import ListQuery, fetch_page

log = logging.getLogger(__name__)

LoadOutcome = Literal["loaded", "failed", "stale"]


def coerce_page_size(size: int, options: Sequence[int], default: int) -> int:
    """Keep ``size`` if the selector offers it, otherwise use ``default``."""

    if not options or size in options:
        return size
    return default


@dataclass
class ListViewState:
    page: int = 1
    per_page: int = 15
    filters: dict[str, Any] = field(default_factory=dict)
    items: list[CanonicalEntity] = field(default_factory=list)
    descriptor: PageDescriptor = field(default_factory=PageDescriptor)
    error: str | None = None
    loading: bool = False


class ListView:
    """Owns page/per-page/items for one resource list."""

    def __init__(
        self,
        transport: ApiTransport,
        spec: ResourceSpec,
        *,
        per_page: int = 15,
        page_size_options: Sequence[int] = (),
    ) -> None:
        self._transport = transport
        self.spec = spec
        self.page_size_options = tuple(page_size_options)
        self._default_per_page = per_page
        self.state = ListViewState(
            per_page=per_page,
            descriptor=PageDescriptor(per_page=per_page),
        )
        self._seq = 0

    @property
    def latest_sequence(self) -> int:
        return self._seq

    def is_current(self, seq: int) -> bool:
        return seq == self._seq

    async def load(self) -> LoadOutcome:
        self._seq += 1
        seq = self._seq
        query = ListQuery(
            page=self.state.page,
            per_page=self.state.per_page,
            filters=dict(self.state.filters),
        )
        self.state.loading = True
        self.state.error = None

        try:
            result = await fetch_page(
                self._transport,
                self.spec,
                query,
                should_continue=lambda: self.is_current(seq),
            )
        except RequestCancelled:
            log.debug("%s load #%d cancelled before fallback", self.spec.name, seq)
            return "stale"
        except TransportError as exc:
            if not self.is_current(seq):
                return "stale"
            self.state.error = str(exc) or f"Failed to load {self.spec.name}."
            self.state.loading = False
            log.error("Failed to load %s: %s", self.spec.name, self.state.error)
            return "failed"

        if not self.is_current(seq):
            log.debug("Discarding stale %s response #%d (latest #%d)", self.spec.name, seq, self._seq)
            return "stale"

        descriptor = result.page
        self.state.items = result.entities
        self.state.descriptor = descriptor
        self.state.page = descriptor.current_page
        if descriptor.per_page != self.state.per_page:
            # The page-size selector follows the server.
            log.info(
                "%s: server per_page=%d differs from requested %d",
                self.spec.name,
                descriptor.per_page,
                self.state.per_page,
            )
            self.state.per_page = descriptor.per_page
        self.state.loading = False
        return "loaded"

    async def refresh(self) -> LoadOutcome:
        return await self.load()

    async def go_to(self, page: int) -> LoadOutcome:
        self.state.page = min(max(1, page), max(1, self.state.descriptor.last_page))
        return await self.load()

    async def first(self) -> LoadOutcome:
        return await self.go_to(1)

    async def previous(self) -> LoadOutcome:
        return await self.go_to(self.state.page - 1)

    async def next(self) -> LoadOutcome:
        return await self.go_to(self.state.page + 1)

    async def last(self) -> LoadOutcome:
        return await self.go_to(self.state.descriptor.last_page)

    async def set_per_page(self, size: int) -> LoadOutcome:
        self.state.per_page = coerce_page_size(size, self.page_size_options, self._default_per_page)
        self.state.page = 1
        return await self.load()

    async def set_filters(self, **filters: Any) -> LoadOutcome:
        self.state.filters = {k: v for k, v in filters.items() if v not in (None, "")}
        self.state.page = 1
        return await self.load()
