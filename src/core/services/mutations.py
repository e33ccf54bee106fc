"""Create/update/delete calls whose responses go back through the normalizer.

The mutation itself is trivial; what matters is that whatever the backend
echoes back (``{data: {...}}``, ``{message, data}``, a bare object or nothing)
is mapped with the same alias tables as the list views.
"""

from __future__ import annotations

from typing import Any, Literal

from core.domain.entities import CanonicalEntity, RecipeSuggestion
from core.domain.resources import RESOURCES, ResourceSpec
from core.interfaces.transport import ApiTransport
from core.normalization import extract_record, map_record

Method = Literal["post", "patch", "put", "delete"]

REVIEW_STATUSES = ("approved", "rejected")


async def submit_mutation(
    transport: ApiTransport,
    spec: ResourceSpec,
    method: Method,
    *,
    record_id: int | str | None = None,
    body: Any = None,
) -> CanonicalEntity | None:
    path = spec.path if record_id is None else spec.detail_path(record_id)
    call = getattr(transport, method)
    response = await call(path, body)
    record = extract_record(response)
    if not record:
        return None
    return map_record(record, spec)


async def update_suggestion_status(
    transport: ApiTransport,
    suggestion_id: str,
    status: str,
) -> RecipeSuggestion:
    """PATCH a suggestion's review status.

    Raises ``ValueError`` for statuses other than approved/rejected. When the
    backend echoes nothing usable, the returned entity reflects the request.
    """

    status = status.strip().lower()
    if status not in REVIEW_STATUSES:
        raise ValueError(f"Status must be one of {', '.join(REVIEW_STATUSES)}, got '{status}'")

    entity = await submit_mutation(
        transport,
        RESOURCES["recipe-suggestions"],
        "patch",
        record_id=suggestion_id,
        body={"status": status},
    )
    if isinstance(entity, RecipeSuggestion) and entity.id is not None:
        return entity
    return RecipeSuggestion(id=suggestion_id, status=status)
