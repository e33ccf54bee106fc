"""Tests for mutation calls and echoed records."""

from __future__ import annotations

import pytest

from core.domain.entities import Addon
from core.domain.resources import RESOURCES
from core.services.mutations import submit_mutation, update_suggestion_status
from tests.fakes.fake_transport import FakeTransport


class TestSubmitMutation:
    @pytest.mark.asyncio
    async def test_echo_is_normalized(self) -> None:
        transport = FakeTransport(mutation_response={"message": "created", "data": {"addonId": 3, "addonName": "Salsa"}})

        entity = await submit_mutation(transport, RESOURCES["addons"], "post", body={"addonName": "Salsa"})

        assert transport.calls[0] == {"method": "POST", "path": "/addons", "body": {"addonName": "Salsa"}}
        assert isinstance(entity, Addon)
        assert entity.addon_id == 3

    @pytest.mark.asyncio
    async def test_empty_echo_returns_none(self) -> None:
        transport = FakeTransport(mutation_response={})

        entity = await submit_mutation(transport, RESOURCES["addons"], "delete", record_id=3)

        assert transport.calls[0]["path"] == "/addons/3"
        assert entity is None


class TestSuggestionStatus:
    @pytest.mark.asyncio
    async def test_patch_and_mapped_echo(self) -> None:
        transport = FakeTransport(mutation_response={"data": {"suggestion_id": 12, "status": "APPROVED", "title": "Soup"}})

        suggestion = await update_suggestion_status(transport, "12", "Approved")

        call = transport.calls[0]
        assert call["method"] == "PATCH"
        assert call["path"] == "/recipes/suggestions/12"
        assert call["body"] == {"status": "approved"}
        assert suggestion.id == "12"
        assert suggestion.status == "approved"
        assert suggestion.summary == "Soup"

    @pytest.mark.asyncio
    async def test_acknowledgement_only_reflects_request(self) -> None:
        transport = FakeTransport(mutation_response={})

        suggestion = await update_suggestion_status(transport, "7", "rejected")

        assert suggestion.id == "7"
        assert suggestion.status == "rejected"

    @pytest.mark.asyncio
    async def test_invalid_status_is_rejected_before_calling(self) -> None:
        transport = FakeTransport()

        with pytest.raises(ValueError, match="approved, rejected"):
            await update_suggestion_status(transport, "7", "pending")

        assert transport.calls == []
