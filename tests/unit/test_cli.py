"""CLI tests with a scripted transport."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from core.config import get_user_env_file
from core.exceptions import TransportError
from tests.fakes.fake_transport import FakeTransport

runner = CliRunner()


@pytest.fixture
def use_transport(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(cli_main, "setup_logging", lambda *args, **kwargs: None)

    def install(transport: FakeTransport) -> FakeTransport:
        monkeypatch.setattr(cli_main, "_open_transport", lambda settings: transport)
        return transport

    return install


class TestListCommand:
    def test_json_output(self, use_transport, paginated_addons) -> None:
        transport = use_transport(FakeTransport([paginated_addons]))

        result = runner.invoke(cli_main.app, ["list", "addons", "--page", "2", "--json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert [item["addon_name"] for item in payload["items"]] == ["Extra cheese", "Bacon", "Avocado"]
        assert "raw" not in payload["items"][0]
        assert payload["page"]["current_page"] == 2
        assert payload["page"]["last_page"] == 4
        assert payload["page"]["total"] == 11
        assert transport.calls[0]["params"]["page"] == 2
        assert transport.calls[0]["params"]["per_page"] == 15

    def test_filters_are_forwarded(self, use_transport) -> None:
        transport = use_transport(FakeTransport([{"data": []}]))

        result = runner.invoke(cli_main.app, ["list", "orders", "-f", "status=pending", "--json"])

        assert result.exit_code == 0, result.output
        assert transport.calls[0]["params"]["status"] == "pending"

    def test_unsupported_page_size_uses_default(self, use_transport) -> None:
        transport = use_transport(FakeTransport([{"data": []}]))

        result = runner.invoke(cli_main.app, ["list", "users", "-n", "33", "--json"])

        assert result.exit_code == 0, result.output
        assert transport.calls[0]["params"]["per_page"] == 15

    def test_table_output(self, use_transport, paginated_addons) -> None:
        use_transport(FakeTransport([paginated_addons]))

        result = runner.invoke(cli_main.app, ["list", "addons"])

        assert result.exit_code == 0, result.output
        assert "Bacon" in result.stdout
        assert "Page 2 of 4" in result.stdout

    def test_unknown_resource(self, use_transport) -> None:
        use_transport(FakeTransport())

        result = runner.invoke(cli_main.app, ["list", "widgets"])

        assert result.exit_code == 2

    def test_failure_exits_non_zero(self, use_transport) -> None:
        use_transport(
            FakeTransport([TransportError("primary"), TransportError("Backend down", status_code=503)])
        )

        result = runner.invoke(cli_main.app, ["list", "addons"])

        assert result.exit_code == 1


class TestRecipeCommand:
    def test_json_uses_wire_indices(self, use_transport) -> None:
        recipe = {
            "data": {
                "id": 5,
                "name": "Soup",
                "ingredients": ["Water", "Salt"],
                "steps": [{"text": "Boil", "ingredientIndexes": [1, 2]}],
            }
        }
        use_transport(FakeTransport([recipe]))

        result = runner.invoke(cli_main.app, ["recipe", "5", "--json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["name"] == "Soup"
        assert payload["steps"][0]["ingredient_indices"] == [0, 1]


class TestSuggestionStatusCommand:
    def test_updates_status(self, use_transport) -> None:
        transport = use_transport(FakeTransport(mutation_response={"data": {"id": 12, "status": "approved"}}))

        result = runner.invoke(cli_main.app, ["suggestion-status", "12", "approved"])

        assert result.exit_code == 0, result.output
        assert "approved" in result.stdout
        assert transport.calls[0]["body"] == {"status": "approved"}

    def test_invalid_status(self, use_transport) -> None:
        use_transport(FakeTransport())

        result = runner.invoke(cli_main.app, ["suggestion-status", "12", "maybe"])

        assert result.exit_code == 2


def test_resources_command(use_transport) -> None:
    result = runner.invoke(cli_main.app, ["resources"])

    assert result.exit_code == 0, result.output
    assert "addons" in result.stdout


def test_doctor_set_token(use_transport) -> None:
    result = runner.invoke(cli_main.app, ["doctor", "set-token"], input="http://backend.test/api\nsecret\n")

    assert result.exit_code == 0, result.output
    text = get_user_env_file().read_text(encoding="utf-8")
    assert "CRAFTDASH_AUTH_TOKEN=secret" in text
    assert "CRAFTDASH_API_BASE_URL=http://backend.test/api" in text
