"""Shared fixtures for craftdash tests."""

from __future__ import annotations

import pytest

from core.config import AppSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep real user config / env vars out of the tests."""

    for key in (
        "CRAFTDASH_API_BASE_URL",
        "CRAFTDASH_AUTH_TOKEN",
        "CRAFTDASH_DEFAULT_PER_PAGE",
        "CRAFTDASH_PAGE_SIZE_OPTIONS",
        "CRAFTDASH_INGREDIENT_INDEX_BASE",
        "CRAFTDASH_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    """Settings that never touch the real backend."""

    return AppSettings(
        api_base_url="http://backend.test/api",
        auth_token="test-token",
        http_timeout_seconds=5.0,
        _env_file=None,
    )


@pytest.fixture
def paginated_addons() -> dict:
    """Laravel-style double envelope with authoritative pagination."""

    return {
        "message": "ok",
        "data": {
            "data": [
                {"addonId": 1, "addonName": "Extra cheese", "addonPrice": "1.50", "isAddonActive": 1},
                {"id": 2, "name": "Bacon", "price": 2, "active": False, "images": [{"url": "https://img/b.png"}]},
                {"id": 3, "title": "Avocado", "price": 2.5, "is_active": True, "image_urls": ["https://img/a.png"]},
            ],
            "current_page": 2,
            "last_page": 4,
            "per_page": 3,
            "total": 11,
        },
    }
