"""Tests for settings and the user .env writer."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file, write_user_env_vars


class TestAppSettings:
    def test_defaults(self) -> None:
        settings = AppSettings(_env_file=None)

        assert settings.default_per_page == 15
        assert settings.page_size_options == [15, 25, 50, 100]
        assert settings.ingredient_index_base == 0
        assert settings.auth_token is None

    def test_reads_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CRAFTDASH_API_BASE_URL", "http://backend.test/api/")
        monkeypatch.setenv("CRAFTDASH_DEFAULT_PER_PAGE", "25")
        monkeypatch.setenv("CRAFTDASH_PAGE_SIZE_OPTIONS", "[50, 10, 10, 0]")

        settings = AppSettings(_env_file=None)

        assert settings.api_base_url == "http://backend.test/api"
        assert settings.default_per_page == 25
        assert settings.page_size_options == [10, 50]

    def test_reads_project_env_file(self, tmp_path) -> None:
        env_file = tmp_path / "project.env"
        env_file.write_text("CRAFTDASH_AUTH_TOKEN=from-file\n", encoding="utf-8")

        settings = AppSettings(_env_file=env_file)

        assert settings.auth_token == "from-file"

    def test_index_base_must_be_zero_or_one(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(ingredient_index_base=2, _env_file=None)

    def test_page_sizes_cannot_be_empty(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(page_size_options=[0], _env_file=None)


class TestWriteUserEnv:
    def test_merges_with_existing_values(self, tmp_path) -> None:
        env_path = tmp_path / "cfg" / ".env"
        write_user_env_vars({"CRAFTDASH_AUTH_TOKEN": "old", "OTHER": "keep"}, env_path=env_path)

        write_user_env_vars({"CRAFTDASH_AUTH_TOKEN": "new", "SKIPPED": None}, env_path=env_path)

        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert "CRAFTDASH_AUTH_TOKEN=new" in lines
        assert "OTHER=keep" in lines
        assert not any(line.startswith("SKIPPED") for line in lines)

    def test_default_path_is_user_config_dir(self, tmp_path) -> None:
        path = write_user_env_vars({"CRAFTDASH_AUTH_TOKEN": "t"})

        assert path == get_user_env_file()
        assert path.read_text(encoding="utf-8").endswith("CRAFTDASH_AUTH_TOKEN=t\n")
