"""Tests for runtime settings."""

from pathlib import Path

import pytest

from discipline.config import HANDBOOK_FILENAME, Settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("HANDBOOK_PATH", "LLM_MODEL", "LLM_TEMPERATURE", "LLM_MAX_HANDBOOK_CHARS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestHandbookCandidates:
    def test_parent_of_working_directory_is_searched(self, clean_env):
        cwd = Path.cwd()
        candidates = Settings().handbook_candidates
        assert cwd.parent / "public" / "docs" / HANDBOOK_FILENAME in candidates

    def test_working_directory_locations_are_searched(self, clean_env):
        cwd = Path.cwd()
        candidates = Settings().handbook_candidates
        assert cwd / "public" / "docs" / HANDBOOK_FILENAME in candidates
        assert cwd / "docs" / HANDBOOK_FILENAME in candidates

    def test_parent_directory_comes_before_working_directory(self, clean_env):
        cwd = Path.cwd()
        candidates = Settings().handbook_candidates
        parent = candidates.index(cwd.parent / "public" / "docs" / HANDBOOK_FILENAME)
        assert parent < candidates.index(cwd / "public" / "docs" / HANDBOOK_FILENAME)

    def test_env_path_replaces_search_list(self, clean_env, tmp_path):
        handbook = tmp_path / "handbook.txt"
        clean_env.setenv("HANDBOOK_PATH", str(handbook))
        assert Settings().handbook_candidates == [handbook]

    def test_explicit_candidates_are_kept(self, clean_env):
        settings = Settings(handbook_candidates=["a.pdf", "b.pdf"])
        assert settings.handbook_candidates == [Path("a.pdf"), Path("b.pdf")]


class TestLLMSettings:
    def test_env_overrides(self, clean_env):
        clean_env.setenv("LLM_MODEL", "mistral")
        clean_env.setenv("LLM_TEMPERATURE", "0.5")
        settings = Settings()
        assert settings.llm_model == "mistral"
        assert settings.llm_temperature == 0.5

    def test_malformed_numbers_keep_defaults(self, clean_env):
        clean_env.setenv("LLM_MAX_HANDBOOK_CHARS", "lots")
        assert Settings().llm_max_handbook_chars == 8000
