"""Unit tests – SearchSettings, loaders and SettingsFactory."""
from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import ClassVar

import pytest

from facetlens.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SearchSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    env_key,
)
from facetlens.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


# ---------------------------------------------------------------------------
# Shared settings fixtures
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"
    api_key: str  # no default → required


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for field in dataclasses.fields(SearchSettings):
        monkeypatch.delenv(f"MEILISEARCH_{field.name}".upper(), raising=False)
    monkeypatch.delenv("REQ_API_KEY", raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# SearchSettings
# ---------------------------------------------------------------------------


class TestSearchSettingsDefaults:
    def test_defaults(self) -> None:
        s = SearchSettings()
        assert s.url == "http://localhost:7700"
        assert s.results_limit == 12
        assert s.ranking_score_threshold == 0.6
        assert s.semantic_ratio == 0.5
        assert s.embedder == "voyage"
        assert s.facet_preview_size == 5

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SearchSettings().results_limit = 3  # type: ignore[misc]

    def test_api_key_hidden_from_repr(self) -> None:
        assert "s3cret" not in repr(SearchSettings(admin_api_key="s3cret"))


class TestSearchSettingsValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"results_limit": 0},
            {"facet_preview_size": 0},
            {"ranking_score_threshold": 1.5},
            {"ranking_score_threshold": -0.1},
            {"semantic_ratio": 2.0},
        ],
    )
    def test_out_of_range(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(InvalidSettingValueError):
            SearchSettings(**kwargs)  # type: ignore[arg-type]

    def test_bounds_inclusive(self) -> None:
        s = SearchSettings(ranking_score_threshold=0.0, semantic_ratio=1.0)
        assert s.semantic_ratio == 1.0


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_reads_prefixed_variables(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MEILISEARCH_URL", "http://search:7700")
        clean_env.setenv("MEILISEARCH_RESULTS_LIMIT", "24")
        clean_env.setenv("MEILISEARCH_SEMANTIC_RATIO", "0.8")
        s = EnvSettingsLoader().load(SearchSettings)
        assert s.url == "http://search:7700"
        assert s.results_limit == 24
        assert s.semantic_ratio == 0.8

    def test_missing_optional_uses_default(self, clean_env: pytest.MonkeyPatch) -> None:
        assert EnvSettingsLoader().load(SearchSettings) == SearchSettings()

    def test_missing_required(self, clean_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_API_KEY"

    def test_uncoercible_value(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MEILISEARCH_RESULTS_LIMIT", "many")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(SearchSettings)

    def test_validation_failure_propagates(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MEILISEARCH_SEMANTIC_RATIO", "3")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(SearchSettings)


class TestDotenvSettingsLoader:
    def test_loads_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        clean_env.setenv("MEILISEARCH_DEFAULT_INDEX", "")
        clean_env.delenv("MEILISEARCH_DEFAULT_INDEX")
        env_file = tmp_path / ".env"
        env_file.write_text("MEILISEARCH_DEFAULT_INDEX=fashion-products-v2\n", encoding="utf-8")
        s = DotenvSettingsLoader(str(env_file)).load(SearchSettings)
        assert s.default_index == "fashion-products-v2"


# ---------------------------------------------------------------------------
# SettingsFactory
# ---------------------------------------------------------------------------


class _FailingLoader(SettingsLoader):
    def load(self, settings_class):  # type: ignore[no-untyped-def]
        raise ConfigError("unavailable")


class TestSettingsFactory:
    def test_overrides_win(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MEILISEARCH_RESULTS_LIMIT", "30")
        s = SettingsFactory.create(
            SearchSettings, loaders=[EnvSettingsLoader()], overrides={"results_limit": 6}
        )
        assert s.results_limit == 6

    def test_failing_loader_skipped(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MEILISEARCH_EMBEDDER", "openai")
        s = SettingsFactory.create(SearchSettings, loaders=[EnvSettingsLoader(), _FailingLoader()])
        assert s.embedder == "openai"

    def test_no_loaders_defaults(self) -> None:
        assert SettingsFactory.create(SearchSettings) == SearchSettings()

    def test_required_missing(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(RequiredSettings)

    def test_required_from_overrides(self) -> None:
        s = SettingsFactory.create(RequiredSettings, overrides={"api_key": "k"})
        assert s.api_key == "k"

    def test_invalid_override(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SettingsFactory.create(SearchSettings, overrides={"results_limit": 0})

    def test_unknown_override_wrapped(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(SearchSettings, overrides={"nope": 1})

    def test_from_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MEILISEARCH_FACET_PREVIEW_SIZE", "8")
        assert SettingsFactory.from_environment(SearchSettings).facet_preview_size == 8

    def test_from_environment_with_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        clean_env.setenv("MEILISEARCH_CONFIG_PATH", "")
        clean_env.delenv("MEILISEARCH_CONFIG_PATH")
        env_file = tmp_path / ".env"
        env_file.write_text("MEILISEARCH_CONFIG_PATH=/etc/facetlens/collections.json\n", encoding="utf-8")
        s = SettingsFactory.from_environment(SearchSettings, env_file=str(env_file))
        assert s.config_path == "/etc/facetlens/collections.json"


class TestEnvKey:
    def test_prefixed(self) -> None:
        assert env_key(SearchSettings, "results_limit") == "MEILISEARCH_RESULTS_LIMIT"

    def test_unprefixed(self) -> None:
        assert env_key(Settings, "url") == "URL"


class TestWithChanges:
    def test_copy_is_revalidated(self) -> None:
        base = SearchSettings()
        assert base.with_changes(results_limit=20).results_limit == 20
        with pytest.raises(InvalidSettingValueError):
            base.with_changes(semantic_ratio=1.5)

    def test_original_untouched(self) -> None:
        base = SearchSettings()
        base.with_changes(embedder="openai")
        assert base.embedder == "voyage"
