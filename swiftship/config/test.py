"""Tests for configuration management."""

from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    GeneratorSettings,
    get_environment,
    get_environment_info,
    list_environment_variables,
)


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("SWIFTSHIP_MAX_TREE_DEPTH", raising=False)
        assert get_environment(EnvVar.SWIFTSHIP_MAX_TREE_DEPTH) == 32

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("SWIFTSHIP_WORKERS", "8")
        assert get_environment(EnvVar.SWIFTSHIP_WORKERS, override=2) == 2

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("SWIFTSHIP_MAX_NODE_COUNT", "500")
        result = get_environment(EnvVar.SWIFTSHIP_MAX_NODE_COUNT)
        assert result == 500
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("SWIFTSHIP_DEPTH_WARNING", "deep")
        assert get_environment(EnvVar.SWIFTSHIP_DEPTH_WARNING) == 8

    @pytest.mark.unit
    def test_path_conversion(self, monkeypatch):
        monkeypatch.setenv("SWIFTSHIP_OUTPUT_DIR", "/tmp/out")
        assert get_environment(EnvVar.SWIFTSHIP_OUTPUT_DIR) == Path("/tmp/out")


class TestIntrospection:
    """Tests for metadata and listing."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        info = get_environment_info(EnvVar.SWIFTSHIP_WORKERS)
        assert isinstance(info, EnvConfig)
        assert info.var_type is int
        assert info.category == "generation"

    @pytest.mark.unit
    def test_filter_by_category(self):
        limits = list_environment_variables("limits")
        assert set(limits) == {
            EnvVar.SWIFTSHIP_MAX_TREE_DEPTH,
            EnvVar.SWIFTSHIP_MAX_NODE_COUNT,
        }

    @pytest.mark.unit
    def test_names_match_members(self):
        for var in list_environment_variables():
            assert var.name == var.value.name


class TestGeneratorSettings:
    """Tests for settings resolution."""

    @pytest.mark.unit
    def test_from_environment_defaults(self, monkeypatch):
        for var in EnvVar:
            monkeypatch.delenv(var.value.name, raising=False)
        settings = GeneratorSettings.from_environment()
        assert settings == GeneratorSettings()

    @pytest.mark.unit
    def test_from_environment_reads_env(self, monkeypatch):
        monkeypatch.setenv("SWIFTSHIP_WORKERS", "4")
        monkeypatch.setenv("SWIFTSHIP_MAX_TREE_DEPTH", "10")
        settings = GeneratorSettings.from_environment(max_node_count=50)
        assert settings.workers == 4
        assert settings.max_tree_depth == 10
        assert settings.max_node_count == 50

    @pytest.mark.unit
    def test_rejects_zero_workers(self):
        with pytest.raises(ValueError):
            GeneratorSettings(workers=0)
