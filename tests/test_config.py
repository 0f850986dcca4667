# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Tests for configuration providers and chunking config loading."""

import pytest

from qa_chunking import DEFAULT_CHUNKING_CONFIG, ChunkingConfig, InvalidConfigurationError, load_chunking_config
from qa_config import EnvConfigProvider, StaticConfigProvider
from qa_config.base import parse_bool


class TestParseBool:
    """Tests for boolean parsing."""

    @pytest.mark.parametrize("value", ["true", "TRUE", " 1 ", "yes", "on", True])
    def test_true_values(self, value):
        assert parse_bool(value, False) is True

    @pytest.mark.parametrize("value", ["false", "0", "No", "off", False])
    def test_false_values(self, value):
        assert parse_bool(value, True) is False

    @pytest.mark.parametrize("value", [None, "maybe", 3])
    def test_unrecognized_uses_default(self, value):
        assert parse_bool(value, True) is True
        assert parse_bool(value, False) is False


class TestProviders:
    """Tests for EnvConfigProvider and StaticConfigProvider."""

    def test_env_provider_reads_mapping(self):
        provider = EnvConfigProvider({"CHUNK_SIZE": "20", "MAX_CHUNK_OVERFLOW": "2.5"})

        assert provider.get("CHUNK_SIZE") == "20"
        assert provider.get_int("CHUNK_SIZE", 50) == 20
        assert provider.get_float("MAX_CHUNK_OVERFLOW", 1.5) == 2.5
        assert provider.get("MISSING", "fallback") == "fallback"

    def test_env_provider_bad_numbers_use_default(self):
        provider = EnvConfigProvider({"CHUNK_SIZE": "many", "MAX_CHUNK_OVERFLOW": "lots"})

        assert provider.get_int("CHUNK_SIZE", 50) == 50
        assert provider.get_float("MAX_CHUNK_OVERFLOW", 1.5) == 1.5

    def test_env_provider_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("QA_TEST_SETTING", "7")

        assert EnvConfigProvider().get_int("QA_TEST_SETTING") == 7

    def test_static_provider_typed_values(self):
        provider = StaticConfigProvider({"CHUNK_SIZE": 10, "SMART_CHUNKING": False})

        assert provider.get_int("CHUNK_SIZE") == 10
        assert provider.get_bool("SMART_CHUNKING", True) is False

    def test_static_provider_set(self):
        provider = StaticConfigProvider()
        provider.set("CHUNK_SIZE", "12")

        assert provider.get_int("CHUNK_SIZE", 50) == 12


class TestLoadChunkingConfig:
    """Tests for load_chunking_config()."""

    def test_defaults(self):
        """Test that unset keys fall back to the smart preset."""
        config = load_chunking_config(StaticConfigProvider())

        assert config == DEFAULT_CHUNKING_CONFIG
        assert config == ChunkingConfig.default()

    def test_values_from_environment(self):
        """Test reading every supported key."""
        provider = EnvConfigProvider({
            "CHUNK_SIZE": "25",
            "SMART_CHUNKING": "false",
            "MIN_RELATIONSHIP_SCORE": "60",
            "MAX_CHUNK_OVERFLOW": "2",
        })

        config = load_chunking_config(provider)

        assert config == ChunkingConfig(
            target_size=25,
            use_smart_chunking=False,
            min_relationship_score=60,
            max_chunk_overflow=2.0,
        )

    def test_reads_os_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("CHUNK_SIZE", "33")

        assert load_chunking_config().target_size == 33

    @pytest.mark.parametrize("key,value", [
        ("CHUNK_SIZE", 0),
        ("CHUNK_SIZE", 501),
        ("MIN_RELATIONSHIP_SCORE", -1),
        ("MIN_RELATIONSHIP_SCORE", 101),
        ("MAX_CHUNK_OVERFLOW", 0),
        ("MAX_CHUNK_OVERFLOW", -0.5),
    ])
    def test_out_of_range_values(self, key, value):
        """Test that out-of-range settings are rejected with their key."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            load_chunking_config(StaticConfigProvider({key: value}))

        assert exc_info.value.key == key
        assert exc_info.value.value == value
