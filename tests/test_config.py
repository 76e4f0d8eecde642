"""Tests for SectiongenConfig - Pydantic Settings single source of truth."""

from pathlib import Path

import pytest


class TestSectiongenConfig:
    """Test SectiongenConfig defaults and overrides."""

    def test_default_values(self):
        """Without env vars the registry URL is absent, never defaulted."""
        from sectiongen.config import SectiongenConfig

        cfg = SectiongenConfig()
        assert cfg.registry_url is None
        assert cfg.timeout is None
        assert cfg.max_workers == 8
        assert cfg.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        """Environment variables with SECTIONGEN_ prefix override defaults."""
        from sectiongen.config import SectiongenConfig

        monkeypatch.setenv("SECTIONGEN_REGISTRY_URL", "https://ui.example.com")
        monkeypatch.setenv("SECTIONGEN_TIMEOUT", "12.5")
        monkeypatch.setenv("SECTIONGEN_MAX_WORKERS", "2")
        cfg = SectiongenConfig()
        assert cfg.registry_url == "https://ui.example.com"
        assert cfg.timeout == 12.5
        assert cfg.max_workers == 2

    def test_legacy_env_var(self, monkeypatch):
        from sectiongen.config import SectiongenConfig

        monkeypatch.setenv("HYDROGEN_UI_URL", "https://legacy.example.com/")
        cfg = SectiongenConfig()
        assert cfg.registry_url == "https://legacy.example.com"

    def test_prefixed_var_wins_over_legacy(self, monkeypatch):
        from sectiongen.config import SectiongenConfig

        monkeypatch.setenv("HYDROGEN_UI_URL", "https://legacy.example.com")
        monkeypatch.setenv("SECTIONGEN_REGISTRY_URL", "https://new.example.com")
        assert SectiongenConfig().registry_url == "https://new.example.com"

    def test_blank_url_counts_as_missing(self):
        from sectiongen.config import SectiongenConfig

        assert SectiongenConfig(registry_url="   ").registry_url is None

    def test_trailing_slash_stripped(self):
        from sectiongen.config import SectiongenConfig

        cfg = SectiongenConfig(registry_url="https://ui.example.com//")
        assert cfg.registry_url == "https://ui.example.com"

    def test_env_file(self, tmp_path):
        from sectiongen.config import SectiongenConfig

        (tmp_path / ".env").write_text("SECTIONGEN_REGISTRY_URL=https://dotenv.example.com\n")
        assert SectiongenConfig().registry_url == "https://dotenv.example.com"

    def test_max_workers_must_be_positive(self):
        from pydantic import ValidationError

        from sectiongen.config import SectiongenConfig

        with pytest.raises(ValidationError):
            SectiongenConfig(max_workers=0)

    def test_log_dir_derives_from_home_dir(self, tmp_path, monkeypatch):
        from sectiongen.config import SectiongenConfig

        monkeypatch.delenv("SECTIONGEN_LOG_DIR")
        cfg = SectiongenConfig(home_dir=tmp_path / "h")
        assert cfg.resolved_log_dir == tmp_path / "h" / "logs"

    def test_explicit_log_dir(self, tmp_path):
        from sectiongen.config import SectiongenConfig

        cfg = SectiongenConfig(log_dir=tmp_path / "elsewhere")
        assert cfg.resolved_log_dir == tmp_path / "elsewhere"

    def test_get_config_singleton(self):
        """get_config() returns the same instance."""
        from sectiongen.config import get_config

        assert get_config() is get_config()
