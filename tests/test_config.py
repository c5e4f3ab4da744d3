"""
Tests for the import-time settings check.
"""

from unittest.mock import patch

import pytest

from contractor_risk import config
from contractor_risk.config import Settings


@pytest.fixture
def unconfigured_store(monkeypatch):
    """Enable the check with no Supabase settings."""
    monkeypatch.setenv("VALIDATE_CONFIG", "true")
    with patch.object(Settings, "SUPABASE_URL", ""), patch.object(Settings, "SUPABASE_KEY", ""):
        yield


class TestCheckOnImport:
    """config._check_on_import()."""

    def test_skipped_when_disabled(self, monkeypatch):
        monkeypatch.setenv("VALIDATE_CONFIG", "false")
        with patch.object(Settings, "validate") as validate:
            config._check_on_import()

        validate.assert_not_called()

    def test_production_raises(self, unconfigured_store):
        """Outside development a missing store setting stops startup."""
        with patch.object(Settings, "ENVIRONMENT", "production"):
            with pytest.raises(ValueError, match="SUPABASE_URL, SUPABASE_KEY"):
                config._check_on_import()

    def test_development_warns(self, unconfigured_store, capsys):
        """In development the problem is printed and startup continues."""
        with patch.object(Settings, "ENVIRONMENT", "development"):
            config._check_on_import()

        out = capsys.readouterr().out
        assert "SUPABASE_URL" in out
        assert "GET /contractors" in out

    def test_configured_store_passes(self, monkeypatch):
        monkeypatch.setenv("VALIDATE_CONFIG", "true")
        with patch.object(Settings, "SUPABASE_URL", "https://db.example.com"), \
                patch.object(Settings, "SUPABASE_KEY", "service-key"), \
                patch.object(Settings, "ENVIRONMENT", "production"):
            config._check_on_import()
