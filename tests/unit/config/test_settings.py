# tests/unit/config/test_settings.py — v2
"""Tests for config/settings.py — typed Settings and validation rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillsalary.config.settings import ConfigurationError, Settings, load_settings


class TestSettingsDefaults:
    def test_default_prediction_profile(self):
        s = Settings(_env_file=None)
        assert s.default_region == "US"
        assert s.default_experience_years == 0

    def test_default_weights_static(self):
        s = Settings(_env_file=None)
        assert s.weights_mode == "static"
        assert s.weights_ttl_ms == 600_000
        assert s.weights_timeout_ms == 3000
        assert s.weights_allow_stale is True

    def test_default_cache(self):
        s = Settings(_env_file=None)
        assert s.cache_backend == "memory"

    def test_default_jobs(self):
        s = Settings(_env_file=None)
        assert s.job_retention_ms == 3_600_000
        assert s.job_cleanup_interval_s == 3600

    def test_default_logging(self):
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.log_format == "json"
        assert s.log_file is None


class TestSettingsValidation:
    def test_live_without_url(self):
        with pytest.raises(ConfigurationError, match="WEIGHTS_URL"):
            Settings(_env_file=None, weights_mode="live")

    def test_live_with_url(self):
        s = Settings(_env_file=None, weights_mode="live", weights_url="https://w.example.com")
        assert s.weights_mode == "live"

    def test_cleanup_interval_positive(self):
        with pytest.raises(ConfigurationError, match="JOB_CLEANUP_INTERVAL_S"):
            Settings(_env_file=None, job_cleanup_interval_s=0)

    def test_errors_joined(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(_env_file=None, weights_mode="live", job_cleanup_interval_s=-1)
        assert "; " in str(exc_info.value)

    def test_non_positive_timeout(self):
        with pytest.raises(ValueError, match="weights_timeout_ms"):
            Settings(_env_file=None, weights_timeout_ms=0)

    def test_negative_experience(self):
        with pytest.raises(ValueError, match="default_experience_years"):
            Settings(_env_file=None, default_experience_years=-2)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, cache_backend="redis")


class TestEnvironment:
    def test_reads_env_vars(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_REGION", "EU")
        monkeypatch.setenv("WEIGHTS_TTL_MS", "1000")
        s = Settings(_env_file=None)
        assert s.default_region == "EU"
        assert s.weights_ttl_ms == 1000

    def test_reads_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("CACHE_BACKEND=json\nCACHE_ROOT=/tmp/ss-cache\n", encoding="utf-8")
        s = Settings(_env_file=env)
        assert s.cache_backend == "json"
        assert s.cache_root == Path("/tmp/ss-cache")


class TestLoadSettings:
    def test_overrides(self):
        s = load_settings(_env_file=None, default_region="UK", log_format="text")
        assert s.default_region == "UK"
        assert s.log_format == "text"
