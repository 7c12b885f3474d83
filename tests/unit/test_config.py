"""Tests for zodiacprompt.core.config — configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the ZODIACPROMPT_ prefix.
- Path defaults pointing at the packaged static/template directories.
- Pydantic validation constraints (port range, template literal, etc.).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from zodiacprompt.core.config import ZodiacPromptConfig


class TestConfigDefaults:
    """Verify that ZodiacPromptConfig provides sensible defaults."""

    def test_form_defaults(self, test_config: ZodiacPromptConfig):
        """The form should open on female / dark / winter."""
        assert test_config.default_gender == "female"
        assert test_config.default_tone == "dark"
        assert test_config.default_theme == "winter"

    def test_default_template(self, test_config: ZodiacPromptConfig):
        assert test_config.default_template == "rich"

    def test_status_timings(self, test_config: ZodiacPromptConfig):
        assert test_config.status_clear_ms == 1400
        assert test_config.row_status_clear_ms == 1200

    def test_server_defaults(self, test_config: ZodiacPromptConfig):
        assert test_config.server_host == "127.0.0.1"
        assert test_config.server_port == 7870
        assert test_config.log_level == "INFO"

    def test_packaged_paths(self, test_config: ZodiacPromptConfig):
        """Static and template directories should ship inside the package."""
        assert (test_config.templates_dir / "index.html").is_file()
        assert (test_config.static_dir / "js" / "app.js").is_file()


class TestConfigEnvironment:
    """Verify ZODIACPROMPT_ environment overrides."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ZODIACPROMPT_DEFAULT_TONE", "light")
        monkeypatch.setenv("ZODIACPROMPT_SERVER_PORT", "8080")
        cfg = ZodiacPromptConfig(_env_file=None)
        assert cfg.default_tone == "light"
        assert cfg.server_port == 8080

    def test_env_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("zodiacprompt_default_template", "classic")
        cfg = ZodiacPromptConfig(_env_file=None)
        assert cfg.default_template == "classic"

    def test_kwargs_override(self, test_config):
        cfg = ZodiacPromptConfig(_env_file=None, default_theme="space")
        assert cfg.default_theme == "space"


class TestConfigValidation:
    """Verify Pydantic constraints."""

    @pytest.mark.parametrize("port", [80, 70000])
    def test_port_range(self, port):
        with pytest.raises(ValidationError):
            ZodiacPromptConfig(_env_file=None, server_port=port)

    def test_unknown_template_rejected(self):
        with pytest.raises(ValidationError):
            ZodiacPromptConfig(_env_file=None, default_template="gothic")

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            ZodiacPromptConfig(_env_file=None, status_clear_ms=-1)


class TestConfigIsolation:
    """The test_config fixture ignores every stray ZODIACPROMPT_ variable."""

    @pytest.fixture
    def stray_env(self, monkeypatch):
        monkeypatch.setenv("ZODIACPROMPT_STATUS_CLEAR_MS", "5")
        monkeypatch.setenv("ZODIACPROMPT_ROW_STATUS_CLEAR_MS", "6")
        monkeypatch.setenv("ZODIACPROMPT_STATIC_DIR", "/nonexistent/static")
        monkeypatch.setenv("ZODIACPROMPT_TEMPLATES_DIR", "/nonexistent/templates")
        monkeypatch.setenv("ZODIACPROMPT_DEFAULT_THEME", "space")

    def test_stray_env_cleared(self, stray_env, request):
        cfg = request.getfixturevalue("test_config")
        assert cfg.status_clear_ms == 1400
        assert cfg.row_status_clear_ms == 1200
        assert (cfg.templates_dir / "index.html").is_file()
        assert (cfg.static_dir / "js" / "app.js").is_file()
        assert cfg.default_theme == "winter"
