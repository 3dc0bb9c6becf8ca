"""Tests for federate.__main__ entrypoint functions."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest

from federate.config import Config
from federate.core.constants import AuthenticationMethod
from federate.core.errors import ConfigurationError, SpecifiedProfileError
from federate.identity import LinkedInIdentity, OAuth1Info

# ---------------------------------------------------------------------------
# setup_logging
# ---------------------------------------------------------------------------


class TestSetupLogging:
    def test_removes_default_handler_and_adds_stderr(self, monkeypatch):
        """setup_logging configures loguru with the correct level."""
        from federate.__main__ import setup_logging

        monkeypatch.delenv("LOG_LEVEL", raising=False)
        with patch("federate.__main__.logger") as mock_logger:
            setup_logging(verbose=False)
            mock_logger.remove.assert_called_once()
            mock_logger.add.assert_called_once()
            assert mock_logger.add.call_args[1]["level"] == "INFO"

    def test_verbose_sets_debug_level(self):
        from federate.__main__ import setup_logging

        with patch("federate.__main__.logger") as mock_logger:
            setup_logging(verbose=True)
            assert mock_logger.add.call_args[1]["level"] == "DEBUG"

    def test_log_level_env(self, monkeypatch):
        from federate.__main__ import setup_logging

        monkeypatch.setenv("LOG_LEVEL", "warning")
        with patch("federate.__main__.logger") as mock_logger:
            setup_logging()
            assert mock_logger.add.call_args[1]["level"] == "WARNING"

    def test_format_includes_time_and_level(self):
        from federate.__main__ import setup_logging

        with patch("federate.__main__.logger") as mock_logger:
            setup_logging()
            fmt = mock_logger.add.call_args[1]["format"]
            assert "{time:" in fmt
            assert "{level:" in fmt
            assert "{message}" in fmt


class TestSafeMessageFilter:
    def test_escapes_braces_and_angles(self):
        from federate.__main__ import _safe_message_filter

        record = {"message": "body {id} <tag>"}
        assert _safe_message_filter(record) is True
        assert record["message"] == "body {{id}} \\<tag>"


# ---------------------------------------------------------------------------
# build_provider / main
# ---------------------------------------------------------------------------


def _identity() -> LinkedInIdentity:
    return LinkedInIdentity(
        provider_user_id="42",
        provider_id="linkedin",
        first_name="Ada",
        auth_method=AuthenticationMethod.OAUTH1,
        auth_info=OAuth1Info("tok", "sec"),
    )


class TestBuildProvider:
    def test_requires_consumer(self, monkeypatch):
        from federate.__main__ import build_provider

        monkeypatch.delenv("FEDERATE_LINKEDIN_CONSUMER_KEY", raising=False)
        monkeypatch.delenv("FEDERATE_LINKEDIN_CONSUMER_SECRET", raising=False)
        with pytest.raises(ConfigurationError):
            build_provider(Config({}))

    def test_uses_configured_timeout(self, monkeypatch):
        from federate.__main__ import build_provider

        monkeypatch.delenv("FEDERATE_HTTP_TIMEOUT", raising=False)
        config = Config(
            {
                "http_timeout_seconds": 4,
                "providers": {"linkedin": {"consumer_key": "k", "consumer_secret": "s"}},
            }
        )
        provider = build_provider(config)
        assert provider._http._timeout == 4.0


class TestMain:
    def test_prints_identity_json(self, capsys, tmp_path):
        from federate.__main__ import main

        with (
            patch("federate.__main__.setup_logging"),
            patch("federate.__main__.reload_config", return_value=Config({})),
            patch("federate.__main__.run", new=AsyncMock(return_value=_identity())) as run_mock,
        ):
            code = main(["--config", str(tmp_path / "c.yaml"), "--token", "tok", "--secret", "sec"])

        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out["provider_user_id"] == "42"
        assert out["auth_method"] == "oauth1"
        assert out["avatar_url"] is None
        assert "sec" not in json.dumps(out)
        _, auth_info = run_mock.call_args[0]
        assert auth_info == OAuth1Info("tok", "sec")

    def test_authentication_error_exit_code(self, tmp_path):
        from federate.__main__ import main

        err = SpecifiedProfileError("linkedin", 401, message="invalid token")
        with (
            patch("federate.__main__.setup_logging"),
            patch("federate.__main__.reload_config", return_value=Config({})),
            patch("federate.__main__.run", new=AsyncMock(side_effect=err)),
        ):
            assert main(["-c", str(tmp_path / "c.yaml"), "--token", "t", "--secret", "s"]) == 1

    def test_configuration_error_exit_code(self, tmp_path):
        from federate.__main__ import main

        with (
            patch("federate.__main__.setup_logging"),
            patch(
                "federate.__main__.reload_config",
                side_effect=ConfigurationError("bad", code="invalid_providers"),
            ),
        ):
            assert main(["-c", str(tmp_path / "c.yaml"), "--token", "t", "--secret", "s"]) == 2
