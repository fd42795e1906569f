"""Unit tests for RecaptchaSettings and LoggingSettings."""

import pytest

from config import RECAPTCHA_ENTERPRISE_URL, LoggingSettings, RecaptchaSettings


_RECAPTCHA_VARS = (
    "RECAPTCHA_API_KEY",
    "RECAPTCHA_PROJECT_ID",
    "RECAPTCHA_BASE_URL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for var in _RECAPTCHA_VARS + ("ENV", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# RecaptchaSettings
# ---------------------------------------------------------------------------


class TestRecaptchaSettings:
    def test_defaults(self, clean_env):
        s = RecaptchaSettings()
        assert s.recaptcha_api_key == ""
        assert s.recaptcha_project_id == ""
        assert s.recaptcha_base_url == RECAPTCHA_ENTERPRISE_URL

    def test_loads_from_env(self, clean_env):
        clean_env.setenv("RECAPTCHA_API_KEY", "abc")
        clean_env.setenv("RECAPTCHA_PROJECT_ID", "my-project")
        s = RecaptchaSettings()
        assert s.recaptcha_api_key == "abc"
        assert s.recaptcha_project_id == "my-project"


@pytest.mark.parametrize(
    "api_key, project_id, expected",
    [
        ("abc", "proj", True),
        ("abc", None, False),
        (None, "proj", False),
    ],
    ids=["both", "no_project", "no_key"],
)
def test_is_configured(clean_env, api_key, project_id, expected):
    if api_key:
        clean_env.setenv("RECAPTCHA_API_KEY", api_key)
    if project_id:
        clean_env.setenv("RECAPTCHA_PROJECT_ID", project_id)
    assert RecaptchaSettings().is_configured is expected


# ---------------------------------------------------------------------------
# LoggingSettings
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "env, expected",
    [("production", True), ("development", False)],
    ids=["production", "development"],
)
def test_is_production(clean_env, env, expected):
    clean_env.setenv("ENV", env)
    assert LoggingSettings().is_production is expected


def test_logging_defaults(clean_env):
    s = LoggingSettings()
    assert s.log_level == "INFO"
    assert s.log_format == "console"
