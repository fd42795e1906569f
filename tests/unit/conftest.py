"""
Unit test configuration.

Stubs out dotenv so RecaptchaSettings / LoggingSettings never pick up a
developer's real .env (and real API key) during tests. Tests set config
exclusively through monkeypatch.setenv().
"""

import pytest


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})
