"""
Configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

The assessment entry point never reads these itself; callers that want
env-driven credentials build a provider with
RecaptchaEnterpriseProvider.from_settings().
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

RECAPTCHA_ENTERPRISE_URL = "https://recaptchaenterprise.googleapis.com"


class RecaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    recaptcha_api_key: str = ""
    recaptcha_project_id: str = ""
    recaptcha_base_url: str = RECAPTCHA_ENTERPRISE_URL

    @property
    def is_configured(self) -> bool:
        return bool(self.recaptcha_api_key and self.recaptcha_project_id)


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production

    @property
    def is_production(self) -> bool:
        return self.env == "production"
