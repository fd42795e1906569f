"""reCAPTCHA Enterprise implementation of AssessmentProvider.

Calls projects.assessments.create over REST with an API key:
- one POST per call, no retry
- every failure (transport, HTTP status, empty or malformed body) comes back
  as AssessmentResult.error; nothing is raised to the caller
- timeout is the HttpClient's (5 seconds unless configured otherwise)
"""

from __future__ import annotations

import json
from typing import Any, Optional

from config import RECAPTCHA_ENTERPRISE_URL, RecaptchaSettings
from infrastructure.http_client import HttpClient
from schemas.models.assessment import AssessmentRequest, AssessmentResult
from shared.logging import get_logger

log = get_logger(__name__)

_ASSESSMENTS_PATH = "/v1/projects/{project_id}/assessments"

EMPTY_RESPONSE_MESSAGE = "Empty response from reCAPTCHA API"
INVALID_JSON_MESSAGE = "Invalid JSON response from reCAPTCHA API"
UNEXPECTED_SHAPE_MESSAGE = "Unexpected response shape from reCAPTCHA API"
FALLBACK_MESSAGE = "Failed to assess reCAPTCHA token"


def _describe(exc: Exception) -> str:
    return str(exc) or FALLBACK_MESSAGE


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


class RecaptchaEnterpriseProvider:
    def __init__(
        self,
        api_key: str,
        project_id: str,
        http_client: HttpClient,
        base_url: str = RECAPTCHA_ENTERPRISE_URL,
    ) -> None:
        self._api_key = api_key
        self._project_id = project_id
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(
        cls, settings: RecaptchaSettings, http_client: HttpClient
    ) -> "RecaptchaEnterpriseProvider":
        if not settings.is_configured:
            # Still built: the API rejects the call and assess() returns the error
            log.warning("recaptcha_enterprise_not_configured")
        return cls(
            api_key=settings.recaptcha_api_key,
            project_id=settings.recaptcha_project_id,
            http_client=http_client,
            base_url=settings.recaptcha_base_url,
        )

    async def assess(
        self, token: str, site_key: str, expected_action: str
    ) -> AssessmentResult:
        try:
            request = AssessmentRequest(
                token=token,
                site_key=site_key,
                expected_action=expected_action,
                api_key=self._api_key,
                project_id=self._project_id,
            )
            response = await self._http.post(
                self._base_url + _ASSESSMENTS_PATH.format(project_id=request.project_id),
                params={"key": request.api_key},
                json=request.to_payload(),
                headers={"Content-Type": "application/json"},
            )

            if not 200 <= response.status_code < 300:
                log.warning(
                    "recaptcha_assessment_http_error",
                    project_id=self._project_id,
                    status_code=response.status_code,
                )
                return AssessmentResult.failure(
                    response.status_code, f"HTTP error: {response.reason_phrase}"
                )

            text = response.text
            if not text:
                log.error(
                    "recaptcha_assessment_empty_response", project_id=self._project_id
                )
                return AssessmentResult.failure(500, EMPTY_RESPONSE_MESSAGE)

            try:
                data = json.loads(text, parse_constant=_reject_constant)
            except ValueError:
                log.error(
                    "recaptcha_assessment_invalid_json",
                    project_id=self._project_id,
                    body_length=len(text),
                )
                return AssessmentResult.failure(500, INVALID_JSON_MESSAGE)

            if not isinstance(data, dict):
                log.error(
                    "recaptcha_assessment_unexpected_shape",
                    project_id=self._project_id,
                    body_type=type(data).__name__,
                )
                return AssessmentResult.failure(500, UNEXPECTED_SHAPE_MESSAGE)

            result = AssessmentResult.from_body(data)
            log.info(
                "recaptcha_assessment_completed",
                project_id=self._project_id,
                valid=getattr(result.token_properties, "valid", None),
                score=getattr(result.risk_analysis, "score", None),
            )
            return result
        except Exception as e:
            log.error(
                "recaptcha_assessment_request_failed",
                project_id=self._project_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return AssessmentResult.failure(500, _describe(e))


async def assess_recaptcha_token(
    *,
    token: str,
    site_key: str,
    expected_action: str,
    api_key: str,
    project_id: str,
    http_client: Optional[HttpClient] = None,
) -> AssessmentResult:
    """Assess a reCAPTCHA Enterprise token.

    Pass a long-lived ``http_client`` to reuse connections; otherwise one is
    opened and closed around this single call.

    Example:
        >>> result = await assess_recaptcha_token(
        ...     token="client-token",
        ...     site_key="your-site-key",
        ...     expected_action="login",
        ...     api_key="your-api-key",
        ...     project_id="your-project-id",
        ... )
        >>> if result.ok and result.token_properties and result.token_properties.valid:
        ...     ...
    """
    if http_client is not None:
        provider = RecaptchaEnterpriseProvider(api_key, project_id, http_client)
        return await provider.assess(token, site_key, expected_action)

    try:
        async with HttpClient() as client:
            provider = RecaptchaEnterpriseProvider(api_key, project_id, client)
            return await provider.assess(token, site_key, expected_action)
    except Exception as e:
        log.error(
            "recaptcha_http_client_failed",
            project_id=project_id,
            error=str(e),
            error_type=type(e).__name__,
        )
        return AssessmentResult.failure(500, _describe(e))
