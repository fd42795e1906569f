"""
Models for reCAPTCHA Enterprise assessments.

AssessmentRequest: the five caller-supplied fields; builds the wire payload
AssessmentResult:  success fields (tokenProperties / riskAnalysis / event) or
                   an ``error`` block; exactly one outcome per call

Field names follow the REST API's camelCase on the wire (aliases) and
snake_case in Python. The upstream body is trusted as-is: results are built
with model_construct, so values are never coerced or rejected, and unknown
fields pass through untouched.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


def _freeze(value: Any) -> Any:
    """Read-only copy of a parsed JSON value: lists become tuples, dicts mappingproxies."""
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return value


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")


class TokenProperties(_WireModel):
    # The API omits false booleans, so an absent ``valid`` means invalid
    valid: bool = False
    action: Optional[str] = None
    # RFC 3339 string, kept verbatim
    create_time: Optional[str] = Field(default=None, alias="createTime")


class RiskAnalysis(_WireModel):
    # 1.0 very likely a human, 0.0 very likely a bot
    score: float = 0.0
    reasons: Optional[tuple[str, ...]] = None


class AssessmentEvent(_WireModel):
    token: Optional[str] = None
    site_key: Optional[str] = Field(default=None, alias="siteKey")
    expected_action: Optional[str] = Field(default=None, alias="expectedAction")


class AssessmentError(_WireModel):
    code: int
    message: str


_NESTED_MODELS: dict[str, type[_WireModel]] = {
    "tokenProperties": TokenProperties,
    "riskAnalysis": RiskAnalysis,
    "event": AssessmentEvent,
    "error": AssessmentError,
}


class AssessmentResult(_WireModel):
    """Outcome of a single assessment.

    Either the parsed upstream body (any of the optional success fields) or
    ``error`` alone. Check ``ok`` before reading the success fields. Build
    instances with ``from_body()`` or ``failure()``.
    """

    token_properties: Optional[TokenProperties] = Field(
        default=None, alias="tokenProperties"
    )
    risk_analysis: Optional[RiskAnalysis] = Field(default=None, alias="riskAnalysis")
    event: Optional[AssessmentEvent] = None
    error: Optional[AssessmentError] = None

    _body: dict[str, Any] = PrivateAttr(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> "AssessmentResult":
        """Wrap a parsed JSON object without validating or coercing any field.

        Known blocks that are JSON objects get a typed view; anything else is
        kept exactly as sent.
        """
        view = {key: _freeze(value) for key, value in body.items()}
        for alias, model in _NESTED_MODELS.items():
            if isinstance(view.get(alias), Mapping):
                view[alias] = model.model_construct(**view[alias])
        result = cls.model_construct(**view)
        result._body = copy.deepcopy(body)
        return result

    @classmethod
    def failure(cls, code: int, message: str) -> "AssessmentResult":
        return cls.from_body({"error": {"code": code, "message": message}})

    def to_dict(self) -> dict[str, Any]:
        """Return a fresh copy of the body this result was built from."""
        return copy.deepcopy(self._body)


class AssessmentRequest(BaseModel):
    """Caller-supplied fields for one assessment.

    No format or emptiness checks: whatever the caller passes is forwarded and
    any rejection comes back from the API as an error result.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    token: str
    site_key: str = Field(alias="siteKey")
    expected_action: str = Field(alias="expectedAction")
    api_key: str = Field(repr=False, exclude=True)
    project_id: str

    def to_payload(self) -> dict[str, Any]:
        event = self.model_dump(
            by_alias=True, include={"token", "site_key", "expected_action"}
        )
        return {"event": event}
