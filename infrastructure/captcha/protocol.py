"""AssessmentProvider protocol: callers depend on this, not the concrete implementation."""

from typing import Protocol

from schemas.models.assessment import AssessmentResult


class AssessmentProvider(Protocol):
    async def assess(
        self, token: str, site_key: str, expected_action: str
    ) -> AssessmentResult: ...
