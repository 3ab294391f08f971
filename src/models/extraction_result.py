"""Extraction result model returned by the logo extraction pipeline."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from src.models.company_logo import ValidatedLogo
from src.models.social_profiles import SocialProfiles

SUCCESS_MESSAGE = "OK"


class FailureReason(StrEnum):
    """Terminal failure states of an extraction."""

    EMPTY_URL = "empty_url"
    MALFORMED_URL = "malformed_url"
    COULD_NOT_IDENTIFY_LOGO = "could_not_identify_logo"
    LOGO_TOO_LARGE = "logo_too_large"


# Fixed message tokens exposed to callers.
FAILURE_MESSAGES: dict[FailureReason, str] = {
    FailureReason.EMPTY_URL: "False",
    FailureReason.MALFORMED_URL: "Malformed URL",
    FailureReason.COULD_NOT_IDENTIFY_LOGO: "could not identify logo",
    FailureReason.LOGO_TOO_LARGE: "logo greater than image limit",
}

# Input validation failures carry no social profiles at all.
_INPUT_FAILURES = frozenset({FailureReason.EMPTY_URL, FailureReason.MALFORMED_URL})


class ExtractionResult(BaseModel):
    """Either a found logo with social profiles, or a failure reason.

    Input validation failures (empty_url, malformed_url) never carry social
    profiles; every other outcome does, even if all of them are None.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    reason: FailureReason | None = None
    logo: ValidatedLogo | None = None
    social_profiles: SocialProfiles | None = None

    @model_validator(mode="after")
    def validate_consistency(self) -> ExtractionResult:
        if self.success:
            if self.reason is not None or self.logo is None or self.social_profiles is None:
                msg = "successful result requires a logo and social profiles and no reason"
                raise ValueError(msg)
            return self
        if self.reason is None:
            msg = "failed result requires a reason"
            raise ValueError(msg)
        if self.logo is not None:
            msg = "failed result must not carry a logo"
            raise ValueError(msg)
        if self.reason in _INPUT_FAILURES and self.social_profiles is not None:
            msg = f"{self.reason} result must not carry social profiles"
            raise ValueError(msg)
        if self.reason not in _INPUT_FAILURES and self.social_profiles is None:
            msg = f"{self.reason} result requires social profiles"
            raise ValueError(msg)
        return self

    @classmethod
    def succeeded(cls, logo: ValidatedLogo, social_profiles: SocialProfiles) -> ExtractionResult:
        return cls(success=True, logo=logo, social_profiles=social_profiles)

    @classmethod
    def failed(
        cls,
        reason: FailureReason,
        social_profiles: SocialProfiles | None = None,
    ) -> ExtractionResult:
        return cls(success=False, reason=reason, social_profiles=social_profiles)

    @property
    def message(self) -> str:
        """Caller-facing message token."""
        if self.success or self.reason is None:
            return SUCCESS_MESSAGE
        return FAILURE_MESSAGES[self.reason]

    def to_payload(self) -> dict[str, Any]:
        """Serialize into the JSON-ready response shape.

        Logo bytes are base64 encoded; failures omit the logo key and input
        validation failures also omit socialProfiles.
        """
        payload: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.logo is not None:
            payload["logo"] = {
                "url": self.logo.url,
                "size": self.logo.size,
                "contentType": self.logo.content_type,
                "data": self.logo.data_base64(),
            }
        if self.social_profiles is not None:
            payload["socialProfiles"] = self.social_profiles.model_dump()
        return payload
