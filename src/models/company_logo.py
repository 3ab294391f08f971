"""Logo candidate and validated logo models."""

from __future__ import annotations

import base64
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator

from src.core.http_headers import is_supported_image_type


class LogoCandidate(BaseModel):
    """An <img> element's resolved URL and its heuristic relevance score."""

    model_config = ConfigDict(frozen=True)

    url: str
    score: int


class ValidatedLogo(BaseModel):
    """A downloaded logo that passed the content-type and size checks."""

    model_config = ConfigDict(frozen=True)

    url: str
    size: int
    content_type: str
    data: bytes

    @field_validator("size")
    @classmethod
    def validate_size(cls, value: int) -> int:
        """Size must be non-negative."""
        if value < 0:
            msg = "size must be >= 0"
            raise ValueError(msg)
        return value

    @field_validator("content_type")
    @classmethod
    def validate_content_type(cls, value: str) -> str:
        """Only JPEG and PNG content types are accepted."""
        if not is_supported_image_type(value):
            msg = "content_type must be image/jpeg, image/jpg or image/png"
            raise ValueError(msg)
        return value.lower()

    def data_base64(self) -> str:
        """Encode the raw image bytes as a base64 string."""
        return base64.b64encode(self.data).decode("ascii")


class RejectionReason(StrEnum):
    """Why a candidate image was not accepted."""

    FETCH_FAILED = "fetch_failed"
    UNSUPPORTED_TYPE = "unsupported_type"
    DOWNLOAD_ERROR = "download_error"
    TOO_LARGE = "too_large"


class CheckOutcome(StrEnum):
    """What the orchestrator does after checking one candidate."""

    ACCEPT = "accept"
    CONTINUE = "continue"
    HALT = "halt"


class LogoCheck(BaseModel):
    """Result of downloading and validating a single candidate image."""

    model_config = ConfigDict(frozen=True)

    outcome: CheckOutcome
    url: str
    reason: RejectionReason | None = None
    size: int | None = None
    logo: ValidatedLogo | None = None

    @classmethod
    def accepted(cls, logo: ValidatedLogo) -> LogoCheck:
        return cls(outcome=CheckOutcome.ACCEPT, url=logo.url, size=logo.size, logo=logo)

    @classmethod
    def rejected(
        cls, url: str, reason: RejectionReason, size: int | None = None
    ) -> LogoCheck:
        """Size rejections halt the fallback chain; every other reason continues it."""
        outcome = CheckOutcome.HALT if reason == RejectionReason.TOO_LARGE else CheckOutcome.CONTINUE
        return cls(outcome=outcome, url=url, reason=reason, size=size)
