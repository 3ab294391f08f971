"""Pydantic data models for the company logo scraper."""

from src.models.company_logo import (
    CheckOutcome,
    LogoCandidate,
    LogoCheck,
    RejectionReason,
    ValidatedLogo,
)
from src.models.config import Config
from src.models.extraction_result import ExtractionResult, FailureReason
from src.models.social_profiles import Platform, SocialProfiles

__all__ = [
    "CheckOutcome",
    "Config",
    "ExtractionResult",
    "FailureReason",
    "LogoCandidate",
    "LogoCheck",
    "Platform",
    "RejectionReason",
    "SocialProfiles",
    "ValidatedLogo",
]
