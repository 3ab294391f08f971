"""Social profile record for the nine tracked platforms."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Platform(StrEnum):
    """Supported social media platforms."""

    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    YOUTUBE = "youtube"
    DISCORD = "discord"
    INSTAGRAM = "instagram"
    PINTEREST = "pinterest"
    SNAPCHAT = "snapchat"
    TIKTOK = "tiktok"


class SocialProfiles(BaseModel):
    """One profile URL per platform, None when nothing was found."""

    model_config = ConfigDict(frozen=True)

    facebook: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    youtube: str | None = None
    discord: str | None = None
    instagram: str | None = None
    pinterest: str | None = None
    snapchat: str | None = None
    tiktok: str | None = None

    def get(self, platform: Platform) -> str | None:
        """Return the profile URL recorded for a platform."""
        return getattr(self, platform.value)

    def found_platforms(self) -> list[Platform]:
        """Platforms with a recorded profile, in field order."""
        return [platform for platform in Platform if self.get(platform) is not None]
