"""Social media platform detection from hostnames."""

from __future__ import annotations

from collections.abc import Mapping

from src.models.social_profiles import Platform

# Platform -> domains whose host or subdomains belong to it.
SOCIAL_DOMAINS: Mapping[Platform, tuple[str, ...]] = {
    Platform.FACEBOOK: ("facebook.com",),
    Platform.LINKEDIN: ("linkedin.com",),
    Platform.TWITTER: ("twitter.com", "x.com"),
    Platform.YOUTUBE: ("youtube.com", "youtu.be"),
    Platform.DISCORD: ("discord.com",),
    Platform.INSTAGRAM: ("instagram.com",),
    Platform.PINTEREST: ("pinterest.com",),
    Platform.SNAPCHAT: ("snapchat.com",),
    Platform.TIKTOK: ("tiktok.com",),
}


def host_matches_domain(hostname: str, domain: str) -> bool:
    """Exact host match or a subdomain of the domain (case-insensitive)."""
    host = hostname.lower().rstrip(".")
    domain = domain.lower()
    return host == domain or host.endswith(f".{domain}")


def detect_platforms(
    hostname: str,
    domains: Mapping[Platform, tuple[str, ...]] = SOCIAL_DOMAINS,
) -> list[Platform]:
    """Return every platform whose domain list matches the hostname, in table order."""
    if not hostname:
        return []
    return [
        platform
        for platform, platform_domains in domains.items()
        if any(host_matches_domain(hostname, domain) for domain in platform_domains)
    ]
