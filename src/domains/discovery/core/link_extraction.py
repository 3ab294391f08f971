"""Extract social profile links from HTML anchor tags."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

import structlog

from src.domains.discovery.core.html_document import attr_text
from src.domains.discovery.core.platform_detection import SOCIAL_DOMAINS, detect_platforms
from src.domains.discovery.core.url_normalization import resolve_url
from src.models.social_profiles import Platform, SocialProfiles

logger = structlog.get_logger(__name__)


def extract_links_from_html(document: Any, base_url: str) -> list[str]:
    """Absolute URLs of every <a href> in document order.

    Empty hrefs and references that do not resolve to an absolute URL are
    skipped.
    """
    urls: list[str] = []
    for tag in document.find_all("a", href=True):
        href = attr_text(tag, "href").strip()
        if not href:
            continue
        absolute = resolve_url(href, base_url)
        if absolute is None:
            continue
        urls.append(absolute)
    return urls


def extract_social_profiles(
    document: Any,
    base_url: str,
    domains: Mapping[Platform, tuple[str, ...]] = SOCIAL_DOMAINS,
) -> SocialProfiles:
    """Classify anchor links into one profile URL per platform.

    The first matching link for a platform wins; later links for the same
    platform are ignored.
    """
    found: dict[str, str] = {}

    for url in extract_links_from_html(document, base_url):
        hostname = (urlsplit(url).hostname or "").lower()
        if not hostname:
            continue
        for platform in detect_platforms(hostname, domains):
            if platform.value in found:
                continue
            found[platform.value] = url

    logger.debug("social_profiles_extracted", base_url=base_url, platforms=sorted(found))
    return SocialProfiles(**found)
