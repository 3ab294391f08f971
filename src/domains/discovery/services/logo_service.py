"""Logo and social profile extraction service.

Runs the full pipeline for one website URL:

  1. Normalize the input URL (empty / malformed input fails without socials)
  2. Fetch the page and parse it
  3. Classify anchor links into social profiles
  4. Scan <img> elements for JPEG/PNG logo candidates and rank them by score
  5. Download candidates best-first until one is accepted; a size rejection
     stops the search, any other rejection moves on to the next candidate

Every outcome is returned as an ExtractionResult; nothing is raised.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import structlog

from src.domains.discovery.core.html_document import parse_html
from src.domains.discovery.core.link_extraction import extract_social_profiles
from src.domains.discovery.core.logo_scoring import (
    DEFAULT_SCORING_RULES,
    ScoringRule,
    rank_candidates,
    scan_logo_candidates,
)
from src.domains.discovery.core.platform_detection import SOCIAL_DOMAINS
from src.domains.discovery.core.url_normalization import (
    EmptyUrlError,
    MalformedUrlError,
    normalize_target_url,
)
from src.domains.discovery.services.image_downloader import ImageDownloader
from src.models.company_logo import CheckOutcome
from src.models.extraction_result import ExtractionResult, FailureReason
from src.models.social_profiles import Platform, SocialProfiles
from src.services.page_fetcher import PageFetcher, PageFetchError, build_session

if TYPE_CHECKING:
    from src.models.company_logo import LogoCandidate
    from src.models.config import Config

logger = structlog.get_logger(__name__)


class LogoService:
    """Finds the most likely company logo and social profiles for a website.

    A service holds one requests.Session, which is not safe to share between
    threads. To extract in parallel, give each thread its own service (each
    from_config call builds a fresh session).
    """

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        downloader: ImageDownloader | None = None,
        social_domains: Mapping[Platform, tuple[str, ...]] = SOCIAL_DOMAINS,
        scoring_rules: tuple[ScoringRule, ...] = DEFAULT_SCORING_RULES,
    ) -> None:
        self.fetcher = fetcher or PageFetcher()
        self.downloader = downloader or ImageDownloader()
        self.social_domains = social_domains
        self.scoring_rules = scoring_rules

    @classmethod
    def from_config(cls, config: Config) -> LogoService:
        """Build a service whose HTTP clients honour the configured limits."""
        session = build_session(
            user_agent=config.user_agent,
            max_redirects=config.max_redirects,
        )
        return cls(
            fetcher=PageFetcher(session=session, timeout=config.request_timeout),
            downloader=ImageDownloader(
                session=session,
                timeout=config.request_timeout,
                max_logo_bytes=config.max_logo_bytes,
            ),
        )

    def extract(self, target_url: str | None) -> ExtractionResult:
        """Extract the logo and social profiles for a website URL."""
        try:
            canonical_url = normalize_target_url(target_url)
        except EmptyUrlError:
            logger.info("extraction_rejected_empty_url")
            return ExtractionResult.failed(FailureReason.EMPTY_URL)
        except MalformedUrlError as exc:
            logger.info("extraction_rejected_malformed_url", error=str(exc))
            return ExtractionResult.failed(FailureReason.MALFORMED_URL)

        log = logger.bind(url=canonical_url)

        try:
            return self._extract_from_page(canonical_url)
        except PageFetchError as exc:
            log.warning("page_unavailable", error=str(exc))
        except Exception:
            log.exception("extraction_failed_unexpectedly")

        return ExtractionResult.failed(
            FailureReason.COULD_NOT_IDENTIFY_LOGO,
            SocialProfiles(),
        )

    def _extract_from_page(self, canonical_url: str) -> ExtractionResult:
        html = self.fetcher.fetch(canonical_url)
        document = parse_html(html)

        social_profiles = extract_social_profiles(document, canonical_url, self.social_domains)
        candidates = scan_logo_candidates(document, canonical_url, self.scoring_rules)

        logger.info(
            "page_scanned",
            url=canonical_url,
            candidates=len(candidates),
            social_platforms=[p.value for p in social_profiles.found_platforms()],
        )

        if not candidates:
            return ExtractionResult.failed(FailureReason.COULD_NOT_IDENTIFY_LOGO, social_profiles)

        return self._select_logo(rank_candidates(candidates), social_profiles)

    def _select_logo(
        self,
        ranked: list[LogoCandidate],
        social_profiles: SocialProfiles,
    ) -> ExtractionResult:
        """Try candidates best-first; stop at the first accept or size rejection."""
        for candidate in ranked:
            check = self.downloader.download_and_validate(candidate.url)

            if check.outcome == CheckOutcome.ACCEPT and check.logo is not None:
                logger.info("logo_selected", url=candidate.url, score=candidate.score)
                return ExtractionResult.succeeded(check.logo, social_profiles)

            if check.outcome == CheckOutcome.HALT:
                logger.info("logo_search_halted", url=candidate.url, size=check.size)
                return ExtractionResult.failed(FailureReason.LOGO_TOO_LARGE, social_profiles)

            logger.debug("logo_candidate_skipped", url=candidate.url, reason=check.reason)

        return ExtractionResult.failed(FailureReason.COULD_NOT_IDENTIFY_LOGO, social_profiles)
