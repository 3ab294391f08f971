"""Logo candidate discovery and heuristic scoring over <img> elements.

Every JPEG/PNG image on the page is a candidate. Its score comes from
keywords found in the lowercased src, alt, id and class attributes, plus a
bonus when the file itself is named "logo". Scoring is pure and
deterministic; ranking keeps discovery order for equal scores.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from src.domains.discovery.core.html_document import attr_text
from src.domains.discovery.core.url_normalization import resolve_url
from src.models.company_logo import LogoCandidate

IMAGE_EXTENSION_PATTERN: re.Pattern[str] = re.compile(r"\.(jpe?g|png)(\?|#|$)")
LOGO_PATH_PATTERN: re.Pattern[str] = re.compile(r"/logo\.")
LOGO_PATH_BONUS = 5


@dataclass(frozen=True)
class ScoringRule:
    """Adds points once when any keyword appears in the attribute haystack."""

    keywords: tuple[str, ...]
    points: int

    def applies_to(self, haystack: str) -> bool:
        return any(keyword in haystack for keyword in self.keywords)


DEFAULT_SCORING_RULES: tuple[ScoringRule, ...] = (
    ScoringRule(("logo",), 10),
    ScoringRule(("brand",), 4),
    ScoringRule(("header", "navbar"), 2),
    ScoringRule(("site", "main"), 1),
)


def is_candidate_src(src: str) -> bool:
    """Check if an <img> src can be a logo candidate (non-inline JPEG/PNG)."""
    lower_src = src.strip().lower()
    if not lower_src or lower_src.startswith("data:"):
        return False
    return bool(IMAGE_EXTENSION_PATTERN.search(lower_src))


def score_image_candidate(
    src: str,
    alt: str = "",
    element_id: str = "",
    css_class: str = "",
    rules: tuple[ScoringRule, ...] = DEFAULT_SCORING_RULES,
) -> int:
    """Compute the additive relevance score for one image element."""
    lower_src = src.lower()
    haystack = f"{lower_src} {alt.lower()} {element_id.lower()} {css_class.lower()}"

    score = sum(rule.points for rule in rules if rule.applies_to(haystack))
    if LOGO_PATH_PATTERN.search(lower_src):
        score += LOGO_PATH_BONUS
    return score


def scan_logo_candidates(
    document: Any,
    base_url: str,
    rules: tuple[ScoringRule, ...] = DEFAULT_SCORING_RULES,
) -> list[LogoCandidate]:
    """Collect scored logo candidates in document order."""
    candidates: list[LogoCandidate] = []

    for tag in document.find_all("img"):
        src = attr_text(tag, "src").strip()
        if not is_candidate_src(src):
            continue

        absolute_url = resolve_url(src, base_url)
        if absolute_url is None:
            continue

        score = score_image_candidate(
            src,
            alt=attr_text(tag, "alt"),
            element_id=attr_text(tag, "id"),
            css_class=attr_text(tag, "class"),
            rules=rules,
        )
        candidates.append(LogoCandidate(url=absolute_url, score=score))

    return candidates


def rank_candidates(candidates: list[LogoCandidate]) -> list[LogoCandidate]:
    """Best score first; equal scores keep discovery order."""
    return sorted(candidates, key=lambda candidate: candidate.score, reverse=True)
