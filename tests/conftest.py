"""Shared test fixtures for the company logo scraper."""

from __future__ import annotations

from io import BytesIO
from typing import Any
from unittest.mock import MagicMock

import pytest
from PIL import Image


def make_response(
    status_code: int = 200,
    content: bytes = b"",
    content_type: str | None = None,
    text: str | None = None,
) -> MagicMock:
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = {"Content-Type": content_type} if content_type else {}
    response.content = content
    response.iter_content.side_effect = lambda chunk_size=1, **kwargs: (
        content[i : i + chunk_size] for i in range(0, len(content), chunk_size)
    )
    response.text = text if text is not None else content.decode("utf-8", errors="replace")
    return response


class FakeSession:
    """Serves canned responses (or raises canned exceptions) per URL."""

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.requested: list[str] = []

    def get(self, url: str, **kwargs: Any) -> Any:
        self.requested.append(url)
        route = self.routes.get(url)
        if route is None:
            return make_response(status_code=404, text="not found")
        if isinstance(route, BaseException):
            raise route
        return route


@pytest.fixture
def response_factory() -> Any:
    """Factory for mock requests.Response objects."""
    return make_response


@pytest.fixture
def session_factory() -> Any:
    """Factory for FakeSession objects keyed by URL."""
    return FakeSession


@pytest.fixture
def png_bytes() -> bytes:
    """A small real PNG image."""
    img = Image.new("RGB", (64, 32), color="red")
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    """A small real JPEG image."""
    img = Image.new("RGB", (48, 48), color="blue")
    buf = BytesIO()
    img.save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
def sample_company_html() -> str:
    """Company homepage with a header logo, other images and social links."""
    return """<!DOCTYPE html>
<html>
<head>
    <title>Acme Corp</title>
    <link rel="icon" href="/favicon.ico">
</head>
<body>
    <header class="navbar">
        <a href="/"><img src="/static/img/logo.png" alt="Acme" class="site-logo"></a>
    </header>
    <main>
        <h1>Welcome to Acme Corp</h1>
        <img src="https://cdn.acme.com/hero-banner.jpg" alt="Our team">
        <img src="/icons/arrow.svg" alt="arrow">
        <img src="data:image/png;base64,iVBORw0KGgo=" alt="inline logo">
    </main>
    <footer>
        <a href="https://m.facebook.com/acme">Facebook</a>
        <a href="https://www.facebook.com/acme-second">Facebook again</a>
        <a href="https://x.com/acmecorp">X</a>
        <a href="https://www.linkedin.com/company/acme-corp">LinkedIn</a>
        <a href="https://youtu.be/abc123">Video</a>
        <a href="mailto:hello@acme.com">Email</a>
        <a href="/about">About</a>
    </footer>
</body>
</html>"""


@pytest.fixture
def html_without_logo_candidates() -> str:
    """Page with images, none of them JPEG/PNG, plus one social link."""
    return """<html><body>
    <img src="/logo.svg" class="logo">
    <img src="/banner.gif">
    <img src="/photo.webp">
    <img src="">
    <a href="https://instagram.com/acme">Instagram</a>
</body></html>"""
