"""HTTP header parsing utilities."""

from __future__ import annotations

from collections.abc import Mapping

SUPPORTED_IMAGE_TYPE_PREFIXES: tuple[str, ...] = ("image/jpeg", "image/jpg", "image/png")


def extract_content_type(headers: Mapping[str, str]) -> str:
    """Extract the raw Content-Type value from headers (case-insensitive key).

    Returns the lowercased value with parameters kept, or "" when absent.
    """
    for key, value in headers.items():
        if key.lower() == "content-type":
            return (value or "").strip().lower()
    return ""


def is_supported_image_type(content_type: str) -> bool:
    """Check if a content type declares a JPEG or PNG image.

    Only the declared type is inspected; the body is not sniffed.
    """
    return content_type.lower().startswith(SUPPORTED_IMAGE_TYPE_PREFIXES)
