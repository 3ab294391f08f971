"""URL validation and canonicalization for target sites and page references."""

from __future__ import annotations

from urllib.parse import quote, urljoin, urlsplit, urlunsplit

# Ports dropped from the canonical form; these schemes also get "/" as an empty path.
DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Printable ASCII left alone when percent-encoding each component; anything
# else (controls, space, non-ASCII) is always encoded. "%" keeps escapes intact.
_PATH_SAFE = "!$%&'()*+,-./:;=@[]^_|~"
_QUERY_SAFE = "!$%&()*+,-./:;=?@[\\]^_`{|}~"
_FRAGMENT_SAFE = "!#$%&'()*+,-./:;=?@[\\]^_{|}~"

_SINGLE_DOT = frozenset({".", "%2e"})
_DOUBLE_DOT = frozenset({"..", ".%2e", "%2e.", "%2e%2e"})


class UrlValidationError(ValueError):
    """Raised when an input string is not a usable absolute URL."""


class EmptyUrlError(UrlValidationError):
    """Raised when the input is missing or whitespace-only."""


class MalformedUrlError(UrlValidationError):
    """Raised when the input cannot be parsed as an absolute URL."""


def _canonical_host(hostname: str) -> str:
    if ":" in hostname:
        # IPv6 literal; urlsplit strips the brackets
        return f"[{hostname}]"
    if hostname.isascii():
        return hostname
    try:
        return hostname.encode("idna").decode("ascii")
    except UnicodeError as exc:
        msg = f"invalid hostname: {hostname!r}"
        raise MalformedUrlError(msg) from exc


def remove_dot_segments(path: str) -> str:
    """Collapse "." and ".." segments of an absolute path.

    A trailing dot segment leaves a trailing slash; ".." never climbs
    above the root.
    """
    if not path.startswith("/"):
        return path

    segments = path.split("/")[1:]
    output: list[str] = []
    for index, segment in enumerate(segments):
        lowered = segment.lower()
        is_last = index == len(segments) - 1
        if lowered in _DOUBLE_DOT:
            if output:
                output.pop()
            if is_last:
                output.append("")
        elif lowered in _SINGLE_DOT:
            if is_last:
                output.append("")
        else:
            output.append(segment)
    return "/" + "/".join(output)


def canonicalize_url(url: str) -> str:
    """Parse an absolute URL and return its canonical serialized form.

    Rules:
    - Scheme and host are required and lowercased
    - Non-ASCII hosts are IDNA encoded
    - Default ports are dropped
    - "." and ".." path segments are removed; an empty path on
      http(s)-like schemes becomes "/"
    - Path, query and fragment are percent-encoded with the WHATWG URL
      encode sets (a "'" in the query is encoded on special schemes only)

    Raises MalformedUrlError when the URL is not absolute or not parseable.
    """
    candidate = url.strip()
    try:
        parsed = urlsplit(candidate)
        port = parsed.port
    except ValueError as exc:
        raise MalformedUrlError(f"unparseable URL: {candidate!r}") from exc

    scheme = parsed.scheme.lower()
    if not scheme:
        raise MalformedUrlError(f"missing scheme: {candidate!r}")
    if not parsed.netloc or not parsed.hostname:
        raise MalformedUrlError(f"missing host: {candidate!r}")
    if any(ch.isspace() for ch in parsed.netloc):
        raise MalformedUrlError(f"whitespace in host: {candidate!r}")

    netloc = _canonical_host(parsed.hostname)
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        netloc = f"{netloc}:{port}"
    if parsed.username is not None:
        userinfo = quote(parsed.username, safe="%")
        if parsed.password is not None:
            userinfo = f"{userinfo}:{quote(parsed.password, safe='%')}"
        netloc = f"{userinfo}@{netloc}"

    special = scheme in DEFAULT_PORTS
    path = remove_dot_segments(quote(parsed.path, safe=_PATH_SAFE))
    if not path and special:
        path = "/"
    query_safe = _QUERY_SAFE if special else _QUERY_SAFE + "'"

    return urlunsplit(
        (
            scheme,
            netloc,
            path,
            quote(parsed.query, safe=query_safe),
            quote(parsed.fragment, safe=_FRAGMENT_SAFE),
        )
    )


def normalize_target_url(raw: str | None) -> str:
    """Validate caller input and return the canonical target URL.

    Raises EmptyUrlError for missing/blank input and MalformedUrlError when
    the string is not an absolute URL.
    """
    if raw is None or not str(raw).strip():
        raise EmptyUrlError("empty URL")
    return canonicalize_url(str(raw))


def resolve_url(href: str, base_url: str) -> str | None:
    """Resolve a possibly relative reference against a base URL.

    Returns the canonical absolute URL, or None if the result is not a
    valid absolute URL.
    """
    try:
        joined = urljoin(base_url, href.strip())
        return canonicalize_url(joined)
    except ValueError:
        return None
