"""URL extraction and parsing helpers."""

from __future__ import annotations

from urllib.parse import SplitResult, urlsplit
import re

URL_PATTERN = re.compile(r"https?://[^\s]+", re.IGNORECASE)
IPV4_PATTERN = re.compile(r"\b(?:[0-9]{1,3}\.){3}[0-9]{1,3}\b", re.ASCII)
_SCHEME_PATTERN = re.compile(r"^[a-z][a-z0-9+.\-]*:", re.IGNORECASE)

# Schemes that must carry an authority component to be usable.
_HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})
_FORBIDDEN_HOST_CHARS = frozenset(" \t\r\n#%/:<>?@[\\]^|")


def _normalize_authority(raw: str) -> str:
    """Rewrite `https:host` and `http:/host` to the `scheme://host` form."""

    scheme, _, rest = raw.partition(":")
    if scheme.lower() not in _HIERARCHICAL_SCHEMES:
        return raw
    authority = rest.lstrip("/\\")
    return f"{scheme}://{authority}"


def extract_urls(text: str) -> list[str]:
    """Return every HTTP(S) URL occurrence in ``text``, duplicates included."""

    return URL_PATTERN.findall(text or "")


def contains_ipv4(text: str) -> bool:
    return IPV4_PATTERN.search(text or "") is not None


def parse_absolute_url(url: str) -> SplitResult | None:
    """Parse ``url`` as an absolute URL, returning ``None`` when it is not one."""

    raw = (url or "").strip()
    if not _SCHEME_PATTERN.match(raw):
        return None
    try:
        parsed = urlsplit(_normalize_authority(raw))
        # Accessing the port validates it.
        parsed.port
    except ValueError:
        return None
    if parsed.scheme.lower() not in _HIERARCHICAL_SCHEMES:
        return parsed
    host = parsed.hostname or ""
    if not host:
        return None
    if not parsed.netloc.rsplit("@", 1)[-1].startswith("[") and any(
        ch in _FORBIDDEN_HOST_CHARS for ch in host
    ):
        return None
    return parsed


def hostname_labels(parsed: SplitResult) -> list[str]:
    return (parsed.hostname or "").split(".")


def subdomain_depth(parsed: SplitResult) -> int:
    """Number of host labels in front of the registrable ``name.tld`` pair."""

    return len(hostname_labels(parsed)) - 2
