"""Centralized configuration for the access.today site build."""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from urllib.parse import urlparse

log = logging.getLogger("access.config")


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# =========================
# Build
# =========================
SITE_URL: str = os.getenv("PUBLIC_SITE_URL", "http://localhost:4321")
DEV: bool = _env_bool("DEV")
CONTENT_DIR: str = os.getenv("CONTENT_DIR", "src/content/articles")
OUTPUT_DIR: str = os.getenv("OUTPUT_DIR", "dist")
BUILD_OUTPUTS: str = os.getenv("BUILD_OUTPUTS", "sitemap,rss")
FEED_LIMIT: int = int(os.getenv("FEED_LIMIT", "20"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

KNOWN_OUTPUTS: Tuple[str, ...] = ("sitemap", "rss")


# =========================
# Site metadata (read by templates)
# =========================
@dataclass(frozen=True)
class NavItem:
    label: str
    href: str


@dataclass(frozen=True)
class SocialLinks:
    github: Optional[str] = None
    linkedin: Optional[str] = None


@dataclass(frozen=True)
class SiteConfig:
    name: str
    title: str
    description: str
    url: str
    author: str
    social: SocialLinks = field(default_factory=SocialLinks)
    nav: Tuple[NavItem, ...] = ()


SITE_CONFIG = SiteConfig(
    name="access.today",
    title="access.today",
    description="A blog about accessibility, technology, and inclusive design by Charles Hall.",
    url="https://access.today",
    author="Charles Hall",
    social=SocialLinks(github="github-username", linkedin="linkedin-username"),
    nav=(
        NavItem(label="Home", href="/"),
        NavItem(label="Articles", href="/articles"),
    ),
)


def validate_config(site_url: Optional[str] = None, dev: Optional[bool] = None) -> None:
    """Validate build settings. Call at startup."""
    site_url = SITE_URL if site_url is None else site_url
    dev = DEV if dev is None else dev
    parsed = urlparse(site_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise EnvironmentError(f"Invalid PUBLIC_SITE_URL: {site_url!r} (expected an absolute http(s) URL)")
    if not dev and parsed.hostname in ("localhost", "127.0.0.1"):
        log.warning("Production build targets %s: sitemap and feed links will point at localhost.", site_url)


def enabled_outputs(raw: Optional[str] = None) -> List[str]:
    """Parse BUILD_OUTPUTS into a deduplicated list of known output names."""
    raw = BUILD_OUTPUTS if raw is None else raw
    out: List[str] = []
    for name in raw.split(","):
        name = name.strip().lower()
        if not name:
            continue
        if name not in KNOWN_OUTPUTS:
            log.warning("Unknown build output ignored: %s", name)
            continue
        if name not in out:
            out.append(name)
    return out
