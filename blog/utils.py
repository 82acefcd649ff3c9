import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from blog.models import ArticleEntry

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(frozen=True)
class DateFormatOptions:
    """Subset of Intl.DateTimeFormat options, rendered for en-US."""

    year: Optional[str] = "numeric"  # numeric | 2-digit
    month: Optional[str] = "long"  # long | short | narrow | numeric | 2-digit
    day: Optional[str] = "numeric"  # numeric | 2-digit
    weekday: Optional[str] = None  # long | short | narrow


DEFAULT_DATE_FORMAT = DateFormatOptions()


def _numeric(value: int, style: str) -> str:
    if style == "2-digit":
        return f"{value % 100:02d}"
    return str(value)


def _name(names: Sequence[str], index: int, style: str) -> str:
    full = names[index]
    if style == "short":
        return full[:3]
    if style == "narrow":
        return full[0]
    return full


def format_date(value: date, options: Optional[DateFormatOptions] = None) -> str:
    """Format a date for display, e.g. "January 15, 2024"."""
    opts = options or DEFAULT_DATE_FORMAT
    year = _numeric(value.year, opts.year) if opts.year else ""
    day = _numeric(value.day, opts.day) if opts.day else ""

    if opts.month in ("numeric", "2-digit"):
        parts = [_numeric(value.month, opts.month), day, year]
        text = "/".join(p for p in parts if p)
    elif opts.month:
        month = _name(MONTH_NAMES, value.month - 1, opts.month)
        text = f"{month} {day}".strip() if day else month
        if year:
            text = f"{text}, {year}" if day else f"{text} {year}"
    else:
        text = " ".join(p for p in (day, year) if p)

    if opts.weekday:
        weekday = _name(WEEKDAY_NAMES, value.weekday(), opts.weekday)
        text = f"{weekday}, {text}" if text else weekday
    return text


_SLUG_STRIP = re.compile(r"[^A-Za-z0-9_\s-]")
_SLUG_SEPARATORS = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    text = (text or "").lower()
    text = _SLUG_STRIP.sub("", text)
    text = _SLUG_SEPARATORS.sub("-", text)
    return text.strip("-")


def sort_articles_by_date(entries: Iterable[ArticleEntry]) -> List[ArticleEntry]:
    """Newest first. Entries sharing a date keep their input order."""
    return sorted(entries, key=lambda e: e.data.date, reverse=True)


def filter_drafts(entries: Iterable[ArticleEntry], include_drafts: bool = False) -> List[ArticleEntry]:
    if include_drafts:
        return list(entries)
    return [e for e in entries if not e.data.draft]


def get_published_articles(entries: Iterable[ArticleEntry], include_drafts: bool = False) -> List[ArticleEntry]:
    return sort_articles_by_date(filter_drafts(entries, include_drafts))


def collect_tags(entries: Iterable[ArticleEntry]) -> List[str]:
    seen = set()
    out: List[str] = []
    for entry in entries:
        for tag in entry.data.tags:
            key = tag.lower()
            if key not in seen:
                seen.add(key)
                out.append(tag)
    return out


def join_url(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return base + "/"
    return f"{base}/{path}"


def article_path(entry: ArticleEntry) -> str:
    return f"/articles/{entry.slug}/"


def tag_path(tag: str) -> str:
    return f"/tags/{slugify(tag)}/"
