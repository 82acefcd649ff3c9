from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ContentError(Exception):
    """Raised when a content file cannot be turned into an article entry."""


class SchemaValidationError(ContentError):
    def __init__(self, source: str, errors: List[Tuple[str, str]]):
        self.source = source
        self.errors = errors
        self.field = errors[0][0] if errors else ""
        details = "; ".join(f"{f}: {msg}" for f, msg in errors)
        super().__init__(f"{source}: invalid front-matter ({details})")


class Article(BaseModel):
    """Validated front-matter of an article."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str
    description: str
    date: datetime
    author: str = "Anonymous"
    draft: bool = Field(False, strict=True)
    cover_image: Optional[str] = Field(None, alias="coverImage")
    cover_image_alt: Optional[str] = Field(None, alias="coverImageAlt")
    tags: Tuple[str, ...] = ()

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        # YAML hands us date objects for bare YYYY-MM-DD values
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime(v.year, v.month, v.day, tzinfo=timezone.utc)
        if isinstance(v, str):
            return datetime.fromisoformat(v.strip())
        if isinstance(v, (bool, int, float)):
            raise ValueError("expected a calendar date, got a number")
        return v

    @field_validator("date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


@dataclass(frozen=True)
class ArticleEntry:
    id: str  # path relative to the collection root
    slug: str
    body: str
    data: Article


def _error_field(err: Mapping[str, Any]) -> str:
    loc = err.get("loc") or ()
    return ".".join(str(p) for p in loc) or "__root__"


def validate_article(raw: Mapping[str, Any], source: str = "<memory>") -> Article:
    """Validate a raw front-matter mapping. Raises SchemaValidationError."""
    if not isinstance(raw, Mapping):
        raise SchemaValidationError(source, [("__root__", "front-matter must be a mapping")])
    try:
        return Article.model_validate(dict(raw))
    except ValidationError as e:
        errors = [(_error_field(err), err["msg"]) for err in e.errors()]
        raise SchemaValidationError(source, errors) from e
