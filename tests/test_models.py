from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from blog.models import ArticleEntry, ContentError, SchemaValidationError, validate_article


def _raw(**overrides):
    data = {
        "title": "Accessible forms",
        "description": "Labels, hints and errors.",
        "date": date(2024, 1, 15),
    }
    data.update(overrides)
    return data


# ── defaults ──────────────────────────────────────────────────

class TestDefaults:
    def test_defaults_applied(self):
        article = validate_article(_raw())
        assert article.author == "Anonymous"
        assert article.draft is False
        assert article.tags == ()
        assert article.cover_image is None
        assert article.cover_image_alt is None

    def test_front_matter_aliases(self):
        article = validate_article(_raw(coverImage="/img/a.png", coverImageAlt="A chart"))
        assert article.cover_image == "/img/a.png"
        assert article.cover_image_alt == "A chart"

    def test_cover_image_without_alt_allowed(self):
        article = validate_article(_raw(coverImage="/img/a.png"))
        assert article.cover_image_alt is None

    def test_tags_keep_order_and_duplicates(self):
        article = validate_article(_raw(tags=["b", "a", "b"]))
        assert article.tags == ("b", "a", "b")

    def test_unknown_keys_ignored(self):
        article = validate_article(_raw(layout="post"))
        assert not hasattr(article, "layout")


# ── dates ─────────────────────────────────────────────────────

class TestDates:
    def test_bare_date_is_utc_midnight(self):
        article = validate_article(_raw(date=date(2024, 1, 15)))
        assert article.date == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_iso_string(self):
        article = validate_article(_raw(date="2024-06-01"))
        assert article.date == datetime(2024, 6, 1, tzinfo=timezone.utc)

    def test_naive_datetime_assumed_utc(self):
        article = validate_article(_raw(date=datetime(2024, 6, 1, 9, 30)))
        assert article.date.tzinfo == timezone.utc
        assert article.date.hour == 9

    def test_aware_datetime_kept(self):
        tz = timezone(timedelta(hours=2))
        article = validate_article(_raw(date=datetime(2024, 6, 1, 9, 30, tzinfo=tz)))
        assert article.date.utcoffset() == timedelta(hours=2)

    def test_impossible_date_rejected(self):
        with pytest.raises(SchemaValidationError) as exc:
            validate_article(_raw(date="2024-02-30"))
        assert exc.value.field == "date"

    def test_garbage_date_rejected(self):
        with pytest.raises(SchemaValidationError) as exc:
            validate_article(_raw(date="next tuesday"))
        assert exc.value.field == "date"

    @pytest.mark.parametrize("value", [2024, 1718000000.5, True])
    def test_numeric_date_rejected(self, value):
        with pytest.raises(SchemaValidationError) as exc:
            validate_article(_raw(date=value))
        assert exc.value.field == "date"


# ── failures ──────────────────────────────────────────────────

class TestValidationErrors:
    def test_missing_title(self):
        raw = _raw()
        del raw["title"]
        with pytest.raises(SchemaValidationError) as exc:
            validate_article(raw, source="missing-title.md")
        assert exc.value.field == "title"
        assert exc.value.source == "missing-title.md"
        assert "title" in str(exc.value)
        assert "missing-title.md" in str(exc.value)

    def test_missing_date(self):
        raw = _raw()
        del raw["date"]
        with pytest.raises(SchemaValidationError) as exc:
            validate_article(raw)
        assert exc.value.field == "date"

    @pytest.mark.parametrize("value", ["yes", "1", 1, "no", 0])
    def test_draft_must_be_boolean(self, value):
        with pytest.raises(SchemaValidationError) as exc:
            validate_article(_raw(draft=value))
        assert exc.value.field == "draft"

    def test_draft_boolean_accepted(self):
        assert validate_article(_raw(draft=True)).draft is True

    def test_title_must_be_text(self):
        with pytest.raises(SchemaValidationError) as exc:
            validate_article(_raw(title=42))
        assert exc.value.field == "title"

    def test_tags_must_be_strings(self):
        with pytest.raises(SchemaValidationError) as exc:
            validate_article(_raw(tags=["ok", {"nested": 1}]))
        assert exc.value.field.startswith("tags")

    def test_collects_every_error(self):
        with pytest.raises(SchemaValidationError) as exc:
            validate_article({"date": "2024-01-01"})
        fields = [f for f, _ in exc.value.errors]
        assert "title" in fields
        assert "description" in fields

    def test_not_a_mapping(self):
        with pytest.raises(SchemaValidationError):
            validate_article(["title"])

    def test_is_content_error(self):
        assert issubclass(SchemaValidationError, ContentError)

    def test_default_source(self):
        with pytest.raises(SchemaValidationError) as exc:
            validate_article({})
        assert exc.value.source == "<memory>"


# ── immutability ──────────────────────────────────────────────

class TestImmutability:
    def test_article_frozen(self):
        article = validate_article(_raw())
        with pytest.raises(ValidationError):
            article.title = "changed"

    def test_entry_frozen(self):
        entry = ArticleEntry(id="a.md", slug="a", body="", data=validate_article(_raw()))
        with pytest.raises(AttributeError):
            entry.slug = "b"
