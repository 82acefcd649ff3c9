import html as htmlmod
import logging
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Sequence

from blog.config import FEED_LIMIT, SiteConfig
from blog.models import ArticleEntry
from blog.utils import article_path, join_url
from builders.base import Builder

log = logging.getLogger("access.builders")


def rfc822_date(value: datetime) -> str:
    return format_datetime(value.astimezone(timezone.utc))


class RssBuilder(Builder):
    name = "rss"
    filename = "rss.xml"

    def __init__(self, limit: int = FEED_LIMIT):
        self.limit = limit

    def _item(self, entry: ArticleEntry, base_url: str) -> str:
        article = entry.data
        link = join_url(base_url, article_path(entry))
        lines = [
            "<item>",
            f"<title>{htmlmod.escape(article.title)}</title>",
            f"<link>{htmlmod.escape(link)}</link>",
            f'<guid isPermaLink="true">{htmlmod.escape(link)}</guid>',
            f"<pubDate>{rfc822_date(article.date)}</pubDate>",
            f"<description>{htmlmod.escape(article.description)}</description>",
            f"<dc:creator>{htmlmod.escape(article.author)}</dc:creator>",
        ]
        lines.extend(f"<category>{htmlmod.escape(tag)}</category>" for tag in article.tags)
        lines.append("</item>")
        return "\n".join(lines)

    def render(self, entries: Sequence[ArticleEntry], site: SiteConfig, base_url: str) -> str:
        """Items follow the order of entries (newest first from get_published_articles)."""
        selected = list(entries)[: max(0, self.limit)]
        channel = [
            "<channel>",
            f"<title>{htmlmod.escape(site.title)}</title>",
            f"<link>{htmlmod.escape(join_url(base_url, '/'))}</link>",
            f"<description>{htmlmod.escape(site.description)}</description>",
            "<language>en-us</language>",
        ]
        if selected:
            newest = max(e.data.date for e in selected)
            channel.append(f"<lastBuildDate>{rfc822_date(newest)}</lastBuildDate>")
        channel.extend(self._item(e, base_url) for e in selected)
        channel.append("</channel>")
        log.info("RSS: %d item(s) (limit=%d)", len(selected), self.limit)
        return "\n".join(
            [
                '<?xml version="1.0" encoding="UTF-8"?>',
                '<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">',
                *channel,
                "</rss>",
            ]
        ) + "\n"
