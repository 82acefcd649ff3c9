import html as htmlmod
import logging
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from blog.config import SiteConfig
from blog.models import ArticleEntry
from blog.utils import article_path, collect_tags, join_url, tag_path
from builders.base import Builder

log = logging.getLogger("access.builders")

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


class SitemapBuilder(Builder):
    name = "sitemap"
    filename = "sitemap.xml"

    def urls(self, entries: Sequence[ArticleEntry], site: SiteConfig, base_url: str) -> List[Tuple[str, Optional[datetime]]]:
        out: List[Tuple[str, Optional[datetime]]] = []
        seen = set()

        def add(path: str, lastmod: Optional[datetime] = None) -> None:
            loc = join_url(base_url, path)
            if loc in seen:
                return
            seen.add(loc)
            out.append((loc, lastmod))

        for item in site.nav:
            add(item.href)
        for entry in entries:
            add(article_path(entry), entry.data.date)
        for tag in collect_tags(entries):
            add(tag_path(tag))
        return out

    def render(self, entries: Sequence[ArticleEntry], site: SiteConfig, base_url: str) -> str:
        items = []
        for loc, lastmod in self.urls(entries, site, base_url):
            lines = ["<url>", f"<loc>{htmlmod.escape(loc)}</loc>"]
            if lastmod:
                lines.append(f"<lastmod>{lastmod.date().isoformat()}</lastmod>")
            lines.append("</url>")
            items.append("\n".join(lines))
        log.info("Sitemap: %d url(s)", len(items))
        return "\n".join(
            [
                '<?xml version="1.0" encoding="UTF-8"?>',
                f'<urlset xmlns="{SITEMAP_NS}">',
                *items,
                "</urlset>",
            ]
        ) + "\n"
