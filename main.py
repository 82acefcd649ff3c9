import sys
import logging
from argparse import ArgumentParser, BooleanOptionalAction
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from blog import config
from blog.content import load_collection
from blog.models import ContentError
from blog.utils import get_published_articles
from builders.base import Builder, write_output
from builders.rss import RssBuilder
from builders.sitemap import SitemapBuilder

log = logging.getLogger("access.build")


def make_builders(outputs: Sequence[str], feed_limit: int = config.FEED_LIMIT) -> List[Builder]:
    available: Dict[str, Builder] = {
        "sitemap": SitemapBuilder(),
        "rss": RssBuilder(limit=feed_limit),
    }
    return [available[name] for name in outputs if name in available]


def build(
    content_dir: Path,
    out_dir: Path,
    include_drafts: bool = False,
    outputs: Optional[Sequence[str]] = None,
    base_url: str = config.SITE_URL,
    site: config.SiteConfig = config.SITE_CONFIG,
) -> List[Path]:
    """Load the collection, keep published articles and write every enabled output."""
    entries = load_collection(content_dir)
    published = get_published_articles(entries, include_drafts)
    hidden = len(entries) - len(published)
    if hidden:
        log.info("%d draft(s) hidden", hidden)

    outputs = config.enabled_outputs() if outputs is None else outputs
    written = []
    for builder in make_builders(outputs):
        text = builder.render(published, site, base_url)
        path = write_output(text, out_dir, builder.filename)
        log.info("%s -> %s", builder.name, path)
        written.append(path)
    return written


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Build sitemap and feed for the access.today articles.")
    parser.add_argument(
        "--content-dir", type=str, default=config.CONTENT_DIR,
        help=f"Articles directory (default: {config.CONTENT_DIR})",
    )
    parser.add_argument(
        "--out-dir", type=str, default=config.OUTPUT_DIR,
        help=f"Output directory (default: {config.OUTPUT_DIR})",
    )
    parser.add_argument(
        "--site-url", type=str, default=config.SITE_URL,
        help="Public site URL used for sitemap and feed links (default: PUBLIC_SITE_URL)",
    )
    parser.add_argument(
        "--drafts", action=BooleanOptionalAction, default=config.DEV,
        help="Include draft articles; --no-drafts hides them (default: on when DEV is set)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    args = build_parser().parse_args(argv)

    config.validate_config(site_url=args.site_url, dev=args.drafts)
    try:
        written = build(
            Path(args.content_dir),
            Path(args.out_dir),
            include_drafts=args.drafts,
            base_url=args.site_url,
        )
    except ContentError as e:
        log.error("Build failed: %s", e)
        return 1
    log.info("Build done: %d file(s) written.", len(written))
    return 0


if __name__ == "__main__":
    sys.exit(main())
