"""Load the articles collection from markdown files with YAML front-matter."""

import logging
from pathlib import Path
from typing import List, Union

import frontmatter
import yaml

from blog.models import ArticleEntry, ContentError, validate_article
from blog.utils import slugify

log = logging.getLogger("access.content")

CONTENT_EXTENSIONS = (".md", ".mdx")


def iter_content_files(content_dir: Path) -> List[Path]:
    files = [
        p for p in content_dir.rglob("*")
        if p.is_file() and p.suffix in CONTENT_EXTENSIONS and not p.name.startswith("_")
    ]
    return sorted(files, key=lambda p: p.relative_to(content_dir).as_posix())


def load_entry(path: Path, content_dir: Path) -> ArticleEntry:
    entry_id = path.relative_to(content_dir).as_posix()
    try:
        post = frontmatter.load(str(path))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ContentError(f"{entry_id}: unreadable content file: {e}") from e

    data = validate_article(post.metadata, source=entry_id)
    slug_source = path.relative_to(content_dir).with_suffix("").as_posix()
    slug = "/".join(slugify(part) for part in slug_source.split("/"))
    return ArticleEntry(id=entry_id, slug=slug, body=post.content, data=data)


def load_collection(content_dir: Union[str, Path]) -> List[ArticleEntry]:
    """Load and validate every article under content_dir.

    The first invalid file aborts the load with a ContentError (or its
    SchemaValidationError subclass) naming the file.
    """
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        raise ContentError(f"Content directory not found: {content_dir}")

    entries = []
    for path in iter_content_files(content_dir):
        entry = load_entry(path, content_dir)
        log.debug("Loaded %s (draft=%s)", entry.id, entry.data.draft)
        entries.append(entry)
    log.info("Loaded %d article(s) from %s", len(entries), content_dir)
    return entries
