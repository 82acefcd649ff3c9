import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence, Union

from blog.config import SiteConfig
from blog.models import ArticleEntry


class Builder(ABC):
    name: str
    filename: str

    @abstractmethod
    def render(self, entries: Sequence[ArticleEntry], site: SiteConfig, base_url: str) -> str:
        ...


def write_output(text: str, out_dir: Union[str, Path], filename: str) -> Path:
    """Atomic write of a generated file."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / filename
    tmp = path.with_name(f"{path.name}.tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(text)
    os.replace(tmp, path)
    return path
