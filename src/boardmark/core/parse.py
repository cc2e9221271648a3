"""Note file discovery and frontmatter extraction"""

import re
from pathlib import Path
from typing import Any

import yaml

from boardmark.core.models import ParsedNote
from boardmark.core.utils.slug import slugify


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
NOTE_EXTENSIONS = {'.txt', '.md'}


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .txt/.md notes under path, or [path] if a single note file."""
    if path.is_file():
        return [path] if path.suffix in NOTE_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in NOTE_EXTENSIONS)


def parse_file(path: Path) -> ParsedNote:
    """Read a single note file into a ParsedNote."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    slug = slugify(str(frontmatter.get('slug') or path.stem)) or 'note'
    return ParsedNote(
        path=path,
        slug=slug,
        raw=raw,
        content=body,
        frontmatter=frontmatter,
    )
