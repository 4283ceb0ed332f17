"""File discovery, text normalization, and the recognize -> transform -> resolve pipeline"""

import logging
from pathlib import Path

from rstlite.core.grammar.recognizer import recognize
from rstlite.core.models import Document, ParsedDoc
from rstlite.core.transform.levels import resolve_header_levels
from rstlite.core.transform.transformer import transform
from rstlite.core.utils import sha256, slugify


logger = logging.getLogger(__name__)

RST_EXTENSIONS = {'.rst', '.txt'}


def _normalize_newlines(text: str) -> str:
    """Convert CRLF/CR terminators to LF and terminate the final line."""
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    if text and not text.endswith('\n'):
        text += '\n'
    return text


def parse_text(text: str) -> Document:
    """Parse a complete text buffer into a Document with resolved header levels."""
    tree = recognize(_normalize_newlines(text))
    return resolve_header_levels(transform(tree))


def discover_files(path: Path) -> list[Path]:
    """Return sorted .rst/.txt files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in RST_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in RST_EXTENSIONS)


def parse_file(path: Path, encoding: str = 'utf-8') -> ParsedDoc:
    """Read and parse a single source file into a ParsedDoc."""
    raw = path.read_text(encoding=encoding)
    document = parse_text(raw)
    logger.debug("Parsed %s into %d block(s)", path, len(document.blocks))
    return ParsedDoc(
        path=str(path),
        slug=slugify(path.stem),
        hash=sha256(raw),
        text=raw,
        document=document,
    )
