"""Document-wide header level assignment by first appearance of each border style"""

import logging

from rstlite.core.models import Document, Header


logger = logging.getLogger(__name__)


def header_styles(document: Document) -> dict[tuple[str, bool], int]:
    """Map each distinct (glyph, double_bordered) style to its first-appearance ordinal."""
    levels: dict[tuple[str, bool], int] = {}
    for header in document.headers():
        levels.setdefault(header.style, len(levels))
    return levels


def resolve_header_levels(document: Document) -> Document:
    """Return a copy of document with every Header's level set; other blocks pass through."""
    levels = header_styles(document)
    logger.debug("Header styles in order of appearance: %s", levels)
    blocks = tuple(
        b.model_copy(update={"level": levels[b.style]}) if isinstance(b, Header) else b
        for b in document.blocks
    )
    return document.model_copy(update={"blocks": blocks})
