"""Tag-dispatched conversion of the concrete parse tree into a Document"""

import logging

from lark import Transformer, Tree
from lark.exceptions import VisitError
from lark.visitors import Discard

from rstlite.core.grammar.rules import BORDER_TAGS
from rstlite.core.models import CodeBlock, Document, Header, Paragraph
from rstlite.core.transform.indent import normalize_indent
from rstlite.exceptions import TransformError


logger = logging.getLogger(__name__)


class DocumentTransformer(Transformer):
    """Walk the parse tree bottom-up; each method handles one grammar rule."""

    def document(self, children) -> Document:
        logger.debug("Transformed %d block(s)", len(children))
        return Document(blocks=children)

    def empty_line(self, _children):
        return Discard

    # --- headers ---

    def header(self, children) -> Header:
        if len(children) == 3:
            glyph, text, _ = children
            return Header(text=text.strip(), border_glyph=glyph, double_bordered=True)
        text, glyph = children
        return Header(text=text.strip(), border_glyph=glyph)

    def header_text(self, children) -> str:
        return "".join(children)

    def __default__(self, data, children, meta):
        # Border rules form a closed family, one rule per glyph
        if data in BORDER_TAGS:
            return BORDER_TAGS[data]
        raise TransformError(f"No transform for parse tree node {data!r}")

    # --- paragraphs ---

    def paragraph(self, children) -> Paragraph:
        return Paragraph(lines=children)

    def paragraph_pre_code_block(self, children) -> Paragraph:
        return Paragraph(lines=children, code_follows=True)

    def content_line(self, children) -> str:
        return "".join(children)

    def content_line_pre_code_block(self, children) -> str:
        return "".join(children)

    def content(self, children) -> str:
        return "".join(children)

    def content_before_sigil(self, children) -> str:
        return "".join(children)

    def code_block_sigil(self, _children):
        return Discard

    # --- code blocks ---

    def code_block(self, children) -> CodeBlock:
        return CodeBlock(lines=normalize_indent(children))

    def code_block_line(self, children) -> tuple[str, str]:
        whitespace, text = children
        return whitespace, text

    def code_block_gap(self, _children) -> tuple[str, str]:
        return "", ""

    def whitespace_prefix(self, children) -> str:
        return "".join(children)

    def code_text(self, children) -> str:
        return "".join(children)


_transformer = DocumentTransformer()


def transform(tree: Tree) -> Document:
    """Convert a recognizer parse tree into a Document with unresolved header levels."""
    try:
        return _transformer.transform(tree)
    except VisitError as e:
        raise TransformError(f"Failed to transform {e.rule!r} node: {e.orig_exc}") from e.orig_exc
