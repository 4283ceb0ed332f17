"""Semantic document model produced by the transform and level passes"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BlockType(str, Enum):
    """Restrict the types of document blocks to the supported constructs"""
    header = "header"
    paragraph = "paragraph"
    code = "code"


class Header(BaseModel):
    """A section title bounded by a border line below, and optionally above."""
    model_config = ConfigDict(frozen=True)

    type: Literal[BlockType.header] = BlockType.header
    text: str
    border_glyph: str = Field(..., min_length=1, max_length=1)
    double_bordered: bool = False
    level: Optional[int] = None     # ordinal from first-appearance order; None until resolved

    @property
    def style(self) -> tuple[str, bool]:
        return self.border_glyph, self.double_bordered


class Paragraph(BaseModel):
    """Running text; code_follows marks a paragraph that ended in the literal sigil."""
    model_config = ConfigDict(frozen=True)

    type: Literal[BlockType.paragraph] = BlockType.paragraph
    lines: tuple[str, ...]
    code_follows: bool = False


class CodeBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal[BlockType.code] = BlockType.code
    lines: tuple[str, ...]           # indentation-normalized


Block = Annotated[Union[Header, Paragraph, CodeBlock], Field(discriminator="type")]


class Document(BaseModel):
    """Ordered blocks in source order; blank separators are never retained."""
    model_config = ConfigDict(frozen=True)

    blocks: tuple[Block, ...] = ()

    @model_validator(mode="after")
    def _code_blocks_follow_sigil_paragraphs(self) -> "Document":
        for i, block in enumerate(self.blocks):
            prev = self.blocks[i - 1] if i else None
            if isinstance(block, CodeBlock):
                if not (isinstance(prev, Paragraph) and prev.code_follows):
                    raise ValueError(f"code block at index {i} is not preceded by a paragraph ending in '::'")
            elif isinstance(prev, Paragraph) and prev.code_follows:
                raise ValueError(f"paragraph at index {i - 1} ends in '::' but no code block follows")
        if self.blocks and isinstance(self.blocks[-1], Paragraph) and self.blocks[-1].code_follows:
            raise ValueError("document ends with a paragraph ending in '::' and no code block")
        return self

    def headers(self) -> list[Header]:
        return [b for b in self.blocks if isinstance(b, Header)]


class ParsedDoc(BaseModel):
    """A parsed source file: identity, content hash, and its document."""
    path: str
    slug: str
    hash: str                       # sha256 of the raw file text
    text: str
    document: Document

