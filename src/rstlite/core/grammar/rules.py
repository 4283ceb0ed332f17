"""Grammar for the supported reStructuredText subset, built from combinators"""

import re

from rstlite.core.grammar.combinators import (
    Choice,
    EndOfInput,
    Hidden,
    Literal,
    Lookahead,
    Not,
    Opt,
    Pattern,
    Repeat,
    Rule,
    Seq,
)


# --- lexical primitives (regex fragments) ---

ANY_CHAR = r"[^\n]"
WORD_CHAR = r"\w"
HSPACE = r"[^\S\n]"

CONTENT_RE = f"{ANY_CHAR}*{WORD_CHAR}{ANY_CHAR}*"
SIGIL = "::"

BORDER_GLYPHS: dict[str, str] = {
    "=": "equals",
    "-": "hyphen",
    "`": "backtick",
    ":": "colon",
    "'": "apostrophe",
    '"': "quote",
    "~": "tilde",
    "^": "caret",
    "_": "underscore",
    "*": "asterisk",
    "+": "plus",
    "#": "hash",
    "<": "less",
    ">": "greater",
}
MIN_BORDER_LENGTH = 4

NEWLINE = Literal("\n")
HSPACE_RUN = Pattern(f"{HSPACE}+", label="HSPACE+")


# --- line-level constructs ---

EMPTY_LINE = Rule("empty_line", Hidden(Pattern(f"{HSPACE}*\n", label="BLANK_LINE")))

CONTENT = Rule("content", Pattern(CONTENT_RE, label="CONTENT"))

CONTENT_LINE = Rule("content_line", Seq(CONTENT, Hidden(NEWLINE)))

CODE_BLOCK_SIGIL = Rule("code_block_sigil", Literal(SIGIL))

CONTENT_LINE_PRE_CODE_BLOCK = Rule(
    "content_line_pre_code_block",
    Seq(
        Rule("content_before_sigil", Pattern(f"{CONTENT_RE}(?={SIGIL}\n)", label="CONTENT")),
        CODE_BLOCK_SIGIL,
        Hidden(NEWLINE),
    ),
)

# A sigil line directly followed by an indented line opens a code block
SIGIL_BEFORE_CODE = Seq(CONTENT_LINE_PRE_CODE_BLOCK, HSPACE_RUN)

BLOCK_END = Choice(EMPTY_LINE, EndOfInput())

# Non-final paragraph line: another content line follows
PARAGRAPH_LINE = Seq(Not(SIGIL_BEFORE_CODE), CONTENT_LINE, Lookahead(CONTENT_LINE))

# Final paragraph line: only a plain paragraph ends without the sigil
PARAGRAPH_LAST_LINE = Seq(Not(CONTENT_LINE_PRE_CODE_BLOCK), CONTENT_LINE, Lookahead(BLOCK_END))


# --- headers ---

def _border(glyph: str, name: str) -> Rule:
    regex = f"{re.escape(glyph)}{{{MIN_BORDER_LENGTH},}}"
    return Rule(f"border_{name}", Seq(Pattern(regex, label=f"'{glyph}'{{{MIN_BORDER_LENGTH},}}"), Hidden(NEWLINE)))


BORDERS: dict[str, Rule] = {glyph: _border(glyph, name) for glyph, name in BORDER_GLYPHS.items()}
BORDER_TAGS: dict[str, str] = {rule.name: glyph for glyph, rule in BORDERS.items()}

HEADER_TEXT = Rule("header_text", Seq(Pattern(CONTENT_RE, label="CONTENT"), Hidden(NEWLINE)))

HEADER = Rule(
    "header",
    Choice(
        *(Seq(border, HEADER_TEXT, border) for border in BORDERS.values()),
        Seq(HEADER_TEXT, Choice(*BORDERS.values())),
    ),
)


# --- blocks ---

PARAGRAPH = Rule(
    "paragraph",
    Seq(Repeat(PARAGRAPH_LINE), PARAGRAPH_LAST_LINE),
)

PARAGRAPH_PRE_CODE_BLOCK = Rule(
    "paragraph_pre_code_block",
    Seq(Repeat(PARAGRAPH_LINE), CONTENT_LINE_PRE_CODE_BLOCK),
)

CODE_BLOCK_LINE = Rule(
    "code_block_line",
    Seq(
        Rule("whitespace_prefix", HSPACE_RUN),
        Rule("code_text", Pattern(rf"\S{ANY_CHAR}*", label="CODE_TEXT")),
        Hidden(NEWLINE),
    ),
)

CODE_BLOCK_GAP = Rule("code_block_gap", Hidden(Pattern(f"{HSPACE}*\n", label="BLANK_LINE")))

CODE_BLOCK = Rule(
    "code_block",
    Seq(
        Hidden(Repeat(EMPTY_LINE)),
        CODE_BLOCK_LINE,
        Repeat(Seq(Repeat(CODE_BLOCK_GAP), CODE_BLOCK_LINE)),
    ),
)

BLOCK = Choice(HEADER, PARAGRAPH, Seq(PARAGRAPH_PRE_CODE_BLOCK, CODE_BLOCK))

DOCUMENT = Rule(
    "document",
    Seq(
        Repeat(EMPTY_LINE),
        Opt(Seq(BLOCK, Repeat(Seq(Repeat(EMPTY_LINE, 1), BLOCK)))),
        Repeat(EMPTY_LINE),
        EndOfInput(),
    ),
)
