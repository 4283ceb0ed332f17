"""Run the document grammar over a text buffer and return the concrete parse tree"""

import logging

from lark import Tree

from rstlite.core.grammar.combinators import State, named_rules
from rstlite.core.grammar.rules import DOCUMENT
from rstlite.exceptions import RecognitionError


logger = logging.getLogger(__name__)


def _locate(text: str, position: int) -> tuple[int, int, str]:
    """Return (line, column, line_text) for an offset, all 1-based."""
    line = text.count("\n", 0, position) + 1
    start = text.rfind("\n", 0, position) + 1
    end = text.find("\n", position)
    line_text = text[start:] if end == -1 else text[start:end]
    return line, position - start + 1, line_text


def recognize(text: str) -> Tree:
    """Recognize text as a sequence of top-level blocks.

    Raises RecognitionError when any part of the input cannot be matched;
    there is no partial result.
    """
    state = State(text)
    result = DOCUMENT.match(state, 0)
    if result is None:
        line, column, line_text = _locate(text, state.farthest)
        logger.debug("Recognition failed at offset %d, expected %s", state.farthest, state.expected)
        raise RecognitionError(state.farthest, line, column, line_text, sorted(state.expected))
    (tree,), _ = result
    logger.debug("Recognized %d top-level node(s)", len(tree.children))
    return tree


def grammar_text() -> str:
    """Render every named rule of the document grammar as PEG definitions."""
    return "\n".join(rule.definition() for rule in named_rules(DOCUMENT))
