"""PEG combinators: ordered choice, repetition, predicates, and named rules

A grammar is a graph of combinator objects built once at import time. Each
combinator matches at a position and returns the children it produced plus the
new position, or None on failure. Named rules wrap their children in a
lark.Tree so the recognizer output is a concrete parse tree.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from lark import Tree


Match = tuple[list, int]


@dataclass
class State:
    """Per-parse bookkeeping: the input buffer and the farthest failure."""
    text: str
    farthest: int = 0
    expected: set[str] = field(default_factory=set)
    silent: int = 0              # >0 while inside a lookahead predicate

    def fail(self, pos: int, what: str) -> None:
        if self.silent:
            return
        if pos > self.farthest:
            self.farthest = pos
            self.expected = {what}
        elif pos == self.farthest:
            self.expected.add(what)


class Parser:
    """Base combinator."""

    def match(self, state: State, pos: int) -> Match | None:
        raise NotImplementedError

    def peg(self) -> str:
        """Render as PEG notation, referencing named rules by name."""
        raise NotImplementedError


class Pattern(Parser):
    """Anchored regular expression; produces the matched text."""

    def __init__(self, regex: str, label: Optional[str] = None):
        self.regex = re.compile(regex)
        self.label = label or f"/{regex}/"

    def match(self, state, pos):
        m = self.regex.match(state.text, pos)
        if m is None:
            state.fail(pos, self.label)
            return None
        return [m.group(0)], m.end()

    def peg(self):
        return self.label


class Literal(Parser):

    def __init__(self, literal: str):
        self.literal = literal

    def match(self, state, pos):
        if state.text.startswith(self.literal, pos):
            return [self.literal], pos + len(self.literal)
        state.fail(pos, repr(self.literal))
        return None

    def peg(self):
        return repr(self.literal)


class Seq(Parser):

    def __init__(self, *parts: Parser):
        self.parts = parts

    def match(self, state, pos):
        children = []
        for part in self.parts:
            result = part.match(state, pos)
            if result is None:
                return None
            found, pos = result
            children.extend(found)
        return children, pos

    def peg(self):
        return " ".join(_group(p) for p in self.parts)


class Choice(Parser):
    """Ordered choice: the first alternative that matches wins."""

    def __init__(self, *alternatives: Parser):
        self.alternatives = alternatives

    def match(self, state, pos):
        for alt in self.alternatives:
            result = alt.match(state, pos)
            if result is not None:
                return result
        return None

    def peg(self):
        return " / ".join(_group(a) for a in self.alternatives)


class Repeat(Parser):
    """Greedy repetition with a lower bound; never backtracks into itself."""

    def __init__(self, inner: Parser, minimum: int = 0):
        self.inner = inner
        self.minimum = minimum

    def match(self, state, pos):
        children, count = [], 0
        while True:
            result = self.inner.match(state, pos)
            if result is None:
                break
            found, new_pos = result
            if new_pos == pos:
                break
            children.extend(found)
            pos = new_pos
            count += 1
        if count < self.minimum:
            return None
        return children, pos

    def peg(self):
        suffix = {0: "*", 1: "+"}.get(self.minimum, f"{{{self.minimum},}}")
        return _group(self.inner, atom=True) + suffix


class Opt(Parser):

    def __init__(self, inner: Parser):
        self.inner = inner

    def match(self, state, pos):
        result = self.inner.match(state, pos)
        return ([], pos) if result is None else result

    def peg(self):
        return _group(self.inner, atom=True) + "?"


class Lookahead(Parser):
    """Positive predicate: succeeds without consuming or producing."""

    def __init__(self, inner: Parser):
        self.inner = inner

    def match(self, state, pos):
        state.silent += 1
        try:
            result = self.inner.match(state, pos)
        finally:
            state.silent -= 1
        if result is None:
            state.fail(pos, f"&{self.inner.peg()}")
            return None
        return [], pos

    def peg(self):
        return "&" + _group(self.inner, atom=True)


class Not(Parser):
    """Negative predicate."""

    def __init__(self, inner: Parser):
        self.inner = inner

    def match(self, state, pos):
        state.silent += 1
        try:
            result = self.inner.match(state, pos)
        finally:
            state.silent -= 1
        if result is not None:
            state.fail(pos, f"!{self.inner.peg()}")
            return None
        return [], pos

    def peg(self):
        return "!" + _group(self.inner, atom=True)


class Hidden(Parser):
    """Match and discard: consumes input but contributes no children."""

    def __init__(self, inner: Parser):
        self.inner = inner

    def match(self, state, pos):
        result = self.inner.match(state, pos)
        if result is None:
            return None
        return [], result[1]

    def peg(self):
        return "<" + self.inner.peg() + ">"


class EndOfInput(Parser):

    def match(self, state, pos):
        if pos == len(state.text):
            return [], pos
        state.fail(pos, "end of input")
        return None

    def peg(self):
        return "EOF"


class Rule(Parser):
    """Named rule: wraps its children in a Tree tagged with the rule name."""

    def __init__(self, name: str, body: Parser):
        self.name = name
        self.body = body

    def match(self, state, pos):
        result = self.body.match(state, pos)
        if result is None:
            return None
        children, pos = result
        return [Tree(self.name, children)], pos

    def peg(self):
        return self.name

    def definition(self) -> str:
        return f"{self.name} <- {self.body.peg()}"


def _group(parser: Parser, atom: bool = False) -> str:
    """Parenthesize composite expressions when nested."""
    text = parser.peg()
    if isinstance(parser, Choice) or (atom and isinstance(parser, Seq)):
        return f"( {text} )"
    return text


def named_rules(root: Rule) -> list[Rule]:
    """Collect every Rule reachable from root, in first-reference order."""
    seen: dict[int, Rule] = {}
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Rule):
            if id(node) in seen:
                continue
            seen[id(node)] = node
            stack.append(node.body)
            continue
        for attr in ("inner", "parts", "alternatives"):
            value = getattr(node, attr, None)
            if value is None:
                continue
            if isinstance(value, Parser):
                stack.append(value)
            else:
                stack.extend(reversed(value))
    return list(seen.values())
