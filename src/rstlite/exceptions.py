"""Custom exceptions for rstlite."""

from typing import Optional


class RstliteError(Exception):
    """Base exception for rstlite operations."""


class RecognitionError(RstliteError):
    """Input could not be matched against the grammar.

    Carries the offset of the farthest point the recognizer reached, its
    1-based line and column, and the text of the offending line.
    """

    def __init__(self, position: int, line: int, column: int, text: str, expected: Optional[list[str]] = None):
        self.position = position
        self.line = line
        self.column = column
        self.text = text
        self.expected = expected or []
        message = f"Unrecognized input at line {line}, column {column}: {text!r}"
        if self.expected:
            message += f" (expected {' or '.join(self.expected)})"
        super().__init__(message)


class TransformError(RstliteError):
    """A parse tree node reached the transform with a tag it does not handle."""


class PipelineError(RstliteError):
    """Error while reading, parsing, or exporting a source file."""
