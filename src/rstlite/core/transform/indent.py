"""Indentation normalization for literal code blocks"""


def normalize_indent(lines: list[tuple[str, str]]) -> list[str]:
    """Strip the smallest leading-whitespace run from every (whitespace, content) line.

    Relative indentation is preserved. Lines with empty content are blank
    gaps inside the block and normalize to "".
    """
    strip = min((len(ws) for ws, content in lines if content), default=0)
    return [ws[strip:] + content if content else "" for ws, content in lines]
