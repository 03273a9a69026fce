"""Utility for selecting one line of a document."""


def line_at(text: str, line_number: int) -> str:
    """Return the zero-based line of the text, without its line ending."""
    lines = text.splitlines()
    if not 0 <= line_number < len(lines):
        msg = f"Line {line_number + 1} is out of range (document has {len(lines)})"
        raise IndexError(msg)
    return lines[line_number]
