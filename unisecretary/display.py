"""Small helpers for console presentation."""


def underline_text(text: str) -> str:
    """Return ``text`` followed by a line of dashes as long as the text."""
    return f"{text}\n{'-' * len(text)}"