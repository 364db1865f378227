"""PR title/body extraction from README.md."""

from typing import Iterable, List, Tuple

TITLE_STRIP_CHARS = "# "


def extract_title(line: str) -> str:
    """Drop the leading run of ``#`` and spaces: ``"## Foo"`` -> ``"Foo"``."""
    return line.lstrip(TITLE_STRIP_CHARS)


def extract_description(lines: Iterable[str]) -> Tuple[str, str]:
    """Split a document into ``(title, body)``.

    The first line that still has text after :func:`extract_title` is the
    title; every line after it is the body, joined with ``\\n``.
    """
    title = ""
    body_lines: List[str] = []

    for line in lines:
        if not title:
            title = extract_title(line)
        else:
            body_lines.append(line)

    return title, "\n".join(body_lines)


__all__ = ["TITLE_STRIP_CHARS", "extract_title", "extract_description"]
