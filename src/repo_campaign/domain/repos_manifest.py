"""repos.txt parsing in the domain layer.

Manifest format, one entry per line::

    # comment
    org/repo
    host/org/repo
    org/repo@branch
"""

from typing import Iterable, List, Set

from .errors import ParseError
from .models import RepoRef

COMMENT_PREFIX = "#"
SEGMENT_SEPARATOR = "/"
BRANCH_SEPARATOR = "@"


def is_ignored_line(line: str) -> bool:
    """Blank lines and ``#`` comments carry no entry."""
    return not line or line.startswith(COMMENT_PREFIX)


def parse_repo_line(line: str, filename: str) -> RepoRef:
    """Parse one manifest line into a :class:`RepoRef`.

    Raises:
        ParseError: the line is not ``[host/]org/repo[@branch]``.
    """
    segments = line.split(SEGMENT_SEPARATOR)
    if len(segments) == 2:
        host = ""
        org_name, repo_name = segments
    elif len(segments) == 3:
        host, org_name, repo_name = segments
    else:
        raise ParseError(line, filename)

    repo_parts = repo_name.split(BRANCH_SEPARATOR)
    if len(repo_parts) == 1:
        branch_name = ""
        full_repo_name = line
    elif len(repo_parts) == 2:
        repo_name, branch_name = repo_parts
        full_repo_name = line[: len(line) - len(branch_name) - 1]
    else:
        raise ParseError(line, filename, "多个 @ 分支后缀")

    if not org_name or not repo_name:
        raise ParseError(line, filename, "组织名或仓库名为空")

    return RepoRef(
        host=host,
        org_name=org_name,
        repo_name=repo_name,
        full_repo_name=full_repo_name,
        branch_name=branch_name,
    )


def parse_repos_lines(lines: Iterable[str], filename: str) -> List[RepoRef]:
    """Parse manifest lines, keeping order and dropping repeated raw lines.

    Lines are compared as written: ``org/repo`` and ``org/repo `` are two
    entries. The first bad line aborts the parse and nothing is returned.
    """
    seen: Set[str] = set()
    repos: List[RepoRef] = []

    for line in lines:
        if is_ignored_line(line):
            continue
        if line in seen:
            continue
        seen.add(line)
        repos.append(parse_repo_line(line, filename))

    return repos


__all__ = [
    "COMMENT_PREFIX",
    "SEGMENT_SEPARATOR",
    "BRANCH_SEPARATOR",
    "is_ignored_line",
    "parse_repo_line",
    "parse_repos_lines",
]
