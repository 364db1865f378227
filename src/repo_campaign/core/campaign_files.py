"""Campaign file reads (repos.txt, README.md) and load orchestration."""

from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Tuple

from ..domain.campaign import assemble_campaign
from ..domain.description import extract_description
from ..domain.errors import CampaignIOError, ConfigError
from ..domain.models import (
    DEFAULT_DESCRIPTION_FILE,
    DEFAULT_REPOS_FILE,
    CampaignDescriptor,
    CampaignOptions,
    RepoRef,
)
from ..domain.repos_manifest import parse_repos_lines
from ..infra.paths import resolve_campaign_path

# utf-8-sig 兼容带 BOM 的文件，对普通 UTF-8 无影响
FILE_ENCODING = "utf-8-sig"


def iter_text_lines(handle: TextIO) -> Iterator[str]:
    """Yield lines without their trailing ``\\n`` or ``\\r\\n``.

    Expects a handle opened with ``newline="\\n"`` so a lone ``\\r`` stays
    inside its line.
    """
    for line in handle:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def _check_readable(path: Path, filename: str) -> None:
    if not path.exists():
        raise CampaignIOError(filename, "文件不存在")
    if not path.is_file():
        raise CampaignIOError(filename, "不是有效的文件")


def read_repos_file(
    filename: Optional[str] = DEFAULT_REPOS_FILE,
    base_dir: Optional[Path] = None,
) -> List[RepoRef]:
    """Read and parse the repos manifest.

    Raises:
        ConfigError: no manifest filename given.
        CampaignIOError: the file is missing or unreadable.
        ParseError: a line is not ``[host/]org/repo[@branch]``.
    """
    if not filename:
        raise ConfigError("未指定仓库清单文件名")

    path = resolve_campaign_path(filename, base_dir)
    try:
        _check_readable(path, filename)
        with path.open("r", encoding=FILE_ENCODING, newline="\n") as handle:
            return parse_repos_lines(iter_text_lines(handle), filename)
    except (OSError, UnicodeDecodeError) as exc:
        raise CampaignIOError(filename, str(exc)) from exc


def read_description_file(
    filename: Optional[str] = DEFAULT_DESCRIPTION_FILE,
    base_dir: Optional[Path] = None,
) -> Tuple[str, str]:
    """Read README.md and return ``(pr_title, pr_body)``."""
    if not filename:
        raise ConfigError("未指定 PR 描述文件名")

    path = resolve_campaign_path(filename, base_dir)
    try:
        _check_readable(path, filename)
        with path.open("r", encoding=FILE_ENCODING, newline="\n") as handle:
            return extract_description(iter_text_lines(handle))
    except (OSError, UnicodeDecodeError) as exc:
        raise CampaignIOError(filename, str(exc)) from exc


def load_campaign(
    options: Optional[CampaignOptions],
    name: str,
    base_dir: Optional[Path] = None,
) -> CampaignDescriptor:
    """Read the manifest, then the description, and assemble the campaign.

    ``name`` is passed in rather than taken from the process working
    directory. The first error propagates and nothing is assembled.
    """
    if options is None:
        options = CampaignOptions()

    repos = read_repos_file(options.repos_file, base_dir)
    pr_title, pr_body = read_description_file(options.description_file, base_dir)
    return assemble_campaign(name, repos, pr_title, pr_body)


__all__ = [
    "FILE_ENCODING",
    "iter_text_lines",
    "read_repos_file",
    "read_description_file",
    "load_campaign",
]
