"""Domain data structures."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

DEFAULT_REPOS_FILE = "repos.txt"
DEFAULT_DESCRIPTION_FILE = "README.md"

# Repos are cloned to work/<org>/<dir_name> relative to the campaign dir.
WORK_DIR_NAME = "work"


@dataclass(frozen=True)
class RepoRef:
    """A single repository (and optional branch) parsed from the manifest."""

    org_name: str
    repo_name: str
    full_repo_name: str
    host: str = ""
    branch_name: str = ""

    @property
    def dir_name(self) -> str:
        if not self.branch_name:
            return self.repo_name
        return f"{self.repo_name}-{self.branch_name}"

    @property
    def visible_name(self) -> str:
        if not self.branch_name:
            return self.full_repo_name
        return f"{self.full_repo_name}@{self.branch_name}"

    @property
    def work_path(self) -> Path:
        return self.work_path_under(Path(WORK_DIR_NAME))

    def work_path_under(self, root: Path) -> Path:
        """Two-level layout ``<root>/<org>/<dir_name>``."""
        return Path(root) / self.org_name / self.dir_name

    def to_dict(self) -> Dict[str, str]:
        return {
            "host": self.host,
            "org_name": self.org_name,
            "repo_name": self.repo_name,
            "full_repo_name": self.full_repo_name,
            "branch_name": self.branch_name,
            "dir_name": self.dir_name,
            "visible_name": self.visible_name,
            "work_path": self.work_path.as_posix(),
        }


@dataclass(frozen=True)
class CampaignDescriptor:
    """Repos plus PR title/body, handed to clone and PR tooling."""

    name: str
    repos: Tuple[RepoRef, ...] = field(default_factory=tuple)
    pr_title: str = ""
    pr_body: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pr_title": self.pr_title,
            "pr_body": self.pr_body,
            "repos": [repo.to_dict() for repo in self.repos],
        }


@dataclass(frozen=True)
class CampaignOptions:
    repos_file: str = DEFAULT_REPOS_FILE
    description_file: str = DEFAULT_DESCRIPTION_FILE
