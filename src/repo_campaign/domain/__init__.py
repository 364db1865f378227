"""Domain models, errors and manifest/description parsing logic."""

from .campaign import assemble_campaign
from .description import extract_description, extract_title
from .errors import CampaignError, CampaignIOError, ConfigError, ParseError
from .models import (
    DEFAULT_DESCRIPTION_FILE,
    DEFAULT_REPOS_FILE,
    WORK_DIR_NAME,
    CampaignDescriptor,
    CampaignOptions,
    RepoRef,
)
from .repos_manifest import is_ignored_line, parse_repo_line, parse_repos_lines

__all__ = [
    "DEFAULT_DESCRIPTION_FILE",
    "DEFAULT_REPOS_FILE",
    "WORK_DIR_NAME",
    "RepoRef",
    "CampaignDescriptor",
    "CampaignOptions",
    "CampaignError",
    "CampaignIOError",
    "ConfigError",
    "ParseError",
    "is_ignored_line",
    "parse_repo_line",
    "parse_repos_lines",
    "extract_title",
    "extract_description",
    "assemble_campaign",
]
