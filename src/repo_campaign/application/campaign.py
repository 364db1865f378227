"""Application services for opening and checking a campaign directory."""

from pathlib import Path
from typing import List, Optional, Tuple

from ..core.campaign_files import load_campaign, read_repos_file
from ..domain.errors import CampaignError
from ..domain.models import CampaignDescriptor, CampaignOptions, RepoRef
from ..infra.logger import log_debug
from ..infra.paths import get_campaign_name


def open_campaign(
    options: Optional[CampaignOptions] = None,
    campaign_dir: Optional[Path] = None,
) -> Tuple[bool, Optional[CampaignDescriptor], Optional[CampaignError]]:
    """Load the campaign in ``campaign_dir`` (default: current directory).

    Returns ``(ok, campaign, error)``; load failures come back as the
    error instead of being raised.
    """
    if options is None:
        options = CampaignOptions()
    if campaign_dir is None:
        campaign_dir = Path.cwd()

    name = get_campaign_name(campaign_dir)
    log_debug(f"加载 campaign: {name} ({campaign_dir})")

    try:
        campaign = load_campaign(options, name, campaign_dir)
    except CampaignError as exc:
        return False, None, exc

    log_debug(f"共 {len(campaign.repos)} 个仓库，PR 标题: {campaign.pr_title}")
    return True, campaign, None


def check_repos_file(
    options: Optional[CampaignOptions] = None,
    campaign_dir: Optional[Path] = None,
) -> Tuple[bool, List[RepoRef], Optional[CampaignError]]:
    """Parse only the manifest; returns ``(ok, repos, error)``."""
    if options is None:
        options = CampaignOptions()
    if campaign_dir is None:
        campaign_dir = Path.cwd()

    try:
        repos = read_repos_file(options.repos_file, campaign_dir)
    except CampaignError as exc:
        return False, [], exc

    return True, repos, None
