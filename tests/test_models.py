from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from repo_campaign.domain.campaign import assemble_campaign
from repo_campaign.domain.models import CampaignOptions, RepoRef


def _repo(branch_name=""):
    return RepoRef(
        org_name="org",
        repo_name="repo",
        full_repo_name="org/repo",
        branch_name=branch_name,
    )


def test_dir_name():
    assert _repo().dir_name == "repo"
    assert _repo("dev").dir_name == "repo-dev"


def test_visible_name():
    assert _repo().visible_name == "org/repo"
    assert _repo("dev").visible_name == "org/repo@dev"


def test_work_path():
    assert _repo().work_path == Path("work") / "org" / "repo"
    assert _repo("dev").work_path == Path("work") / "org" / "repo-dev"
    assert _repo("dev").work_path_under(Path("/tmp/x")) == Path("/tmp/x/org/repo-dev")


def test_repo_ref_is_immutable():
    repo = _repo()
    with pytest.raises(FrozenInstanceError):
        repo.repo_name = "other"


def test_repo_ref_to_dict_includes_derived_names():
    data = _repo("dev").to_dict()

    assert data["visible_name"] == "org/repo@dev"
    assert data["dir_name"] == "repo-dev"
    assert data["work_path"] == "work/org/repo-dev"
    assert data["host"] == ""


def test_assemble_campaign_keeps_order():
    repos = [_repo(), _repo("dev")]
    campaign = assemble_campaign("my-campaign", repos, "Title", "Body")

    assert campaign.name == "my-campaign"
    assert campaign.repos == (repos[0], repos[1])
    assert campaign.pr_title == "Title"
    assert campaign.pr_body == "Body"
    assert campaign.to_dict()["repos"][1]["branch_name"] == "dev"


def test_campaign_options_defaults():
    options = CampaignOptions()

    assert options.repos_file == "repos.txt"
    assert options.description_file == "README.md"
