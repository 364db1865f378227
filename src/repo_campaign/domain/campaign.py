"""Campaign assembly from already parsed parts."""

from typing import Iterable

from .models import CampaignDescriptor, RepoRef


def assemble_campaign(
    name: str,
    repos: Iterable[RepoRef],
    pr_title: str,
    pr_body: str,
) -> CampaignDescriptor:
    return CampaignDescriptor(
        name=name,
        repos=tuple(repos),
        pr_title=pr_title,
        pr_body=pr_body,
    )


__all__ = ["assemble_campaign"]
