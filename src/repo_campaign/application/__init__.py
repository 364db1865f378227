"""Application services orchestrating domain and core capabilities."""

from .campaign import check_repos_file, open_campaign

__all__ = [
    "check_repos_file",
    "open_campaign",
]
