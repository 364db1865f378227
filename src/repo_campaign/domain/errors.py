"""Errors raised while loading a campaign.

Every failure aborts the whole load; callers decide whether to retry,
prompt or give up.
"""

from typing import Optional


class CampaignError(Exception):
    """Base class for campaign load failures."""

    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename


class CampaignIOError(CampaignError):
    """A campaign file is missing or cannot be read."""

    def __init__(self, filename: str, reason: str = ""):
        message = f"无法读取文件: {filename}"
        if reason:
            message = f"{message} - {reason}"
        super().__init__(message, filename)
        self.reason = reason


class ParseError(CampaignError):
    """A manifest line does not match ``[host/]org/repo[@branch]``."""

    def __init__(self, line: str, filename: str, reason: str = ""):
        message = f"无法解析 {filename} 中的条目: {line}"
        if reason:
            message = f"{message}（{reason}）"
        super().__init__(message, filename)
        self.line = line
        self.reason = reason


class ConfigError(CampaignError):
    """Options are missing something required, e.g. the manifest filename."""


__all__ = [
    "CampaignError",
    "CampaignIOError",
    "ParseError",
    "ConfigError",
]
