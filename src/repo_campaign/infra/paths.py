# 路径处理模块：提供 campaign 目录相关功能
#
# 主要功能：
#   - 获取 campaign 目录（默认当前工作目录）
#   - 获取 campaign 名称（目录名）
#   - 解析相对 campaign 目录的文件路径

import re
from pathlib import Path
from typing import Optional


def get_campaign_dir(campaign_dir: Optional[str] = None) -> Path:
    """获取 campaign 目录（未指定时使用当前工作目录）"""
    if campaign_dir:
        return Path(campaign_dir).resolve()
    return Path.cwd()


def get_campaign_name(campaign_dir: Path) -> str:
    """campaign 名称即目录名（根目录时返回路径本身）"""
    resolved = Path(campaign_dir).resolve()
    return resolved.name or str(resolved)


def resolve_campaign_path(filename: str, base_dir: Optional[Path] = None) -> Path:
    """Resolve a campaign file from absolute/relative input.

    Relative names are looked up in ``base_dir``; Windows absolute paths
    like ``C:\\...`` are kept as-is on other platforms too.
    """
    path = Path(filename)
    if base_dir is None or path.is_absolute() or re.match(r"^[A-Za-z]:", filename):
        return path
    return Path(base_dir) / path
