#!/usr/bin/env python3
# 多仓库 campaign 查看脚本：极简设计，专注于核心功能
#
# 主要功能：
#   - 解析命令行参数（show / check，-r 仓库清单，-d PR 描述文件）
#   - 读取并解析 repos.txt 仓库清单
#   - 读取 README.md 作为 PR 标题和正文
#   - 输出 campaign 内容（文本或 JSON）
#
# 执行流程：
#   1. 解析命令行参数
#   2. 加载 campaign（清单 -> 描述 -> 组装）
#   3. 输出结果，失败时返回退出码 1
#
# 特性：
#   - 不访问网络，不执行 git 操作
#   - 清单中任一行无法解析时整体失败

import json
import sys
from typing import Optional, Sequence

from repo_campaign.application.campaign import check_repos_file, open_campaign
from repo_campaign.domain.models import CampaignDescriptor, CampaignOptions
from repo_campaign.infra.logger import (
    log_error,
    log_info,
    log_success,
    log_warning,
    set_verbose,
)
from repo_campaign.infra.paths import get_campaign_dir
from repo_campaign.ui.args import parse_args


def print_campaign(campaign: CampaignDescriptor) -> None:
    """输出 campaign 摘要

    Args:
        campaign: 已加载的 campaign
    """
    log_info(f"Campaign: {campaign.name}")
    log_info(f"PR 标题: {campaign.pr_title}")
    log_info(f"仓库数: {len(campaign.repos)}")

    if not campaign.repos:
        log_warning("仓库清单为空")
        return

    for repo in campaign.repos:
        print(f"  {repo.visible_name}  ->  {repo.work_path.as_posix()}")


def run_show(args) -> int:
    options = CampaignOptions(
        repos_file=args.repos_file,
        description_file=args.description_file,
    )
    campaign_dir = get_campaign_dir(args.dir)

    success, campaign, error = open_campaign(options, campaign_dir)
    if not success:
        log_error(str(error))
        return 1

    if args.json:
        print(json.dumps(campaign.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_campaign(campaign)
    return 0


def run_check(args) -> int:
    options = CampaignOptions(repos_file=args.repos_file)
    campaign_dir = get_campaign_dir(args.dir)

    success, repos, error = check_repos_file(options, campaign_dir)
    if not success:
        log_error(str(error))
        return 1

    log_success(f"{args.repos_file} 解析成功，共 {len(repos)} 个仓库")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """主函数

    Returns:
        退出码（0 成功，1 失败）
    """
    args = parse_args(argv)
    set_verbose(args.verbose)

    if args.command == "check":
        return run_check(args)
    return run_show(args)


if __name__ == '__main__':
    sys.exit(main())
