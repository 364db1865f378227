# 命令行参数解析模块
#
# 主要功能：
#   - parse_args()：解析命令行参数（show / check 子命令）
#   - 参数验证
#   - 帮助信息生成

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..domain.models import DEFAULT_DESCRIPTION_FILE, DEFAULT_REPOS_FILE
from ..infra.logger import log_error

COMMANDS = ("show", "check")
DEFAULT_COMMAND = "show"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '-r', '--repos-file',
        type=str,
        default=DEFAULT_REPOS_FILE,
        metavar='FILE',
        help=f'仓库清单文件（默认: {DEFAULT_REPOS_FILE}）'
    )
    parser.add_argument(
        '-C', '--dir',
        type=str,
        default=None,
        metavar='DIR',
        help='campaign 目录（默认: 当前目录）'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='输出调试日志'
    )


def build_parser() -> argparse.ArgumentParser:
    """构建参数解析器"""
    parser = argparse.ArgumentParser(
        description="多仓库 campaign 清单查看工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  %(prog)s                         # 默认执行 show 命令
  %(prog)s show --json             # 以 JSON 输出 campaign
  %(prog)s check -r other.txt      # 只检查仓库清单

仓库清单文件格式（repos.txt）:
  # 注释行
  org/repo
  host/org/repo
  org/repo@branch
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='可用命令',
        metavar='COMMAND'
    )

    show_parser = subparsers.add_parser(
        'show',
        help='加载并显示 campaign',
        description='读取仓库清单和 PR 描述文件，输出 campaign 内容',
    )
    _add_common_arguments(show_parser)
    show_parser.add_argument(
        '-d', '--description-file',
        type=str,
        default=DEFAULT_DESCRIPTION_FILE,
        metavar='FILE',
        help=f'PR 描述文件（默认: {DEFAULT_DESCRIPTION_FILE}）'
    )
    show_parser.add_argument(
        '--json',
        action='store_true',
        help='以 JSON 格式输出'
    )

    check_parser = subparsers.add_parser(
        'check',
        help='只检查仓库清单',
        description='解析仓库清单文件并报告仓库数量，不读取 PR 描述文件',
    )
    _add_common_arguments(check_parser)

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """解析命令行参数"""
    args_list: List[str] = list(sys.argv[1:] if argv is None else argv)

    # 未指定子命令时默认 show（-h/--help 仍显示总帮助）
    if not args_list or (args_list[0] not in COMMANDS and args_list[0] not in ('-h', '--help')):
        args_list.insert(0, DEFAULT_COMMAND)

    args = build_parser().parse_args(args_list)

    if args.dir is not None:
        dir_path = Path(args.dir)
        if not dir_path.is_dir():
            log_error(f"campaign 目录不存在: {dir_path}")
            sys.exit(1)

    return args
