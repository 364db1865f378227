# 日志输出模块：提供统一的日志输出功能
#
# 主要功能：
#   - log_info()：输出信息日志
#   - log_success()：输出成功日志
#   - log_error()：输出错误日志
#   - log_warning()：输出警告日志
#   - log_debug()：输出调试日志（仅 verbose 模式）
#
# 特性：
#   - 带时间戳
#   - 支持颜色输出（colorama，终端支持时）

import sys
from datetime import datetime

from colorama import Fore, Style, just_fix_windows_console

# Windows 终端启用 ANSI 颜色，其他平台无操作
just_fix_windows_console()

COLOR_RESET = Style.RESET_ALL
COLOR_INFO = Fore.CYAN
COLOR_SUCCESS = Fore.GREEN
COLOR_ERROR = Fore.RED
COLOR_WARNING = Fore.YELLOW
COLOR_DEBUG = Style.DIM

_verbose = False


def set_verbose(enabled: bool) -> None:
    """开启/关闭调试日志"""
    global _verbose
    _verbose = enabled


def _get_timestamp() -> str:
    """获取时间戳"""
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def _format_message(level: str, color: str, message: str, stream=None) -> str:
    """格式化日志消息"""
    stream = stream or sys.stdout
    timestamp = _get_timestamp()
    if stream.isatty():
        return f"{color}[{level}]{COLOR_RESET} [{timestamp}] {message}"
    return f"[{level}] [{timestamp}] {message}"


def log_info(message: str) -> None:
    """输出信息日志"""
    print(_format_message("INFO", COLOR_INFO, message))


def log_success(message: str) -> None:
    """输出成功日志"""
    print(_format_message("SUCCESS", COLOR_SUCCESS, message))


def log_error(message: str) -> None:
    """输出错误日志（输出到 stderr）"""
    formatted = _format_message("ERROR", COLOR_ERROR, message, sys.stderr)
    print(formatted, file=sys.stderr)


def log_warning(message: str) -> None:
    """输出警告日志"""
    print(_format_message("WARNING", COLOR_WARNING, message))


def log_debug(message: str) -> None:
    """输出调试日志"""
    if not _verbose:
        return
    print(_format_message("DEBUG", COLOR_DEBUG, message))
