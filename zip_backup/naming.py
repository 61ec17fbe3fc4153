"""
输出文件名生成

文件名格式: {YYYYMMDDHHMMSS}-BKP[-{名称}].zip
名称取自源目录的最后一级，只保留 ASCII 字母、数字和下划线。
"""

import os
import re
from datetime import datetime
from typing import Optional, Tuple

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
FILENAME_TAG = "BKP"
ARCHIVE_SUFFIX = ".zip"

_DISALLOWED = re.compile(r"[^A-Za-z0-9_]")
_UNDERSCORE_RUN = re.compile(r"_{2,}")


def format_timestamp(now: datetime) -> str:
    """格式化为14位时间戳"""
    return now.strftime(TIMESTAMP_FORMAT)


def leaf_name(path: str, pathmod=os.path) -> str:
    """
    取路径最后一级名称

    先去掉末尾的分隔符，所以 "data/" 得到 "data" 而不是空串。
    分隔符按运行平台判断（POSIX 上 "\\" 是普通字符），
    需要按 Windows 规则解析时传入 pathmod=ntpath。
    """
    separators = pathmod.sep + (pathmod.altsep or "")
    return pathmod.basename(path.rstrip(separators))


def sanitize_name(leaf: str) -> str:
    """
    清洗名称

    Args:
        leaf: 原始目录名

    Returns:
        只含 [A-Za-z0-9_] 的名称，可能为空
    """
    name = _DISALLOWED.sub("_", leaf)
    name = _UNDERSCORE_RUN.sub("_", name)
    return name.strip("_")


def build_output_filename(source_folder: str, timestamp: str) -> str:
    """
    根据源目录和时间戳生成输出文件名（纯函数）

    Args:
        source_folder: 源目录路径
        timestamp: 14位时间戳

    Returns:
        输出文件名
    """
    name = sanitize_name(leaf_name(source_folder))
    if name:
        return f"{timestamp}-{FILENAME_TAG}-{name}{ARCHIVE_SUFFIX}"
    return f"{timestamp}-{FILENAME_TAG}{ARCHIVE_SUFFIX}"


def derive_output_filename(
    source_folder: str,
    now: Optional[datetime] = None
) -> Tuple[str, str]:
    """返回 (时间戳, 文件名)，时间只取一次"""
    timestamp = format_timestamp(now or datetime.now())
    return timestamp, build_output_filename(source_folder, timestamp)
