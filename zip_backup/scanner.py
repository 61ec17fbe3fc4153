"""
目录大小统计

递归统计普通文件的字节数，符号链接和无法访问的条目直接跳过
"""

import os
import logging
from typing import Union

from .models import ScanResult

logger = logging.getLogger(__name__)

SIZE_UNITS = ["KB", "MB", "GB", "TB"]


def format_size(num_bytes: int) -> str:
    """
    转换为易读的大小

    小于1024显示字节数，否则逐级除以1024，取值不小于1的最大单位，保留两位小数
    （按四舍五入后的值选单位，避免出现 1024.00 KB）
    """
    if num_bytes < 1024:
        return f"{num_bytes} bytes"

    size = float(num_bytes)
    unit = SIZE_UNITS[0]
    for unit in SIZE_UNITS:
        size /= 1024
        if round(size, 2) < 1024 or unit == SIZE_UNITS[-1]:
            break

    return f"{size:.2f} {unit}"


def scan_directory(path: Union[str, os.PathLike]) -> ScanResult:
    """
    统计目录大小

    Args:
        path: 已校验的源目录

    Returns:
        ScanResult对象
    """
    total = 0
    count = 0
    skipped = []

    def on_error(error: OSError):
        logger.warning(f"无法读取目录，已跳过: {error.filename} ({error.strerror})")
        skipped.append(str(error.filename))

    for root, dirs, files in os.walk(path, onerror=on_error):
        # 不进入目录链接
        for name in list(dirs):
            full = os.path.join(root, name)
            if os.path.islink(full):
                dirs.remove(name)
                skipped.append(full)
                logger.debug(f"跳过目录链接: {full}")

        for name in files:
            full = os.path.join(root, name)
            if os.path.islink(full):
                skipped.append(full)
                logger.debug(f"跳过文件链接: {full}")
                continue

            try:
                total += os.stat(full).st_size
                count += 1
            except OSError as e:
                logger.warning(f"无法读取文件，已跳过: {full} ({e.strerror})")
                skipped.append(full)

    return ScanResult(
        total_bytes=total,
        file_count=count,
        skipped=skipped,
        human_size=format_size(total)
    )
