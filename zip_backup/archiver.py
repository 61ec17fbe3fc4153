"""压缩器。

定义压缩器的统一接口，并提供基于 zipfile 的默认实现。
"""

from __future__ import annotations

import os
import logging
import warnings
import zipfile
from abc import ABC, abstractmethod

from .errors import ArchiveError
from .models import ArchiveResult, CompressionLevel

logger = logging.getLogger(__name__)

# 压缩级别 -> (压缩方式, zlib 级别)
ZIP_SETTINGS = {
    CompressionLevel.NONE: (zipfile.ZIP_STORED, None),
    CompressionLevel.FASTEST: (zipfile.ZIP_DEFLATED, 1),
    CompressionLevel.OPTIMAL: (zipfile.ZIP_DEFLATED, 6),
}


class Archiver(ABC):
    """压缩器基类。

    工作流只依赖这个接口，测试时可以换成假的实现。
    """

    @abstractmethod
    def archive(
        self,
        source_dir: str,
        dest_path: str,
        level: CompressionLevel = CompressionLevel.FASTEST
    ) -> ArchiveResult:
        """把 source_dir 的内容压缩到 dest_path。

        Args:
            source_dir: 源目录，压缩包根目录对应它的内容
            dest_path: 输出文件路径，已存在时直接覆盖
            level: 压缩级别

        Returns:
            ArchiveResult

        Raises:
            ArchiveError: 任何无法恢复的失败
        """
        ...


class ZipArchiver(Archiver):
    """使用标准库 zipfile 生成 .zip"""

    def archive(
        self,
        source_dir: str,
        dest_path: str,
        level: CompressionLevel = CompressionLevel.FASTEST
    ) -> ArchiveResult:
        level = CompressionLevel(level)
        compression, compresslevel = ZIP_SETTINGS[level]
        source_dir = os.path.abspath(source_dir)
        dest_path = os.path.abspath(dest_path)

        logger.info(f"开始压缩: {source_dir} -> {dest_path} (level={level.value})")

        try:
            # zip 不支持 1980 年以前的时间，这类提示不是错误
            with warnings.catch_warnings():
                warnings.simplefilter("ignore")
                with zipfile.ZipFile(
                    dest_path,
                    "w",
                    compression=compression,
                    compresslevel=compresslevel,
                    strict_timestamps=False
                ) as zf:
                    entries = self._write_tree(zf, source_dir, dest_path)
            size = os.path.getsize(dest_path)
        except (OSError, ValueError, zipfile.BadZipFile) as e:
            raise ArchiveError(f"压缩失败: {e}", output_path=dest_path) from e

        logger.info(f"压缩完成: {dest_path} ({entries} 个条目, {size} 字节)")

        return ArchiveResult(
            output_path=dest_path,
            entry_count=entries,
            archive_bytes=size,
            level=level
        )

    def _write_tree(self, zf: zipfile.ZipFile, source_dir: str, dest_path: str) -> int:
        """写入目录树，返回条目数"""
        count = 0

        def on_error(error: OSError):
            raise error

        for root, dirs, files in os.walk(source_dir, onerror=on_error):
            dirs.sort()
            for name in list(dirs):
                full = os.path.join(root, name)
                if os.path.islink(full):
                    dirs.remove(name)
                    logger.warning(f"跳过目录链接: {full}")
                    continue
                zf.write(full, os.path.relpath(full, source_dir))
                count += 1

            for name in sorted(files):
                full = os.path.join(root, name)
                if full == dest_path:
                    continue
                if os.path.islink(full) and not os.path.exists(full):
                    logger.warning(f"跳过失效链接: {full}")
                    continue
                zf.write(full, os.path.relpath(full, source_dir))
                count += 1

        return count
