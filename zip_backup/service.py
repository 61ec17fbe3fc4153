"""
文件夹备份服务

校验源目录 -> 统计大小 -> 压缩 -> 返回结果
"""

import os
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .archiver import Archiver, ZipArchiver
from .errors import BackupError, SourceNotFoundError
from .models import BackupResult, BackupStage, CompressionLevel, SourceKind
from .naming import derive_output_filename
from .scanner import scan_directory

logger = logging.getLogger(__name__)

StageCallback = Callable[[BackupStage, BackupResult], None]


def classify_source(path: str) -> SourceKind:
    """判断源路径类型（目录链接视为目录，失效链接视为不存在）"""
    if os.path.isdir(path):
        return SourceKind.DIRECTORY
    if os.path.exists(path):
        return SourceKind.FILE
    return SourceKind.MISSING


def validate_source(path: str) -> Path:
    """
    校验源目录

    Args:
        path: 用户给出的路径

    Returns:
        源目录的 Path

    Raises:
        SourceNotFoundError: 路径不存在或不是目录
    """
    kind = classify_source(path)
    if kind != SourceKind.DIRECTORY:
        logger.error(f"源路径校验失败: {path} ({kind.value})")
        raise SourceNotFoundError(path)
    return Path(path)


class BackupService:
    """文件夹备份服务"""

    def __init__(
        self,
        archiver: Optional[Archiver] = None,
        level: CompressionLevel = CompressionLevel.FASTEST,
        output_dir: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        初始化备份服务

        Args:
            archiver: 压缩器，默认 ZipArchiver
            level: 压缩级别
            output_dir: 输出目录，默认当前工作目录
            clock: 取当前时间的函数，测试时可替换
        """
        self.archiver = archiver or ZipArchiver()
        self.level = CompressionLevel(level)
        self.output_dir = output_dir
        self.clock = clock or datetime.now

    def run(self, source: str, on_stage: Optional[StageCallback] = None) -> BackupResult:
        """
        执行一次备份

        失败不会抛出异常，而是记录在返回结果的 stage/error 中。

        Args:
            source: 源目录
            on_stage: 每进入一个阶段时的回调

        Returns:
            BackupResult对象
        """
        timestamp, filename = derive_output_filename(
            os.path.abspath(source), self.clock()
        )
        output_dir = self.output_dir or os.getcwd()
        result = BackupResult(
            source=source,
            output_path=os.path.abspath(os.path.join(output_dir, filename)),
            timestamp=timestamp
        )

        def enter(stage: BackupStage):
            result.stage = stage
            logger.debug(f"阶段: {stage.value}")
            if on_stage:
                on_stage(stage, result)

        try:
            enter(BackupStage.VALIDATING)
            validate_source(source)

            enter(BackupStage.SIZE_SCAN)
            try:
                result.scan = scan_directory(source)
                if result.scan.skipped:
                    result.warnings.append(
                        f"统计大小时跳过了 {len(result.scan.skipped)} 个条目"
                    )
            except OSError as e:
                logger.warning(f"统计大小失败: {e}")
                result.warnings.append(f"统计大小失败: {e}")

            enter(BackupStage.COMPRESSING)
            result.archive = self.archiver.archive(source, result.output_path, self.level)

        except BackupError as e:
            result.error = str(e)
            enter(BackupStage.FAILED)
            return result

        enter(BackupStage.SUCCEEDED)
        logger.info(f"备份完成: {source} -> {result.output_path}")
        return result
