"""
备份异常定义
"""

from typing import Optional


class BackupError(Exception):
    """备份失败的基类"""


class SourceNotFoundError(BackupError):
    """源路径不存在或不是目录"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"源目录不存在或不是目录: {path}")


class ArchiveError(BackupError):
    """压缩过程失败"""

    def __init__(self, message: str, output_path: Optional[str] = None):
        self.output_path = output_path
        super().__init__(message)
