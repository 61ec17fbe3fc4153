"""
zip-backup

把文件夹压缩为带时间戳的 .zip 备份
"""

__version__ = "1.0.0"

from .archiver import Archiver, ZipArchiver
from .errors import ArchiveError, BackupError, SourceNotFoundError
from .models import (
    ArchiveResult,
    BackupResult,
    BackupStage,
    CompressionLevel,
    ScanResult,
    SourceKind
)
from .naming import build_output_filename, sanitize_name
from .service import BackupService

__all__ = [
    "Archiver",
    "ZipArchiver",
    "ArchiveError",
    "BackupError",
    "SourceNotFoundError",
    "ArchiveResult",
    "BackupResult",
    "BackupStage",
    "CompressionLevel",
    "ScanResult",
    "SourceKind",
    "build_output_filename",
    "sanitize_name",
    "BackupService",
]
