"""
备份数据模型定义
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum


class CompressionLevel(str, Enum):
    """压缩级别枚举"""
    NONE = "none"
    FASTEST = "fastest"
    OPTIMAL = "optimal"


class SourceKind(str, Enum):
    """源路径类型"""
    DIRECTORY = "directory"
    FILE = "file"
    MISSING = "missing"


class BackupStage(str, Enum):
    """备份流程阶段"""
    IDLE = "idle"
    VALIDATING = "validating"
    SIZE_SCAN = "size_scan"
    COMPRESSING = "compressing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ScanResult(BaseModel):
    """目录大小统计结果"""
    total_bytes: int = Field(default=0, ge=0, description="普通文件字节数合计")
    file_count: int = Field(default=0, ge=0, description="统计到的文件数")
    skipped: List[str] = Field(default_factory=list, description="跳过的路径（链接、无权限）")
    human_size: str = Field(default="0 bytes", description="易读的大小")


class ArchiveResult(BaseModel):
    """压缩结果"""
    output_path: str = Field(description="压缩包绝对路径")
    entry_count: int = Field(default=0, ge=0, description="写入的条目数（文件+目录）")
    archive_bytes: int = Field(default=0, ge=0, description="压缩包大小")
    level: CompressionLevel = CompressionLevel.FASTEST


class BackupResult(BaseModel):
    """一次备份的完整结果"""
    source: str = Field(description="用户给出的源目录")
    output_path: str = Field(description="输出文件绝对路径")
    timestamp: str = Field(pattern=r"^\d{14}$", description="YYYYMMDDHHMMSS")
    stage: BackupStage = BackupStage.IDLE
    scan: Optional[ScanResult] = None
    archive: Optional[ArchiveResult] = None
    warnings: List[str] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.stage == BackupStage.SUCCEEDED
