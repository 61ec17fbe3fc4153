"""
测试备份数据模型
"""

import pytest
from pydantic import ValidationError

from ..models import (
    ArchiveResult,
    BackupResult,
    BackupStage,
    CompressionLevel,
    ScanResult,
    SourceKind
)


def test_compression_level_enum():
    """测试压缩级别枚举"""
    assert CompressionLevel.NONE == "none"
    assert CompressionLevel.FASTEST == "fastest"
    assert CompressionLevel.OPTIMAL == "optimal"
    assert CompressionLevel("optimal") is CompressionLevel.OPTIMAL

    with pytest.raises(ValueError):
        CompressionLevel("ultra")


def test_source_kind_enum():
    """测试源路径类型枚举"""
    assert SourceKind.DIRECTORY == "directory"
    assert SourceKind.MISSING == "missing"


def test_backup_result_defaults():
    """测试默认状态"""
    result = BackupResult(source="data", output_path="/tmp/x.zip", timestamp="20250623143000")

    assert result.stage == BackupStage.IDLE
    assert result.success is False
    assert result.warnings == []
    assert result.scan is None
    assert result.error is None


def test_backup_result_success():
    """测试成功状态"""
    result = BackupResult(
        source="data",
        output_path="/tmp/x.zip",
        timestamp="20250623143000",
        stage=BackupStage.SUCCEEDED,
        archive=ArchiveResult(output_path="/tmp/x.zip", entry_count=3)
    )

    assert result.success is True
    assert result.archive.level == CompressionLevel.FASTEST


def test_backup_result_rejects_bad_timestamp():
    """测试时间戳必须是14位数字"""
    with pytest.raises(ValidationError):
        BackupResult(source="data", output_path="/tmp/x.zip", timestamp="2025-06-23")


def test_scan_result_rejects_negative_size():
    """测试大小不能为负"""
    with pytest.raises(ValidationError):
        ScanResult(total_bytes=-1)
