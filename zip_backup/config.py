"""
配置管理模块

支持从YAML配置文件和环境变量读取配置
"""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field, asdict

from .models import CompressionLevel


@dataclass
class ArchiveConfig:
    """压缩配置"""
    level: str = CompressionLevel.FASTEST.value
    output_dir: Optional[str] = None  # None 表示当前目录

    def __post_init__(self):
        # 非法值直接报错
        self.level = CompressionLevel(self.level).value


@dataclass
class OutputConfig:
    """输出配置"""
    color: bool = True
    verbose: bool = False


@dataclass
class Config:
    """全局配置"""
    archive: ArchiveConfig = field(default_factory=ArchiveConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def compression_level(self) -> CompressionLevel:
        return CompressionLevel(self.archive.level)

    @classmethod
    def get_config_path(cls) -> Path:
        """获取配置文件路径"""
        # 优先级：
        # 1. 环境变量 ZIP_BACKUP_CONFIG
        # 2. ~/.zip-backup/config.yaml
        # 3. ./config.yaml

        env_path = os.getenv("ZIP_BACKUP_CONFIG")
        if env_path:
            return Path(env_path)

        home_config = Path.home() / ".zip-backup" / "config.yaml"
        if home_config.exists():
            return home_config

        local_config = Path("config.yaml")
        if local_config.exists():
            return local_config

        # 默认返回home配置路径（即使不存在）
        return home_config

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """
        加载配置

        Args:
            config_path: 配置文件路径，如果为None则自动查找

        Returns:
            Config对象
        """
        if config_path is None:
            config_path = cls.get_config_path()
        config_path = Path(config_path)

        config = cls()

        if config_path.exists():
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            if 'archive' in data:
                config.archive = ArchiveConfig(**(data['archive'] or {}))
            if 'output' in data:
                config.output = OutputConfig(**(data['output'] or {}))

        # 环境变量覆盖
        config._load_from_env()

        return config

    def _load_from_env(self):
        """从环境变量加载配置"""
        if os.getenv("ZIP_BACKUP_LEVEL"):
            self.archive.level = CompressionLevel(os.getenv("ZIP_BACKUP_LEVEL").lower()).value
        if os.getenv("ZIP_BACKUP_OUTPUT_DIR"):
            self.archive.output_dir = os.getenv("ZIP_BACKUP_OUTPUT_DIR")

    def save(self, config_path: Optional[Path] = None):
        """
        保存配置到文件

        Args:
            config_path: 配置文件路径，如果为None则使用默认路径
        """
        if config_path is None:
            config_path = self.get_config_path()
        config_path = Path(config_path)

        # 确保目录存在
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, allow_unicode=True)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            'archive': asdict(self.archive),
            'output': asdict(self.output)
        }
