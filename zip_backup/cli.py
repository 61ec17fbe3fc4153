"""
zip-backup CLI 工具

把指定文件夹压缩为带时间戳的 .zip 文件，输出到当前目录
"""

import click
import yaml
import logging
import sys
from pathlib import Path
from typing import Optional
from rich.console import Console

from . import __version__
from .config import Config
from .models import CompressionLevel
from .reporter import ResultReporter
from .service import BackupService

logger = logging.getLogger("zip_backup")


@click.command()
@click.version_option(version=__version__)
@click.argument("source", required=False)
@click.option(
    "--level",
    type=click.Choice([lvl.value for lvl in CompressionLevel]),
    help="压缩级别（默认 fastest）"
)
@click.option("--output-dir", type=click.Path(file_okay=False), help="输出目录（默认当前目录）")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="配置文件路径")
@click.option("--verbose", "-v", is_flag=True, help="输出详细日志")
@click.option("--no-color", is_flag=True, help="不使用颜色")
def cli(
    source: Optional[str],
    level: Optional[str],
    output_dir: Optional[str],
    config_path: Optional[str],
    verbose: bool,
    no_color: bool
):
    """备份文件夹为 {时间戳}-BKP-{名称}.zip"""
    try:
        config = Config.load(Path(config_path) if config_path else None)
    except (ValueError, TypeError, OSError, yaml.YAMLError) as e:
        click.echo(f"配置文件错误: {e}", err=True)
        sys.exit(1)

    color = config.output.color and not no_color
    console = Console(color_system="auto" if color else None, highlight=False, emoji=False)

    logging.basicConfig(
        level=logging.INFO if (verbose or config.output.verbose) else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if not source:
        source = click.prompt("请输入要备份的文件夹路径", type=str)

    service = BackupService(
        level=CompressionLevel(level) if level else config.compression_level,
        output_dir=output_dir or config.archive.output_dir
    )
    logger.info(f"压缩级别: {service.level.value}, 输出目录: {service.output_dir or '当前目录'}")
    reporter = ResultReporter(console=console)

    try:
        result = service.run(source, on_stage=reporter.stage)
    except KeyboardInterrupt:
        console.print("\n[yellow]备份已中断[/yellow]")
        sys.exit(130)

    reporter.report(result)

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    cli()
