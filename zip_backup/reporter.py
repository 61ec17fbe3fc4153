"""
结果输出

进度提示、成功信息和失败原因，统一通过 rich 控制台打印
"""

from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich import box
from rich.markup import escape

from .models import BackupResult, BackupStage


class ResultReporter:
    """备份结果输出器"""

    def __init__(self, console: Optional[Console] = None, color: bool = True):
        """
        初始化输出器

        Args:
            console: 复用已有控制台，如果为None则新建
            color: 是否使用颜色
        """
        self.console = console or Console(
            color_system="auto" if color else None,
            highlight=False,
            emoji=False
        )

    def _line(self, text: str):
        # 路径不折行，方便复制
        self.console.print(text, soft_wrap=True)

    def stage(self, stage: BackupStage, result: BackupResult):
        """阶段进度提示"""
        if stage == BackupStage.SIZE_SCAN:
            self._line(f"[cyan]正在统计源目录大小: {escape(result.source)}[/cyan]")
        elif stage == BackupStage.COMPRESSING:
            if result.scan is not None:
                self._line(
                    f"[cyan]源目录大小:[/cyan] {result.scan.human_size} "
                    f"({result.scan.file_count} 个文件)"
                )
            for warning in result.warnings:
                self._line(f"[yellow]⚠️  {escape(warning)}[/yellow]")
            self._line("[cyan]开始压缩...[/cyan]")

    def report(self, result: BackupResult):
        """输出最终结果"""
        if not result.success:
            self._line(f"[red]❌ 备份失败: {escape(result.error or '')}[/red]")
            return

        self.console.print(Panel("[bold green]✅ 备份完成[/bold green]", box=box.ROUNDED))
        self._line(f"[cyan]备份文件:[/cyan] {escape(result.output_path)}")
        self._line(f"[cyan]源目录:[/cyan] {escape(result.source)}")
        if result.archive is not None:
            self._line(
                f"[cyan]条目数:[/cyan] {result.archive.entry_count}  "
                f"[cyan]压缩级别:[/cyan] {result.archive.level.value}"
            )
