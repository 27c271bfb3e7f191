"""Waldhari 命令行接口。

使用 typer 实现语言文件查看、检查以及日志查看命令。

示例:
    waldhari show MyMod --language fr-FR
    waldhari check MyMod -f General -f Missions
    waldhari tail MyMod -n 20 --level warn
"""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from waldhari.core.config import get_settings
from waldhari.core.environment import get_data_directory
from waldhari.core.exceptions import WaldhariError
from waldhari.core.i18n import CsvLanguageService
from waldhari.core.logging import LogLevel, MemoryLogService, read_records

console = Console()

app = typer.Typer(
    name="waldhari",
    help="Waldhari 运行时工具（语言文件与日志）",
    add_completion=False,
)

_LEVEL_STYLES = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "green",
    LogLevel.WARN: "yellow",
    LogLevel.ERROR: "bold red",
}


def _data_dir(root: Path | None) -> Path:
    """获取数据目录，--root 优先于 WALDHARI_ROOT_DIR。"""
    if root is None:
        return get_data_directory()
    return root / get_settings().data_dir_name


def _load_catalog(
    mod_name: str,
    language: str | None,
    features: list[str] | None,
    root: Path | None,
) -> tuple[CsvLanguageService, MemoryLogService]:
    log = MemoryLogService()
    service = CsvLanguageService(
        mod_name,
        language,
        features or None,
        base_dir=_data_dir(root),
        logger=log,
    )
    return service, log


@app.command()
def show(
    mod_name: str = typer.Argument(..., help="模组名"),
    language: Optional[str] = typer.Option(None, "-l", "--language", help="语言代码（默认：系统区域）"),
    features: Optional[list[str]] = typer.Option(None, "-f", "--feature", help="功能名（可重复）"),
    root: Optional[Path] = typer.Option(None, "--root", help="宿主根目录"),
) -> None:
    """显示已加载的翻译。
    
    示例:
        waldhari show MyMod -l fr-FR
    """
    try:
        service, _log = _load_catalog(mod_name, language, features, root)
    except WaldhariError as e:
        typer.echo(f"❌ 加载失败: {e}", err=True)
        raise typer.Exit(1)
    
    table = Table(title=escape(f"{mod_name} [{service.current_language}]"))
    table.add_column("键", style="cyan")
    table.add_column("值")
    for key, value in service.messages.items():
        table.add_row(escape(key), escape(value))
    console.print(table)
    typer.echo(f"共 {len(service)} 条消息")


@app.command()
def check(
    mod_name: str = typer.Argument(..., help="模组名"),
    language: Optional[str] = typer.Option(None, "-l", "--language", help="语言代码（默认：系统区域）"),
    features: Optional[list[str]] = typer.Option(None, "-f", "--feature", help="功能名（可重复）"),
    root: Optional[Path] = typer.Option(None, "--root", help="宿主根目录"),
) -> None:
    """检查语言文件（缺失文件、格式错误的行、重复键）。
    
    发现问题时退出码为 1。
    
    示例:
        waldhari check MyMod -f General -f Missions
    """
    try:
        service, log = _load_catalog(mod_name, language, features, root)
    except WaldhariError as e:
        typer.echo(f"❌ 加载失败: {e}", err=True)
        raise typer.Exit(1)
    
    issues = [record for record in log.records if record.level >= LogLevel.WARN]
    if not issues:
        typer.echo(f"✅ {mod_name} [{service.current_language}]: {len(service)} 条消息，没有问题")
        return
    
    typer.echo(f"📝 {mod_name} [{service.current_language}]: 发现 {len(issues)} 个问题:")
    for record in issues:
        typer.echo(f"  - {record.level.label}: {record.message}")
    raise typer.Exit(1)


@app.command()
def tail(
    channel: str = typer.Argument(..., help="日志通道名"),
    lines: int = typer.Option(20, "-n", "--lines", help="显示的记录数"),
    level: str = typer.Option("debug", "--level", help="最低级别（debug/info/warn/error）"),
    root: Optional[Path] = typer.Option(None, "--root", help="宿主根目录"),
) -> None:
    """显示通道日志的最后几条记录。
    
    示例:
        waldhari tail MyMod -n 50 --level warn
    """
    try:
        min_level = LogLevel.parse(level)
    except WaldhariError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(2)
    
    log_path = _data_dir(root) / f"{channel}.log"
    if not log_path.is_file():
        typer.echo(f"❌ 日志文件不存在: {log_path}", err=True)
        raise typer.Exit(1)
    
    try:
        records = deque(
            (record for record in read_records(log_path) if record.level >= min_level),
            maxlen=max(lines, 0),
        )
    except WaldhariError as e:
        typer.echo(f"❌ 日志文件格式错误: {e}", err=True)
        raise typer.Exit(1)
    
    table = Table(title=escape(str(log_path)))
    table.add_column("时间", style="green")
    table.add_column("级别")
    table.add_column("消息")
    table.add_column("错误", style="red")
    for record in records:
        table.add_row(
            record.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            f"[{_LEVEL_STYLES[record.level]}]{record.level.label}[/]",
            escape(record.message),
            escape(record.error or ""),
        )
    console.print(table)


def main() -> None:
    """命令行入口。"""
    app()


__all__ = [
    "app",
    "main",
]
