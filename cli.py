#!/usr/bin/env python3
"""UE5 API 文档生成工具 - 命令行工具"""

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# 直接运行 cli.py 时也能找到 ue_docgen
sys.path.insert(0, str(Path(__file__).parent))

from ue_docgen import __version__
from ue_docgen.config import get_config, get_settings
from ue_docgen.logging_setup import configure_logging
from ue_docgen.parser import ApiParser, DeclarationSet, HeaderParser
from ue_docgen.pipeline import DocPipeline
from ue_docgen.scanner import ModuleScanner

app = typer.Typer(
    name="ue-docgen",
    help="UE5 引擎 API 文档生成工具",
    add_completion=False,
)
console = Console()

MAX_WARNINGS_SHOWN = 10


def load_config_file(config_path: Optional[Path]) -> None:
    """指定了 --config 时重新加载配置"""
    if config_path is None:
        return
    if not config_path.exists():
        console.print(f"[red]错误: 配置文件不存在: {config_path}[/red]")
        raise typer.Exit(1)
    get_config().load(config_path)


def print_declaration_counts(declarations: DeclarationSet, title: str) -> None:
    table = Table(title=title)
    table.add_column("类型", style="cyan")
    table.add_column("数量", style="green")
    table.add_row("类", str(len(declarations.classes)))
    table.add_row("函数", str(len(declarations.functions)))
    table.add_row("枚举", str(len(declarations.enums)))
    table.add_row("结构体", str(len(declarations.structs)))
    console.print(table)


# ==================== 生成命令 ====================

@app.command()
def generate(
    source_dir: Optional[Path] = typer.Option(
        None, "--source-dir", "-s", help="引擎源码目录（默认从 config.yaml 读取）"
    ),
    plugins_dir: Optional[Path] = typer.Option(None, "--plugins-dir", "-p", help="插件目录"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="输出目录"),
    engine_version: Optional[str] = typer.Option(None, "--engine-version", "-e", help="引擎版本"),
    categories: Optional[List[str]] = typer.Option(
        None, "--category", "-c", help="要处理的模块类别（可重复）"
    ),
    exclude_dirs: Optional[List[str]] = typer.Option(
        None, "--exclude-dir", "-x", help="要排除的目录（可重复）"
    ),
    formats: Optional[List[str]] = typer.Option(
        None, "--format", "-f", help="输出格式: markdown, json（可重复）"
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", help="配置文件路径"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="显示详细日志"),
):
    """
    生成 API 文档

    扫描模块 → 解析 Build.cs 与头文件 → 生成 Markdown / JSON
    """
    load_config_file(config_path)

    try:
        settings = get_settings(
            source_dir=source_dir,
            plugins_dir=plugins_dir,
            output_dir=output_dir,
            engine_version=engine_version,
            module_categories=categories or None,
            exclude_dirs=exclude_dirs or None,
            formats=formats or None,
            verbose=verbose or None,
        )
    except ValueError as e:
        console.print(f"[red]错误: {e}[/red]")
        raise typer.Exit(1)

    output = settings.output_dir.resolve()
    output.mkdir(parents=True, exist_ok=True)
    log_file = output / settings.log_file
    configure_logging(verbose=settings.verbose, log_file=log_file)

    source = settings.source_dir.resolve()
    if not source.is_dir():
        console.print(f"[red]错误: 源码目录不存在: {source}[/red]")
        raise typer.Exit(1)

    console.print(
        Panel(
            f"源码目录: [bold]{source}[/bold]\n"
            + (f"插件目录: {settings.plugins_dir}\n" if settings.plugins_dir else "")
            + f"输出目录: {output}\n"
            f"引擎版本: {settings.engine_version}\n"
            f"处理类别: {', '.join(settings.module_categories)}",
            title="UE5 API 文档生成",
        )
    )

    pipeline = DocPipeline(settings)
    modules = pipeline.discover_modules()

    stats = pipeline.scanner.get_module_count()
    console.print(f"找到 {len(modules)} 个模块:")
    for category, count in stats.items():
        console.print(f"  {category}: {count} 个模块")

    if not modules:
        console.print("[red]错误: 未找到任何模块[/red]")
        raise typer.Exit(1)

    report = pipeline.run(modules)

    console.print()
    console.print(
        Panel(
            f"[green]生成完成![/green]\n\n"
            f"成功处理模块数: {report.succeeded}\n"
            f"文档已生成到: {output}\n"
            f"  - Markdown文档: {output / 'modules'}\n"
            f"  - JSON数据: {output / 'data'}\n"
            f"  - 索引文件: {output / 'index.md'}\n"
            f"  - 日志文件: {log_file}\n"
            f"  - 报告文件: {report.report_path}",
            title="完成",
        )
    )

    if report.warnings:
        console.print(f"\n[yellow]警告 ({len(report.warnings)} 个):[/yellow]")
        for warning in report.warnings[:MAX_WARNINGS_SHOWN]:
            console.print(f"  - {warning}")
        if len(report.warnings) > MAX_WARNINGS_SHOWN:
            console.print(
                f"  ... 还有 {len(report.warnings) - MAX_WARNINGS_SHOWN} 个警告，详见日志文件"
            )

    if report.errors:
        console.print(f"\n[red]错误 ({len(report.errors)} 个):[/red]")
        for error in report.errors:
            console.print(f"  - {error}")


# ==================== 查看命令 ====================

@app.command()
def modules(
    source_dir: Optional[Path] = typer.Option(None, "--source-dir", "-s", help="引擎源码目录"),
    categories: Optional[List[str]] = typer.Option(
        None, "--category", "-c", help="要处理的模块类别（可重复）"
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", help="配置文件路径"),
):
    """
    列出引擎模块

    只扫描目录结构，不解析头文件
    """
    load_config_file(config_path)
    try:
        settings = get_settings(source_dir=source_dir, module_categories=categories or None)
    except ValueError as e:
        console.print(f"[red]错误: {e}[/red]")
        raise typer.Exit(1)

    scanner = ModuleScanner(
        settings.source_dir, settings.module_categories, settings.exclude_dirs
    )
    try:
        found = scanner.scan()
    except (FileNotFoundError, NotADirectoryError) as e:
        console.print(f"[red]错误: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"模块列表 ({len(found)})")
    table.add_column("模块", style="cyan")
    table.add_column("类别", style="magenta")
    table.add_column("路径", style="dim")
    table.add_column("Public", style="green", width=6)

    for module in found:
        table.add_row(
            module.name, module.category, module.path, "是" if module.public_dir else "否"
        )

    console.print(table)


@app.command()
def parse(
    path: Path = typer.Argument(..., help="头文件或目录"),
    as_json: bool = typer.Option(False, "--json", help="以 JSON 输出全部声明"),
):
    """
    解析头文件声明

    对单个头文件或目录运行声明提取，输出统计或 JSON
    """
    if not path.exists():
        console.print(f"[red]错误: 路径不存在: {path}[/red]")
        raise typer.Exit(1)

    if path.is_dir():
        declarations = ApiParser(path).parse()
    else:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]读取失败: {e}[/red]")
            raise typer.Exit(1)
        declarations = HeaderParser().parse_content(content, path.name)

    if as_json:
        typer.echo(json.dumps(declarations.to_dict(), ensure_ascii=False, indent=2))
    else:
        print_declaration_counts(declarations, title=f"声明统计: {path}")


@app.command()
def version():
    """显示版本信息"""
    console.print(f"UE5 API 文档生成工具 v{__version__}")


def main():
    """主入口"""
    app()


if __name__ == "__main__":
    main()
