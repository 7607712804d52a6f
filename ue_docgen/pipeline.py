"""文档生成流程"""

import logging
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .config import GeneratorSettings
from .generator import JsonGenerator, MarkdownGenerator
from .models import ModuleData
from .parser import ApiParser, DeclarationSet, HeaderParser
from .scanner import BuildCsParser, ModuleInfo, ModuleScanner

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """一次生成任务的结果汇总"""

    modules: List[ModuleData] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    report_path: Optional[Path] = None

    @property
    def succeeded(self) -> int:
        return len(self.modules)


def process_module(module_info: ModuleInfo, header_parser: Optional[HeaderParser] = None) -> ModuleData:
    """
    解析单个模块：Build.cs 依赖 + Public 目录下的声明

    Args:
        module_info: 扫描到的模块
        header_parser: 共用的声明解析器

    Returns:
        模块数据
    """
    logger.info(f"处理模块: {module_info.name} ({module_info.category})")

    dependencies = BuildCsParser(module_info.build_cs_path).parse_dependencies()

    declarations = DeclarationSet()
    if module_info.public_dir is not None:
        declarations = ApiParser(module_info.public_dir, header_parser=header_parser).parse()

    return ModuleData(
        name=module_info.name,
        path=module_info.path,
        category=module_info.category,
        dependencies=dependencies,
        declarations=declarations,
    )


class DocPipeline:
    """扫描模块 → 解析声明 → 生成文档

    模块逐个顺序处理，保证输出顺序稳定。
    """

    def __init__(self, settings: GeneratorSettings):
        self.settings = settings
        self.output_dir = Path(settings.output_dir).resolve()
        self.scanner = ModuleScanner(
            settings.source_dir,
            categories=settings.module_categories,
            exclude_dirs=settings.exclude_dirs,
        )
        self.header_parser = HeaderParser()
        self.markdown = MarkdownGenerator(
            self.output_dir, settings.engine_version, max_functions=settings.max_functions
        )
        self.json = JsonGenerator(self.output_dir, settings.engine_version)

    def discover_modules(self) -> List[ModuleInfo]:
        """
        扫描引擎模块和插件模块

        Raises:
            FileNotFoundError: 源码目录不存在
        """
        modules = list(self.scanner.scan())
        if self.settings.plugins_dir is not None:
            modules.extend(self.scanner.scan_plugins(self.settings.plugins_dir))
        return modules

    def run(self, modules: Optional[List[ModuleInfo]] = None) -> GenerationReport:
        """
        执行完整生成流程

        Args:
            modules: 已扫描的模块（默认重新扫描）

        Returns:
            生成报告；单个模块失败记为警告，索引生成失败记为错误
        """
        report = GenerationReport()

        if modules is None:
            modules = self.discover_modules()

        logger.info("开始处理模块")
        for module_info in modules:
            try:
                report.modules.append(process_module(module_info, self.header_parser))
                logger.info(f"成功处理模块: {module_info.name}")
            except Exception as e:
                self._warn(report, f"处理模块 {module_info.name} 时出错: {e}")

        logger.info("开始生成文档")
        for module_data in report.modules:
            try:
                self.write_module(module_data)
                logger.info(f"成功生成模块文档: {module_data.name}")
            except Exception as e:
                self._warn(report, f"生成模块 {module_data.name} 文档时出错: {e}")

        logger.info("生成索引文件")
        try:
            self.write_indexes(report.modules)
        except Exception as e:
            message = f"生成索引时出错: {e}"
            report.errors.append(message)
            logger.error(message)
            logger.debug(traceback.format_exc())

        logger.info(
            f"文档生成完成。成功: {report.succeeded}, "
            f"警告: {len(report.warnings)}, 错误: {len(report.errors)}"
        )
        report.report_path = self.write_report(report)
        return report

    def write_module(self, module_data: ModuleData) -> None:
        if "markdown" in self.settings.formats:
            self.markdown.generate_module_docs(module_data)
        if "json" in self.settings.formats:
            self.json.generate_module_data(module_data)

    def write_indexes(self, modules: List[ModuleData]) -> None:
        if "markdown" in self.settings.formats:
            self.markdown.generate_index(modules)
            self.markdown.generate_readme()
        if "json" in self.settings.formats:
            self.json.generate_modules_index(modules)
            self.json.generate_api_index(modules)

    def write_report(self, report: GenerationReport) -> Path:
        """写出 generation_report.txt"""
        lines = [
            "UE5 API文档生成报告",
            f"生成时间: {datetime.now().strftime('%Y/%m/%d %H:%M:%S')}",
            f"引擎版本: {self.settings.engine_version}",
            f"成功处理模块数: {report.succeeded}",
            f"警告数: {len(report.warnings)}",
            f"错误数: {len(report.errors)}",
            "",
        ]
        if report.warnings:
            lines.append("警告列表:")
            lines.extend(f"  - {w}" for w in report.warnings)
            lines.append("")
        if report.errors:
            lines.append("错误列表:")
            lines.extend(f"  - {e}" for e in report.errors)
            lines.append("")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        report_path = self.output_dir / self.settings.report_file
        report_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return report_path

    def _warn(self, report: GenerationReport, message: str) -> None:
        report.warnings.append(message)
        logger.warning(message)
        logger.debug(traceback.format_exc())
