"""文档生成

把模块数据渲染为 Markdown 文档和 JSON 数据文件。
"""

from .markdown_generator import MarkdownGenerator
from .json_generator import JsonGenerator
from .example_extractor import ExampleExtractor
from .best_practices import BestPracticesExtractor

__all__ = [
    "MarkdownGenerator",
    "JsonGenerator",
    "ExampleExtractor",
    "BestPracticesExtractor",
]
