"""引擎模块扫描

识别 Engine/Source 下的模块，并解析 .Build.cs 中声明的依赖。
"""

from .module_scanner import ModuleScanner, ModuleInfo, PLUGINS_CATEGORY
from .build_cs_parser import BuildCsParser, Dependencies

__all__ = [
    "ModuleScanner",
    "ModuleInfo",
    "PLUGINS_CATEGORY",
    "BuildCsParser",
    "Dependencies",
]
