"""引擎模块扫描器"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from ..parser.api_parser import get_engine_relative_path

logger = logging.getLogger(__name__)

PLUGINS_CATEGORY = "Plugins"


@dataclass
class ModuleInfo:
    """扫描到的模块"""

    name: str  # 模块名
    path: str  # 相对路径（Engine/Source/... 格式）
    category: str  # Runtime / Editor / Developer / Programs / Plugins
    build_cs_path: Path  # .Build.cs 文件
    public_dir: Optional[Path] = None
    private_dir: Optional[Path] = None


class ModuleScanner:
    """扫描 Engine/Source 下各类别目录，识别带 .Build.cs 的模块"""

    def __init__(
        self,
        source_dir: Path,
        categories: Iterable[str],
        exclude_dirs: Optional[Iterable[str]] = None,
    ):
        """
        初始化扫描器

        Args:
            source_dir: 引擎源码目录
            categories: 要扫描的模块类别
            exclude_dirs: 跳过的目录名
        """
        self.source_dir = Path(source_dir).resolve()
        self.categories = list(categories)
        self.exclude_dirs = set(exclude_dirs or [])
        self.modules: List[ModuleInfo] = []

    def scan(self) -> List[ModuleInfo]:
        """
        扫描所有类别目录

        Returns:
            模块列表（按类别顺序，类别内按目录名排序）

        Raises:
            FileNotFoundError: 源码目录不存在
            NotADirectoryError: 路径不是目录
        """
        if not self.source_dir.exists():
            raise FileNotFoundError(f"源码目录不存在: {self.source_dir}")

        if not self.source_dir.is_dir():
            raise NotADirectoryError(f"路径不是目录: {self.source_dir}")

        self.modules = []

        for category in self.categories:
            category_dir = self.source_dir / category
            if not category_dir.is_dir():
                logger.debug(f"类别目录不存在，跳过: {category_dir}")
                continue

            try:
                entries = sorted(category_dir.iterdir())
            except OSError as e:
                logger.warning(f"扫描类别 {category} 出错: {e}")
                continue

            for entry in entries:
                if not entry.is_dir() or entry.name in self.exclude_dirs:
                    continue

                build_cs_path = entry / f"{entry.name}.Build.cs"
                if not build_cs_path.is_file():
                    continue

                module = self._create_module(entry, category, build_cs_path)
                if module:
                    self.modules.append(module)

        return self.modules

    def scan_plugins(self, plugins_dir: Path) -> List[ModuleInfo]:
        """
        扫描插件目录（任意深度），模块类别记为 Plugins

        Args:
            plugins_dir: 插件根目录

        Returns:
            插件模块列表；目录不存在时为空
        """
        plugins_dir = Path(plugins_dir).resolve()
        if not plugins_dir.is_dir():
            logger.warning(f"插件目录不存在: {plugins_dir}")
            return []

        plugin_modules: List[ModuleInfo] = []

        for module_dir in self._walk_dirs(plugins_dir):
            build_cs_path = module_dir / f"{module_dir.name}.Build.cs"
            if not build_cs_path.is_file():
                continue

            module = self._create_module(module_dir, PLUGINS_CATEGORY, build_cs_path)
            if module:
                plugin_modules.append(module)

        self.modules.extend(plugin_modules)
        return plugin_modules

    def _walk_dirs(self, root: Path) -> Iterator[Path]:
        """递归遍历子目录"""
        try:
            entries = sorted(root.iterdir())
        except OSError as e:
            logger.warning(f"读取目录失败 {root}: {e}")
            return

        for item in entries:
            if item.is_dir() and item.name not in self.exclude_dirs:
                yield item
                yield from self._walk_dirs(item)

    def _create_module(
        self, module_dir: Path, category: str, build_cs_path: Path
    ) -> Optional[ModuleInfo]:
        """构建模块信息；Public 和 Private 都不存在的模块不算"""
        public_dir = module_dir / "Public"
        private_dir = module_dir / "Private"

        if not public_dir.is_dir() and not private_dir.is_dir():
            return None

        return ModuleInfo(
            name=module_dir.name,
            path=get_engine_relative_path(module_dir, self.source_dir),
            category=category,
            build_cs_path=build_cs_path,
            public_dir=public_dir if public_dir.is_dir() else None,
            private_dir=private_dir if private_dir.is_dir() else None,
        )

    def get_module_count(self) -> Dict[str, int]:
        """按类别统计模块数"""
        stats = {category: 0 for category in self.categories}

        for module in self.modules:
            stats[module.category] = stats.get(module.category, 0) + 1

        return stats
