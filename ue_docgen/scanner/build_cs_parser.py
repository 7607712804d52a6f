"""Build.cs 依赖解析器"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Dependencies:
    """模块依赖"""

    public: List[str] = field(default_factory=list)
    private: List[str] = field(default_factory=list)
    dynamic: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "public": list(self.public),
            "private": list(self.private),
            "dynamic": list(self.dynamic),
        }


def _dependency_pattern(field_name: str) -> "re.Pattern[str]":
    # XxxModuleNames.AddRange(new string[] { ... }) 或 .Add("X")
    return re.compile(
        field_name
        + r"""
        \.(?:
            AddRange\s*\(\s*new\s+string\[\]\s*\{(?P<range>[^}]+)\}
            |
            Add\s*\(\s*"(?P<single>[^"]+)"\s*\)
        )
        """,
        re.VERBOSE,
    )


class BuildCsParser:
    """模块 .Build.cs 文件解析器"""

    PUBLIC_PATTERN = _dependency_pattern("PublicDependencyModuleNames")
    PRIVATE_PATTERN = _dependency_pattern("PrivateDependencyModuleNames")
    DYNAMIC_PATTERN = _dependency_pattern("DynamicallyLoadedModuleNames")

    # "ModuleName"
    STRING_PATTERN = re.compile(r'"([^"]+)"')

    # public class ModuleName : ModuleRules
    MODULE_NAME_PATTERN = re.compile(r"public\s+class\s+(\w+)\s*:\s*ModuleRules")

    def __init__(self, build_cs_path: Path):
        self.build_cs_path = Path(build_cs_path)
        self._content: Optional[str] = None

    @property
    def content(self) -> str:
        """文件内容（读取失败时为空字符串）"""
        if self._content is None:
            self._content = self._read_file()
        return self._content

    def _read_file(self) -> str:
        try:
            return self.build_cs_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"读取 {self.build_cs_path} 失败: {e}")
            return ""

    def parse_dependencies(self) -> Dependencies:
        """
        提取 Public / Private / Dynamic 三类依赖

        Returns:
            去重后（保持首次出现顺序）的依赖
        """
        return Dependencies(
            public=self._collect(self.PUBLIC_PATTERN),
            private=self._collect(self.PRIVATE_PATTERN),
            dynamic=self._collect(self.DYNAMIC_PATTERN),
        )

    def _collect(self, pattern: "re.Pattern[str]") -> List[str]:
        names: List[str] = []

        for match in pattern.finditer(self.content):
            if match.group("range"):
                names.extend(self.STRING_PATTERN.findall(match.group("range")))
            elif match.group("single"):
                names.append(match.group("single"))

        return list(dict.fromkeys(names))

    def get_module_name(self) -> str:
        """从 ModuleRules 子类声明中读取模块名"""
        match = self.MODULE_NAME_PATTERN.search(self.content)
        return match.group(1) if match else ""
