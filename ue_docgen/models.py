"""模块级数据结构"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .parser.records import ClassRecord, DeclarationSet, EnumRecord, FunctionRecord, StructRecord
from .scanner.build_cs_parser import Dependencies


@dataclass
class ModuleData:
    """一个模块的依赖和 API 声明"""

    name: str
    path: str
    category: str
    dependencies: Dependencies = field(default_factory=Dependencies)
    declarations: DeclarationSet = field(default_factory=DeclarationSet)
    description: Optional[str] = None

    @property
    def classes(self) -> Tuple[ClassRecord, ...]:
        return self.declarations.classes

    @property
    def functions(self) -> Tuple[FunctionRecord, ...]:
        return self.declarations.functions

    @property
    def enums(self) -> Tuple[EnumRecord, ...]:
        return self.declarations.enums

    @property
    def structs(self) -> Tuple[StructRecord, ...]:
        return self.declarations.structs

    def summary(self) -> Dict[str, Any]:
        """模块索引条目"""
        return {
            "name": self.name,
            "path": self.path,
            "category": self.category,
            "dependencies": self.dependencies.to_dict(),
            "class_count": len(self.classes),
            "function_count": len(self.functions),
            "enum_count": len(self.enums),
            "struct_count": len(self.structs),
        }


@dataclass
class BestPractice:
    """最佳实践条目"""

    title: str
    description: str
    category: str


@dataclass
class Example:
    """使用示例"""

    type: str  # "comment" | "generated"
    code: str
    title: Optional[str] = None
    description: Optional[str] = None
    file: Optional[str] = None
