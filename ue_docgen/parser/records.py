"""声明记录数据结构"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class ParameterRecord:
    """函数参数"""

    name: str  # 参数名（无法识别时为空字符串）
    type: str  # 参数类型文本

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type}


@dataclass(frozen=True)
class ClassRecord:
    """类声明"""

    name: str  # 类名
    base_classes: Tuple[str, ...]  # 基类名（保持源码顺序，不去重）
    file_path: str  # 来源文件
    access: str = "public"
    members: Tuple[Dict[str, str], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "baseClasses": list(self.base_classes),
            "access": self.access,
            "members": [dict(m) for m in self.members],
            "filePath": self.file_path,
        }


@dataclass(frozen=True)
class FunctionRecord:
    """函数声明"""

    name: str  # 函数名
    return_type: str  # 返回类型（原样文本，不做语义解析）
    parameters: Tuple[ParameterRecord, ...]  # 参数列表
    is_static: bool
    is_virtual: bool
    file_path: str
    access: str = "public"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "returnType": self.return_type,
            "parameters": [p.to_dict() for p in self.parameters],
            "access": self.access,
            "isStatic": self.is_static,
            "isVirtual": self.is_virtual,
            "filePath": self.file_path,
        }


@dataclass(frozen=True)
class EnumValue:
    """枚举项"""

    name: str
    value: str = ""  # 值表达式原文，没有显式赋值时为空

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class EnumRecord:
    """枚举声明"""

    name: str
    values: Tuple[EnumValue, ...]
    file_path: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "values": [v.to_dict() for v in self.values],
            "filePath": self.file_path,
        }


@dataclass(frozen=True)
class StructRecord:
    """结构体声明

    成员列表始终为空：这一层只识别结构体名，不解析结构体体。
    """

    name: str
    file_path: str
    members: Tuple[Dict[str, str], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "members": [dict(m) for m in self.members],
            "filePath": self.file_path,
        }


@dataclass(frozen=True)
class DeclarationSet:
    """一个文件（或拼接后的一个模块）的全部声明"""

    classes: Tuple[ClassRecord, ...] = ()
    functions: Tuple[FunctionRecord, ...] = ()
    enums: Tuple[EnumRecord, ...] = ()
    structs: Tuple[StructRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.classes) + len(self.functions) + len(self.enums) + len(self.structs)

    @classmethod
    def concat(cls, sets: Iterable["DeclarationSet"]) -> "DeclarationSet":
        """按顺序拼接多个声明集合"""
        builder = DeclarationSetBuilder()
        for item in sets:
            builder.extend(item)
        return builder.build()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "classes": [c.to_dict() for c in self.classes],
            "functions": [f.to_dict() for f in self.functions],
            "enums": [e.to_dict() for e in self.enums],
            "structs": [s.to_dict() for s in self.structs],
        }


@dataclass
class DeclarationSetBuilder:
    """一次解析调用独占的结果收集器，只追加"""

    classes: List[ClassRecord] = field(default_factory=list)
    functions: List[FunctionRecord] = field(default_factory=list)
    enums: List[EnumRecord] = field(default_factory=list)
    structs: List[StructRecord] = field(default_factory=list)

    def extend(self, other: DeclarationSet) -> None:
        self.classes.extend(other.classes)
        self.functions.extend(other.functions)
        self.enums.extend(other.enums)
        self.structs.extend(other.structs)

    def build(self) -> DeclarationSet:
        return DeclarationSet(
            classes=tuple(self.classes),
            functions=tuple(self.functions),
            enums=tuple(self.enums),
            structs=tuple(self.structs),
        )
