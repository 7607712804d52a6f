"""C++ 头文件声明解析器"""

import logging
import re
from typing import List

from . import noise_filter
from .params import parse_parameters
from .records import (
    ClassRecord,
    DeclarationSet,
    DeclarationSetBuilder,
    EnumRecord,
    EnumValue,
    FunctionRecord,
    StructRecord,
)

logger = logging.getLogger(__name__)

# 访问控制关键字，不计入基类列表
ACCESS_SPECIFIERS = ("public", "protected", "private")


class HeaderParser:
    """基于正则的头文件声明解析器

    不是真正的 C++ 解析器：不建 AST、不展开宏、不处理条件编译，
    宁可多匹配也不漏匹配，结果仅供文档参考。
    四个识别器互相独立，各自扫描整段文本。
    """

    # 所有模式的 \w 只匹配 ASCII 字符

    # class [XXX_API] Name [: public Base, ...]
    CLASS_PATTERN = re.compile(
        r"""
        class\s+
        (?:CORE_API|ENGINE_API|[\w_]+_API)?\s*   # 导出宏（可选）
        (?P<name>\w+)                            # 类名
        (?:
            \s*:\s*(?:public|protected|private)\s+
            (?P<bases>[\w\s,<>:]+)               # 继承列表
        )?
        """,
        re.VERBOSE | re.ASCII,
    )

    # 继承列表中的单个类型名（含模板参数）
    BASE_CLASS_PATTERN = re.compile(r"\w+(?:<[^>]+>)?", re.ASCII)

    # [修饰符] [XXX_API] 返回类型 Name(参数);
    FUNCTION_PATTERN = re.compile(
        r"""
        (?:static\s+|virtual\s+|inline\s+|extern\s+)?   # 单个修饰符（可选）
        (?:CORE_API|ENGINE_API|[\w_]+_API)?\s*           # 导出宏（可选）
        (?P<return_type>[\w<>:,\s*&\[\]()]+?)            # 返回类型
        \s+
        (?P<name>\w+)                                    # 函数名
        \s*
        \((?P<params>[^)]*)\)                            # 参数列表
        \s*;
        """,
        re.VERBOSE | re.ASCII,
    )

    # enum [class] Name { ... }
    ENUM_PATTERN = re.compile(
        r"""
        enum\s+
        (?:class\s+)?
        (?P<name>\w+)
        \s*
        \{(?P<body>[^}]+)\}
        """,
        re.VERBOSE | re.ASCII,
    )

    # 枚举项：Name [= 表达式]
    ENUM_VALUE_PATTERN = re.compile(r"(\w+)(?:\s*=\s*([^,}]+))?", re.ASCII)

    # struct [XXX_API] Name [: Base] {
    STRUCT_PATTERN = re.compile(
        r"""
        struct\s+
        (?:CORE_API|ENGINE_API|[\w_]+_API)?\s*
        (?P<name>\w+)
        (?:\s*:\s*(?P<bases>[\w\s,<>:]+))?
        \s*\{
        """,
        re.VERBOSE | re.ASCII,
    )

    def parse_content(self, content: str, file_path: str) -> DeclarationSet:
        """
        解析一个文件的全部声明

        Args:
            content: 文件全文
            file_path: 写入记录的来源路径

        Returns:
            该文件的声明集合
        """
        builder = DeclarationSetBuilder()

        builder.classes.extend(self.parse_classes(content, file_path))
        builder.functions.extend(self.parse_functions(content, file_path))
        builder.enums.extend(self.parse_enums(content, file_path))
        builder.structs.extend(self.parse_structs(content, file_path))

        logger.debug(
            f"{file_path}: {len(builder.classes)} classes, {len(builder.functions)} functions, "
            f"{len(builder.enums)} enums, {len(builder.structs)} structs"
        )
        return builder.build()

    def parse_classes(self, content: str, file_path: str) -> List[ClassRecord]:
        """提取类声明（按出现顺序，不去重，前向声明也会重复出现）"""
        classes: List[ClassRecord] = []

        for match in self.CLASS_PATTERN.finditer(content):
            bases_str = match.group("bases") or ""

            base_classes = [
                token
                for token in self.BASE_CLASS_PATTERN.findall(bases_str)
                if token not in ACCESS_SPECIFIERS
            ]

            classes.append(
                ClassRecord(
                    name=match.group("name"),
                    base_classes=tuple(base_classes),
                    file_path=file_path,
                )
            )

        return classes

    def parse_functions(self, content: str, file_path: str) -> List[FunctionRecord]:
        """提取以分号结尾的函数声明"""
        functions: List[FunctionRecord] = []

        for match in self.FUNCTION_PATTERN.finditer(content):
            full_match = match.group(0)
            name = match.group("name")

            if noise_filter.is_macro_invocation(full_match, name):
                continue

            return_type = noise_filter.clean_return_type(match.group("return_type"))
            if noise_filter.is_noise_return_type(return_type):
                continue

            # 只做子串判断，参数类型里出现 virtual/static 也会命中
            functions.append(
                FunctionRecord(
                    name=name,
                    return_type=return_type,
                    parameters=tuple(parse_parameters(match.group("params"))),
                    is_static="static" in full_match,
                    is_virtual="virtual" in full_match,
                    file_path=file_path,
                )
            )

        return functions

    def parse_enums(self, content: str, file_path: str) -> List[EnumRecord]:
        """提取枚举及其枚举项（值表达式保留原文，不求值）"""
        enums: List[EnumRecord] = []

        for match in self.ENUM_PATTERN.finditer(content):
            values = [
                EnumValue(name=value_match.group(1), value=(value_match.group(2) or "").strip())
                for value_match in self.ENUM_VALUE_PATTERN.finditer(match.group("body"))
            ]

            enums.append(
                EnumRecord(
                    name=match.group("name"),
                    values=tuple(values),
                    file_path=file_path,
                )
            )

        return enums

    def parse_structs(self, content: str, file_path: str) -> List[StructRecord]:
        """提取结构体名（必须带左花括号，结构体体不解析）"""
        return [
            StructRecord(name=match.group("name"), file_path=file_path)
            for match in self.STRUCT_PATTERN.finditer(content)
        ]
