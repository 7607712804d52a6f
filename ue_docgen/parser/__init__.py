"""头文件声明提取

基于正则识别类、函数、枚举、结构体声明，输出供文档生成器使用的记录。
"""

from .records import (
    ParameterRecord,
    ClassRecord,
    FunctionRecord,
    EnumValue,
    EnumRecord,
    StructRecord,
    DeclarationSet,
    DeclarationSetBuilder,
)
from .params import split_parameters, parse_parameter, parse_parameters
from .header_parser import HeaderParser
from .api_parser import ApiParser, get_engine_relative_path

__all__ = [
    "ParameterRecord",
    "ClassRecord",
    "FunctionRecord",
    "EnumValue",
    "EnumRecord",
    "StructRecord",
    "DeclarationSet",
    "DeclarationSetBuilder",
    "split_parameters",
    "parse_parameter",
    "parse_parameters",
    "HeaderParser",
    "ApiParser",
    "get_engine_relative_path",
]
