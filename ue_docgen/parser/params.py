"""函数参数列表解析"""

import re
from typing import List

from .records import ParameterRecord

# 默认值子句：第一个 = 到行尾
DEFAULT_VALUE_PATTERN = re.compile(r"\s*=\s*.*$")

# 类型 + 末尾参数名
TYPE_AND_NAME_PATTERN = re.compile(r"^(.+?)\s+(\w+)$", re.ASCII)

WHITESPACE_PATTERN = re.compile(r"\s+")


def split_parameters(params_str: str) -> List[str]:
    """
    按顶层逗号切分参数列表

    只跟踪尖括号深度，模板参数里的逗号不切分。
    深度不做负数校验：多余的 '>' 只会让深度变负，扫描照常继续。

    Args:
        params_str: 括号内的原始参数文本

    Returns:
        去掉首尾空白、非空的参数片段列表
    """
    if not params_str.strip():
        return []

    parts: List[str] = []
    depth = 0
    current = []

    for char in params_str:
        if char == "<":
            depth += 1
            current.append(char)
        elif char == ">":
            depth -= 1
            current.append(char)
        elif char == "," and depth == 0:
            piece = "".join(current).strip()
            if piece:
                parts.append(piece)
            current = []
        else:
            current.append(char)

    piece = "".join(current).strip()
    if piece:
        parts.append(piece)

    return parts


def parse_parameter(param_str: str) -> ParameterRecord:
    """
    解析单个参数为 (名称, 类型)

    先去掉默认值，再把末尾的单词当作参数名。
    只有类型（无名参数、函数指针等）时名称为空，整段作为类型。
    """
    without_default = DEFAULT_VALUE_PATTERN.sub("", param_str, count=1).strip()

    match = TYPE_AND_NAME_PATTERN.match(without_default)
    if match:
        param_type = WHITESPACE_PATTERN.sub(" ", match.group(1).strip())
        return ParameterRecord(name=match.group(2), type=param_type)

    return ParameterRecord(name="", type=without_default)


def parse_parameters(params_str: str) -> List[ParameterRecord]:
    """切分并解析整段参数列表"""
    parameters: List[ParameterRecord] = []
    for piece in split_parameters(params_str):
        param = parse_parameter(piece)
        # 只剩默认值的片段（如 "= 5"）不记录
        if param.type:
            parameters.append(param)
    return parameters
