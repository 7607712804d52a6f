"""宏调用/噪声过滤

函数声明的正则很宽松，宏调用、注释片段都可能被误匹配，这里集中做二元过滤：
任意一项命中即丢弃，不打分、不部分接受。
"""

import re
from typing import Tuple

# 宏名前缀
MACRO_PREFIXES: Tuple[str, ...] = (
    "DECLARE_",
    "DEFINE_",
    "IMPLEMENT_",
    "BEGIN_",
    "END_",
    "GENERATED_",
)

# 反射宏调用
REFLECTION_MACROS: Tuple[str, ...] = (
    "UCLASS(",
    "USTRUCT(",
    "UENUM(",
    "UFUNCTION(",
    "UPROPERTY(",
)

# 按顺序检查的全部标记
MACRO_MARKERS: Tuple[str, ...] = MACRO_PREFIXES + REFLECTION_MACROS

# 常见导出宏，单独出现时不算返回类型
EXPORT_MACROS: Tuple[str, ...] = ("CORE_API", "ENGINE_API")

# 返回类型里出现这些词说明匹配到的是注释
COMMENT_MARKERS: Tuple[str, ...] = ("optional", "should be")

MAX_RETURN_TYPE_LENGTH = 200

PREPROCESSOR_PATTERN = re.compile(r"#\w+.*")
LINE_COMMENT_PATTERN = re.compile(r"//.*")
BLOCK_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
WHITESPACE_PATTERN = re.compile(r"\s+")


def contains_macro_marker(text: str) -> bool:
    """整段匹配文本中是否出现宏标记"""
    return any(marker in text for marker in MACRO_MARKERS)


def is_macro_style_name(name: str) -> bool:
    """全大写且至少两个下划线的名字通常是宏"""
    return name == name.upper() and name.count("_") >= 2


def is_macro_invocation(text: str, name: str) -> bool:
    """匹配文本或名字看起来像宏调用"""
    return contains_macro_marker(text) or is_macro_style_name(name)


def clean_return_type(raw: str) -> str:
    """去掉预处理指令残留、注释，并压缩空白"""
    cleaned = PREPROCESSOR_PATTERN.sub("", raw)
    cleaned = LINE_COMMENT_PATTERN.sub("", cleaned)
    cleaned = BLOCK_COMMENT_PATTERN.sub("", cleaned)
    return WHITESPACE_PATTERN.sub(" ", cleaned).strip()


def is_noise_return_type(return_type: str) -> bool:
    """清理后的返回类型是否应丢弃"""
    if not return_type:
        return True
    if return_type in EXPORT_MACROS:
        return True
    if len(return_type) > MAX_RETURN_TYPE_LENGTH:
        return True

    lowered = return_type.lower()
    return any(marker in lowered for marker in COMMENT_MARKERS)
