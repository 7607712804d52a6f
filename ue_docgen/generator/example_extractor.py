"""使用示例生成"""

from typing import List, Optional

from ..models import Example, ModuleData
from ..parser.records import ClassRecord, FunctionRecord

MAX_CLASS_EXAMPLES = 5
MAX_FUNCTION_EXAMPLES = 5


class ExampleExtractor:
    """根据解析出的类和函数生成基本使用示例"""

    def generate_usage_examples(self, module_data: ModuleData) -> List[Example]:
        """前 5 个类和前 5 个函数各生成一个示例，下划线开头的函数跳过"""
        examples: List[Example] = []

        for cls in module_data.classes[:MAX_CLASS_EXAMPLES]:
            if cls.name:
                examples.append(self._class_example(cls))

        for func in module_data.functions[:MAX_FUNCTION_EXAMPLES]:
            if func.name and not func.name.startswith("_"):
                examples.append(self._function_example(func))

        return examples

    def _class_example(self, cls: ClassRecord) -> Example:
        code = (
            f"// 使用 {cls.name} 类\n"
            f"{cls.name}* Instance = NewObject<{cls.name}>();\n"
            f"// 使用实例...\n"
        )
        return Example(
            type="generated",
            title=f"使用 {cls.name} 类",
            code=code,
            description=f"创建和使用{cls.name}类的基本示例",
            file=cls.file_path,
        )

    def _function_example(self, func: FunctionRecord) -> Example:
        param_list = ", ".join(p.name or f"param{i}" for i, p in enumerate(func.parameters))

        if func.return_type == "void":
            code = f"// 调用 {func.name} 函数\n{func.name}({param_list});\n"
        else:
            code = (
                f"// 调用 {func.name} 函数\n"
                f"{func.return_type} Result = {func.name}({param_list});\n"
                f"// 使用返回值...\n"
            )

        return Example(
            type="generated",
            title=f"调用 {func.name} 函数",
            code=code,
            description=f"调用{func.name}函数的基本示例",
            file=func.file_path,
        )

    def format_examples_markdown(self, examples: List[Example]) -> str:
        """格式化为 Markdown"""
        if not examples:
            return "暂无使用示例。\n"

        parts = ["## 使用示例\n"]

        for i, example in enumerate(examples, 1):
            title: Optional[str] = example.title or f"示例 {i}"
            parts.append(f"### {title}\n")
            if example.description:
                parts.append(f"{example.description}\n")
            parts.append(f"```cpp\n{example.code}```\n")

        return "\n".join(parts) + "\n"
