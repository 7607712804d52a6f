"""Markdown 文档生成"""

from datetime import datetime
from pathlib import Path
from typing import List

from ..models import ModuleData
from ..parser.records import ClassRecord, EnumRecord, FunctionRecord, StructRecord
from .best_practices import BestPracticesExtractor
from .example_extractor import ExampleExtractor

# index.md 中固定的类别顺序，Plugins 只在有插件模块时出现
INDEX_CATEGORIES = ["Runtime", "Editor", "Developer", "Programs"]

EXPORT_MACRO_PREFIXES = ("CORE_API", "ENGINE_API")


def _now() -> str:
    return datetime.now().strftime("%Y/%m/%d %H:%M:%S")


class MarkdownGenerator:
    """生成人类可读的 Markdown 文档"""

    def __init__(self, output_dir: Path, engine_version: str, max_functions: int = 500):
        """
        Args:
            output_dir: 文档输出根目录
            engine_version: 引擎版本
            max_functions: api.md 中最多列出的函数数
        """
        self.output_dir = Path(output_dir)
        self.engine_version = engine_version
        self.max_functions = max_functions
        self.modules_dir = self.output_dir / "modules"
        self.example_extractor = ExampleExtractor()
        self.practices_extractor = BestPracticesExtractor()

    def generate_module_docs(self, module_data: ModuleData) -> Path:
        """
        生成单个模块的 5 个文档

        Returns:
            模块文档目录
        """
        module_dir = self.modules_dir / module_data.name
        module_dir.mkdir(parents=True, exist_ok=True)

        self._write(module_dir / "overview.md", self.render_overview(module_data))
        self._write(module_dir / "api.md", self.render_api_reference(module_data))
        self._write(module_dir / "classes.md", self.render_classes(module_data))
        self._write(module_dir / "best-practices.md", self.render_best_practices(module_data))
        self._write(module_dir / "examples.md", self.render_examples(module_data))

        return module_dir

    def _write(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")

    # ==================== 模块文档 ====================

    def render_overview(self, module_data: ModuleData) -> str:
        deps = module_data.dependencies
        name = module_data.name

        content = f"""# {name} 模块概览

## 基本信息

- **模块名称**: {name}
- **路径**: {module_data.path}
- **类别**: {module_data.category}
- **引擎版本**: {self.engine_version}
- **文档生成时间**: {_now()}

## 模块描述

{module_data.description or '暂无描述'}

## 依赖关系

### 公共依赖 (Public Dependencies)
"""
        # 公共依赖链接到对应模块的概览
        content += self._dependency_list([f"[{d}](../{d}/overview.md)" for d in deps.public])
        content += "\n### 私有依赖 (Private Dependencies)\n"
        content += self._dependency_list(deps.private)
        content += "\n### 动态加载依赖 (Dynamic Dependencies)\n"
        content += self._dependency_list(deps.dynamic)

        content += f"""
## 统计信息

- **类数量**: {len(module_data.classes)}
- **函数数量**: {len(module_data.functions)}
- **枚举数量**: {len(module_data.enums)}
- **结构体数量**: {len(module_data.structs)}

## 相关文档

- [API参考](api.md)
- [类文档](classes.md)
- [最佳实践](best-practices.md)
- [使用示例](examples.md)
"""
        return content

    def _dependency_list(self, items: List[str]) -> str:
        if not items:
            return "- 无\n"
        return "".join(f"- {item}\n" for item in items)

    def render_api_reference(self, module_data: ModuleData) -> str:
        name = module_data.name
        content = f"""# {name} API参考

## 概述

本文档包含{name}模块的所有公共API接口。

> **注意**: 本文档仅包含公共API函数，宏定义和内部实现细节已过滤。

## 函数

"""
        functions = module_data.functions
        if functions:
            if len(functions) > self.max_functions:
                content += (
                    f"> **提示**: 本模块共有 {len(functions)} 个函数，"
                    f"此处仅显示前 {self.max_functions} 个。完整列表请查看JSON数据文件。\n\n"
                )
            for func in functions[: self.max_functions]:
                content += self.format_function(func)
        else:
            content += "暂无函数定义。\n"

        content += "\n## 枚举\n\n"
        if module_data.enums:
            for enum in module_data.enums:
                content += self.format_enum(enum)
        else:
            content += "暂无枚举定义。\n"

        content += "\n## 结构体\n\n"
        if module_data.structs:
            for struct in module_data.structs:
                content += self.format_struct(struct)
        else:
            content += "暂无结构体定义。\n"

        return content

    def render_classes(self, module_data: ModuleData) -> str:
        name = module_data.name
        content = f"""# {name} 类文档

## 概述

本文档包含{name}模块中所有类的详细信息。

"""
        if module_data.classes:
            for cls in module_data.classes:
                content += self.format_class(cls)
        else:
            content += "暂无类定义。\n"

        return content

    def render_best_practices(self, module_data: ModuleData) -> str:
        practices = self.practices_extractor.extract_from_module(module_data)
        practices_content = self.practices_extractor.format_practices_markdown(practices)

        return f"""# {module_data.name} 最佳实践

## 概述

本文档包含使用{module_data.name}模块的最佳实践建议。

{practices_content}
"""

    def render_examples(self, module_data: ModuleData) -> str:
        examples = self.example_extractor.generate_usage_examples(module_data)
        examples_content = self.example_extractor.format_examples_markdown(examples)

        return f"""# {module_data.name} 使用示例

## 概述

本文档包含{module_data.name}模块的常见使用示例。

{examples_content}

## 更多示例

更多详细示例请参考：
- UE5官方文档
- 引擎示例项目
- 模块源码中的注释和测试代码

"""

    # ==================== 单条记录 ====================

    def format_function(self, func: FunctionRecord) -> str:
        params = ", ".join(f"{p.type} {p.name}" for p in func.parameters)
        prefix = ("static " if func.is_static else "") + ("virtual " if func.is_virtual else "")

        # 只在展示时去掉开头的导出宏，记录本身保持原样
        return_type = " ".join(func.return_type.split())
        if return_type.startswith(EXPORT_MACRO_PREFIXES):
            parts = return_type.split(" ")
            return_type = " ".join(parts[1:]) if len(parts) > 1 else "void"

        return f"""### {prefix}{func.name}

```cpp
{return_type} {func.name}({params});
```

- **返回类型**: `{return_type}`
- **参数**: {params or '无'}
- **文件**: `{func.file_path}`

"""

    def format_enum(self, enum: EnumRecord) -> str:
        content = f"### {enum.name}\n\n```cpp\nenum {enum.name} {{\n"

        for value in enum.values:
            if value.value:
                content += f"    {value.name} = {value.value},\n"
            else:
                content += f"    {value.name},\n"

        content += f"}};\n```\n\n- **文件**: `{enum.file_path}`\n\n"
        return content

    def format_struct(self, struct: StructRecord) -> str:
        return f"### {struct.name}\n\n- **文件**: `{struct.file_path}`\n\n"

    def format_class(self, cls: ClassRecord) -> str:
        base_classes = ", ".join(cls.base_classes)
        inheritance = f" : public {base_classes}" if base_classes else ""

        return f"""## {cls.name}

```cpp
class {cls.name}{inheritance} {{
    // ...
}};
```

- **基类**: {base_classes or '无'}
- **文件**: `{cls.file_path}`


"""

    # ==================== 索引 ====================

    def generate_index(self, all_modules: List[ModuleData]) -> Path:
        """index.md：按类别列出所有模块"""
        content = f"""# UE{self.engine_version} 引擎API文档索引

## 概述

本文档是UE{self.engine_version}引擎源码API文档的总索引。文档基于引擎源码自动生成，包含所有模块的API参考、类文档、最佳实践和使用示例。

- **引擎版本**: {self.engine_version}
- **生成时间**: {_now()}
- **模块总数**: {len(all_modules)}

## 模块列表
"""
        categories = list(INDEX_CATEGORIES)
        if any(m.category == "Plugins" for m in all_modules):
            categories.append("Plugins")

        for category in categories:
            content += f"\n### {category}模块\n\n"
            modules = sorted(
                (m for m in all_modules if m.category == category), key=lambda m: m.name
            )
            for module in modules:
                content += f"- [{module.name}](modules/{module.name}/overview.md)\n"

        content += """
## 使用说明

1. 浏览模块列表，找到你需要的模块
2. 查看模块概览了解模块用途和依赖关系
3. 参考API文档了解具体的接口
4. 查看类文档了解类的继承关系和使用方法
5. 参考最佳实践和使用示例学习如何正确使用

## 文档结构

每个模块的文档包含以下部分：

- **overview.md**: 模块概览、依赖关系、统计信息
- **api.md**: 所有公共API的详细说明
- **classes.md**: 类的继承关系、成员函数、属性
- **best-practices.md**: 基于代码分析的最佳实践
- **examples.md**: 常见使用场景的代码示例

## 注意事项

- 本文档基于引擎源码自动生成，可能存在解析不准确的情况
- 建议结合官方文档和示例代码使用
- 文档使用相对路径，不依赖引擎源码的绝对路径
"""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        index_path = self.output_dir / "index.md"
        self._write(index_path, content)
        return index_path

    def generate_readme(self) -> Path:
        """README.md：文档集说明"""
        content = f"""# UE{self.engine_version} 引擎API文档

## 概述

本文档集合包含UE{self.engine_version}引擎源码的API文档，由自动化工具生成。

## 文档结构

```
{self.output_dir.name}/
├── modules/          # 按模块组织的文档
│   ├── Core/
│   │   ├── overview.md
│   │   ├── api.md
│   │   ├── classes.md
│   │   ├── best-practices.md
│   │   └── examples.md
│   └── ...
├── data/             # JSON结构化数据
│   ├── modules.json
│   ├── api-index.json
│   └── [module-name].json
├── index.md          # 总索引
└── README.md         # 本文件
```

## 使用方式

### 浏览文档

1. 打开 `index.md` 查看所有模块列表
2. 选择需要的模块，查看其文档
3. 使用Markdown阅读器或GitHub查看文档

### 程序化查询

使用 `data/` 目录下的JSON文件进行程序化查询：

```python
import json

with open("data/modules.json", encoding="utf-8") as f:
    modules = json.load(f)

core = next(m for m in modules["modules"] if m["name"] == "Core")
```

## 路径说明

文档中所有路径引用使用相对路径格式：
- `Engine/Source/Runtime/Core`
- `Engine/Source/Editor/LevelEditor`

不包含绝对路径，可以在不同环境中使用。

## 版本信息

- **引擎版本**: {self.engine_version}
- **文档生成工具**: ue-docgen
- **生成时间**: {_now()}
"""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        readme_path = self.output_dir / "README.md"
        self._write(readme_path, content)
        return readme_path
