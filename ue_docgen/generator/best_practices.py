"""最佳实践提取"""

from typing import Dict, List

from ..models import BestPractice, ModuleData

DEFAULT_PRACTICES_MARKDOWN = """## 最佳实践

本文档正在完善中，将基于代码分析提取最佳实践模式。

### 通用建议

1. 参考官方文档和示例代码
2. 遵循UE5编码规范
3. 注意模块依赖关系
4. 使用UE5的反射系统和宏系统

"""


class BestPracticesExtractor:
    """按模块类别和 API 命名模式给出最佳实践"""

    def extract_from_module(self, module_data: ModuleData) -> List[BestPractice]:
        practices: List[BestPractice] = []

        if module_data.category == "Runtime":
            practices.extend(self._runtime_practices(module_data.name))
        elif module_data.category == "Editor":
            practices.extend(self._editor_practices())

        practices.extend(self._api_practices(module_data))
        return practices

    def _runtime_practices(self, module_name: str) -> List[BestPractice]:
        if module_name != "Core":
            return []

        return [
            BestPractice(
                title="使用智能指针管理内存",
                description="优先使用TSharedPtr、TUniquePtr等智能指针，避免手动内存管理",
                category="内存管理",
            ),
            BestPractice(
                title="使用容器类",
                description="使用TArray、TMap等UE5容器类，而不是STL容器",
                category="容器使用",
            ),
        ]

    def _editor_practices(self) -> List[BestPractice]:
        return [
            BestPractice(
                title="编辑器工具开发",
                description="使用EditorSubsystem和EditorUtilityWidget开发编辑器工具",
                category="编辑器开发",
            )
        ]

    def _api_practices(self, module_data: ModuleData) -> List[BestPractice]:
        """类名含 Singleton / Manager 时视为单例"""
        practices: List[BestPractice] = []

        for cls in module_data.classes:
            if "Singleton" in cls.name or "Manager" in cls.name:
                practices.append(
                    BestPractice(
                        title=f"使用 {cls.name} 单例",
                        description=f"{cls.name}采用单例模式，使用Get()方法获取实例",
                        category="设计模式",
                    )
                )

        return practices

    def format_practices_markdown(self, practices: List[BestPractice]) -> str:
        """按类别分组格式化为 Markdown"""
        if not practices:
            return DEFAULT_PRACTICES_MARKDOWN

        grouped: Dict[str, List[BestPractice]] = {}
        for practice in practices:
            grouped.setdefault(practice.category or "其他", []).append(practice)

        content = "## 最佳实践\n\n"
        for category, items in grouped.items():
            content += f"### {category}\n\n"
            for practice in items:
                content += f"#### {practice.title}\n\n{practice.description}\n\n"

        return content
