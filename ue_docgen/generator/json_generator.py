"""JSON 结构化数据生成"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from ..models import ModuleData


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class JsonGenerator:
    """输出 data/ 目录下的 JSON 文件

    记录字段名与原样文本保持不变（包括基类列表中的 XXX_API 之类的 token），
    下游工具依赖这些字段。
    """

    def __init__(self, output_dir: Path, engine_version: str):
        self.output_dir = Path(output_dir)
        self.engine_version = engine_version
        self.data_dir = self.output_dir / "data"

    def _write_json(self, file_name: str, data: Dict[str, Any]) -> Path:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.data_dir / file_name
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        return output_path

    def generate_module_data(self, module_data: ModuleData) -> Path:
        """data/<Module>.json：模块完整数据"""
        module_json = {
            "version": self.engine_version,
            "generated_at": _timestamp(),
            "module": {
                "name": module_data.name,
                "path": module_data.path,
                "category": module_data.category,
                "dependencies": module_data.dependencies.to_dict(),
                **module_data.declarations.to_dict(),
            },
        }
        return self._write_json(f"{module_data.name}.json", module_json)

    def generate_modules_index(self, all_modules: List[ModuleData]) -> Path:
        """data/modules.json：模块列表和统计"""
        modules_data = {
            "version": self.engine_version,
            "generated_at": _timestamp(),
            "module_count": len(all_modules),
            "modules": [m.summary() for m in all_modules],
        }
        return self._write_json("modules.json", modules_data)

    def generate_api_index(self, all_modules: List[ModuleData]) -> Path:
        """data/api-index.json：所有声明的扁平索引"""
        api_index: Dict[str, Any] = {
            "version": self.engine_version,
            "generated_at": _timestamp(),
            "classes": [],
            "functions": [],
            "enums": [],
            "structs": [],
        }

        for module in all_modules:
            for cls in module.classes:
                api_index["classes"].append(
                    {
                        "name": cls.name,
                        "module": module.name,
                        "base_classes": list(cls.base_classes),
                        "file_path": cls.file_path,
                    }
                )

            for func in module.functions:
                api_index["functions"].append(
                    {
                        "name": func.name,
                        "module": module.name,
                        "return_type": func.return_type,
                        "file_path": func.file_path,
                    }
                )

            for enum in module.enums:
                api_index["enums"].append(
                    {"name": enum.name, "module": module.name, "file_path": enum.file_path}
                )

            for struct in module.structs:
                api_index["structs"].append(
                    {"name": struct.name, "module": module.name, "file_path": struct.file_path}
                )

        return self._write_json("api-index.json", api_index)
