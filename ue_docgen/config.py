"""配置管理模块"""

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "source": {
        # 源码目录（相对于工作目录）
        "source_dir": "Engine/Source",
        "plugins_dir": "",
        # 要处理的模块类别
        "module_categories": ["Runtime", "Editor", "Developer", "Programs"],
        # 排除的目录
        "exclude_dirs": ["ThirdParty"],
    },
    "output": {
        "output_dir": "docs/ue5-api",
        "engine_version": "5.1",
        "formats": ["markdown", "json"],
        # api.md 中最多列出的函数数
        "max_functions": 500,
    },
    "logging": {
        "log_file": "generation.log",
        "report_file": "generation_report.txt",
        "verbose": False,
    },
}

SUPPORTED_FORMATS = ("markdown", "json")


class Config:
    """配置管理类"""

    _instance: Optional["Config"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._config:
            self.load()

    def load(self, config_path: Optional[Path] = None) -> None:
        """加载配置文件，缺失的键用默认值补齐"""
        if config_path is None:
            # 默认在项目根目录查找 config.yaml
            config_path = Path(__file__).parent.parent / "config.yaml"

        config = copy.deepcopy(DEFAULT_CONFIG)

        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            # 顶层不是映射时忽略整个文件
            if not isinstance(loaded, dict):
                loaded = {}
            for section, values in loaded.items():
                if isinstance(values, dict) and isinstance(config.get(section), dict):
                    config[section].update(values)
                else:
                    config[section] = values

        self._config = config

    def get(self, key: str, default: Any = None) -> Any:
        """获取配置值，支持点号分隔的嵌套键"""
        keys = key.split(".")
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
            if value is None:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """设置配置值"""
        keys = key.split(".")
        config = self._config
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]
        config[keys[-1]] = value

    @property
    def source(self) -> Dict[str, Any]:
        """源码扫描配置"""
        return self._config.get("source", {})

    @property
    def output(self) -> Dict[str, Any]:
        """输出配置"""
        return self._config.get("output", {})

    @property
    def logging(self) -> Dict[str, Any]:
        """日志配置"""
        return self._config.get("logging", {})


def get_config() -> Config:
    """获取配置实例"""
    return Config()


@dataclass
class GeneratorSettings:
    """一次生成任务的最终参数"""

    source_dir: Path
    output_dir: Path
    plugins_dir: Optional[Path] = None
    engine_version: str = "5.1"
    module_categories: List[str] = field(default_factory=list)
    exclude_dirs: List[str] = field(default_factory=list)
    formats: List[str] = field(default_factory=lambda: list(SUPPORTED_FORMATS))
    max_functions: int = 500
    log_file: str = "generation.log"
    report_file: str = "generation_report.txt"
    verbose: bool = False


def get_settings(**overrides: Any) -> GeneratorSettings:
    """
    合并配置文件和命令行参数

    值为 None 的覆盖项视为未指定，使用配置文件中的值。

    Raises:
        ValueError: 输出格式不受支持
    """
    config = get_config()
    overrides = {k: v for k, v in overrides.items() if v is not None}

    plugins_dir = overrides.get("plugins_dir", config.get("source.plugins_dir", ""))
    formats = list(overrides.get("formats", config.get("output.formats", list(SUPPORTED_FORMATS))))

    unknown = [fmt for fmt in formats if fmt not in SUPPORTED_FORMATS]
    if unknown:
        raise ValueError(f"不支持的输出格式: {', '.join(unknown)}")

    return GeneratorSettings(
        source_dir=Path(overrides.get("source_dir", config.get("source.source_dir", "Engine/Source"))),
        output_dir=Path(overrides.get("output_dir", config.get("output.output_dir", "docs/ue5-api"))),
        plugins_dir=Path(plugins_dir) if plugins_dir else None,
        engine_version=str(overrides.get("engine_version", config.get("output.engine_version", "5.1"))),
        module_categories=list(
            overrides.get("module_categories", config.get("source.module_categories", []))
        ),
        exclude_dirs=list(overrides.get("exclude_dirs", config.get("source.exclude_dirs", []))),
        formats=formats,
        max_functions=int(overrides.get("max_functions", config.get("output.max_functions", 500))),
        log_file=overrides.get("log_file", config.get("logging.log_file", "generation.log")),
        report_file=overrides.get(
            "report_file", config.get("logging.report_file", "generation_report.txt")
        ),
        verbose=bool(overrides.get("verbose", config.get("logging.verbose", False))),
    )
