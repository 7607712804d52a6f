"""UE 引擎 API 文档生成器

扫描 Engine/Source 下的模块，从头文件中提取类、函数、枚举、结构体声明，
生成 Markdown 文档和 JSON 数据。
"""

__version__ = "0.1.0"
