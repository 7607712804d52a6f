"""日志配置"""

import logging
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

LOG_FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    配置控制台（Rich）和日志文件输出

    Args:
        verbose: 控制台输出 DEBUG 级别日志
        log_file: 日志文件路径，不指定则只输出到控制台
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # 重复调用时替换旧 handler
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(rich_tracebacks=True, show_path=False)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        root_logger.addHandler(file_handler)
