"""模块 Public 目录 API 解析"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .header_parser import HeaderParser
from .records import DeclarationSet, DeclarationSetBuilder

logger = logging.getLogger(__name__)

HEADER_EXTENSION = ".h"
GENERATED_SUFFIX = ".generated.h"


def get_engine_relative_path(file_path: Path, base_dir: Optional[Path] = None) -> str:
    """
    转换为以 Engine 开头的相对路径

    路径中没有 Engine 段时，相对 base_dir 计算；都不满足则原样返回。
    """
    parts = Path(file_path).parts
    if "Engine" in parts:
        return "/".join(parts[parts.index("Engine"):])

    if base_dir is not None:
        try:
            return Path(file_path).relative_to(base_dir).as_posix()
        except ValueError:
            pass

    return Path(file_path).as_posix()


class ApiParser:
    """解析一个模块 Public 目录下的全部头文件"""

    ENCODINGS = ["utf-8", "gbk", "latin-1"]

    def __init__(self, public_dir: Path, header_parser: Optional[HeaderParser] = None):
        """
        Args:
            public_dir: 模块 Public 目录
            header_parser: 声明解析器（默认新建）
        """
        self.public_dir = Path(public_dir).resolve()
        self.header_parser = header_parser or HeaderParser()
        self.skipped_files: List[str] = []

    def parse(self) -> DeclarationSet:
        """
        逐个解析头文件并按文件顺序拼接

        Returns:
            整个模块的声明集合；目录不存在时为空集合
        """
        self.skipped_files = []

        if not self.public_dir.is_dir():
            return DeclarationSet()

        builder = DeclarationSetBuilder()
        for relative_path, content in self.iter_headers():
            builder.extend(self.header_parser.parse_content(content, relative_path))

        return builder.build()

    def iter_headers(self) -> Iterator[Tuple[str, str]]:
        """依次产出 (相对路径, 文件全文)，读取失败的文件记录警告后跳过"""
        for header_file in self.find_header_files(self.public_dir):
            relative_path = get_engine_relative_path(header_file, self.public_dir)
            content = self._read_file(header_file)

            if content is None:
                logger.warning(f"跳过无法读取的头文件: {header_file}")
                self.skipped_files.append(relative_path)
                continue

            yield relative_path, content

    def find_header_files(self, root: Path) -> List[Path]:
        """递归查找 .h 文件，排除 .generated.h，按路径排序"""
        files: List[Path] = []

        try:
            entries = sorted(root.iterdir())
        except OSError as e:
            logger.warning(f"读取目录失败 {root}: {e}")
            return files

        for entry in entries:
            if entry.is_dir():
                files.extend(self.find_header_files(entry))
            elif (
                entry.is_file()
                and entry.name.endswith(HEADER_EXTENSION)
                and not entry.name.endswith(GENERATED_SUFFIX)
            ):
                files.append(entry)

        return files

    def _read_file(self, file_path: Path) -> Optional[str]:
        """读取文件内容"""
        for encoding in self.ENCODINGS:
            try:
                return file_path.read_text(encoding=encoding)
            except (UnicodeDecodeError, LookupError):
                continue
            except OSError:
                return None

        return None
