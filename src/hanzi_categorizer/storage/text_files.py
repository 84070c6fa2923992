"""纯文本输入读取与分类结果写出。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping

from ..errors import InputOpenError, OutputCreateError
from ..models.category import Category
from ..core.text_utils import collapse_lines

logger = logging.getLogger(__name__)


def read_text_buffer(path: str | Path, encoding: str = "utf-8") -> str:
    """读取输入文件并拼成单个缓冲（换行折叠为空格）。"""

    file_path = Path(path)
    try:
        with file_path.open("r", encoding=encoding, newline="") as handle:
            content = collapse_lines(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputOpenError(f"无法读取输入文件 {file_path}：{exc}") from exc
    logger.info("已读取输入文件 %s（%d 个字符）", file_path, len(content))
    return content


def write_ranked_list(
    path: str | Path,
    items: Iterable[str],
    encoding: str = "utf-8",
    category: str | None = None,
) -> Path:
    """每行写一个条目并以换行结尾；没有条目时仍然创建空文件。"""

    file_path = Path(path)
    try:
        with file_path.open("w", encoding=encoding, newline="\n") as handle:
            for item in items:
                handle.write(item + "\n")
    except OSError as exc:
        label = category or file_path.name
        raise OutputCreateError(f"无法创建 {label} 的输出文件 {file_path}：{exc}", category=category) from exc
    return file_path


def write_categories(
    output_dir: str | Path,
    ranked: Mapping[Category, List[str]],
    category_files: Dict[Category, str],
    encoding: str = "utf-8",
) -> List[Path]:
    """按类别顺序逐个写出。

    任一类别失败即中止：已经写出的文件保留在磁盘上，后续类别不再尝试。
    输出目录不会自动创建。
    """

    directory = Path(output_dir)
    written: List[Path] = []
    for category in Category:
        filename = category_files.get(category, category.filename)
        path = write_ranked_list(
            directory / filename,
            ranked.get(category, []),
            encoding=encoding,
            category=category.value,
        )
        logger.debug("%s：写出 %d 条", category.value, len(ranked.get(category, [])))
        written.append(path)
    logger.info("已向 %s 写出 %d 个文件", directory, len(written))
    return written
