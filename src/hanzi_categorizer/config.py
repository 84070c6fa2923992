"""全局配置与默认参数。"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, List, Tuple

from .models.category import Category

DEFAULT_IDIOMS: Tuple[str, ...] = ("井底之蛙", "守株待兔", "画蛇添足", "纸上谈兵")
DEFAULT_SLANG: Tuple[str, ...] = ("吃土", "学霸", "宅男", "高富帅")

# 标注器只给出“动词”，情态动词需要按词表再细分
DEFAULT_MODAL_WORDS: FrozenSet[str] = frozenset(
    {"能", "能够", "会", "可以", "可", "应该", "应当", "应", "必须", "得", "要", "想", "敢", "肯", "愿意", "愿", "可能"}
)
DEFAULT_DETERMINER_WORDS: FrozenSet[str] = frozenset(
    {"这", "那", "这些", "那些", "这个", "那个", "每", "各", "某", "本", "该", "所有", "全部", "一切", "任何", "其他", "其余"}
)


def default_category_files() -> Dict[Category, str]:
    return {category: category.filename for category in Category}


@dataclass(frozen=True)
class CategorizerConfig:
    """一次分类运行的全部参数。

    注意：配置显式传给分类器与写出层，不依赖模块级全局变量，
    便于在测试里换用别的成语/俚语表。
    """

    # 成语表：整词（忽略大小写）完全相等才算命中
    idioms: Tuple[str, ...] = DEFAULT_IDIOMS
    # 俚语表：匹配规则同成语表
    slang: Tuple[str, ...] = DEFAULT_SLANG
    # 类别到输出文件名的映射
    category_files: Dict[Category, str] = field(default_factory=default_category_files)
    # 标注后端：jieba、ltp、simple；None 表示自动探测
    tagger_backend: str | None = None
    # 是否把成语/俚语表登记进分词词典，保证它们整词切出
    register_phrase_lists: bool = True
    # 被标为动词时改判为情态词的词表
    modal_words: FrozenSet[str] = DEFAULT_MODAL_WORDS
    # 一律判为限定词的词表
    determiner_words: FrozenSet[str] = DEFAULT_DETERMINER_WORDS
    # 输入输出文件编码
    input_encoding: str = "utf-8"
    output_encoding: str = "utf-8"

    def with_phrase_lists(
        self,
        idioms_path: str | Path | None = None,
        slang_path: str | Path | None = None,
        encoding: str = "utf-8",
    ) -> "CategorizerConfig":
        """返回替换了成语/俚语表的新配置，未给出的路径保留原表。"""

        changes = {}
        if idioms_path is not None:
            changes["idioms"] = tuple(load_phrase_list(idioms_path, encoding=encoding))
        if slang_path is not None:
            changes["slang"] = tuple(load_phrase_list(slang_path, encoding=encoding))
        return dataclasses.replace(self, **changes)


def load_phrase_list(path: str | Path, encoding: str = "utf-8") -> List[str]:
    """读取外置词表：每行一条，忽略空行与 # 注释，去重并保留首次出现顺序。"""

    file_path = Path(path)
    entries: List[str] = []
    seen = set()
    for line in file_path.read_text(encoding=encoding).splitlines():
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        if entry in seen:
            continue
        seen.add(entry)
        entries.append(entry)
    return entries
