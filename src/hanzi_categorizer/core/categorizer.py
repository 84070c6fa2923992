"""分类流程编排：读入 → 标注 → 分类/短语 → 排序 → 写出。"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Protocol

from ..config import CategorizerConfig
from ..frequency.ranking import rank
from ..models.category import Category
from ..models.token import Token
from ..storage.text_files import read_text_buffer, write_categories
from .classifier import classify
from .phrases import extract_noun_phrases, extract_verb_phrases
from .tagging import PosTagger

logger = logging.getLogger(__name__)


class Tagger(Protocol):
    def tag(self, text: str) -> List[Token]:
        ...


@dataclass
class CategorizationResult:
    """一次运行的产物，全部为临时数据。"""

    tokens: List[Token]
    collected: Dict[Category, List[str]]
    ranked: Dict[Category, List[str]]
    written: List[Path] = field(default_factory=list)

    def summary(self) -> Dict[Category, int]:
        """各类别去重后的条目数。"""

        return {category: len(self.ranked.get(category, [])) for category in Category}


class Categorizer:
    """中文文本分类引擎。

    标注器是外部协作者，可以注入任何带 tag(text) 方法的对象；
    不注入时按配置构造 PosTagger。
    """

    def __init__(self, config: CategorizerConfig | None = None, tagger: Tagger | None = None) -> None:
        self.config = config or CategorizerConfig()
        self.tagger = tagger or PosTagger.from_config(self.config)

    def collect(self, tokens: List[Token]) -> Dict[Category, List[str]]:
        """对同一词元流做一次分类与两次短语合并，返回全部 11 个类别的原始条目。"""

        collected: Dict[Category, List[str]] = {category: [] for category in Category}
        collected.update(classify(tokens, self.config.idioms, self.config.slang))
        collected[Category.noun_phrases] = extract_noun_phrases(tokens)
        collected[Category.verb_phrases] = extract_verb_phrases(tokens)
        return collected

    def rank_all(self, collected: Dict[Category, List[str]]) -> Dict[Category, List[str]]:
        ranked: Dict[Category, List[str]] = {}
        for category in Category:
            ranked[category] = rank(collected.get(category, []))
            logger.debug(
                "%s：%d 条，去重后 %d 条",
                category.value,
                len(collected.get(category, [])),
                len(ranked[category]),
            )
        return ranked

    def categorize_text(self, text: str) -> CategorizationResult:
        tokens = self.tagger.tag(text)
        logger.info("标注完成，共 %d 个词元", len(tokens))
        collected = self.collect(tokens)
        ranked = self.rank_all(collected)
        return CategorizationResult(tokens=tokens, collected=collected, ranked=ranked)

    def categorize_file(self, input_path: str | Path, output_dir: str | Path) -> CategorizationResult:
        """完整运行一次；任何阶段出错立即中止，不做重试与回滚。"""

        text = read_text_buffer(input_path, encoding=self.config.input_encoding)
        result = self.categorize_text(text)
        result.written = write_categories(
            output_dir,
            result.ranked,
            self.config.category_files,
            encoding=self.config.output_encoding,
        )
        return result
