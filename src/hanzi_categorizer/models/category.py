"""输出类别模型。"""

from enum import Enum
from typing import Dict

from .token import PosTag


class Category(str, Enum):
    """11 个固定输出类别，枚举值即输出文件名主干。

    枚举顺序就是处理与写出的顺序。
    """

    characters = "ChineseCharacters"
    adjectives = "ChineseAdjectives"
    adverbs = "ChineseAdverbs"
    common_phrases = "ChineseCommonPhrases"
    idioms = "ChineseIdioms"
    nouns = "ChineseNouns"
    noun_phrases = "ChineseNounPhrases"
    slang = "ChineseSlang"
    verb_phrases = "ChineseVerbPhrases"
    verbs = "ChineseVerbs"
    other_expressions = "ChineseOtherExpressions"

    @property
    def filename(self) -> str:
        return f"{self.value}.txt"


# 主类别表：每个词性标签都必须显式列出，新增标签时这里要一起改
PRIMARY_CATEGORIES: Dict[PosTag, Category] = {
    PosTag.noun: Category.nouns,
    PosTag.verb: Category.verbs,
    PosTag.adjective: Category.adjectives,
    PosTag.adverb: Category.adverbs,
    PosTag.determiner: Category.other_expressions,
    PosTag.modal: Category.other_expressions,
    PosTag.other: Category.other_expressions,
}
