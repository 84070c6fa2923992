"""词性标签与带标签的词元模型。"""

from dataclasses import dataclass
from enum import Enum


class PosTag(str, Enum):
    """外部标注器输出的词性标签（封闭集合）。

    标签体系沿用英文风格的粗粒度词类，不保证对中文的语言学准确性。
    """

    noun = "noun"
    verb = "verb"
    adjective = "adjective"
    adverb = "adverb"
    determiner = "determiner"
    modal = "modal"
    other = "other"


@dataclass(frozen=True)
class Token:
    """标注器产出的词元：表层文本加词性，产出后不可变。"""

    text: str
    tag: PosTag


# 名词短语组：限定词、名词、形容词可以相邻合并
NOUN_GROUP = frozenset({PosTag.determiner, PosTag.noun, PosTag.adjective})
# 动词短语组：动词、副词、情态词可以相邻合并
VERB_GROUP = frozenset({PosTag.verb, PosTag.adverb, PosTag.modal})
