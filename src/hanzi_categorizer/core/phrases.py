"""名词短语、动词短语的相邻合并。"""

from __future__ import annotations

from typing import AbstractSet, Iterable, List

from ..models.token import NOUN_GROUP, VERB_GROUP, PosTag, Token
from .text_utils import is_chinese_text


def chunk_phrases(tokens: Iterable[Token], tag_group: AbstractSet[PosTag]) -> List[str]:
    """从左到右单次扫描，把相邻的组内词元用空格拼成短语。

    非中文词元与组外词元都视为边界：缓冲非空时先输出再清空。
    扫描结束后缓冲里剩余的词元也要输出，末尾短语不会丢失。
    """

    phrases: List[str] = []
    buffer: List[str] = []
    for token in tokens:
        if is_chinese_text(token.text) and token.tag in tag_group:
            buffer.append(token.text)
            continue
        if buffer:
            phrases.append(" ".join(buffer))
            buffer = []
    if buffer:
        phrases.append(" ".join(buffer))
    return phrases


def extract_noun_phrases(tokens: Iterable[Token]) -> List[str]:
    return chunk_phrases(tokens, NOUN_GROUP)


def extract_verb_phrases(tokens: Iterable[Token]) -> List[str]:
    return chunk_phrases(tokens, VERB_GROUP)
