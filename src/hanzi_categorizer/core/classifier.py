"""按词性把中文词元分到各个类别。"""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..models.category import PRIMARY_CATEGORIES, Category
from ..models.token import Token
from .text_utils import extract_characters, is_chinese_text

# classify 的结果里总会出现的类别，即使为空
CLASSIFIED_CATEGORIES = (
    Category.characters,
    Category.nouns,
    Category.verbs,
    Category.adjectives,
    Category.adverbs,
    Category.other_expressions,
    Category.idioms,
    Category.slang,
)


def matches_phrase_list(text: str, phrases: Iterable[str]) -> bool:
    """整词比较，忽略大小写；不做子串匹配。"""

    folded = text.casefold()
    return any(folded == phrase.casefold() for phrase in phrases)


def classify(
    tokens: Iterable[Token],
    idioms: Iterable[str],
    slang: Iterable[str],
) -> Dict[Category, List[str]]:
    """单次遍历词元流，填充字、主类别与成语/俚语类别。

    关键规则：
    - 非中文词元整体跳过，不进入任何类别；
    - 每个中文词元恰好进入名词/动词/形容词/副词/其他表达之一；
    - 成语、俚语是附加类别，与主类别互不排斥。
    """

    idiom_list = list(idioms)
    slang_list = list(slang)
    results: Dict[Category, List[str]] = {category: [] for category in CLASSIFIED_CATEGORIES}
    for token in tokens:
        text = token.text
        if not is_chinese_text(text):
            continue
        results[Category.characters].extend(extract_characters(text))
        results[PRIMARY_CATEGORIES[token.tag]].append(text)
        if matches_phrase_list(text, idiom_list):
            results[Category.idioms].append(text)
        if matches_phrase_list(text, slang_list):
            results[Category.slang].append(text)
    return results
