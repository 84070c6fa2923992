"""频次统计与排序规则。"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List


def capitalize_first(item: str) -> str:
    """只把首字符转成大写，其余保持原样。"""

    if not item:
        return item
    return item[0].upper() + item[1:]


def count_frequencies(items: Iterable[str]) -> Counter:
    """统计规范化后各条目的出现次数。

    说明：Counter 按首次出现的顺序保存键，排序时据此决定并列条目的先后。
    """

    counts: Counter = Counter()
    for item in items:
        counts[capitalize_first(item)] += 1
    return counts


def sort_by_frequency(counts: Counter) -> List[str]:
    # sorted 是稳定排序，频次相同的条目保持首次出现的顺序
    ordered = sorted(counts.items(), key=lambda entry: entry[1], reverse=True)
    return [item for item, _ in ordered]


def rank(items: Iterable[str]) -> List[str]:
    """去重后按频次从高到低排列；空输入返回空列表。"""

    return sort_by_frequency(count_frequencies(items))
