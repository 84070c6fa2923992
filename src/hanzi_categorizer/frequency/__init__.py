"""频次统计与排序工具。"""

from .ranking import capitalize_first, count_frequencies, rank, sort_by_frequency

__all__ = [
    "capitalize_first",
    "count_frequencies",
    "rank",
    "sort_by_frequency",
]
