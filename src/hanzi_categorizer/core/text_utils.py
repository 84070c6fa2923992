"""汉字文字判定、逐字拆分与输入缓冲拼接。"""

from __future__ import annotations

import re
from typing import Iterable, List

# Unicode Script=Han 的全部码位区段（部首、〇々等标记、基本区与扩展 A–H、兼容区）。
HAN_CLASS = (
    r"\u2E80-\u2E99\u2E9B-\u2EF3\u2F00-\u2FD5"
    r"\u3005\u3007\u3021-\u3029\u3038-\u303B"
    r"\u3400-\u4DBF\u4E00-\u9FFF\uF900-\uFA6D\uFA70-\uFAD9"
    r"\U00016FE2\U00016FE3\U00016FF0\U00016FF1"
    r"\U00020000-\U0002A6DF\U0002A700-\U0002B739\U0002B740-\U0002B81D"
    r"\U0002B820-\U0002CEA1\U0002CEB0-\U0002EBE0\U0002EBF0-\U0002EE5D"
    r"\U0002F800-\U0002FA1D\U00030000-\U0003134A\U00031350-\U000323AF"
)

HAN_PATTERN = re.compile(f"[{HAN_CLASS}]")
# 汉字之外只允许空格与连字符
CHINESE_TEXT_PATTERN = re.compile(f"[{HAN_CLASS} \\-]*")


def is_chinese_text(text: str) -> bool:
    """判断文本是否只由汉字、空格、连字符组成；空串视为真。"""

    return CHINESE_TEXT_PATTERN.fullmatch(text) is not None


def extract_characters(text: str) -> List[str]:
    """按原顺序拆出全部汉字，非汉字直接丢弃。"""

    if not text:
        return []
    return HAN_PATTERN.findall(text)


def collapse_lines(lines: Iterable[str]) -> str:
    """把多行拼成一个缓冲：每行去掉换行符后补一个空格。

    不重新引入句子边界，整段文本一次交给标注器。
    """

    return "".join(line.rstrip("\r\n") + " " for line in lines)
