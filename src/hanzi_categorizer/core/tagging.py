"""中文分词与词性标注入口。"""

from __future__ import annotations

import importlib.util
import logging
import re
import warnings
from typing import AbstractSet, Iterable, List, Tuple

from ..config import CategorizerConfig
from ..errors import TaggerUnavailableError, TokenizationError
from ..models.token import PosTag, Token
from .text_utils import HAN_CLASS

logger = logging.getLogger(__name__)

BACKENDS = ("jieba", "ltp", "simple")

# jieba 自定义词条使用的词性：i 为成语，l 为习用语
IDIOM_FLAG = "i"
SLANG_FLAG = "l"

# 个别双字母标记要先于首字母规则判断
_FLAG_OVERRIDES = {
    "rz": PosTag.determiner,
    "ad": PosTag.adverb,
    "vd": PosTag.adverb,
    "an": PosTag.noun,
    "vn": PosTag.noun,
}
_FLAG_PREFIXES = {
    "n": PosTag.noun,
    "v": PosTag.verb,
    "a": PosTag.adjective,
    "d": PosTag.adverb,
}

_SIMPLE_TOKEN_PATTERN = re.compile(f"[{HAN_CLASS}]|[^\\s{HAN_CLASS}]+")


def map_pos_flag(
    word: str,
    flag: str,
    modal_words: AbstractSet[str] = frozenset(),
    determiner_words: AbstractSet[str] = frozenset(),
) -> PosTag:
    """把 jieba（ICTCLAS）或 LTP（863）词性标记映射为粗粒度标签。"""

    if word in determiner_words:
        return PosTag.determiner
    flag = (flag or "").lower()
    tag = _FLAG_OVERRIDES.get(flag)
    if tag is None:
        tag = _FLAG_PREFIXES.get(flag[:1], PosTag.other)
    if tag is PosTag.verb and word in modal_words:
        return PosTag.modal
    return tag


class PosTagger:
    """词性标注器，作为分类引擎的外部协作者。

    后端优先顺序：jieba（轻量成熟）→ LTP（更准但依赖重）→ simple（内置退化方案）。
    simple 后端没有词性信息，所有词元都标为 other。
    """

    def __init__(
        self,
        backend: str | None = None,
        extra_words: Iterable[Tuple[str, str]] | None = None,
        config: CategorizerConfig | None = None,
    ) -> None:
        self.config = config or CategorizerConfig()
        if backend is not None and backend not in BACKENDS:
            raise TaggerUnavailableError(f"未知的标注后端：{backend}")
        self.backend = backend or self._detect_backend()
        self._jieba_tagger = None
        self._ltp_model = None
        self._extra_words = list(extra_words or [])
        if self.backend != "simple":
            self._ensure_available(self.backend)
        if self._extra_words and self.backend != "jieba":
            # 自定义词条只登记进 jieba 词典
            logger.debug(
                "%s 后端不登记自定义词条，忽略 %d 条成语/俚语",
                self.backend,
                len(self._extra_words),
            )

    @classmethod
    def from_config(cls, config: CategorizerConfig) -> "PosTagger":
        """按配置构造，必要时把成语/俚语表登记为自定义词条。"""

        extra_words: List[Tuple[str, str]] = []
        if config.register_phrase_lists:
            extra_words.extend((word, IDIOM_FLAG) for word in config.idioms)
            extra_words.extend((word, SLANG_FLAG) for word in config.slang)
        return cls(backend=config.tagger_backend, extra_words=extra_words, config=config)

    def tag(self, text: str) -> List[Token]:
        """标注整段文本，返回列表以便多次遍历得到相同结果。"""

        if not text:
            return []
        try:
            if self.backend == "jieba":
                pairs = self._jieba_tag(text)
            elif self.backend == "ltp":
                pairs = self._ltp_tag(text)
            else:
                return self._simple_tag(text)
        except Exception as exc:
            raise TokenizationError(f"词性标注失败（{self.backend}）：{exc}") from exc
        tokens = [
            Token(
                text=word,
                tag=map_pos_flag(
                    word,
                    flag,
                    self.config.modal_words,
                    self.config.determiner_words,
                ),
            )
            for word, flag in pairs
            if word.strip()
        ]
        logger.debug("%s 后端标注出 %d 个词元", self.backend, len(tokens))
        return tokens

    def _jieba_tag(self, text: str) -> List[Tuple[str, str]]:
        if self._jieba_tagger is None:
            import jieba
            from jieba import posseg

            # 使用独立的分词器实例，自定义词条不会污染全局词典
            tokenizer = jieba.Tokenizer()
            for word, flag in self._extra_words:
                tokenizer.add_word(word, tag=flag)
            self._jieba_tagger = posseg.POSTokenizer(tokenizer)
        return [(pair.word, pair.flag) for pair in self._jieba_tagger.cut(text, HMM=True)]

    def _ltp_tag(self, text: str) -> List[Tuple[str, str]]:
        if self._ltp_model is None:
            from ltp import LTP

            self._ltp_model = LTP()
        seg, hidden = self._ltp_model.seg([text])
        pos = self._ltp_model.pos(hidden)
        return list(zip(seg[0], pos[0]))

    def _simple_tag(self, text: str) -> List[Token]:
        # 汉字逐字切分，其余连续非空白字符整体保留
        return [Token(text=match, tag=PosTag.other) for match in _SIMPLE_TOKEN_PATTERN.findall(text)]

    def _ensure_available(self, backend: str) -> None:
        if importlib.util.find_spec(backend) is None:
            raise TaggerUnavailableError(
                f"无法加载 {backend}，请先安装：python -m pip install {backend}"
            )

    def _detect_backend(self) -> str:
        if importlib.util.find_spec("jieba") is not None:
            return "jieba"
        if importlib.util.find_spec("ltp") is not None:
            return "ltp"
        warnings.warn(
            "未检测到 jieba 或 ltp，退化为 simple 后端，所有词元都会归入其他表达。",
            RuntimeWarning,
        )
        return "simple"
