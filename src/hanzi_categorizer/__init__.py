"""中文文本词类分类与频次排序。"""

from __future__ import annotations

from .config import CategorizerConfig, load_phrase_list
from .core.categorizer import CategorizationResult, Categorizer
from .core.classifier import classify
from .core.phrases import chunk_phrases, extract_noun_phrases, extract_verb_phrases
from .core.tagging import PosTagger
from .core.text_utils import extract_characters, is_chinese_text
from .errors import (
    CategorizerError,
    InputOpenError,
    OutputCreateError,
    TaggerUnavailableError,
    TokenizationError,
)
from .frequency.ranking import rank
from .models import NOUN_GROUP, VERB_GROUP, Category, PosTag, Token

__all__ = [
    "CategorizationResult",
    "Categorizer",
    "CategorizerConfig",
    "CategorizerError",
    "Category",
    "InputOpenError",
    "NOUN_GROUP",
    "OutputCreateError",
    "PosTag",
    "PosTagger",
    "TaggerUnavailableError",
    "Token",
    "TokenizationError",
    "VERB_GROUP",
    "chunk_phrases",
    "classify",
    "extract_characters",
    "extract_noun_phrases",
    "extract_verb_phrases",
    "is_chinese_text",
    "load_phrase_list",
    "rank",
]
