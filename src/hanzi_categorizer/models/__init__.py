"""数据模型。"""

from .category import PRIMARY_CATEGORIES, Category
from .token import NOUN_GROUP, VERB_GROUP, PosTag, Token

__all__ = [
    "Category",
    "NOUN_GROUP",
    "PRIMARY_CATEGORIES",
    "PosTag",
    "Token",
    "VERB_GROUP",
]
