"""
核心層

拼音正規化、音節對齊與兩種比對策略，皆為無 I/O 的純函式/無狀態物件。
"""

from .alignment import AlignedPair, align_tokens
from .normalizer import (
    TONE_MAP,
    normalize_pinyin,
    normalize_pinyin_word,
    pinyin_equal,
    strip_tone_marks,
    tokenize_pinyin_words,
)
from .strategies import ExactPrefixSuffixRule, TokenAlignmentDiff
from .strategy_interface import MatchStrategy
from .verdict import MatchVerdict, Mismatch, ValidationRules

__all__ = [
    "TONE_MAP",
    "strip_tone_marks",
    "normalize_pinyin",
    "normalize_pinyin_word",
    "pinyin_equal",
    "tokenize_pinyin_words",
    "AlignedPair",
    "align_tokens",
    "MatchStrategy",
    "TokenAlignmentDiff",
    "ExactPrefixSuffixRule",
    "MatchVerdict",
    "Mismatch",
    "ValidationRules",
]
