"""
pinyinmatch - 拼音作答驗證與口說評分 (Pinyin Answer Verification)

核心概念：
- 把拼音統一轉到「無聲調、小寫、無標點」的比對維度
- 打字作答與 ASR 轉寫同樣轉到此維度，再做音節對齊或規則式驗收
- 比對結果帶有相似度與逐音節差異，供介面標示錯誤

官方入口（穩定 API）：
- `pinyinmatch.normalize_pinyin` / `normalize_pinyin_word` / `strip_tone_marks`
- `pinyinmatch.match`
- `pinyinmatch.SpeechScorer`
"""

# =============================================================================
# 核心層（正規化與比對）
# =============================================================================
from pinyinmatch.core.normalizer import (
    normalize_pinyin,
    normalize_pinyin_word,
    pinyin_equal,
    strip_tone_marks,
    tokenize_pinyin_words,
)
from pinyinmatch.core.strategies import ExactPrefixSuffixRule, TokenAlignmentDiff
from pinyinmatch.core.strategy_interface import MatchStrategy
from pinyinmatch.core.verdict import MatchVerdict, Mismatch, ValidationRules
from pinyinmatch.matcher import match

# =============================================================================
# 練習呼叫端
# =============================================================================
from pinyinmatch.practice import (
    ConversationTurn,
    PracticeEntry,
    SpeechScorer,
    SpeechVerdict,
    VocabularyIndex,
    validate_conversation_response,
    validate_typed_answer,
)

# =============================================================================
# 配置與日誌工具
# =============================================================================
from pinyinmatch.config import DEFAULT_CONFIG, MatcherConfig
from pinyinmatch.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Normalizer
    "strip_tone_marks",
    "normalize_pinyin",
    "normalize_pinyin_word",
    "pinyin_equal",
    "tokenize_pinyin_words",
    # Matcher
    "match",
    "MatchVerdict",
    "Mismatch",
    "ValidationRules",
    "MatchStrategy",
    "TokenAlignmentDiff",
    "ExactPrefixSuffixRule",
    # Practice
    "validate_typed_answer",
    "validate_conversation_response",
    "ConversationTurn",
    "SpeechScorer",
    "SpeechVerdict",
    "PracticeEntry",
    "VocabularyIndex",
    # Config / logging
    "MatcherConfig",
    "DEFAULT_CONFIG",
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
