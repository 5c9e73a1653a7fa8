"""
練習模組

比對核心的呼叫端：打字作答驗證、對話驗證、口說評分與詞彙索引。

安裝中文支援 (ASR 轉寫為漢字時需要):
    pip install "pinyinmatch[ch]"
"""

from .answer_validator import (
    ConversationTurn,
    validate_conversation_response,
    validate_typed_answer,
)
from .speech_scorer import SpeechScorer, SpeechVerdict, character_similarity
from .utils import CHINESE_INSTALL_HINT, contains_hanzi, hanzi_to_pinyin, is_chinese_available, is_hanzi
from .vocabulary import DuplicateInfo, PracticeEntry, Segment, VocabularyIndex

__all__ = [
    "validate_typed_answer",
    "validate_conversation_response",
    "ConversationTurn",
    "SpeechScorer",
    "SpeechVerdict",
    "character_similarity",
    "DuplicateInfo",
    "PracticeEntry",
    "Segment",
    "VocabularyIndex",
    "is_hanzi",
    "contains_hanzi",
    "hanzi_to_pinyin",
    "is_chinese_available",
    "CHINESE_INSTALL_HINT",
]
