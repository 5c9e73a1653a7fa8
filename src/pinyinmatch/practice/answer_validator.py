"""
作答驗證 (Typed Answer Validation)

兩個呼叫端:
- 詞彙練習: 使用者輸入的拼音與目標比對，回傳完整 MatchVerdict
- 對話練習: 每一輪對話可附帶驗收規則，沒有規則時要求與預期拼音相同
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pinyinmatch.core.normalizer import _require_str, normalize_pinyin, pinyin_equal
from pinyinmatch.core.verdict import MatchVerdict, ValidationRules
from pinyinmatch.matcher import RulesInput, coerce_rules, match
from pinyinmatch.utils.logger import get_logger

logger = get_logger("practice.answer")


def validate_typed_answer(answer: str, expected: str) -> MatchVerdict:
    """
    詞彙練習的作答比對

    Args:
        answer: 使用者輸入
        expected: 目標拼音

    Returns:
        MatchVerdict: 含相似度與差異列表
    """
    verdict = match(answer, expected)
    logger.debug(f"typed answer {answer!r} vs {expected!r}: passed={verdict.passed}")
    return verdict


def validate_conversation_response(
    answer: str,
    expected_pinyin: str,
    rules: RulesInput = None,
) -> bool:
    """
    對話練習的作答驗證

    Args:
        answer: 使用者輸入
        expected_pinyin: 本輪預期的拼音
        rules: 驗收規則；未提供時以正規化後是否相等判斷

    Returns:
        bool: 是否接受此回答
    """
    _require_str(expected_pinyin, "expected_pinyin")
    coerced = coerce_rules(rules)
    if coerced is None:
        _require_str(answer, "answer")
        return pinyin_equal(normalize_pinyin(answer), normalize_pinyin(expected_pinyin))
    return match(answer, expected_pinyin, rules=coerced).passed


@dataclass(frozen=True)
class ConversationTurn:
    """
    對話中的一輪

    Attributes:
        expected_pinyin: 使用者應回答的拼音
        rules: 驗收規則 (可選)
        prompt: 機器人這一輪說的話 (僅供顯示)
    """

    expected_pinyin: str
    rules: Optional[ValidationRules] = None
    prompt: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConversationTurn":
        """
        由課程資料建立，格式:
            {"bot": {"text": ...}, "user": {"pinyin": ...}, "validation": {...}}
        """
        user = data.get("user") or {}
        bot = data.get("bot") or {}
        validation = data.get("validation")
        return cls(
            expected_pinyin=user.get("pinyin", ""),
            rules=None if validation is None else ValidationRules.from_dict(validation),
            prompt=bot.get("text", ""),
        )

    def accepts(self, answer: str) -> bool:
        return validate_conversation_response(answer, self.expected_pinyin, self.rules)
