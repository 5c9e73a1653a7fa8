"""
比對入口 (Similarity Matcher)

使用方式:
    from pinyinmatch import match

    # 音節對齊比對
    verdict = match("wo jiao li ming", "wo jiao li hua")
    verdict.passed        # False
    verdict.mismatches    # (Mismatch(index=3, expected='hua', received='ming'),)

    # 規則式驗收 (目標字串不參與判斷)
    match("wo hen hao", "", rules={"mustInclude": ["hǎo"]}).passed  # True
"""

from typing import Any, Mapping, Optional, Union

from .core.strategies import ExactPrefixSuffixRule, TokenAlignmentDiff
from .core.strategy_interface import MatchStrategy
from .core.verdict import MatchVerdict, ValidationRules
from .utils.logger import get_logger

logger = get_logger("matcher")

RulesInput = Union[ValidationRules, Mapping[str, Any], None]


def coerce_rules(rules: RulesInput) -> Optional[ValidationRules]:
    """將 dict 形式的規則轉為 ValidationRules；None 原樣回傳"""
    if rules is None or isinstance(rules, ValidationRules):
        return rules
    if isinstance(rules, Mapping):
        return ValidationRules.from_dict(rules)
    raise TypeError(f"rules must be ValidationRules, a mapping or None, got {type(rules).__name__}")


def select_strategy(rules: RulesInput = None) -> MatchStrategy:
    """有規則時使用 ExactPrefixSuffixRule，否則使用 TokenAlignmentDiff"""
    coerced = coerce_rules(rules)
    if coerced is None:
        return TokenAlignmentDiff()
    return ExactPrefixSuffixRule(coerced)


def match(candidate: str, target: str, rules: RulesInput = None) -> MatchVerdict:
    """
    比對候選與目標

    Args:
        candidate: 使用者輸入或 ASR 轉寫
        target: 目標拼音
        rules: 規則式驗收條件 (ValidationRules 或 camelCase dict)；
            提供時略過音節對齊，只回報通過與否

    Returns:
        MatchVerdict

    Raises:
        TypeError: candidate/target 不是 str，或 rules 型別錯誤
    """
    strategy = select_strategy(rules)
    verdict = strategy.evaluate(candidate, target)
    logger.debug(
        f"[{strategy.name}] passed={verdict.passed} similarity={verdict.similarity} "
        f"mismatches={len(verdict.mismatches)}"
    )
    return verdict
