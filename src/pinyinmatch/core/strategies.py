"""
比對策略實作

使用方式:
    >>> TokenAlignmentDiff().evaluate("wo jiao li ming", "wo jiao li hua").similarity
    75
    >>> rule = ExactPrefixSuffixRule(ValidationRules(must_include=("hǎo",)))
    >>> rule.evaluate("wo hen hao", "").passed
    True
"""

from typing import List

from .alignment import align_tokens
from .normalizer import _require_str, normalize_pinyin, pinyin_equal
from .strategy_interface import MatchStrategy
from .verdict import MatchVerdict, Mismatch, ValidationRules


def _percentage(matched: int, total: int) -> int:
    """四捨五入 (0.5 進位) 的百分比"""
    if total == 0:
        return 100
    return int(100 * matched / total + 0.5)


class TokenAlignmentDiff(MatchStrategy):
    """
    音節對齊比對

    流程:
    1. 兩側以 normalize_pinyin 正規化
    2. 完全相同 (忽略音節分詞差異) → 通過，相似度 100
    3. 否則以空白切成音節並對齊，列出每個不一致的位置
    4. 相似度 = 相同音節數 / max(目標音節數, 候選音節數)

    只有正規化後完全相同才算通過；門檻式的「夠接近」由呼叫端決定。
    """

    name = "token_alignment_diff"

    def evaluate(self, candidate: str, target: str) -> MatchVerdict:
        _require_str(candidate, "candidate")
        _require_str(target, "target")

        normalized_candidate = normalize_pinyin(candidate)
        normalized_target = normalize_pinyin(target)

        if pinyin_equal(normalized_candidate, normalized_target):
            return MatchVerdict(passed=True, similarity=100, mismatches=())

        candidate_tokens = normalized_candidate.split()
        target_tokens = normalized_target.split()

        mismatches: List[Mismatch] = []
        matched = 0
        for index, pair in enumerate(align_tokens(target_tokens, candidate_tokens)):
            if pair.is_match:
                matched += 1
            else:
                mismatches.append(Mismatch(index=index, expected=pair.expected, received=pair.received))

        total = max(len(target_tokens), len(candidate_tokens))
        return MatchVerdict(
            passed=False,
            similarity=_percentage(matched, total),
            mismatches=tuple(mismatches),
        )


class ExactPrefixSuffixRule(MatchStrategy):
    """
    規則式驗收

    所有已設定的條件 (exact / starts_with / ends_with / must_include) 須同時成立，
    比較皆在 normalize_pinyin 之後進行。目標字串不參與判斷。
    """

    name = "exact_prefix_suffix_rule"

    def __init__(self, rules: ValidationRules):
        if not isinstance(rules, ValidationRules):
            raise TypeError(f"rules must be ValidationRules, got {type(rules).__name__}")
        self.rules = rules

    def evaluate(self, candidate: str, target: str = "") -> MatchVerdict:
        _require_str(candidate, "candidate")
        _require_str(target, "target")
        return MatchVerdict(passed=self.accepts(normalize_pinyin(candidate)))

    def accepts(self, normalized_candidate: str) -> bool:
        rules = self.rules

        if rules.exact and not pinyin_equal(normalized_candidate, normalize_pinyin(rules.exact)):
            return False

        if rules.starts_with and not normalized_candidate.startswith(normalize_pinyin(rules.starts_with)):
            return False

        if rules.ends_with and not normalized_candidate.endswith(normalize_pinyin(rules.ends_with)):
            return False

        return all(normalize_pinyin(fragment) in normalized_candidate for fragment in rules.must_include)
