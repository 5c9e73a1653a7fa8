"""
比對器測試

驗證：
1. 音節對齊比對 (TokenAlignmentDiff) 的相似度與差異列表
2. 規則式驗收 (ExactPrefixSuffixRule)
3. 決定性 (相同輸入產生相同結果)
4. 型別錯誤
"""

import pytest

from pinyinmatch import match
from pinyinmatch.core.alignment import AlignedPair, align_tokens
from pinyinmatch.core.strategies import ExactPrefixSuffixRule, TokenAlignmentDiff
from pinyinmatch.core.verdict import MatchVerdict, Mismatch, ValidationRules
from pinyinmatch.matcher import select_strategy


class TestAlignTokens:
    """測試音節對齊"""

    def test_empty(self):
        assert align_tokens([], []) == []

    def test_substitution(self):
        pairs = align_tokens(["wo", "jiao", "li", "hua"], ["wo", "jiao", "li", "ming"])
        assert pairs[-1] == AlignedPair("hua", "ming")
        assert [p.is_match for p in pairs] == [True, True, True, False]

    def test_omission(self):
        pairs = align_tokens(["wo", "hen", "hao"], ["wo", "hao"])
        assert pairs == [AlignedPair("wo", "wo"), AlignedPair("hen", ""), AlignedPair("hao", "hao")]

    def test_insertion(self):
        pairs = align_tokens(["wo", "hen", "hao"], ["wo", "hen", "hen", "hao"])
        assert len(pairs) == 4
        assert [p.expected for p in pairs if p.expected] == ["wo", "hen", "hao"]
        assert [p.received for p in pairs] == ["wo", "hen", "hen", "hao"]
        assert [p for p in pairs if not p.is_match] == [AlignedPair("", "hen")]

    def test_deterministic(self):
        target = ["wo", "bu", "shi", "laoshi"]
        candidate = ["wo", "shi", "xuesheng", "ma"]
        assert align_tokens(target, candidate) == align_tokens(target, candidate)

    def test_only_target(self):
        pairs = align_tokens(["ni", "hao"], [])
        assert pairs == [AlignedPair("ni", ""), AlignedPair("hao", "")]


class TestTokenAlignmentDiff:
    """測試音節對齊比對"""

    def test_exact_after_normalization(self):
        verdict = match("Xiè xie", "xiexie")
        assert verdict.passed is True
        assert verdict.similarity == 100
        assert verdict.mismatches == ()

    def test_case_tone_and_punctuation_ignored(self):
        verdict = match("Nǐ hǎo!", "ni hao")
        assert verdict.passed is True
        assert verdict.similarity == 100

    def test_full_mismatch(self):
        verdict = match("", "nǐ hǎo")
        assert verdict.passed is False
        assert verdict.similarity == 0
        assert verdict.mismatches == (
            Mismatch(index=0, expected="ni", received=""),
            Mismatch(index=1, expected="hao", received=""),
        )

    def test_partial_mismatch(self):
        verdict = match("wo jiao li ming", "wo jiao li hua")
        assert verdict.passed is False
        assert 0 < verdict.similarity < 100
        assert verdict.similarity == 75
        assert verdict.mismatches == (Mismatch(index=3, expected="hua", received="ming"),)

    def test_missing_token(self):
        verdict = match("wo hao", "wo hen hao")
        assert verdict.passed is False
        assert verdict.similarity == 67
        assert verdict.mismatches == (Mismatch(index=1, expected="hen", received=""),)

    def test_extra_token(self):
        verdict = match("wo hen hen hao", "wo hen hao")
        assert verdict.similarity == 75
        assert len(verdict.mismatches) == 1
        extra = verdict.mismatches[0]
        assert (extra.expected, extra.received) == ("", "hen")
        assert extra.index in (1, 2)

    def test_candidate_against_empty_target(self):
        verdict = match("ni", "")
        assert verdict.passed is False
        assert verdict.similarity == 0
        assert verdict.mismatches == (Mismatch(index=0, expected="", received="ni"),)

    def test_both_empty(self):
        verdict = match("", "")
        assert verdict.passed is True
        assert verdict.similarity == 100

    def test_punctuation_only_candidate(self):
        assert match("?!", "").passed is True

    def test_deterministic(self):
        first = match("wo bu shi laoshi", "wǒ shì xuésheng")
        second = match("wo bu shi laoshi", "wǒ shì xuésheng")
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_to_dict(self):
        verdict = match("wo jiao li ming", "wo jiao li hua")
        assert verdict.to_dict() == {
            "passed": False,
            "similarity": 75,
            "mismatches": [{"index": 3, "expected": "hua", "received": "ming"}],
        }

    def test_strategy_direct(self):
        verdict = TokenAlignmentDiff().evaluate("ni hao", "nǐ hǎo")
        assert verdict == MatchVerdict(passed=True, similarity=100, mismatches=())


class TestExactPrefixSuffixRule:
    """測試規則式驗收"""

    def test_must_include(self):
        rules = {"mustInclude": ["hǎo"]}
        assert match("wo hen hao", "", rules=rules).passed is True
        assert match("wo hen bu cuo", "", rules=rules).passed is False

    def test_rule_branch_reports_pass_fail_only(self):
        verdict = match("wo hen hao", "something else", rules={"mustInclude": ["hao"]})
        assert verdict.similarity is None
        assert verdict.mismatches == ()

    def test_starts_with_ignores_tone_and_case(self):
        rules = ValidationRules(starts_with="Wǒ jiào")
        assert match("WO JIAO Li Ming", "", rules=rules).passed is True
        assert match("ni jiao li ming", "", rules=rules).passed is False

    def test_ends_with_ignores_tone_and_case(self):
        rules = {"endsWith": "XUÉSHENG!"}
        assert match("wo shi xuesheng", "", rules=rules).passed is True
        assert match("wo shi laoshi", "", rules=rules).passed is False

    def test_exact(self):
        assert match("Xiè xie", "", rules={"exact": "xiexie"}).passed is True
        assert match("xie xie ni", "", rules={"exact": "xiexie"}).passed is False

    def test_all_conditions_must_hold(self):
        rules = {"startsWith": "wo", "endsWith": "ming", "mustInclude": ["jiao", "li"]}
        assert match("Wǒ jiào Lǐ Míng", "", rules=rules).passed is True
        assert match("Wǒ jiào Wáng Míng", "", rules=rules).passed is False
        assert match("Tā jiào Lǐ Míng", "", rules=rules).passed is False

    def test_empty_rules_accept_anything(self):
        assert match("anything", "", rules={}).passed is True
        assert match("anything", "", rules=ValidationRules(exact="")).passed is True

    def test_snake_case_keys(self):
        rules = ValidationRules.from_dict({"starts_with": "ni", "must_include": ["hao"]})
        assert rules == ValidationRules(starts_with="ni", must_include=("hao",))

    def test_select_strategy(self):
        assert isinstance(select_strategy(None), TokenAlignmentDiff)
        assert isinstance(select_strategy({"exact": "ni"}), ExactPrefixSuffixRule)


class TestTypeErrors:
    """非字串參數直接拋出 TypeError"""

    def test_candidate(self):
        with pytest.raises(TypeError):
            match(None, "ni hao")

    def test_target(self):
        with pytest.raises(TypeError):
            match("ni hao", 5)

    def test_rules_type(self):
        with pytest.raises(TypeError):
            match("ni hao", "ni hao", rules=["hao"])

    def test_must_include_string(self):
        with pytest.raises(TypeError):
            match("ni hao", "", rules={"mustInclude": "hao"})

    def test_rule_field_type(self):
        with pytest.raises(TypeError):
            ValidationRules(exact=3)
