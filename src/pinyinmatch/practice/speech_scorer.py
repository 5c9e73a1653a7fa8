"""
口說評分 (ASR Verdict Builder)

將語音辨識的轉寫結果與目標拼音比對，產生口說練習的評分結果。

與打字練習不同，口說評分採用較寬鬆的容錯策略:
- 整句字元相似度 (Levenshtein) 達門檻即通過 (預設 80%)
- 單一音節與目標足夠接近 (預設 0.7) 時視為「接近」，不列入錯誤報告

使用方式:
    from pinyinmatch import SpeechScorer

    scorer = SpeechScorer()

    # ASR 只給漢字轉寫時，自動以 pypinyin 轉成拼音
    result = scorer.score("你好", target_pinyin="nǐ hǎo")
    result.passed        # True

    # ASR 已附帶拼音
    result = scorer.score("你号", "nǐ hǎo", transcript_pinyin="nǐ hào")

注意：只有在轉寫含漢字且未提供 transcript_pinyin 時才需要 pypinyin。
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import Levenshtein

from pinyinmatch.config import DEFAULT_CONFIG, MatcherConfig
from pinyinmatch.core.normalizer import _require_str, normalize_pinyin
from pinyinmatch.core.verdict import Mismatch
from pinyinmatch.matcher import match
from pinyinmatch.utils.logger import TimingContext, get_logger

from .utils import contains_hanzi, hanzi_to_pinyin


def character_similarity(a: str, b: str) -> float:
    """
    字元層級相似度 = 1 - 編輯距離 / 最大長度

    兩者皆為空字串時視為完全相同 (1.0)。
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(a, b) / max_len


@dataclass(frozen=True)
class SpeechVerdict:
    """
    口說評分結果

    Attributes:
        transcript: ASR 原始轉寫
        transcript_pinyin: 轉寫對應的拼音
        normalized_transcript: 正規化後的轉寫拼音
        target_pinyin: 目標拼音
        normalized_target: 正規化後的目標拼音
        passed: 是否通過
        similarity: 字元相似度百分比 (0-100)
        mismatches: 未達容錯的音節差異
    """

    transcript: str
    transcript_pinyin: str
    normalized_transcript: str
    target_pinyin: str
    normalized_target: str
    passed: bool
    similarity: int
    mismatches: Tuple[Mismatch, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transcript": self.transcript,
            "transcriptPinyin": self.transcript_pinyin,
            "normalizedTranscript": self.normalized_transcript,
            "targetPinyin": self.target_pinyin,
            "normalizedTarget": self.normalized_target,
            "passed": self.passed,
            "similarity": self.similarity,
            "mismatches": [m.to_dict() for m in self.mismatches],
        }


class SpeechScorer:
    """
    口說評分器

    無狀態，可在多個請求間共用同一實例。
    """

    def __init__(self, config: Optional[MatcherConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._logger = get_logger("practice.speech")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self.config.on_timing,
        )

    def resolve_transcript_pinyin(self, transcript: str) -> str:
        """轉寫含漢字時轉為拼音，否則視為已是拼音"""
        if contains_hanzi(transcript):
            return hanzi_to_pinyin(transcript)
        return transcript

    def score(
        self,
        transcript: str,
        target_pinyin: str,
        transcript_pinyin: Optional[str] = None,
    ) -> SpeechVerdict:
        """
        評分

        Args:
            transcript: ASR 轉寫 (漢字或拼音)
            target_pinyin: 目標拼音
            transcript_pinyin: ASR 提供的拼音；None 時由 transcript 推得

        Returns:
            SpeechVerdict

        Raises:
            TypeError: 參數不是 str
            ImportError: 需要轉換漢字但未安裝 pypinyin
        """
        _require_str(transcript, "transcript")
        _require_str(target_pinyin, "target_pinyin")
        if transcript_pinyin is not None:
            _require_str(transcript_pinyin, "transcript_pinyin")

        with self._log_timing("SpeechScorer.score"):
            if transcript_pinyin is None:
                transcript_pinyin = self.resolve_transcript_pinyin(transcript)

            normalized_transcript = normalize_pinyin(transcript_pinyin)
            normalized_target = normalize_pinyin(target_pinyin)
            verdict = match(transcript_pinyin, target_pinyin)

            max_len = max(len(normalized_transcript), len(normalized_target))
            distance = Levenshtein.distance(normalized_transcript, normalized_target)
            # 音節切分不同 (xiexie / xie xie) 仍算完全相符
            similarity = 100 if verdict.passed else self._percentage(distance, max_len)
            within_threshold = distance * 100 <= (100 - self.config.speech_pass_threshold) * max_len
            passed = verdict.passed or within_threshold

            mismatches = tuple(
                m for m in verdict.mismatches
                if character_similarity(m.expected, m.received) < self.config.token_tolerance
            )

            self._logger.debug(
                f"  [Speech] {normalized_transcript!r} vs {normalized_target!r}: "
                f"similarity={similarity} passed={passed} "
                f"mismatches={len(mismatches)}/{len(verdict.mismatches)}"
            )

        return SpeechVerdict(
            transcript=transcript,
            transcript_pinyin=transcript_pinyin,
            normalized_transcript=normalized_transcript,
            target_pinyin=target_pinyin,
            normalized_target=normalized_target,
            passed=passed,
            similarity=similarity,
            mismatches=mismatches,
        )

    @staticmethod
    def _percentage(distance: int, max_len: int) -> int:
        if max_len == 0:
            return 100
        # 0.5 進位
        return (200 * (max_len - distance) + max_len) // (2 * max_len)
