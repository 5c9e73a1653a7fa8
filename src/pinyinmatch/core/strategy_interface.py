"""
比對策略抽象基類

兩種驗收策略共用同一套正規化：
- TokenAlignmentDiff: 音節對齊 + 相似度 + 差異列表
- ExactPrefixSuffixRule: 規則式驗收，只回報通過與否
"""

from abc import ABC, abstractmethod

from .verdict import MatchVerdict


class MatchStrategy(ABC):
    """比對策略介面，實作須為無狀態、可重入"""

    name: str = "base"

    @abstractmethod
    def evaluate(self, candidate: str, target: str) -> MatchVerdict:
        """
        比對候選與目標

        Args:
            candidate: 使用者輸入或 ASR 轉寫 (原始字串)
            target: 目標拼音 (原始字串)

        Returns:
            MatchVerdict
        """
        pass
