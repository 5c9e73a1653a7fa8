"""
音節序列對齊

以 Levenshtein.opcodes 對齊目標與候選的音節序列 (以音節為單位而非字元)，
再把 equal / replace / delete / insert 區塊展開成逐位置的配對。
opcodes 對相同輸入永遠回傳相同結果，因此對齊是決定性的。

    target:    wo  jiao  li  hua
    candidate: wo  jiao  li  ming
    pairs:     (wo,wo) (jiao,jiao) (li,li) (hua,ming)
"""

from dataclasses import dataclass
from itertools import zip_longest
from typing import List, Sequence

import Levenshtein


@dataclass(frozen=True)
class AlignedPair:
    """對齊後的一個位置；缺少的一側為空字串"""

    expected: str
    received: str

    @property
    def is_match(self) -> bool:
        return bool(self.expected) and self.expected == self.received


def align_tokens(target: Sequence[str], candidate: Sequence[str]) -> List[AlignedPair]:
    """
    對齊兩個音節序列

    Args:
        target: 目標音節
        candidate: 候選音節

    Returns:
        List[AlignedPair]: 依目標順序排列的配對
    """
    target = list(target)
    candidate = list(candidate)
    if not target and not candidate:
        return []

    pairs: List[AlignedPair] = []
    for tag, i1, i2, j1, j2 in Levenshtein.opcodes(target, candidate):
        expected = target[i1:i2]
        received = candidate[j1:j2]
        if tag == "delete":
            pairs.extend(AlignedPair(token, "") for token in expected)
        elif tag == "insert":
            pairs.extend(AlignedPair("", token) for token in received)
        else:
            # equal / replace
            pairs.extend(
                AlignedPair(e, r) for e, r in zip_longest(expected, received, fillvalue="")
            )
    return pairs
