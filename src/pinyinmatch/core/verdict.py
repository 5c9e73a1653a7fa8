"""
比對結果與規則的資料結構

- Mismatch: 單一對齊位置的差異
- MatchVerdict: 比對結果 (通過與否、相似度、差異列表)
- ValidationRules: 對話練習用的規則式驗收條件
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Mismatch:
    """
    對齊後的單一差異

    Attributes:
        index: 在對齊序列中的位置
        expected: 目標音節 (候選多出音節時為空字串)
        received: 候選音節 (候選漏掉音節時為空字串)
    """

    index: int
    expected: str
    received: str

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "expected": self.expected, "received": self.received}


@dataclass(frozen=True)
class MatchVerdict:
    """
    比對結果

    Attributes:
        passed: 是否通過
        similarity: 0-100 的相似度；規則式比對只回報通過與否，此欄為 None
        mismatches: 依目標音節順序排列的差異
    """

    passed: bool
    similarity: Optional[int] = None
    mismatches: Tuple[Mismatch, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "similarity": self.similarity,
            "mismatches": [m.to_dict() for m in self.mismatches],
        }


def _optional_str(value: Any, name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"rule '{name}' must be a str, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ValidationRules:
    """
    規則式驗收條件 (所有已設定的條件須同時成立)

    Attributes:
        exact: 候選正規化後須完全等於此值
        starts_with: 候選正規化後須以此值開頭
        ends_with: 候選正規化後須以此值結尾
        must_include: 每個片段正規化後都須出現在候選中

    未設定或空字串的條件視為不存在。
    """

    exact: Optional[str] = None
    starts_with: Optional[str] = None
    ends_with: Optional[str] = None
    must_include: Tuple[str, ...] = ()

    def __post_init__(self):
        _optional_str(self.exact, "exact")
        _optional_str(self.starts_with, "starts_with")
        _optional_str(self.ends_with, "ends_with")
        if isinstance(self.must_include, str) or not isinstance(self.must_include, (list, tuple)):
            raise TypeError(
                f"rule 'must_include' must be a list of str, got {type(self.must_include).__name__}"
            )
        for fragment in self.must_include:
            if not isinstance(fragment, str):
                raise TypeError(
                    f"rule 'must_include' items must be str, got {type(fragment).__name__}"
                )
        # list 轉 tuple，保持 frozen/hashable
        object.__setattr__(self, "must_include", tuple(self.must_include))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidationRules":
        """
        由 dict 建立規則，接受 camelCase (exact/startsWith/endsWith/mustInclude)
        與 snake_case 兩種鍵名
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"rules must be a mapping, got {type(data).__name__}")

        must_include = data.get("mustInclude", data.get("must_include"))
        return cls(
            exact=data.get("exact"),
            starts_with=data.get("startsWith", data.get("starts_with")),
            ends_with=data.get("endsWith", data.get("ends_with")),
            must_include=() if must_include is None else must_include,
        )
