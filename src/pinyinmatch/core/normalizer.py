"""
拼音正規化模組 (Pinyin Normalizer)

將羅馬拼音轉為可比對的標準形式，提供兩種嚴格度：

- normalize_pinyin: 整句比對用，保留數字/底線，只移除標點與聲調
- normalize_pinyin_word: 單詞比對用，只留 [a-z]，並把 v 視為 ü (-> u)

使用方式:
    >>> normalize_pinyin("Nǐ hǎo!")
    'ni hao'
    >>> normalize_pinyin_word("lǘ")
    'lu'
    >>> normalize_pinyin_word("lv")
    'lu'

所有函式皆為純函式，可在多執行緒下直接呼叫。
"""

import re
import unicodedata
from typing import List

# =============================================================================
# 聲調對照表
# =============================================================================
# ü 本身沒有聲調，但輸入法常與帶調母音混用，因此一併折回 u

TONE_MAP = {
    "ā": "a", "á": "a", "ǎ": "a", "à": "a",
    "ē": "e", "é": "e", "ě": "e", "è": "e",
    "ī": "i", "í": "i", "ǐ": "i", "ì": "i",
    "ō": "o", "ó": "o", "ǒ": "o", "ò": "o",
    "ū": "u", "ú": "u", "ǔ": "u", "ù": "u",
    "ǖ": "u", "ǘ": "u", "ǚ": "u", "ǜ": "u", "ü": "u",
    "ń": "n", "ň": "n", "ǹ": "n",
    "Ā": "a", "Á": "a", "Ǎ": "a", "À": "a",
    "Ē": "e", "É": "e", "Ě": "e", "È": "e",
    "Ī": "i", "Í": "i", "Ǐ": "i", "Ì": "i",
    "Ō": "o", "Ó": "o", "Ǒ": "o", "Ò": "o",
    "Ū": "u", "Ú": "u", "Ǔ": "u", "Ù": "u",
    "Ǖ": "u", "Ǘ": "u", "Ǚ": "u", "Ǜ": "u", "Ü": "u",
    "Ń": "n", "Ň": "n", "Ǹ": "n",
}

_TONE_TABLE = str.maketrans(TONE_MAP)

# 聲調組合符號 (grave, acute, macron, diaeresis, caron)
_COMBINING_TONE_MARKS = re.compile("[\u0300\u0301\u0304\u0308\u030c]")
# 字母 + 聲調組合符號；只有這段會做 NFC 合成
_TONED_SEQUENCE = re.compile("[A-Za-z\u00dc\u00fc][\u0300\u0301\u0304\u0308\u030c]+")

_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")
_WHITESPACE = re.compile(r"\s+")
_NON_LETTER = re.compile(r"[^a-z]")


def _require_str(value: object, name: str = "text") -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")


def strip_tone_marks(text: str) -> str:
    """
    移除聲調符號

    只對「字母 + 聲調組合符號」片段做 NFC 合成，再查表；
    查表後殘留的聲調組合符號直接刪除。其他字元 (含相容字元如 U+F900) 保持不變。

    Args:
        text: 任意字串

    Returns:
        str: 去除聲調後的字串 (帶調字母一律轉為小寫原字母)

    Raises:
        TypeError: text 不是 str
    """
    _require_str(text)
    if not text:
        return ""
    composed = _TONED_SEQUENCE.sub(lambda m: unicodedata.normalize("NFC", m.group()), text)
    return _COMBINING_TONE_MARKS.sub("", composed.translate(_TONE_TABLE))


def normalize_pinyin(text: str) -> str:
    """
    整句正規化

    去聲調 → 移除標點 (只留 ASCII 字母、數字、底線與空白) → 壓縮空白 → trim → 小寫。
    輸出只包含 [a-z0-9_] 與單一空格。

    Args:
        text: 拼音句子

    Returns:
        str: 正規化後的句子
    """
    stripped = strip_tone_marks(text)
    cleaned = _NON_WORD.sub("", stripped)
    return _WHITESPACE.sub(" ", cleaned).strip().lower()


def normalize_pinyin_word(text: str) -> str:
    """
    單詞正規化

    去聲調 → trim → 小寫 → v 折為 u → 刪除所有非 [a-z] 字元。
    用於詞彙表查找，輸出為空字串或符合 [a-z]+。

    Args:
        text: 單一拼音詞

    Returns:
        str: 正規化後的單詞
    """
    stripped = strip_tone_marks(text).strip().lower().replace("v", "u")
    return _NON_LETTER.sub("", stripped)


def tokenize_pinyin_words(text: str) -> List[str]:
    """以空白切詞並逐一做單詞正規化，丟棄正規化後為空的片段"""
    _require_str(text)
    words = (normalize_pinyin_word(segment) for segment in text.split())
    return [word for word in words if word]


def pinyin_equal(normalized_a: str, normalized_b: str) -> bool:
    """
    兩個已正規化的句子是否相同

    音節分詞方式不同 ("xie xie" / "xiexie") 仍視為相同。
    """
    if normalized_a == normalized_b:
        return True
    return normalized_a.replace(" ", "") == normalized_b.replace(" ", "")
