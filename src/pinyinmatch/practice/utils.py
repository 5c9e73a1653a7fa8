"""
練習模組工具

提供漢字判斷與 pypinyin 的延遲載入 (Lazy Loading)。
只有在 ASR 轉寫內含漢字、需要轉成拼音時才會載入 pypinyin。
"""

from typing import Any, Optional

from pinyinmatch.utils.logger import get_logger

logger = get_logger(__name__)

CHINESE_INSTALL_HINT = (
    "缺少中文依賴。請執行:\n"
    "  pip install \"pinyinmatch[ch]\""
)

_pypinyin_module: Optional[Any] = None


def _get_pypinyin() -> Any:
    """
    取得 pypinyin 模組 (Lazy Loading)

    Returns:
        module: pypinyin

    Raises:
        ImportError: 如果未安裝 pypinyin
    """
    global _pypinyin_module
    if _pypinyin_module is None:
        try:
            import pypinyin
        except ImportError as e:
            logger.error("無法載入 pypinyin，請確認是否已安裝 'pinyinmatch[ch]'")
            raise ImportError(CHINESE_INSTALL_HINT) from e
        _pypinyin_module = pypinyin
    return _pypinyin_module


def is_chinese_available() -> bool:
    """檢查 pypinyin 是否可用"""
    try:
        _get_pypinyin()
    except ImportError:
        return False
    return True


def is_hanzi(char: str) -> bool:
    """
    判斷字元是否為漢字 (CJK 統一表意文字與擴展 A 區)

    Args:
        char: 單個字元

    Returns:
        bool
    """
    if not char:
        return False

    code = ord(char[0])

    # CJK Unified Ideographs: 0x4E00 - 0x9FFF
    if 0x4E00 <= code <= 0x9FFF:
        return True

    # CJK Extension A: 0x3400 - 0x4DBF
    if 0x3400 <= code <= 0x4DBF:
        return True

    return False


def contains_hanzi(text: str) -> bool:
    return any(is_hanzi(ch) for ch in text)


def hanzi_to_pinyin(text: str) -> str:
    """
    漢字轉帶調拼音，音節以空白分隔

    非漢字片段 (英數、標點) 原樣保留，後續由 normalize_pinyin 處理。

    >>> hanzi_to_pinyin("你好")
    'nǐ hǎo'
    """
    if not text:
        return ""
    pypinyin = _get_pypinyin()
    syllables = pypinyin.lazy_pinyin(text, style=pypinyin.Style.TONE)
    return " ".join(s.strip() for s in syllables if s.strip())
