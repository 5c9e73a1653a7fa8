"""
全域配置模組

提供統一的配置類別，控制日誌、計時與口說評分的容錯門檻。

使用方式:
    from pinyinmatch import SpeechScorer, MatcherConfig

    # 簡單開啟 verbose 模式
    scorer = SpeechScorer(MatcherConfig(verbose=True))

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("pinyinmatch").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class MatcherConfig:
    """
    比對配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        speech_pass_threshold: 口說評分的通過門檻 (字元相似度百分比, 0-100)
        token_tolerance: 單一音節的近似容錯 (0.0-1.0)，
            字元相似度達此值的錯位音節視為「接近」，不列入錯誤報告

    使用範例:
        # 對孩童練習放寬門檻
        config = MatcherConfig(speech_pass_threshold=70)

        # 自定義計時回呼
        def my_callback(op, elapsed):
            print(f"{op} took {elapsed:.3f}s")

        config = MatcherConfig(verbose=True, on_timing=my_callback)
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None

    speech_pass_threshold: int = 80
    token_tolerance: float = 0.7

    def __post_init__(self):
        if isinstance(self.speech_pass_threshold, bool) or not isinstance(self.speech_pass_threshold, int):
            raise TypeError(
                f"speech_pass_threshold must be an int, got {type(self.speech_pass_threshold).__name__}"
            )
        if not 0 <= self.speech_pass_threshold <= 100:
            raise ValueError(
                f"speech_pass_threshold must be between 0 and 100, got {self.speech_pass_threshold}"
            )
        if not 0.0 <= self.token_tolerance <= 1.0:
            raise ValueError(f"token_tolerance must be between 0.0 and 1.0, got {self.token_tolerance}")
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = MatcherConfig(verbose=False)
