"""
日誌與計時工具

所有模組的 logger 皆為 `pinyinmatch` 的子 logger，
函式庫本身不主動加裝 handler，由使用者透過標準 logging 控制。

使用方式:
    from pinyinmatch.utils.logger import get_logger, TimingContext

    logger = get_logger("practice.speech")
    with TimingContext("SpeechScorer.score", logger):
        ...

    # 開啟除錯輸出
    from pinyinmatch import enable_debug_logging
    enable_debug_logging()
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Optional

ROOT_LOGGER_NAME = "pinyinmatch"

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 pinyinmatch 命名空間下的 logger

    Args:
        name: 子 logger 名稱 (例如 "matcher")，
              已帶 `pinyinmatch.` 前綴的名稱會原樣使用

    Returns:
        logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 安裝 StreamHandler (重複呼叫只會調整等級)

    Args:
        level: 日誌等級
        fmt: 日誌格式

    Returns:
        logging.Logger: `pinyinmatch` 根 logger
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(_handler)
    _handler.setLevel(level)
    logger.setLevel(level)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級輸出"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時相關輸出 (計時訊息以 DEBUG 記錄於 `pinyinmatch.timing`)"""
    setup_logger(level=logging.INFO)
    timing_logger = get_logger("timing")
    timing_logger.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時 context manager

    離開區塊時以指定等級記錄耗時，並呼叫 callback(operation, elapsed)。

    範例:
        >>> with TimingContext("normalize", logger, callback=print_cb):
        ...     normalize_pinyin(text)
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.start: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> "TimingContext":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self.start
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG) -> Callable:
    """
    函式計時裝飾器

    Args:
        operation: 記錄名稱，預設為函式的 qualname
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__
        logger = get_logger("timing")

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with TimingContext(name, logger, level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
