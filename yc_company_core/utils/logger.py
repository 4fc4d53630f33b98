# logger.py
import logging
import inspect
from typing import Optional

from yc_company_core.utils.config import LOG_LEVEL


def get_logger(logger_level: str = "DEBUG", name: Optional[str] = None) -> logging.Logger:
    # 自動取得呼叫此函數的模組名稱
    if name is None:
        caller_frame = inspect.stack()[1]
        module = inspect.getmodule(caller_frame[0])
        name = module.__name__ if module else "unknown"

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, logger_level.upper(), logging.INFO))

    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        formatter = logging.Formatter(f"[%(levelname)s] [{name}] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
