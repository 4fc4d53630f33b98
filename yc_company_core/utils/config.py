# config.py
"""執行期設定，從環境變數或 .env 讀取"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return default


default_log_level = "DEBUG"  # 預設日誌等級
LOG_LEVEL = os.getenv("LOG_LEVEL", default_log_level).upper()

# 輸入 / 輸出路徑
INPUT_CSV = os.getenv("YC_INPUT_CSV", "inputs/companies.csv")
OUTPUT_JSON = os.getenv("YC_OUTPUT_JSON", "out/scraped.json")

# 網頁快取
CACHE_DIR = os.getenv("YC_CACHE_DIR") or None  # None 表示使用套件內的 cache 目錄
USE_CACHE = _env_bool("YC_USE_CACHE", True)

# 網路請求
REQUEST_TIMEOUT = _env_float("YC_REQUEST_TIMEOUT", 10.0)
SITE_ORIGIN = os.getenv("YC_SITE_ORIGIN", "https://www.ycombinator.com")
