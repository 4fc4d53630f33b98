import hashlib
import json
from typing import Dict, Optional
from datetime import datetime
from pathlib import Path

from yc_company_core.abc.cache_abc import BaseCacheABC
from yc_company_core.company.crawler import CompanyCrawler
from yc_company_core.company.models import (
    CacheMetadata,
    CachedPage,
    FetchError,
)
from yc_company_core.utils.config import CACHE_DIR
from yc_company_core.utils.logger import get_logger

logger = get_logger(logger_level="INFO")

# 全域記憶體快取，以網址為主鍵
_memory_cache: Dict[str, CachedPage] = {}


class PageCache(BaseCacheABC):
    """公司頁面原始 HTML 的快取實作，支援三層快取架構"""

    def __init__(
        self,
        crawler: Optional[CompanyCrawler] = None,
        cache_dir: Optional[str] = None,
        file_path_template: str = "page_{key}.json",
    ):
        """初始化快取系統

        Args:
            crawler: 公司頁面爬蟲實例，如果未提供會建立新的實例
            cache_dir: 快取目錄路徑，如果未提供則使用設定值或預設路徑
            file_path_template: 快取檔案名稱模板，可用 {key} 做替換
        """
        self._crawler = crawler or CompanyCrawler()
        cache_dir = cache_dir or CACHE_DIR
        self._cache_dir = Path(cache_dir) if cache_dir else Path(__file__).resolve().parent / "cache"
        self._file_path_template = file_path_template
        self._cache_dir.mkdir(parents=True, exist_ok=True)

    def _get_cache_path(self, url: str) -> Path:
        """取得網址的快取檔案路徑"""
        key = hashlib.sha1(url.encode("utf-8")).hexdigest()
        return self._cache_dir / self._file_path_template.format(key=key)

    async def fetch_from_memory(self, url: str, *args, **kwargs) -> Optional[CachedPage]:
        if url in _memory_cache:
            logger.debug(f"✨ 從記憶體快取取得頁面：{url}")
            return _memory_cache[url]
        return None

    async def save_to_memory(self, data: CachedPage, *args, **kwargs) -> None:
        _memory_cache[data.url] = data
        logger.debug(f"✨ 已更新記憶體快取：{data.url}")

    async def fetch_from_file(self, url: str, *args, **kwargs) -> Optional[CachedPage]:
        """從檔案快取取得頁面，檔案損壞時回傳 None"""
        cache_path = self._get_cache_path(url)
        try:
            if not cache_path.exists():
                return None
            with open(cache_path, encoding="utf-8") as f:
                data = json.load(f)
                result = CachedPage.model_validate(data)
                if result.url != url:
                    logger.warning(f"⚠️ 快取檔案網址不符，忽略：{cache_path.name}")
                    return None
                logger.debug(f"💾 從檔案載入頁面快取：{url}")
                return result
        except Exception as e:
            logger.error(f"讀取快取檔案時發生錯誤: {e} [{url}]")
            return None

    async def save_to_file(self, data: CachedPage, *args, **kwargs) -> None:
        cache_path = self._get_cache_path(data.url)
        try:
            with open(cache_path, "w", encoding="utf-8") as f:
                f.write(data.model_dump_json(indent=4))
                logger.debug(f"💾 已更新檔案快取：{data.url}")
        except OSError as e:
            # 快取寫入失敗不影響本次結果
            logger.warning(f"⚠️ 儲存快取檔案失敗: {e} [{data.url}]")

    async def fetch_from_source(self, url: str, *args, **kwargs) -> CachedPage:
        """從網路來源取得最新的頁面"""
        logger.info(f"🌐 從網路抓取頁面：{url}")
        html = await self._crawler.fetch_raw(url)
        return CachedPage(
            metadata=CacheMetadata(cache_fetch_at=datetime.now()),
            url=url,
            html=html,
        )

    async def fetch(self, url: str, *, refresh: bool = False, **kwargs) -> CachedPage:
        """依序嘗試記憶體、檔案、網路取得頁面

        Raises:
            FetchError: 網路來源抓取失敗
        """
        if not refresh:
            mem = await self.fetch_from_memory(url)
            if mem:
                return mem
            file = await self.fetch_from_file(url)
            if file:
                await self.save_to_memory(file)
                return file
        try:
            net = await self.fetch_from_source(url)
        except FetchError:
            raise
        except Exception as e:
            error_msg = f"從來源抓取頁面失敗 {url}: {str(e)}"
            logger.warning(f"⚠️ {error_msg}")
            raise FetchError(error_msg)
        await self.save_to_file(net)
        await self.save_to_memory(net)
        return net

    async def fetch_html(self, url: str, *, refresh: bool = False) -> str:
        cached = await self.fetch(url, refresh=refresh)
        return cached.html


def clear_memory_cache() -> None:
    _memory_cache.clear()
