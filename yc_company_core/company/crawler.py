from __future__ import annotations
from typing import Dict, Optional
import logging
import asyncio
import aiohttp
from aiohttp import client_exceptions
from bs4 import BeautifulSoup
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
    RetryError
)

from yc_company_core.abc.crawler_abc import BaseCrawlerABC
from yc_company_core.company.extractor import extract
from yc_company_core.company.models import CompanyRecord, FetchError
from yc_company_core.utils.config import REQUEST_TIMEOUT, SITE_ORIGIN
from yc_company_core.utils.logger import get_logger

# 設定日誌
logger = get_logger(logger_level="INFO")


class ServerStatusError(FetchError):
    """伺服器端 5xx 錯誤，可重試"""
    pass


class CompanyCrawler(BaseCrawlerABC[CompanyRecord]):
    """公司頁面爬蟲

    資料流程：
    1. fetch_raw: HTTP 請求 -> 原始 HTML 字串（含重試）
    2. parse: HTML -> CompanyRecord（委派給 extractor）
    3. fetch: 串接以上兩步
    """

    DEFAULT_TIMEOUT = REQUEST_TIMEOUT
    DEFAULT_ORIGIN = SITE_ORIGIN

    def __init__(self, timeout: Optional[float] = None, origin: Optional[str] = None):
        """
        初始化公司頁面爬蟲

        Args:
            timeout: 單次請求的總超時秒數
            origin: 發表文章相對連結使用的網站來源
        """
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.origin = origin or self.DEFAULT_ORIGIN

    def get_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": (
                "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
                "AppleWebKit/537.36 (KHTML, like Gecko) "
                "Chrome/124.0 Safari/537.36"
            ),
            "Accept": "text/html,application/xhtml+xml",
            "Accept-Language": "en-US,en;q=0.9",
        }

    @retry(
        retry=retry_if_exception_type((
            ServerStatusError,
            client_exceptions.ClientError,
            client_exceptions.ServerTimeoutError,
            asyncio.TimeoutError
        )),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        before_sleep=before_sleep_log(logger, logging.WARNING)
    )
    async def _request(self, url: str) -> str:
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
            logger.debug(f"📡 發送請求：{url}")
            async with session.get(url, headers=self.get_headers()) as response:
                if response.status >= 500:
                    error_msg = f"伺服器錯誤 {response.status}: {response.reason} [{url}]"
                    logger.warning(f"⚠️ {error_msg}")
                    raise ServerStatusError(error_msg)
                if response.status >= 400:
                    error_msg = f"HTTP 狀態碼錯誤 {response.status}: {response.reason} [{url}]"
                    logger.error(f"❌ {error_msg}")
                    raise FetchError(error_msg)
                content = await response.text(errors="replace")
                logger.debug(f"📥 收到回應：{len(content)} chars [{url}]")
                return content

    async def fetch_raw(self, url: str, *args, **kwargs) -> str:
        """
        抓取公司頁面原始 HTML

        Args:
            url: 公司頁面網址

        Returns:
            str: 原始 HTML 內容

        Raises:
            FetchError: HTTP 錯誤或重試耗盡
        """
        try:
            return await self._request(url)
        except FetchError:
            raise
        except RetryError as e:
            error_msg = f"重試耗盡仍然失敗：{e.last_attempt.exception()} [{url}]"
            logger.error(f"❌ {error_msg}")
            raise FetchError(error_msg)
        except Exception as e:
            error_msg = f"未預期的錯誤：{str(e)} [{url}]"
            logger.error(f"❌ {error_msg}")
            raise FetchError(error_msg)

    def parse(self, raw: str | BeautifulSoup, *args, **kwargs) -> CompanyRecord:
        """解析 HTML 為 CompanyRecord，永不因頁面缺漏而失敗"""
        return extract(raw, origin=self.origin)

    async def fetch(self, url: str, *args, **kwargs) -> CompanyRecord:
        """完整的公司頁面抓取流程"""
        raw = await self.fetch_raw(url)
        record = self.parse(raw)
        logger.info(f"✅ {record.name or url}[抓取]完成")
        return record
