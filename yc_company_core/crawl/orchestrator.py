from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Optional, Protocol
import asyncio

from aiohttp import client_exceptions

from yc_company_core.company.cache import PageCache
from yc_company_core.company.crawler import CompanyCrawler
from yc_company_core.company.extractor import extract
from yc_company_core.company.models import CompanyRecord, FetchError, ResultCollection
from yc_company_core.crawl.sink import ResultSink
from yc_company_core.source.loader import load_source_rows
from yc_company_core.source.models import SourceRow
from yc_company_core.utils.config import INPUT_CSV, SITE_ORIGIN, USE_CACHE
from yc_company_core.utils.logger import get_logger

logger = get_logger(logger_level="INFO")


class PageFetcher(Protocol):
    async def fetch_html(self, url: str) -> str: ...


class _DirectFetcher:
    """不經快取，直接以爬蟲抓取頁面"""

    def __init__(self, crawler: Optional[CompanyCrawler] = None):
        self._crawler = crawler or CompanyCrawler()

    async def fetch_html(self, url: str) -> str:
        return await self._crawler.fetch_raw(url)


class CrawlOrchestrator:
    """依輸入順序逐一抓取並解析公司頁面

    - 工作佇列一次只處理一列，不併發
    - 抓取失敗的列不產生結果，繼續下一列
    - 全部完成後才交給 ResultSink 寫出
    """

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        sink: Optional[ResultSink] = None,
        origin: str = SITE_ORIGIN,
        use_cache: bool = USE_CACHE,
    ):
        if fetcher is None:
            fetcher = PageCache() if use_cache else _DirectFetcher()
        self._fetcher = fetcher
        self._sink = sink or ResultSink()
        self.origin = origin

    async def _process(self, row: SourceRow) -> Optional[CompanyRecord]:
        try:
            html = await self._fetcher.fetch_html(row.source_url)
        except (FetchError, client_exceptions.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"⚠️ 略過 {row.identifier}：{e}")
            return None

        record = extract(html, origin=self.origin)
        if record.name != row.identifier:
            logger.debug(f"🔄 頁面名稱 {record.name!r} 與輸入 {row.identifier!r} 不同")
        return record

    async def run(self, rows: Iterable[SourceRow]) -> ResultCollection:
        """依序處理所有列並回傳結果集合"""
        queue: Deque[SourceRow] = deque(rows)
        total = len(queue)
        results = ResultCollection()
        logger.info(f"🔄 開始爬取，共 {total} 間公司")

        while queue:
            row = queue.popleft()
            record = await self._process(row)
            if record is not None:
                results.append(record)
                logger.info(f"✅ {row.identifier} 完成 ({len(results)}/{total})")

        skipped = total - len(results)
        if skipped:
            logger.warning(f"⚠️ {skipped} 間公司抓取失敗，未列入結果")
        logger.info(f"🏁 爬取完成，共 {len(results)} 筆結果")
        return results

    async def run_and_save(self, rows: Iterable[SourceRow]) -> ResultCollection:
        """處理所有列後一次寫出，寫出失敗時拋出 SinkError"""
        results = await self.run(rows)
        self._sink.save(results)
        return results


async def process_company_list() -> ResultCollection:
    """讀取設定中的公司清單，爬取並寫出結果"""
    rows = load_source_rows(INPUT_CSV)
    return await CrawlOrchestrator().run_and_save(rows)


if __name__ == "__main__":
    asyncio.run(process_company_list())
