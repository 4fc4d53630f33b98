"""YC 公司頁面爬取核心模組"""
from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional, Union

if TYPE_CHECKING:
    import logging
    from yc_company_core.company.models import CompanyRecord, ResultCollection
    from yc_company_core.source.models import SourceRow


class YCCompanyCore:
    """YC 公司頁面爬取功能的統一入口點

    此類別提供以下功能：
    1. 輸入
       - load_companies(): 讀取公司清單 CSV

    2. 單頁操作
       - parse_company(): 將 HTML 解析為公司資料
       - fetch_company(): 從網路抓取並解析單一公司頁面

    3. 批次爬取
       - crawl(): 依序爬取多間公司
       - run(): 讀取設定中的清單、爬取並寫出結果

    4. 工具
       - get_logger(): 取得模組日誌
    """

    def get_logger(self, logger_level: str = "DEBUG") -> "logging.Logger":
        import inspect
        from yc_company_core.utils.logger import get_logger
        caller = inspect.getmodule(inspect.stack()[1][0])
        return get_logger(logger_level, name=caller.__name__ if caller else "unknown")

    def load_companies(self, path: Union[str, Path, None] = None) -> List["SourceRow"]:
        """讀取公司清單

        Args:
            path: CSV 路徑，預設為設定中的 YC_INPUT_CSV

        Returns:
            List[SourceRow]: 有效的公司列
        """
        from yc_company_core.source.loader import load_source_rows
        from yc_company_core.utils.config import INPUT_CSV
        return load_source_rows(path or INPUT_CSV)

    def parse_company(self, html: str) -> "CompanyRecord":
        from yc_company_core.company.extractor import extract
        return extract(html)

    async def fetch_company(self, url: str, refresh: bool = False) -> "CompanyRecord":
        """從網路（或快取）獲取單一公司資料

        Args:
            url: 公司頁面網址
            refresh: 是否強制重新抓取，預設為 False

        Returns:
            CompanyRecord: 解析後的公司資料
        """
        from yc_company_core.company.cache import PageCache
        from yc_company_core.company.extractor import extract
        html = await PageCache().fetch_html(url, refresh=refresh)
        return extract(html)

    async def crawl(self, rows: Iterable["SourceRow"], output_path: Optional[str] = None) -> "ResultCollection":
        """依序爬取多間公司並寫出結果

        Args:
            rows: 公司列
            output_path: 輸出 JSON 路徑，預設為設定中的 YC_OUTPUT_JSON

        Returns:
            ResultCollection: 爬取結果
        """
        from yc_company_core.crawl.orchestrator import CrawlOrchestrator
        from yc_company_core.crawl.sink import ResultSink
        orchestrator = CrawlOrchestrator(sink=ResultSink(output_path))
        return await orchestrator.run_and_save(rows)

    async def run(self) -> "ResultCollection":
        from yc_company_core.crawl.orchestrator import process_company_list
        return await process_company_list()
