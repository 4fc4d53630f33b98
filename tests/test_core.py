import json
import pytest
from yc_company_core import YCCompanyCore
from yc_company_core.company.models import FetchError
from yc_company_core.crawl import orchestrator


class FakePageCache:
    """取代 PageCache，只提供一個可抓取的頁面"""

    pages = {"https://example.org/acme": "<h1>Acme</h1><div class='whitespace-pre-line'>Widgets</div>"}

    async def fetch_html(self, url: str, *, refresh: bool = False) -> str:
        if url not in self.pages:
            raise FetchError(f"HTTP 狀態碼錯誤 404 [{url}]")
        return self.pages[url]


@pytest.fixture
def core():
    return YCCompanyCore()


def test_parse_company(core):
    record = core.parse_company("<h1>Acme</h1>")
    assert record.name == "Acme"
    assert record.jobs == []


def test_load_companies(core, tmp_path):
    path = tmp_path / "companies.csv"
    path.write_text("Company Name,YC URL\nAcme,https://example.org/acme\n", encoding="utf-8")
    rows = core.load_companies(path)
    assert [r.identifier for r in rows] == ["Acme"]


@pytest.mark.asyncio
async def test_crawl_writes_output(core, tmp_path, monkeypatch):
    monkeypatch.setattr(orchestrator, "PageCache", FakePageCache)
    path = tmp_path / "companies.csv"
    path.write_text(
        "Company Name,YC URL\nAcme,https://example.org/acme\nGone,https://example.org/gone\n",
        encoding="utf-8",
    )
    output = tmp_path / "out" / "scraped.json"
    results = await core.crawl(core.load_companies(path), output_path=str(output))

    assert len(results) == 1
    document = json.loads(output.read_text(encoding="utf-8"))
    assert document[0]["name"] == "Acme"
    assert document[0]["description"] == "Widgets"


def test_get_logger_uses_caller_module(core):
    logger = core.get_logger(logger_level="INFO")
    assert logger.name == __name__
