import json
import pytest
from typing import Dict, List

from yc_company_core.company.models import FetchError, ResultCollection
from yc_company_core.crawl.orchestrator import CrawlOrchestrator
from yc_company_core.crawl.sink import ResultSink, SinkError
from yc_company_core.source.models import SourceRow


def page(name: str, jobs: int = 0) -> str:
    rows = "".join(f'<div class="py-4"><div class="pr-4">Job {i}</div></div>' for i in range(jobs))
    return f"""
    <h1>{name}</h1>
    <div class="whitespace-pre-line">{name} description</div>
    <div class="divide-gray-200">{rows}</div>
    <div class="space-y-5"><div class="flex">
      <div class="flex-grow"><h3>{name} Founder</h3><p>Bio</p></div>
      <div class="ycdc-card"><a href="https://x.com/{name}">x</a></div>
    </div></div>
    <div class="company-launch"><h3>Launch {name}</h3><div>Post</div><a href="/launches/{name}">go</a></div>
    """


class FakeFetcher:
    """依網址回傳頁面，未登錄的網址視為抓取失敗"""

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.calls: List[str] = []

    async def fetch_html(self, url: str) -> str:
        self.calls.append(url)
        if url not in self.pages:
            raise FetchError(f"重試耗盡仍然失敗 [{url}]")
        return self.pages[url]


@pytest.fixture
def rows():
    return [
        SourceRow(identifier="Acme", source_url="https://example.org/acme"),
        SourceRow(identifier="Broken", source_url="https://example.org/broken"),
        SourceRow(identifier="Globex", source_url="https://example.org/globex"),
    ]


@pytest.fixture
def fetcher():
    return FakeFetcher({
        "https://example.org/acme": page("Acme", jobs=2),
        "https://example.org/globex": page("Globex", jobs=1),
    })


@pytest.fixture
def sink(tmp_path):
    return ResultSink(tmp_path / "out" / "scraped.json")


@pytest.mark.asyncio
async def test_failed_row_is_skipped_and_order_kept(rows, fetcher, sink):
    """抓取失敗的列不產生結果，其餘依輸入順序"""
    orchestrator = CrawlOrchestrator(fetcher=fetcher, sink=sink)
    results = await orchestrator.run(rows)

    assert isinstance(results, ResultCollection)
    assert len(results) == len(rows) - 1
    assert [r.name for r in results] == ["Acme", "Globex"]
    assert fetcher.calls == [r.source_url for r in rows]
    assert len(results[0].jobs) == 2
    assert results[0].launch_posts[0].links == ["https://www.ycombinator.com/launches/Acme"]


@pytest.mark.asyncio
async def test_every_row_failing_yields_empty_collection(rows, sink):
    orchestrator = CrawlOrchestrator(fetcher=FakeFetcher({}), sink=sink)
    results = await orchestrator.run(rows)
    assert len(results) == 0


@pytest.mark.asyncio
async def test_duplicate_urls_are_processed_each_time(fetcher, sink):
    rows = [SourceRow(identifier="Acme", source_url="https://example.org/acme")] * 2
    results = await CrawlOrchestrator(fetcher=fetcher, sink=sink).run(rows)
    assert len(results) == 2


@pytest.mark.asyncio
async def test_run_and_save_persists_once(rows, fetcher, sink):
    """完成後一次寫出，讀回的內容與記憶體中一致"""
    orchestrator = CrawlOrchestrator(fetcher=fetcher, sink=sink)
    results = await orchestrator.run_and_save(rows)

    assert sink.path.exists()
    document = json.loads(sink.path.read_text(encoding="utf-8"))
    assert [d["name"] for d in document] == ["Acme", "Globex"]
    assert set(document[0]) == {
        "name", "founded", "description", "teamSize", "location",
        "jobs", "founders", "newsStories", "launchPosts",
    }
    assert sink.load() == results


@pytest.mark.asyncio
async def test_unwritable_output_is_fatal(rows, fetcher, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")
    orchestrator = CrawlOrchestrator(fetcher=fetcher, sink=ResultSink(blocker / "scraped.json"))
    with pytest.raises(SinkError):
        await orchestrator.run_and_save(rows)
