from __future__ import annotations
from typing import Dict, List, Optional, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from yc_company_core.company import selectors
from yc_company_core.company.models import (
    CompanyRecord,
    Founder,
    JobListing,
    LaunchPost,
    NewsStory,
)
from yc_company_core.utils.config import SITE_ORIGIN
from yc_company_core.utils.logger import get_logger

logger = get_logger(logger_level="INFO")

Markup = Union[BeautifulSoup, str, bytes]


def _text(element: Optional[Tag]) -> str:
    """取得元素文字並去除前後空白，元素不存在時回傳空字串"""
    if element is None:
        return ""
    return element.get_text().strip()


def _raw_text(element: Tag) -> str:
    return element.get_text()


def _last(element: Tag, selector: str) -> Optional[Tag]:
    """多個符合時以最後一個為準"""
    matches = element.select(selector)
    return matches[-1] if matches else None


def _hrefs(element: Optional[Tag]) -> List[str]:
    if element is None:
        return []
    return [a.get("href", "") for a in element.select(selectors.LINK)]


def _pick_positions(elements: List[Tag], positions: Dict[str, int]) -> Dict[str, str]:
    """依位置對照表取出原始文字，超出範圍的欄位維持空字串"""
    return {
        field: _raw_text(elements[index]) if index < len(elements) else ""
        for field, index in positions.items()
    }


def to_soup(markup: Markup) -> BeautifulSoup:
    if isinstance(markup, BeautifulSoup):
        return markup
    return BeautifulSoup(markup or "", "html.parser")


def extract_name(soup: BeautifulSoup) -> str:
    return _text(soup.select_one(selectors.NAME))


def extract_description(soup: BeautifulSoup) -> str:
    return _text(soup.select_one(selectors.DESCRIPTION))


def extract_facts(soup: BeautifulSoup) -> Dict[str, str]:
    """擷取成立年份、團隊人數與所在地

    Returns:
        Dict[str, str]: 鍵為 founded / team_size / location
    """
    spans = soup.select(selectors.FACT_SPANS)
    return _pick_positions(spans, selectors.FACT_POSITIONS)


def extract_jobs(soup: BeautifulSoup) -> List[JobListing]:
    """每個職缺列都會產生一筆 JobListing，即使欄位全為空"""
    jobs: List[JobListing] = []
    for row in soup.select(selectors.JOB_ROW):
        attributes = _pick_positions(
            row.select(selectors.JOB_ATTRIBUTE),
            selectors.JOB_ATTRIBUTE_POSITIONS,
        )
        title = _text(row.select_one(selectors.JOB_TITLE))
        jobs.append(JobListing(title=title, **attributes))
    return jobs


def extract_founders(soup: BeautifulSoup) -> List[Founder]:
    """擷取創辦人，名稱與簡介皆非空才會納入"""
    founders: List[Founder] = []
    for card in soup.select(selectors.FOUNDER_CARD):
        info = _last(card, selectors.FOUNDER_INFO)
        name = _text(info.select_one(selectors.FOUNDER_NAME)) if info else ""
        description = _text(info.select_one(selectors.FOUNDER_DESCRIPTION)) if info else ""
        links = _hrefs(_last(card, selectors.FOUNDER_LINK_CARD))

        if name and description:
            founders.append(Founder(name=name, description=description, links=links))
    return founders


def extract_launch_posts(soup: BeautifulSoup, origin: str = SITE_ORIGIN) -> List[LaunchPost]:
    """擷取發表文章，相對連結會以 origin 轉為絕對網址"""
    posts: List[LaunchPost] = []
    for block in soup.select(selectors.LAUNCH_POST):
        title = _text(block.select_one(selectors.LAUNCH_TITLE))
        description = _text(block.select_one(selectors.LAUNCH_DESCRIPTION))
        links = [urljoin(origin, href) for href in _hrefs(block)]

        if title and description:
            posts.append(LaunchPost(title=title, description=description, links=links))
    return posts


def extract_news_stories(soup: BeautifulSoup) -> List[NewsStory]:
    # 頁面上尚無對應的新聞區塊規則
    return []


def extract(markup: Markup, origin: str = SITE_ORIGIN) -> CompanyRecord:
    """
    將公司頁面 HTML 解析為 CompanyRecord。

    任何缺少的區塊都會退化為空字串或空列表，不會拋出例外，
    避免單一頁面格式異常中斷整批爬取。

    Args:
        markup: BeautifulSoup 物件或原始 HTML
        origin: 發表文章相對連結所使用的網站來源

    Returns:
        CompanyRecord: 解析後的公司資料
    """
    soup = to_soup(markup)
    facts = extract_facts(soup)
    record = CompanyRecord(
        name=extract_name(soup),
        description=extract_description(soup),
        founded=facts["founded"],
        team_size=facts["team_size"],
        location=facts["location"],
        jobs=extract_jobs(soup),
        founders=extract_founders(soup),
        news_stories=extract_news_stories(soup),
        launch_posts=extract_launch_posts(soup, origin=origin),
    )
    logger.debug(
        f"🔍 解析完成：{record.name or '(未命名)'}，"
        f"職缺 {len(record.jobs)}、創辦人 {len(record.founders)}、發表 {len(record.launch_posts)}"
    )
    return record
