from __future__ import annotations
from typing import List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel


class FetchError(Exception):
    """抓取公司頁面時可能發生的錯誤"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class _CamelModel(BaseModel):
    """輸出文件使用 camelCase 欄位名稱，程式內使用 snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Founder(_CamelModel):
    """創辦人資訊"""
    name: str
    description: str
    links: List[str] = Field(default_factory=list)  # 外部連結，依頁面順序


class JobListing(_CamelModel):
    """職缺資訊，缺少的欄位一律為空字串"""
    title: str = ""
    location: str = ""
    pay: str = ""
    equity: str = ""
    experience: str = ""


class NewsStory(_CamelModel):
    """新聞報導（目前頁面解析不會填入）"""
    title: str
    link: str


class LaunchPost(_CamelModel):
    """公司發表文章"""
    title: str
    description: str
    links: List[str] = Field(default_factory=list)  # 絕對網址


class CompanyRecord(_CamelModel):
    """一間公司頁面解析後的完整資料

    包含：
    - 基本資訊（名稱、簡介、成立年份、團隊人數、所在地）
    - 職缺、創辦人、新聞、發表文章列表
    """
    # 基本資訊
    name: str = ""
    founded: str = ""
    description: str = ""
    team_size: str = ""
    location: str = ""

    # 列表資料，順序與頁面一致
    jobs: List[JobListing] = Field(default_factory=list)
    founders: List[Founder] = Field(default_factory=list)
    news_stories: List[NewsStory] = Field(default_factory=list)
    launch_posts: List[LaunchPost] = Field(default_factory=list)


class ResultCollection(RootModel[List[CompanyRecord]]):
    """爬取結果集合，只能依序附加"""
    root: List[CompanyRecord] = Field(default_factory=list)

    def append(self, record: CompanyRecord) -> None:
        self.root.append(record)

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self):
        return iter(self.root)

    def __getitem__(self, index: int) -> CompanyRecord:
        return self.root[index]


class CacheMetadata(BaseModel):
    """快取的元數據，記錄資料的生命週期資訊"""
    cache_fetch_at: datetime = Field(description="資料從遠端抓取的時間")


class CachedPage(BaseModel):
    """單一公司頁面的原始 HTML 快取

    包含：
    1. metadata: 快取的元數據（時間戳記）
    2. url: 頁面網址
    3. html: 原始 HTML 內容
    """
    metadata: CacheMetadata
    url: str
    html: str
