async def fetch_company(url: str = "https://www.ycombinator.com/companies/airbnb"):
    """抓取單一公司頁面並輸出解析結果

    Args:
        url: 公司頁面網址
    """
    # 初始化 core
    from yc_company_core import YCCompanyCore
    core = YCCompanyCore()

    record = await core.fetch_company(url)
    print(f"🏢 公司資訊: {record.name}")
    print(record.model_dump_json(indent=4, by_alias=True))

if __name__ == "__main__":
    import asyncio
    asyncio.run(fetch_company())
