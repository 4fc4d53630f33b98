async def crawl_from_csv(csv_path: str = "inputs/companies.csv", output_path: str = "out/scraped.json"):
    """讀取公司清單，依序爬取並寫出 JSON

    Args:
        csv_path: 含 "Company Name" 與 "YC URL" 欄位的 CSV
        output_path: 輸出 JSON 路徑
    """
    from yc_company_core import YCCompanyCore
    core = YCCompanyCore()

    rows = core.load_companies(csv_path)
    results = await core.crawl(rows, output_path=output_path)
    print(f"🏁 共 {len(results)} / {len(rows)} 間公司寫出至 {output_path}")

if __name__ == "__main__":
    import asyncio
    asyncio.run(crawl_from_csv())
