import csv
from pathlib import Path
from typing import List, Union

from yc_company_core.source.models import LoaderError, SourceRow
from yc_company_core.utils.logger import get_logger

logger = get_logger(logger_level="INFO")

DEFAULT_IDENTIFIER_COLUMN = "Company Name"
DEFAULT_URL_COLUMN = "YC URL"


def load_source_rows(
    path: Union[str, Path],
    identifier_column: str = DEFAULT_IDENTIFIER_COLUMN,
    url_column: str = DEFAULT_URL_COLUMN,
) -> List[SourceRow]:
    """
    讀取公司清單 CSV，回傳 (公司名稱, 網址) 列表。

    缺少任一欄位值的列會被略過；表頭缺少必要欄位或 CSV 格式錯誤時
    整批中止。

    Args:
        path: CSV 檔案路徑
        identifier_column: 公司名稱欄位
        url_column: 網址欄位

    Returns:
        List[SourceRow]: 依原始順序排列的有效列

    Raises:
        LoaderError: 檔案無法讀取或格式錯誤
    """
    path = Path(path)
    try:
        with open(path, newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            fieldnames = reader.fieldnames or []
            missing = [c for c in (identifier_column, url_column) if c not in fieldnames]
            if missing:
                raise LoaderError(f"CSV 缺少必要欄位 {missing}：{path}")

            rows: List[SourceRow] = []
            for line_no, raw in enumerate(reader, start=2):
                identifier = (raw.get(identifier_column) or "").strip()
                source_url = (raw.get(url_column) or "").strip()
                if not identifier or not source_url:
                    logger.debug(f"⏭️ 略過第 {line_no} 列：欄位不完整")
                    continue
                rows.append(SourceRow(identifier=identifier, source_url=source_url))
    except OSError as e:
        error_msg = f"無法讀取 CSV：{path} ({e})"
        logger.error(f"❌ {error_msg}")
        raise LoaderError(error_msg)
    except csv.Error as e:
        error_msg = f"CSV 解析錯誤：{path} ({e})"
        logger.error(f"❌ {error_msg}")
        raise LoaderError(error_msg)

    logger.info(f"📄 讀取 {len(rows)} 間公司：{path}")
    return rows
