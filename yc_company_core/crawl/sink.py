from pathlib import Path
from typing import Optional, Union

from yc_company_core.company.models import ResultCollection
from yc_company_core.utils.config import OUTPUT_JSON
from yc_company_core.utils.logger import get_logger

logger = get_logger(logger_level="INFO")


class SinkError(Exception):
    """寫出結果文件失敗，整批結果無法保存"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResultSink:
    """將爬取結果一次性寫出為縮排 JSON 文件"""

    def __init__(self, path: Optional[Union[str, Path]] = None, indent: int = 4):
        self.path = Path(path or OUTPUT_JSON)
        self.indent = indent

    def save(self, collection: ResultCollection) -> Path:
        """寫出整份結果集合

        Raises:
            SinkError: 目錄無法建立或檔案無法寫入
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(collection.model_dump_json(indent=self.indent, by_alias=True))
        except OSError as e:
            error_msg = f"寫出結果失敗：{self.path} ({e})"
            logger.error(f"❌ {error_msg}")
            raise SinkError(error_msg)
        logger.info(f"💾 已寫出 {len(collection)} 筆結果：{self.path}")
        return self.path

    def load(self) -> ResultCollection:
        """讀回結果文件"""
        with open(self.path, encoding="utf-8") as f:
            return ResultCollection.model_validate_json(f.read())
