from pydantic import BaseModel, ConfigDict


class LoaderError(Exception):
    """讀取輸入表格時可能發生的錯誤"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SourceRow(BaseModel):
    """輸入表格中的一列：公司識別名稱與其頁面網址"""
    model_config = ConfigDict(frozen=True)

    identifier: str  # 公司名稱（如 "Acme Inc"）
    source_url: str  # 公司頁面網址
