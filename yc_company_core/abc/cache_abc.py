from abc import ABC, abstractmethod
from typing import Any, Optional


class BaseCacheABC(ABC):
    """
    Cache 層的抽象基底類，規範三層快取（記憶體 → 檔案 → 來源）的標準介面。
    """
    @abstractmethod
    async def fetch_from_memory(self, *args, **kwargs) -> Optional[Any]:
        pass

    @abstractmethod
    async def save_to_memory(self, data: Any, *args, **kwargs) -> None:
        pass

    @abstractmethod
    async def fetch_from_file(self, *args, **kwargs) -> Optional[Any]:
        pass

    @abstractmethod
    async def save_to_file(self, data: Any, *args, **kwargs) -> None:
        pass

    @abstractmethod
    async def fetch_from_source(self, *args, **kwargs) -> Any:
        pass

    @abstractmethod
    async def fetch(self, *args, refresh: bool = False, **kwargs) -> Any:
        """依序嘗試記憶體、檔案、來源取得資料"""
        pass
