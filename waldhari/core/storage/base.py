"""持久化接口。"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


class IPersistenceService(ABC):
    """持久化服务接口。
    
    以名称为单位保存和读取结构化对象，每个名称对应一个文件。
    """
    
    @abstractmethod
    def load(self, name: str, model: type[M]) -> M | None:
        """读取对象，文件不存在时返回 None。"""
        pass
    
    @abstractmethod
    def save(self, name: str, data: BaseModel) -> None:
        """保存对象（覆盖已有文件）。"""
        pass
    
    @abstractmethod
    def exists(self, name: str) -> bool:
        """检查对象是否存在。"""
        pass
    
    @abstractmethod
    def delete(self, name: str) -> None:
        """删除对象，不存在时不做任何事。"""
        pass


__all__ = [
    "IPersistenceService",
]
