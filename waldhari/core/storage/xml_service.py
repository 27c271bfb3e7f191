"""基于 XML 文件的持久化服务。

文件路径: <root>/Waldhari/<name>.<ext>（默认扩展名 xml）
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TypeVar
import xml.etree.ElementTree as ET

from pydantic import BaseModel

from waldhari.core.config import get_settings
from waldhari.core.environment import get_data_directory
from waldhari.core.exceptions import PersistenceError, ServiceUnavailableError
from waldhari.core.logging import ILogService, LoggerFacade

from .base import IPersistenceService
from .codec import element_to_model, model_to_element

M = TypeVar("M", bound=BaseModel)


class XmlPersistenceService(IPersistenceService):
    """XML 持久化服务。
    
    save/load 的任何序列化或 IO 错误都包装为 PersistenceError，
    并保留原始异常（__cause__）。
    
    使用示例:
        class Garage(BaseModel):
            owner: str
            vehicles: list[str] = []
        
        store = XmlPersistenceService()
        store.save("garage", Garage(owner="Franklin"))
        garage = store.load("garage", Garage)
    """
    
    def __init__(
        self,
        extension: str | None = None,
        *,
        base_dir: str | os.PathLike[str] | None = None,
        logger: ILogService | None = None,
    ) -> None:
        """初始化持久化服务。
        
        Args:
            extension: 文件扩展名（默认：xml）
            base_dir: 数据目录（默认：<root>/Waldhari）
            logger: 日志器（默认：LoggerFacade 当前日志器）
            
        Raises:
            ServiceUnavailableError: 数据目录无法创建
        """
        self._extension = extension or get_settings().persistence_extension
        self._base_path = Path(base_dir) if base_dir is not None else get_data_directory()
        self._logger = logger
        try:
            self._base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ServiceUnavailableError(
                f"无法创建数据目录: {self._base_path}",
                path=str(self._base_path),
                cause=exc,
            ) from exc
    
    @property
    def _log(self) -> ILogService:
        if self._logger is not None:
            return self._logger
        return LoggerFacade.current()
    
    @property
    def base_path(self) -> Path:
        return self._base_path
    
    def get_full_path(self, name: str) -> Path:
        """获取名称对应的文件路径。"""
        return self._base_path / f"{name}.{self._extension}"
    
    def load(self, name: str, model: type[M]) -> M | None:
        full_path = self.get_full_path(name)
        try:
            if not full_path.is_file():
                return None
            tree = ET.parse(full_path)
            data = element_to_model(tree.getroot(), model)
        except (OSError, ET.ParseError, ValueError) as exc:
            self._log.error(f"加载文件失败: {full_path.name}", exc)
            raise PersistenceError(f"加载文件失败: {full_path.name}", name=name, cause=exc) from exc
        
        self._log.debug(f"文件加载成功: {full_path}")
        return data
    
    def save(self, name: str, data: BaseModel) -> None:
        full_path = self.get_full_path(name)
        try:
            tree = ET.ElementTree(model_to_element(data))
            ET.indent(tree)
            tree.write(full_path, encoding="utf-8", xml_declaration=True)
        except (OSError, ValueError) as exc:
            self._log.error(f"保存文件失败: {full_path.name}", exc)
            raise PersistenceError(f"保存文件失败: {full_path.name}", name=name, cause=exc) from exc
        
        self._log.debug(f"文件保存成功: {full_path}")
    
    def exists(self, name: str) -> bool:
        return self.get_full_path(name).is_file()
    
    def delete(self, name: str) -> None:
        full_path = self.get_full_path(name)
        if full_path.is_file():
            full_path.unlink()
            self._log.debug(f"文件删除成功: {full_path}")


__all__ = [
    "XmlPersistenceService",
]
