"""持久化模块。

提供：
- 持久化服务接口
- pydantic 模型的 XML 编解码
- 基于 XML 文件的持久化服务
"""

from .base import IPersistenceService
from .codec import dumps, loads
from .xml_service import XmlPersistenceService

__all__ = [
    "IPersistenceService",
    "XmlPersistenceService",
    "dumps",
    "loads",
]
