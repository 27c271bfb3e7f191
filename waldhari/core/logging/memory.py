"""内存日志服务。

把日志记录保存在内存列表中，用于命令行检查语言文件以及测试断言。
"""

from __future__ import annotations

from datetime import datetime
import threading

from .base import ILogService, LogLevel, LogRecord
from .tsv import format_error


class MemoryLogService(ILogService):
    """内存日志服务。"""
    
    def __init__(self, level: LogLevel | str = LogLevel.DEBUG) -> None:
        self.level = LogLevel.parse(level)
        self.records: list[LogRecord] = []
        self._lock = threading.Lock()
    
    def write(self, level: LogLevel, message: str, error: BaseException | str | None = None) -> None:
        if level < self.level:
            return
        record = LogRecord(
            timestamp=datetime.now(),
            level=level,
            message=message,
            error=format_error(error) or None,
        )
        with self._lock:
            self.records.append(record)
    
    def at_level(self, level: LogLevel) -> list[LogRecord]:
        """获取指定级别的记录。"""
        return [record for record in self.records if record.level == level]
    
    def messages(self, level: LogLevel | None = None) -> list[str]:
        """获取消息文本（可按级别过滤）。"""
        return [record.message for record in self.records if level is None or record.level == level]
    
    def clear(self) -> None:
        """清空记录。"""
        with self._lock:
            self.records.clear()


__all__ = [
    "MemoryLogService",
]
