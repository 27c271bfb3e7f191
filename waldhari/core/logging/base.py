"""日志基础类型。

- LogLevel: 按严重程度排序的日志级别（Debug < Info < Warn < Error）
- LogRecord: 单条日志记录（仅在写入调用期间存在）
- ILogService: 日志服务接口，所有日志实现必须实现此接口
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from waldhari.core.exceptions import InvalidArgumentError


class LogLevel(IntEnum):
    """日志级别。
    
    整数值决定严重程度顺序，label 为写入日志文件的名称。
    """
    
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    
    @property
    def label(self) -> str:
        """日志文件中的级别名称（Debug/Info/Warn/Error）。"""
        return self.name.capitalize()
    
    @classmethod
    def parse(cls, value: str | LogLevel) -> LogLevel:
        """解析日志级别名称（大小写不敏感）。
        
        Args:
            value: 级别名称或 LogLevel
            
        Returns:
            LogLevel: 对应的日志级别
            
        Raises:
            InvalidArgumentError: 未知的级别名称
        """
        if isinstance(value, LogLevel):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise InvalidArgumentError(f"未知的日志级别: {value!r}", argument="level") from None


@dataclass(frozen=True)
class LogRecord:
    """日志记录。"""
    
    timestamp: datetime
    level: LogLevel
    message: str
    error: str | None = None


class ILogService(ABC):
    """日志服务接口。
    
    实现类只需实现 write()，四个级别方法都委托给它。
    低于 level 的消息会被过滤。
    """
    
    level: LogLevel = LogLevel.DEBUG
    
    @abstractmethod
    def write(self, level: LogLevel, message: str, error: BaseException | str | None = None) -> None:
        """写入一条日志。
        
        Args:
            level: 日志级别
            message: 日志消息
            error: 异常或错误详情（可选）
        """
        pass
    
    def is_enabled(self, level: LogLevel) -> bool:
        """判断指定级别是否会被写入。"""
        return level >= self.level
    
    def debug(self, message: str) -> None:
        """记录调试信息。"""
        self.write(LogLevel.DEBUG, message)
    
    def info(self, message: str) -> None:
        """记录一般信息。"""
        self.write(LogLevel.INFO, message)
    
    def warn(self, message: str) -> None:
        """记录警告。"""
        self.write(LogLevel.WARN, message)
    
    def error(self, message: str, error: BaseException | str | None = None) -> None:
        """记录错误。
        
        Args:
            message: 错误消息
            error: 导致错误的异常（可选）
        """
        self.write(LogLevel.ERROR, message, error)


__all__ = [
    "ILogService",
    "LogLevel",
    "LogRecord",
]
