"""全局日志入口。

库内所有诊断日志都在调用时通过 LoggerFacade.current() 获取日志器，
因此安装新的日志器会立即影响之后的所有日志，包括安装前已创建的组件。

模组应在初始化时调用 set_logger()，把库日志写入模组自己的日志文件，
而不是单独的 Core.log。
"""

from __future__ import annotations

from waldhari.core.config import get_settings
from waldhari.core.exceptions import InvalidArgumentError

from .base import ILogService
from .tsv import TsvLogService


class LoggerFacade:
    """进程级日志器持有者。
    
    首次读取时惰性创建默认的 TsvLogService（通道 "Core"，级别 Debug）。
    读写不加锁：并发首次访问可能各自创建一个默认实例，
    默认配置是幂等的，结果等价。
    
    使用示例:
        LoggerFacade.install(TsvLogService("MyMod"))
        LoggerFacade.current().info("...")
    """
    
    _logger: ILogService | None = None
    
    @classmethod
    def current(cls) -> ILogService:
        """获取当前日志器，未安装时创建默认日志器。"""
        if cls._logger is None:
            settings = get_settings()
            cls._logger = TsvLogService(settings.default_channel, settings.log_level)
        return cls._logger
    
    @classmethod
    def install(cls, logger: ILogService | None) -> None:
        """替换当前日志器。
        
        Args:
            logger: 新的日志器，不能为 None
            
        Raises:
            InvalidArgumentError: logger 为 None
        """
        if logger is None:
            raise InvalidArgumentError("logger 不能为 None", argument="logger")
        cls._logger = logger
    
    @classmethod
    def reset_instance(cls) -> None:
        """清除当前日志器（仅用于测试）。"""
        cls._logger = None


def get_logger() -> ILogService:
    """获取当前日志器。"""
    return LoggerFacade.current()


def set_logger(logger: ILogService) -> None:
    """安装日志器。"""
    LoggerFacade.install(logger)


__all__ = [
    "LoggerFacade",
    "get_logger",
    "set_logger",
]
