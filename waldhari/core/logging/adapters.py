"""loguru 适配器。

宿主已经使用 loguru 时，可以把库日志转发到 loguru：

    set_logger(LoguruLogService("MyMod"))
"""

from __future__ import annotations

from loguru import logger

from .base import ILogService, LogLevel

_LOGURU_LEVELS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARNING",
    LogLevel.ERROR: "ERROR",
}


class LoguruLogService(ILogService):
    """把日志转发到 loguru 的日志服务。
    
    每条日志绑定 channel 字段，便于在 loguru 格式中区分模组。
    """
    
    def __init__(self, channel: str = "Core", level: LogLevel | str = LogLevel.DEBUG) -> None:
        self.channel = channel
        self.level = LogLevel.parse(level)
        self._logger = logger.bind(channel=channel)
    
    def write(self, level: LogLevel, message: str, error: BaseException | str | None = None) -> None:
        if level < self.level:
            return
        
        target = self._logger.opt(depth=2)
        if isinstance(error, BaseException):
            target = self._logger.opt(depth=2, exception=error)
        elif error:
            message = f"{message}\n{error}"
        target.log(_LOGURU_LEVELS[level], message)


__all__ = [
    "LoguruLogService",
]
