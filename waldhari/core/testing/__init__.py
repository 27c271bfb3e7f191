"""测试工具模块。

提供满足 ILogService 契约的测试替身：
- StubLogService: 丢弃所有日志
- RecordingLogService: 在内存中记录所有日志，便于断言
"""

from waldhari.core.logging import ILogService, LogLevel, MemoryLogService


class StubLogService(ILogService):
    """空日志服务，所有日志都被丢弃。"""
    
    def __init__(self, level: LogLevel = LogLevel.DEBUG) -> None:
        self.level = level
    
    def write(self, level, message, error=None) -> None:
        pass


RecordingLogService = MemoryLogService

__all__ = [
    "RecordingLogService",
    "StubLogService",
]
