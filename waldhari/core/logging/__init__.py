"""日志模块。

提供：
- 日志级别与日志服务接口
- 线程安全的 TSV 文件日志服务
- 进程级日志入口（LoggerFacade）
- loguru 适配器与控制台配置
"""

from .adapters import LoguruLogService
from .base import ILogService, LogLevel, LogRecord
from .console import setup_logging
from .facade import LoggerFacade, get_logger, set_logger
from .memory import MemoryLogService
from .tsv import (
    TsvLogService,
    escape_field,
    format_record,
    parse_record,
    read_records,
    unescape_field,
)

__all__ = [
    "ILogService",
    "LogLevel",
    "LogRecord",
    "LoggerFacade",
    "LoguruLogService",
    "MemoryLogService",
    "TsvLogService",
    "escape_field",
    "format_record",
    "get_logger",
    "parse_record",
    "read_records",
    "set_logger",
    "setup_logging",
    "unescape_field",
]
