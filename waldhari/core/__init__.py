"""Waldhari Core - 游戏模组运行时服务。

模块结构：
- exceptions: 异常体系
- config: 运行时配置（pydantic-settings）
- environment: 宿主环境（根目录、系统区域）
- logging: 日志系统（TSV 文件日志、全局日志入口、loguru 适配）
- i18n: 国际化（按功能拆分的 CSV 语言文件）
- storage: 持久化（pydantic 模型的 XML 存储）
- testing: 测试替身
"""

from . import i18n, logging, storage
from .exceptions import (
    InvalidArgumentError,
    PersistenceError,
    ServiceUnavailableError,
    WaldhariError,
)
from .logging import LoggerFacade, get_logger, set_logger

__version__ = "0.1.0"
__all__ = [
    "InvalidArgumentError",
    "LoggerFacade",
    "PersistenceError",
    "ServiceUnavailableError",
    "WaldhariError",
    "get_logger",
    "i18n",
    "logging",
    "set_logger",
    "storage",
]
