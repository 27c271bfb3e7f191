"""loguru 控制台输出配置。

只影响 loguru 的输出（例如 LoguruLogService 与命令行工具），
不会改动 TSV 通道文件。
"""

from __future__ import annotations

import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[channel]}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(log_level: str = "INFO", enable_console: bool = True) -> None:
    """设置 loguru 日志输出。
    
    Args:
        log_level: 日志级别（DEBUG/INFO/WARNING/ERROR）
        enable_console: 是否输出到控制台（stderr）
    """
    log_level = log_level.upper()
    if log_level == "WARN":
        log_level = "WARNING"
    
    # 移除默认配置，统一由此处配置
    logger.remove()
    logger.configure(extra={"channel": "-"})
    
    if enable_console:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_level,
            colorize=True,
        )
    
    logger.debug(f"日志系统初始化完成，级别: {log_level}")


__all__ = [
    "setup_logging",
]
