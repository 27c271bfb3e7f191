"""命令行工具模块。"""

from .cli import app, main

__all__ = [
    "app",
    "main",
]
