"""宿主环境。

提供宿主程序的可写根目录和当前系统区域名称。
库本身不硬编码这两个值，只把它们当作输入。
"""

from __future__ import annotations

import locale
from pathlib import Path

from .config import get_settings


def get_root_directory() -> Path:
    """获取宿主根目录。"""
    return Path(get_settings().root_dir)


def get_data_directory() -> Path:
    """获取数据目录 <root>/Waldhari。"""
    settings = get_settings()
    return Path(settings.root_dir) / settings.data_dir_name


def to_culture_name(locale_name: str | None) -> str:
    """把 POSIX 区域名转换为区域文化名。
    
    Args:
        locale_name: 例如 "en_US"、"fr_FR.UTF-8"、"C"
        
    Returns:
        str: 例如 "en-US"；无法识别时返回空字符串（不变区域）
    """
    if not locale_name:
        return ""
    name = locale_name.split(".", 1)[0].split("@", 1)[0]
    if name in ("C", "POSIX"):
        return ""
    return name.replace("_", "-")


def get_system_locale() -> str:
    """获取当前系统区域名称。
    
    优先使用 WALDHARI_LOCALE 配置，其次是进程区域设置。
    """
    configured = get_settings().locale
    if configured:
        return configured
    language, _encoding = locale.getlocale()
    return to_culture_name(language)


__all__ = [
    "get_data_directory",
    "get_root_directory",
    "get_system_locale",
    "to_culture_name",
]
