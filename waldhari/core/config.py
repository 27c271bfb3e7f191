"""运行时配置。

使用 pydantic-settings 从环境变量加载配置。

环境变量前缀: WALDHARI_
示例: WALDHARI_ROOT_DIR, WALDHARI_LOCALE, WALDHARI_LOG_LEVEL
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WaldhariSettings(BaseSettings):
    """Waldhari 运行时配置。
    
    root_dir 对应宿主程序的安装目录（例如游戏的 scripts 目录），
    所有日志、语言文件和持久化文件都位于 <root_dir>/<data_dir_name> 下。
    """
    
    root_dir: Path = Field(
        default_factory=Path.cwd,
        description="宿主根目录（默认：当前工作目录）"
    )
    data_dir_name: str = Field(
        default="Waldhari",
        description="根目录下的数据目录名"
    )
    locale: str | None = Field(
        default=None,
        description="覆盖系统区域名称（例如 fr-FR）"
    )
    log_level: str = Field(
        default="Debug",
        description="默认日志通道的最低级别"
    )
    default_channel: str = Field(
        default="Core",
        description="默认日志通道名"
    )
    catalog_extension: str = Field(
        default="csv",
        description="语言文件扩展名"
    )
    persistence_extension: str = Field(
        default="xml",
        description="持久化文件扩展名"
    )
    
    model_config = SettingsConfigDict(
        env_prefix="WALDHARI_",
        case_sensitive=False,
    )


_settings: WaldhariSettings | None = None


def get_settings() -> WaldhariSettings:
    """获取配置实例（首次调用时从环境变量加载）。"""
    global _settings
    if _settings is None:
        _settings = WaldhariSettings()
    return _settings


def reset_settings() -> None:
    """丢弃缓存的配置，下次调用 get_settings() 时重新加载。"""
    global _settings
    _settings = None


__all__ = [
    "WaldhariSettings",
    "get_settings",
    "reset_settings",
]
