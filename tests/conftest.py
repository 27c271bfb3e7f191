"""Waldhari 测试夹具。

每个测试使用独立的临时根目录，并重置配置缓存与全局日志器。
"""

from __future__ import annotations

import pytest

from waldhari.core.config import reset_settings
from waldhari.core.logging import LoggerFacade
from waldhari.core.testing import RecordingLogService

_ENV_KEYS = [
    "WALDHARI_ROOT_DIR",
    "WALDHARI_DATA_DIR_NAME",
    "WALDHARI_LOCALE",
    "WALDHARI_LOG_LEVEL",
    "WALDHARI_DEFAULT_CHANNEL",
    "WALDHARI_CATALOG_EXTENSION",
    "WALDHARI_PERSISTENCE_EXTENSION",
]


@pytest.fixture(autouse=True)
def waldhari_root(tmp_path, monkeypatch):
    """把宿主根目录指向临时目录。"""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("WALDHARI_ROOT_DIR", str(tmp_path))
    reset_settings()
    LoggerFacade.reset_instance()
    yield tmp_path
    reset_settings()
    LoggerFacade.reset_instance()


@pytest.fixture
def data_dir(waldhari_root):
    return waldhari_root / "Waldhari"


@pytest.fixture
def recorder():
    """安装记录日志器并返回。"""
    log = RecordingLogService()
    LoggerFacade.install(log)
    return log
