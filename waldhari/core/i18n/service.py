"""基于 CSV 文件的语言服务。

目录结构：

    <root>/Waldhari/<ModName>/<LanguageCode>/<Feature>.csv

功能（Feature）把翻译按功能区域拆分为多个文件（例如 UI、Missions），
按列表顺序加载，同一语言内第一次出现的键生效。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import os
from pathlib import Path
from types import MappingProxyType

from waldhari.core.config import get_settings
from waldhari.core.environment import get_data_directory, get_system_locale
from waldhari.core.exceptions import ServiceUnavailableError
from waldhari.core.logging import ILogService, LoggerFacade

from .base import ILanguageService
from .catalog import CatalogIssue, parse_catalog_lines

DEFAULT_MOD_NAME = "Waldhari.Core"
DEFAULT_FEATURE = "General"


class CsvLanguageService(ILanguageService):
    """CSV 语言服务。
    
    缺失语言目录、缺失功能文件、格式错误的行和重复键都只记录日志并跳过。
    键的匹配不区分大小写。
    
    不支持并发调用 load()：load() 与 get_message() 并发时可能看到部分清空的数据，
    需要并发访问时由调用方同步。
    
    使用示例:
        lang = CsvLanguageService("MyMod", "fr-FR", ["General", "Missions"])
        lang.get_message("greeting")
        
        # 运行时切换语言
        lang.load("MyMod", "en-US")
    """
    
    def __init__(
        self,
        mod_name: str = DEFAULT_MOD_NAME,
        language_code: str | None = None,
        features: Iterable[str] | None = None,
        *,
        base_dir: str | os.PathLike[str] | None = None,
        logger: ILogService | None = None,
    ) -> None:
        """初始化语言服务并立即加载语言。
        
        Args:
            mod_name: 模组名
            language_code: 初始语言代码，为空时使用系统区域
            features: 功能列表（默认：["General"]）
            base_dir: 数据目录（默认：<root>/Waldhari）
            logger: 日志器（默认：LoggerFacade 当前日志器）
            
        Raises:
            ServiceUnavailableError: 模组目录无法创建
        """
        self._logger = logger
        root = Path(base_dir) if base_dir is not None else get_data_directory()
        self._localization_dir = root / mod_name
        try:
            self._localization_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ServiceUnavailableError(
                f"无法创建语言目录: {self._localization_dir}",
                path=str(self._localization_dir),
                cause=exc,
            ) from exc
        
        self._features = list(features) if features is not None else [DEFAULT_FEATURE]
        self._extension = get_settings().catalog_extension
        # casefold(键) -> (原始键, 值)
        self._messages: dict[str, tuple[str, str]] = {}
        # 原始键 -> 值，供 messages 只读视图使用
        self._display: dict[str, str] = {}
        self._current_language = ""
        
        self._log.info(f"初始化语言服务: 模组 '{mod_name}'，语言 '{language_code or get_system_locale()}'")
        self._log.debug(f"待加载功能: {', '.join(self._features)}")
        
        self.load(mod_name, language_code)
    
    @property
    def _log(self) -> ILogService:
        if self._logger is not None:
            return self._logger
        return LoggerFacade.current()
    
    @property
    def current_language(self) -> str:
        return self._current_language
    
    @property
    def features(self) -> list[str]:
        """功能列表（副本）。"""
        return list(self._features)
    
    @property
    def localization_dir(self) -> Path:
        """模组语言目录。"""
        return self._localization_dir
    
    @property
    def messages(self) -> Mapping[str, str]:
        """已加载的翻译（只读视图，保留首次出现的键写法）。"""
        return MappingProxyType(self._display)
    
    def __len__(self) -> int:
        return len(self._messages)
    
    def __contains__(self, message_id: object) -> bool:
        return isinstance(message_id, str) and message_id.casefold() in self._messages
    
    def load(self, mod_name: str = DEFAULT_MOD_NAME, language_code: str | None = None) -> None:
        """加载或重新加载语言。
        
        先清空现有翻译（整体替换，不合并），再从语言目录加载各功能文件。
        语言目录不存在时只记录警告，翻译保持为空。
        """
        self._messages.clear()
        self._display.clear()
        self._current_language = self.determine_language(language_code)
        self._log.info(f"加载语言 '{self._current_language}'，模组 '{mod_name}'")
        
        lang_dir = self._localization_dir / self._current_language
        if not lang_dir.is_dir():
            self._log.warn(f"语言目录不存在: {lang_dir}")
            return
        
        self._load_feature_files(lang_dir)
        
        self._log.info(f"语言 '{self._current_language}' 已加载 {len(self._messages)} 条消息")
    
    def determine_language(self, language_code: str | None) -> str:
        """确定要加载的语言代码。
        
        非空时原样返回（纯空白字符串也原样返回），否则使用系统区域。
        """
        if language_code:
            return language_code
        return get_system_locale()
    
    def _load_feature_files(self, lang_dir: Path) -> None:
        for feature in self._features:
            file_path = lang_dir / f"{feature}.{self._extension}"
            if not file_path.is_file():
                self._log.warn(f"语言文件不存在: {file_path}")
                continue
            
            self._log.debug(f"加载文件: {file_path}")
            self._load_messages_from_file(file_path)
    
    def _read_catalog_text(self, file_path: Path) -> str | None:
        try:
            data = file_path.read_bytes()
        except OSError as exc:
            self._log.error(f"无法读取语言文件: {file_path}", exc)
            return None
        
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            # 非法字节替换为 U+FFFD，其余行照常加载
            self._log.error(f"语言文件不是有效的 UTF-8，已替换非法字节: {file_path}", exc)
            return data.decode("utf-8-sig", errors="replace")
    
    def _load_messages_from_file(self, file_path: Path) -> None:
        text = self._read_catalog_text(file_path)
        if text is None:
            return
        
        for item in parse_catalog_lines(text.splitlines()):
            if isinstance(item, CatalogIssue):
                self._log.error(f"{file_path} 第 {item.line_no} 行格式错误（{item.reason}）: {item.line}")
                continue
            
            folded = item.key.casefold()
            if folded in self._messages:
                self._log.warn(f"{file_path} 第 {item.line_no} 行重复键 '{item.key}'")
                continue
            
            self._messages[folded] = (item.key, item.value)
            self._display[item.key] = item.value
    
    def get_message(self, message_id: str | None) -> str:
        """获取翻译文本。
        
        - 键为空：记录警告，返回空字符串
        - 找到：返回翻译
        - 找不到：记录警告，返回键本身（缺失的翻译显示为键，而不是空白）
        """
        if not message_id:
            self._log.warn("get_message 的键为空")
            return ""
        
        entry = self._messages.get(message_id.casefold())
        if entry is not None:
            self._log.debug(f"获取消息 '{message_id}'")
            return entry[1]
        
        self._log.warn(f"消息键 '{message_id}' 不存在，返回键本身")
        return message_id
    
    def __repr__(self) -> str:
        return f"<CsvLanguageService language={self._current_language!r} messages={len(self._messages)}>"


__all__ = [
    "CsvLanguageService",
    "DEFAULT_FEATURE",
    "DEFAULT_MOD_NAME",
]
