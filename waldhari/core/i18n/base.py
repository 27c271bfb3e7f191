"""国际化接口。"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ILanguageService(ABC):
    """语言服务接口。
    
    提供消息查询和运行时语言切换。
    """
    
    @property
    @abstractmethod
    def current_language(self) -> str:
        """当前加载的语言代码（例如 en-US、fr-FR）。"""
        pass
    
    @abstractmethod
    def load(self, mod_name: str, language_code: str | None = None) -> None:
        """加载或重新加载指定语言的翻译。
        
        Args:
            mod_name: 模组名
            language_code: 语言代码，为空时使用系统区域
        """
        pass
    
    @abstractmethod
    def get_message(self, message_id: str | None) -> str:
        """根据键获取翻译文本。
        
        Args:
            message_id: 消息键
            
        Returns:
            str: 翻译文本；找不到时返回键本身
        """
        pass


__all__ = [
    "ILanguageService",
]
