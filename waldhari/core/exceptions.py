"""Core 层异常定义。

异常分类：
- 构造期致命错误（目录无法创建）：ServiceUnavailableError
- 调用方输入错误（安装空日志器、未知日志级别）：InvalidArgumentError
- 持久化失败（序列化 / 反序列化 / IO）：PersistenceError

缺失语言目录、缺失功能文件、格式错误的行、重复键均属于可恢复情况，
只记录日志，不抛出异常。
"""

from __future__ import annotations


class WaldhariError(Exception):
    """Waldhari 异常基类。
    
    所有库内异常都应该继承此类。
    
    Attributes:
        message: 错误消息
        cause: 原始异常（可选）
    """
    
    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        """初始化异常。
        
        Args:
            message: 错误消息
            cause: 原始异常
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
    
    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} ({type(self.cause).__name__}: {self.cause})"
        return self.message
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} message={self.message!r}>"


class InvalidArgumentError(WaldhariError, ValueError):
    """参数无效异常。
    
    例如向 LoggerFacade 安装 None，或解析未知的日志级别。
    """
    
    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class ServiceUnavailableError(WaldhariError):
    """服务不可用异常。
    
    必需的目录无法创建时抛出，组件在此情况下无法使用。
    """
    
    def __init__(self, message: str, path: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message, cause)
        self.path = path


class PersistenceError(WaldhariError):
    """持久化操作失败。
    
    包装底层的序列化或 IO 异常，调用方无需了解存储格式即可判断"操作失败"。
    """
    
    def __init__(self, message: str, name: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message, cause)
        self.name = name


__all__ = [
    "InvalidArgumentError",
    "PersistenceError",
    "ServiceUnavailableError",
    "WaldhariError",
]
