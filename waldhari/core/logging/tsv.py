"""TSV 文件日志服务。

每个通道写入一个文件 <root>/Waldhari/<channel>.log，每行一条记录：

    timestamp<TAB>Level<TAB>"message"<TAB>"error"

文件只追加，不会被截断或滚动。每次写入都重新以追加模式打开文件，
不长期持有文件句柄。
"""

from __future__ import annotations

from collections.abc import Iterator
import csv
from datetime import datetime
import os
from pathlib import Path
import threading
import traceback

from waldhari.core.environment import get_data_directory
from waldhari.core.exceptions import InvalidArgumentError, ServiceUnavailableError

from .base import ILogService, LogLevel, LogRecord

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
FIELD_SEPARATOR = "\t"
EMPTY_FIELD = '""'


def format_timestamp(moment: datetime) -> str:
    """格式化时间戳，精确到毫秒。"""
    return moment.strftime(TIMESTAMP_FORMAT)[:-3]


def format_error(error: BaseException | str | None) -> str:
    """把异常格式化为完整的堆栈文本。"""
    if error is None:
        return ""
    if isinstance(error, BaseException):
        return "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip("\n")
    return str(error)


def escape_field(value: str | None) -> str:
    """转义 TSV 字段。
    
    - 空值写为 ""
    - 制表符替换为空格（制表符是字段分隔符）
    - 双引号加倍，整体用双引号包裹
    """
    if not value:
        return EMPTY_FIELD
    clean = value.replace("\t", " ").replace('"', '""')
    return f'"{clean}"'


def unescape_field(value: str) -> str:
    """escape_field 的逆操作（制表符已被替换，无法还原）。"""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value.replace('""', '"')


def format_record(record: LogRecord) -> str:
    """把日志记录格式化为一行 TSV（不含换行符）。"""
    return FIELD_SEPARATOR.join(
        (
            format_timestamp(record.timestamp),
            record.level.label,
            escape_field(record.message),
            escape_field(record.error),
        )
    )


def _record_from_fields(fields: list[str]) -> LogRecord:
    if len(fields) != 4:
        raise InvalidArgumentError(f"日志记录应有 4 个字段，实际为 {len(fields)}", argument="line")
    timestamp, level, message, error = fields
    try:
        moment = datetime.strptime(timestamp, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise InvalidArgumentError(f"无效的时间戳: {timestamp!r}", argument="line") from exc
    return LogRecord(
        timestamp=moment,
        level=LogLevel.parse(level),
        message=message,
        error=error or None,
    )


def parse_record(line: str) -> LogRecord:
    """解析单行日志记录。
    
    Raises:
        InvalidArgumentError: 行格式无效
    """
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) == 4:
        fields = fields[:2] + [unescape_field(fields[2]), unescape_field(fields[3])]
    return _record_from_fields(fields)


def read_records(path: str | os.PathLike[str]) -> Iterator[LogRecord]:
    """读取通道日志文件中的所有记录。
    
    错误字段中的堆栈可能跨越多个物理行，按带引号的 TSV 解析。
    """
    with open(path, encoding="utf-8", newline="") as f:
        for fields in csv.reader(f, delimiter=FIELD_SEPARATOR, quotechar='"', doublequote=True):
            if fields:
                yield _record_from_fields(fields)


class TsvLogService(ILogService):
    """基于 TSV 文件的日志服务。
    
    线程安全：同一实例的并发写入由实例级锁串行化，
    不同实例之间互不竞争（即使指向同一文件，调用方应避免这种配置）。
    
    写入失败（磁盘已满、权限不足）不在内部捕获，直接抛给调用方。
    
    使用示例:
        log = TsvLogService("MyMod", LogLevel.INFO)
        log.info("模组已加载")
        log.error("保存失败", exc)
    """
    
    def __init__(
        self,
        mod_name: str,
        level: LogLevel | str = LogLevel.DEBUG,
        *,
        base_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        """初始化日志服务。
        
        只创建目录，首次写入前不会创建日志文件。
        
        Args:
            mod_name: 通道名（日志文件名）
            level: 最低日志级别
            base_dir: 日志目录（默认：<root>/Waldhari）
            
        Raises:
            ServiceUnavailableError: 日志目录无法创建
        """
        self.level = LogLevel.parse(level)
        self.channel = mod_name
        logs_dir = Path(base_dir) if base_dir is not None else get_data_directory()
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ServiceUnavailableError(f"无法创建日志目录: {logs_dir}", path=str(logs_dir), cause=exc) from exc
        self._log_file_path = logs_dir / f"{mod_name}.log"
        self._lock = threading.Lock()
    
    @classmethod
    def configure(cls, channel: str, level: LogLevel | str = LogLevel.DEBUG) -> TsvLogService:
        """为指定通道创建日志服务。"""
        return cls(channel, level)
    
    @property
    def log_file_path(self) -> Path:
        """日志文件路径。"""
        return self._log_file_path
    
    def write(self, level: LogLevel, message: str, error: BaseException | str | None = None) -> None:
        if level < self.level:
            return
        
        with self._lock:
            record = LogRecord(
                timestamp=datetime.now(),
                level=level,
                message=message,
                error=format_error(error),
            )
            with open(self._log_file_path, "a", encoding="utf-8") as f:
                f.write(format_record(record) + "\n")
    
    def read(self) -> Iterator[LogRecord]:
        """读取本通道已写入的记录（文件不存在时为空）。"""
        if not self._log_file_path.exists():
            return iter(())
        return read_records(self._log_file_path)
    
    def __repr__(self) -> str:
        return f"<TsvLogService channel={self.channel!r} level={self.level.label}>"


__all__ = [
    "TsvLogService",
    "escape_field",
    "format_error",
    "format_record",
    "format_timestamp",
    "parse_record",
    "read_records",
    "unescape_field",
]
