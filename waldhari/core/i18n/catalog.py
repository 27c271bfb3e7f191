"""语言文件解析。

每行一条记录 KEY;VALUE，第一个分号为分隔符（值中可以包含分号），
键和值都去除首尾空白。空行和以 # 开头的行为注释。
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

SEPARATOR = ";"
COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class CatalogEntry:
    """一条翻译。"""
    
    line_no: int
    key: str
    value: str


@dataclass(frozen=True)
class CatalogIssue:
    """无法解析的行。"""
    
    line_no: int
    line: str
    reason: str


def parse_catalog_lines(lines: Iterable[str]) -> Iterator[CatalogEntry | CatalogIssue]:
    """逐行解析语言文件。
    
    格式错误的行产出 CatalogIssue，解析继续进行，不会中断整个文件。
    重复键不在此处处理。
    
    Args:
        lines: 文件行（不含换行符）
        
    Yields:
        CatalogEntry | CatalogIssue
    """
    for line_no, line in enumerate(lines, start=1):
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        
        parts = line.split(SEPARATOR, 1)
        if len(parts) != 2:
            yield CatalogIssue(line_no, line, f"分段数为 {len(parts)}，应为 2")
            continue
        
        yield CatalogEntry(line_no, parts[0].strip(), parts[1].strip())


__all__ = [
    "CatalogEntry",
    "CatalogIssue",
    "parse_catalog_lines",
]
