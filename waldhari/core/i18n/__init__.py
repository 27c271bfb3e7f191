"""国际化模块。

提供：
- 语言服务接口
- 语言文件解析
- 基于 CSV 文件的语言服务
"""

from .base import ILanguageService
from .catalog import CatalogEntry, CatalogIssue, parse_catalog_lines
from .service import DEFAULT_FEATURE, DEFAULT_MOD_NAME, CsvLanguageService

__all__ = [
    "CatalogEntry",
    "CatalogIssue",
    "CsvLanguageService",
    "DEFAULT_FEATURE",
    "DEFAULT_MOD_NAME",
    "ILanguageService",
    "parse_catalog_lines",
]
