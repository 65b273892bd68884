"""
数据模型层 - 定义系统核心数据结构

- PageDelimiterPolicy: 分页策略（固定行数 / 分页符）
- PageRange: 闭区间页范围
- SelectionConfig: 一次运行的不可变配置
- PaginationResult: 一次运行的结果
"""

from .result import PaginationResult, TerminationCause
from .selection import (
    FORM_FEED,
    NEWLINE,
    DelimiterKind,
    PageDelimiterPolicy,
    PageRange,
    SelectionConfig,
)

__all__ = [
    "DelimiterKind",
    "PageDelimiterPolicy",
    "PageRange",
    "SelectionConfig",
    "PaginationResult",
    "TerminationCause",
    "FORM_FEED",
    "NEWLINE",
]
