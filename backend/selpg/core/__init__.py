"""
分页核心

- segments: 按分隔字节增量读段
- paginator: 计页并选择性拷贝
"""

from .paginator import PageCounter, Paginator, paginate
from .segments import Segment, read_segments

__all__ = [
    "PageCounter",
    "Paginator",
    "paginate",
    "Segment",
    "read_segments",
]
