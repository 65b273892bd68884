"""
运行结果模型
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class TerminationCause(str, Enum):
    """读循环终止原因"""
    EXHAUSTED = "exhausted"                 # 输入流读尽
    RANGE_SATISFIED = "range_satisfied"     # 页号已超过范围上界


class PaginationResult(BaseModel):
    """一次分页运行的结果"""
    cause: TerminationCause
    last_page: int = 1
    segments_written: int = 0
    bytes_written: int = 0

    @property
    def empty(self) -> bool:
        return self.segments_written == 0
