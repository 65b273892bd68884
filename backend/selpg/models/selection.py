"""
页选择模型 - 页范围、分页策略与运行配置

所有模型均为不可变值：由 CLI 层构造一次，向下传递。
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

NEWLINE = b"\n"
FORM_FEED = b"\f"


class DelimiterKind(str, Enum):
    """分页方式"""
    FIXED_LINE_COUNT = "lines"      # 每页固定行数（-l）
    EXPLICIT_BREAK = "page_break"   # 以 \f 分页（-f）


class PageDelimiterPolicy(BaseModel):
    """分页策略"""
    kind: DelimiterKind
    lines_per_page: int | None = Field(None, description="每页行数，仅 FIXED_LINE_COUNT")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_lines(self) -> PageDelimiterPolicy:
        if self.kind == DelimiterKind.FIXED_LINE_COUNT:
            if self.lines_per_page is None or self.lines_per_page <= 0:
                raise ValueError("line number can not be negative")
        elif self.lines_per_page is not None:
            raise ValueError("page break policy does not take a line count")
        return self

    @classmethod
    def fixed_lines(cls, n: int) -> PageDelimiterPolicy:
        return cls(kind=DelimiterKind.FIXED_LINE_COUNT, lines_per_page=n)

    @classmethod
    def page_break(cls) -> PageDelimiterPolicy:
        return cls(kind=DelimiterKind.EXPLICIT_BREAK)

    @property
    def is_page_break(self) -> bool:
        return self.kind == DelimiterKind.EXPLICIT_BREAK

    @property
    def delimiter(self) -> bytes:
        """段分隔字节"""
        return FORM_FEED if self.is_page_break else NEWLINE


class PageRange(BaseModel):
    """闭区间页范围 [start, end]"""
    start: int
    end: int

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_bounds(self) -> PageRange:
        if self.start <= 0 or self.end <= 0:
            raise ValueError("page number can not be negative")
        if self.start > self.end:
            raise ValueError("start page cannot be greater than end page")
        return self

    def __contains__(self, page: int) -> bool:
        return self.start <= page <= self.end

    def is_passed(self, page: int) -> bool:
        """页号已超过上界"""
        return page > self.end


class SelectionConfig(BaseModel):
    """一次运行的完整配置"""
    page_range: PageRange
    policy: PageDelimiterPolicy
    source_path: Path | None = Field(None, description="输入文件，None 表示 stdin")
    print_dest: str | None = Field(None, description="打印目的地，None 表示 stdout")

    model_config = {"frozen": True}
