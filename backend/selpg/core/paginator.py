"""
分页器 - 按页范围拷贝字节流

流程：
1. 按当前策略的分隔字节读段（\\n 为行，\\f 为页）
2. 推进页计数
3. 页号在范围内则原样写出；低于起始页则跳过；超过结束页则立即停止读取

约束：
- 单线程、同步、阻塞 I/O；每轮最多一次写
- 读/写错误立即上抛，不重试、不吞掉
- 核心不记录日志、不决定退出码
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from ..interfaces import ByteSink, ByteSource, IPaginator, SinkWriteError
from ..models import PageDelimiterPolicy, PageRange, PaginationResult, TerminationCause
from .segments import DEFAULT_CHUNK_SIZE, read_segments


@dataclass
class PageCounter:
    """运行期页计数状态（仅属于一次运行）"""
    policy: PageDelimiterPolicy
    current_page: int = 1
    lines_in_current_page: int = 0
    segments_seen: int = 0

    def advance(self) -> int:
        """读到一个段后推进计数，返回该段所属页号"""
        self.segments_seen += 1
        if self.policy.is_page_break:
            # 每段即一整页，第一段为第1页
            self.current_page = self.segments_seen
        else:
            self.lines_in_current_page += 1
            if self.lines_in_current_page > self.policy.lines_per_page:
                self.lines_in_current_page = 1
                self.current_page += 1
        return self.current_page


class Paginator(IPaginator):
    """分页器实现"""

    def __init__(
        self,
        policy: PageDelimiterPolicy,
        page_range: PageRange,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self.policy = policy
        self.page_range = page_range
        self.chunk_size = chunk_size

    def paginate(self, source: ByteSource | BinaryIO, sink: ByteSink | BinaryIO) -> PaginationResult:
        """执行一次分页拷贝"""
        counter = PageCounter(self.policy)
        result = PaginationResult(cause=TerminationCause.EXHAUSTED)

        for segment in read_segments(source, self.policy.delimiter, self.chunk_size):
            # 分页符模式下，末尾未以 \f 结束的数据不构成一页
            if not segment.terminated and self.policy.is_page_break:
                break

            page = counter.advance()
            result.last_page = page

            if self.page_range.is_passed(page):
                result.cause = TerminationCause.RANGE_SATISFIED
                break
            if page not in self.page_range:
                continue

            self._write(sink, segment.data)
            result.segments_written += 1
            result.bytes_written += len(segment.data)

        return result

    @staticmethod
    def _write(sink: ByteSink | BinaryIO, data: bytes) -> None:
        try:
            sink.write(data)
        except OSError as e:
            raise SinkWriteError(f"write failed: {e}") from e


def paginate(
    source: ByteSource | BinaryIO,
    sink: ByteSink | BinaryIO,
    policy: PageDelimiterPolicy,
    page_range: PageRange,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> PaginationResult:
    """便捷函数：构造 Paginator 并运行一次"""
    return Paginator(policy, page_range, chunk_size).paginate(source, sink)
