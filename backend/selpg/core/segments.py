"""
段读取 - 从字节流中按分隔字节切出段

段 = 从当前位置到下一个分隔字节（含）之间的连续字节；
流末尾若还有未以分隔字节结束的数据，作为 terminated=False 的最后一段给出。

块读取而非逐字节读取，分隔字节可以是 \\n 以外的任意单字节（如 \\f）。
"""

from __future__ import annotations

from typing import BinaryIO, Iterator, NamedTuple

from ..interfaces import ByteSource, SourceReadError

DEFAULT_CHUNK_SIZE = 65536


class Segment(NamedTuple):
    data: bytes
    terminated: bool


def read_segments(
    source: ByteSource | BinaryIO,
    delimiter: bytes,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[Segment]:
    """
    增量读取段

    Args:
        source: 可读字节流
        delimiter: 单字节分隔符
        chunk_size: 单次 read 的字节数

    Yields:
        Segment（按读取顺序）

    Raises:
        SourceReadError: read 抛出 OSError
    """
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single byte: {delimiter!r}")
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive: {chunk_size}")

    pending = bytearray()
    while True:
        try:
            chunk = source.read(chunk_size)
        except OSError as e:
            raise SourceReadError(f"read failed: {e}") from e

        if not chunk:
            break

        pending += chunk
        start = 0
        while True:
            idx = pending.find(delimiter, start)
            if idx < 0:
                break
            yield Segment(bytes(pending[start:idx + 1]), True)
            start = idx + 1
        del pending[:start]

    if pending:
        yield Segment(bytes(pending), False)
