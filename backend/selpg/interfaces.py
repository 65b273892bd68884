"""
模块接口契约 - 定义分页核心与流层的抽象接口

设计原则：
1. 核心只依赖"可读字节流"和"可写字节流"，不关心具体来源
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from selpg.interfaces import IPaginator

    class MyPaginator(IPaginator):
        def paginate(self, source, sink) -> PaginationResult:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, BinaryIO, Protocol

if TYPE_CHECKING:
    from .models import PaginationResult


# ============================================================================
# 流协议
# ============================================================================

class ByteSource(Protocol):
    """可读字节流（文件、stdin.buffer、BytesIO 等）"""

    def read(self, size: int = -1) -> bytes:
        ...


class ByteSink(Protocol):
    """可写字节流（stdout.buffer、子进程 stdin 管道、BytesIO 等）"""

    def write(self, data: bytes) -> int | None:
        ...


# ============================================================================
# 分页核心接口
# ============================================================================

class IPaginator(ABC):
    """分页器接口 - 按页范围拷贝字节流"""

    @abstractmethod
    def paginate(self, source: ByteSource | BinaryIO, sink: ByteSink | BinaryIO) -> PaginationResult:
        """
        从 source 读取，按页计数，把范围内的段写入 sink

        Args:
            source: 已打开的可读字节流
            sink: 已打开的可写字节流

        Returns:
            运行结果（终止原因、最后页号、写出统计）

        Raises:
            SourceReadError: 读取失败（EOF 不算失败）
            SinkWriteError: 写入失败
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class SelpgError(Exception):
    """基础异常"""
    pass


class ConfigurationError(SelpgError):
    """参数/配置错误（核心运行前抛出）"""
    pass


class UsageError(ConfigurationError):
    """必需参数缺失（需打印用法）"""
    pass


class SourceOpenError(SelpgError):
    """输入文件无法打开"""
    pass


class SourceReadError(SelpgError):
    """输入流读取失败"""
    pass


class SinkWriteError(SelpgError):
    """输出流写入失败"""
    pass


class PrintError(SelpgError):
    """打印子进程启动或退出失败"""
    pass
