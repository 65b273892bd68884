"""
流层 - 打开输入源与输出端

- source: 文件或 stdin
- sink: stdout 或打印子进程（lp -dDEST）的 stdin
"""

from .sink import PrinterSink, open_sink
from .source import open_source

__all__ = [
    "open_source",
    "open_sink",
    "PrinterSink",
]
