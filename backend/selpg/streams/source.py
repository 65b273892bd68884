"""
输入源 - 文件或标准输入

文件在退出时关闭；stdin 不归本程序所有，不关闭。
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from ..interfaces import SourceOpenError

logger = logging.getLogger(__name__)


@contextmanager
def open_source(path: Path | None, stdin: BinaryIO | None = None) -> Iterator[BinaryIO]:
    """
    打开输入源

    Args:
        path: 输入文件，None 表示标准输入
        stdin: 替代标准输入的字节流（测试用）

    Raises:
        SourceOpenError: 文件无法打开
    """
    if path is None:
        logger.debug("输入源: stdin")
        yield stdin if stdin is not None else sys.stdin.buffer
        return

    try:
        f = open(path, "rb")
    except OSError as e:
        raise SourceOpenError(f"cannot open {path}: {e.strerror or e}") from e

    logger.debug(f"输入源: {path}")
    with f:
        yield f
