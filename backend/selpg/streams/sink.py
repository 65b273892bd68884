"""
输出端 - 标准输出或打印子进程

职责：
- 无打印目的地时写 stdout（退出时 flush，不关闭）
- 有打印目的地时启动 `lp -dDEST`，写入其 stdin；
  子进程 stdout 继承本进程 stdout
- 任何退出路径（正常/提前终止/异常）都关闭管道并等待子进程

测试要点：
- test_printer_receives_bytes: 子进程收到写入的字节
- test_printer_missing_command: 命令不存在
- test_printer_nonzero_exit: 子进程非零退出
- test_printer_closed_input_early: 子进程未读完即退出
"""

from __future__ import annotations

import logging
import subprocess
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from ..config import PrinterConfig
from ..interfaces import PrintError, SinkWriteError

logger = logging.getLogger(__name__)


class PrinterSink:
    """打印子进程封装（可写字节流）"""

    def __init__(self, dest: str, config: PrinterConfig | None = None):
        self.dest = dest
        self.config = config or PrinterConfig()
        self.cmd = self.config.build_command(dest)
        self._proc: subprocess.Popen | None = None

    def start(self) -> None:
        logger.debug(f"启动打印命令: {self.cmd}")
        try:
            self._proc = subprocess.Popen(self.cmd, stdin=subprocess.PIPE)
        except OSError as e:
            raise PrintError(f"cannot start {self.cmd[0]}: {e.strerror or e}") from e

    def write(self, data: bytes) -> int:
        if self._proc is None or self._proc.stdin is None:
            raise SinkWriteError("printer is not running")
        return self._proc.stdin.write(data)

    def close(self, check: bool = True) -> int | None:
        """
        关闭管道并等待子进程退出

        Args:
            check: 为 True 时非零退出码或管道提前断开抛出 PrintError

        Returns:
            子进程退出码
        """
        if self._proc is None:
            return None

        proc, self._proc = self._proc, None
        broken: BrokenPipeError | None = None
        try:
            if proc.stdin is not None:
                proc.stdin.close()
        except BrokenPipeError as e:
            # 缓冲中的数据未送达打印命令
            broken = e
            logger.warning(f"打印命令提前关闭输入: {' '.join(self.cmd)}: {e}")
        finally:
            returncode = proc.wait()

        logger.debug(f"打印命令退出: rc={returncode}")
        if check and returncode != 0:
            raise PrintError(f"command failed (rc={returncode}): {' '.join(self.cmd)}")
        if check and broken is not None:
            raise PrintError(f"printer closed its input early: {' '.join(self.cmd)}") from broken
        return returncode


@contextmanager
def open_sink(
    print_dest: str | None,
    config: PrinterConfig | None = None,
    stdout: BinaryIO | None = None,
) -> Iterator[BinaryIO | PrinterSink]:
    """
    打开输出端

    Args:
        print_dest: 打印目的地，None 表示标准输出
        config: 打印命令配置
        stdout: 替代标准输出的字节流（测试用）

    Raises:
        PrintError: 打印命令无法启动或非零退出
    """
    if not print_dest:
        out = stdout if stdout is not None else sys.stdout.buffer
        logger.debug("输出端: stdout")
        try:
            yield out
        finally:
            try:
                out.flush()
            except OSError as e:
                raise SinkWriteError(f"write failed: {e}") from e
        return

    printer = PrinterSink(print_dest, config)
    printer.start()
    try:
        yield printer
    except BaseException:
        printer.close(check=False)
        raise
    printer.close()
