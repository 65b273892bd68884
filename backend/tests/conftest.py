"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(lines, runtime_config):
        source = io.BytesIO(lines(150))
"""

from __future__ import annotations

import io
import sys
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

from selpg.config import PrinterConfig, RuntimeConfig, runtime_config as runtime_config_module


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def _reset_global_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """每个用例使用干净的全局配置"""
    monkeypatch.delenv("SELPG_CONFIG", raising=False)
    runtime_config_module._config = None
    yield
    runtime_config_module._config = None


@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置"""
    return RuntimeConfig()


@pytest.fixture
def python_printer() -> PrinterConfig:
    """用当前解释器代替 lp：dest 即 -c 的脚本"""
    return PrinterConfig(command=sys.executable, dest_option="-c")


# ============================================================================
# 数据 Fixtures
# ============================================================================

@pytest.fixture
def lines() -> Callable[[int], bytes]:
    """生成 n 行 "lineNNN\\n" 文本"""
    def _make(n: int) -> bytes:
        return b"".join(f"line{i:03d}\n".encode() for i in range(1, n + 1))
    return _make


class FailingSource:
    """读取若干次后抛出 OSError 的输入流"""

    def __init__(self, data: bytes, fail_after: int = 1):
        self._inner = io.BytesIO(data)
        self._reads = 0
        self.fail_after = fail_after

    def read(self, size: int = -1) -> bytes:
        self._reads += 1
        if self._reads > self.fail_after:
            raise OSError(5, "Input/output error")
        return self._inner.read(size)


class FailingSink:
    """写入若干次后抛出 BrokenPipeError 的输出流"""

    def __init__(self, fail_after: int = 0):
        self.buffer = io.BytesIO()
        self._writes = 0
        self.fail_after = fail_after

    def write(self, data: bytes) -> int:
        self._writes += 1
        if self._writes > self.fail_after:
            raise BrokenPipeError(32, "Broken pipe")
        return self.buffer.write(data)

    def flush(self) -> None:
        pass


@pytest.fixture
def failing_source() -> type[FailingSource]:
    return FailingSource


@pytest.fixture
def failing_sink() -> type[FailingSink]:
    return FailingSink


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
