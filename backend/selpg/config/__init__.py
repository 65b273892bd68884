"""
配置层 - 加载运行期配置

职责：
- 提供默认值（页长72、打印命令lp等）
- 加载 selpg.yaml（可选）
- 支持 SELPG_* 环境变量覆盖
"""

from .runtime_config import (
    LoggingConfig,
    PaginationConfig,
    PrinterConfig,
    RuntimeConfig,
    get_config,
    reload_config,
)

__all__ = [
    "RuntimeConfig",
    "PaginationConfig",
    "PrinterConfig",
    "LoggingConfig",
    "get_config",
    "reload_config",
]
