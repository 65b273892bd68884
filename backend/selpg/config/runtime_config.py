"""
运行期配置 - 读取 selpg.yaml

职责：
- 加载分页默认值/打印命令/日志级别等运行参数
- 提供环境变量覆盖机制
- 类型安全的配置访问

YAML 结构：
    runtime_options:
      pagination:
        default_page_len: 72
        read_chunk_size: 65536
      printer:
        command: lp
        dest_option: -d
      logging:
        log_level: WARNING
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

DEFAULT_CONFIG_PATH = Path("selpg.yaml")
CONFIG_ENV_VAR = "SELPG_CONFIG"


class PaginationConfig(BaseModel):
    """分页配置"""

    default_page_len: int = Field(72, ge=1, description="未指定 -l 时每页行数")
    read_chunk_size: int = Field(65536, ge=1, description="单次读取的块大小(字节)")


class PrinterConfig(BaseModel):
    """打印子进程配置"""

    command: str = "lp"
    dest_option: str = "-d"

    def build_command(self, dest: str) -> list[str]:
        """生成打印命令行，如 ["lp", "-dPrinter1"]"""
        return [self.command, f"{self.dest_option}{dest}"]


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper()


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    printer: PrinterConfig = Field(default_factory=PrinterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "SELPG_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """优先级：环境变量 > YAML(构造参数) > 默认值；嵌套字段逐项合并"""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置（文件不存在时返回默认配置）"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {}) or {}

        return cls(
            pagination=cls._extract(runtime_opts, "pagination"),
            printer=cls._extract(runtime_opts, "printer"),
            logging=cls._extract(runtime_opts, "logging"),
        )

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置（支持 {default: x} 写法）"""
        section = data.get(key, {}) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result


# 全局配置实例
_config: RuntimeConfig | None = None


def _default_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(_default_path())
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    _config = RuntimeConfig.from_yaml(yaml_path or _default_path())
    return _config
