"""
配置加载单元测试

每个模块完成后必须运行：pytest backend/tests/unit/test_config.py -v
"""

import yaml

from selpg.config import PrinterConfig, RuntimeConfig, get_config, reload_config


class TestRuntimeConfig:
    """运行期配置测试"""

    def test_default_config(self, runtime_config: RuntimeConfig):
        """测试默认配置"""
        assert runtime_config.pagination.default_page_len == 72
        assert runtime_config.pagination.read_chunk_size == 65536
        assert runtime_config.printer.command == "lp"
        assert runtime_config.logging.log_level == "WARNING"

    def test_from_yaml(self, temp_dir):
        """测试从YAML加载"""
        path = temp_dir / "selpg.yaml"
        path.write_text(
            yaml.safe_dump({
                "runtime_options": {
                    "pagination": {"default_page_len": {"default": 66}},
                    "printer": {"command": "lpr", "dest_option": "-P"},
                    "logging": {"log_level": "debug"},
                }
            }),
            encoding="utf-8",
        )
        config = RuntimeConfig.from_yaml(path)
        assert config.pagination.default_page_len == 66
        assert config.printer.build_command("office") == ["lpr", "-Poffice"]
        assert config.logging.log_level == "DEBUG"

    def test_from_missing_yaml(self, temp_dir):
        """测试文件不存在时使用默认值"""
        config = RuntimeConfig.from_yaml(temp_dir / "nope.yaml")
        assert config.pagination.default_page_len == 72

    def test_from_empty_yaml(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert RuntimeConfig.from_yaml(path).printer.command == "lp"

    def test_env_override(self, monkeypatch):
        """测试环境变量覆盖"""
        monkeypatch.setenv("SELPG_PAGINATION__DEFAULT_PAGE_LEN", "10")
        monkeypatch.setenv("SELPG_PRINTER__COMMAND", "lpr")
        config = RuntimeConfig()
        assert config.pagination.default_page_len == 10
        assert config.printer.command == "lpr"

    def test_env_overrides_yaml(self, temp_dir, monkeypatch):
        """测试环境变量覆盖YAML，且只覆盖所设字段"""
        path = temp_dir / "selpg.yaml"
        path.write_text(
            yaml.safe_dump({
                "runtime_options": {
                    "pagination": {"default_page_len": 66, "read_chunk_size": 512},
                    "printer": {"command": "lpr"},
                }
            }),
            encoding="utf-8",
        )
        monkeypatch.setenv("SELPG_PAGINATION__DEFAULT_PAGE_LEN", "10")
        config = RuntimeConfig.from_yaml(path)
        assert config.pagination.default_page_len == 10
        assert config.pagination.read_chunk_size == 512
        assert config.printer.command == "lpr"


class TestPrinterConfig:
    """打印命令配置测试"""

    def test_build_command(self):
        assert PrinterConfig().build_command("Printer1") == ["lp", "-dPrinter1"]


class TestGlobalConfig:
    """全局配置缓存测试"""

    def test_get_config_cached(self):
        assert get_config() is get_config()

    def test_get_config_from_env_path(self, temp_dir, monkeypatch):
        path = temp_dir / "custom.yaml"
        path.write_text(
            yaml.safe_dump({"runtime_options": {"pagination": {"default_page_len": 20}}}),
            encoding="utf-8",
        )
        monkeypatch.setenv("SELPG_CONFIG", str(path))
        assert get_config().pagination.default_page_len == 20

    def test_reload_config(self, temp_dir):
        path = temp_dir / "selpg.yaml"
        path.write_text(
            yaml.safe_dump({"runtime_options": {"pagination": {"default_page_len": 30}}}),
            encoding="utf-8",
        )
        before = get_config()
        after = reload_config(path)
        assert after is not before
        assert get_config() is after
        assert after.pagination.default_page_len == 30
