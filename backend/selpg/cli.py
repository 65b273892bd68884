"""
selpg — 从文本流中截取页范围。

用法：
  selpg -sNumber -eNumber [-lNumber | -f] [-dDestination] [filename]

  -s, --start-page N      起始页（必需）
  -e, --end-page N        结束页（必需）
  -l, --page-len N        每页行数（默认 72）
  -f, --use-page-break    以分页符 \\f 分页（与 -l 互斥）
  -d, --print-dest DEST   送往打印机 DEST（lp -dDEST），否则写 stdout
  filename                输入文件，缺省读 stdin

退出码：0 成功；1 运行/参数错误；2 参数不足（打印用法）。
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import yaml
from pydantic import ValidationError

from . import __version__
from .config import RuntimeConfig, get_config, reload_config
from .core import Paginator
from .interfaces import ConfigurationError, SelpgError, UsageError
from .models import PageDelimiterPolicy, PageRange, PaginationResult, SelectionConfig
from .streams import open_sink, open_source

logger = logging.getLogger(__name__)

USAGE = "selpg -sNumber -eNumber [-lNumber/-f] [-dDestination] [filename]"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="selpg",
        usage=USAGE,
        description="从文本流中截取页范围，写到标准输出或打印机。",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"selpg {__version__}")
    parser.add_argument("-s", "--start-page", type=int, default=None, metavar="N",
                        help="起始页")
    parser.add_argument("-e", "--end-page", type=int, default=None, metavar="N",
                        help="结束页")
    parser.add_argument("-l", "--page-len", type=int, default=None, metavar="N",
                        help="每页行数（默认取配置，72）")
    parser.add_argument("-f", "--use-page-break", action="store_true",
                        help="以分页符 \\f 分页")
    parser.add_argument("-d", "--print-dest", default=None, metavar="DEST",
                        help="打印目的地（lp -dDEST）")
    parser.add_argument("-c", "--config", type=Path, default=None, metavar="YAML",
                        help="运行期配置文件")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="输出调试日志到 stderr")
    parser.add_argument("filename", nargs="?", type=Path, default=None,
                        help="输入文件，缺省读 stdin")
    return parser


def build_selection(args: argparse.Namespace, config: RuntimeConfig) -> SelectionConfig:
    """
    校验参数并构造运行配置

    校验顺序：参数齐全 → 页码为正 → 起始不大于结束 → 行数为正 → -f 与 -l 互斥

    Raises:
        UsageError: 起始页/结束页缺失
        ConfigurationError: 其他非法组合
    """
    default_len = config.pagination.default_page_len
    page_len = default_len if args.page_len is None else args.page_len

    if args.start_page is None or args.end_page is None:
        raise UsageError("arguments are not enough")
    if args.start_page <= 0 or args.end_page <= 0:
        raise ConfigurationError("page number can not be negative")
    if args.start_page > args.end_page:
        raise ConfigurationError("start page cannot be greater than end page")
    if not args.use_page_break and page_len <= 0:
        raise ConfigurationError("line number can not be negative")
    if args.use_page_break and page_len != default_len:
        raise ConfigurationError("-f and -lNumber cannot be set at the same time")

    try:
        policy = (
            PageDelimiterPolicy.page_break()
            if args.use_page_break
            else PageDelimiterPolicy.fixed_lines(page_len)
        )
        return SelectionConfig(
            page_range=PageRange(start=args.start_page, end=args.end_page),
            policy=policy,
            source_path=args.filename,
            print_dest=args.print_dest or None,
        )
    except ValidationError as e:
        raise ConfigurationError(_first_error(e)) from e


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    cause = (err.get("ctx") or {}).get("error")
    return str(cause) if cause is not None else err["msg"]


def load_config(path: Path | None) -> RuntimeConfig:
    """
    加载运行期配置：显式 -c 文件必须存在；否则按默认路径惰性加载

    Raises:
        ConfigurationError: 文件缺失、YAML 语法错误或取值非法
    """
    if path is not None and not path.exists():
        raise ConfigurationError(f"config file not found: {path}")
    try:
        return reload_config(path) if path is not None else get_config()
    except ValidationError as e:
        raise ConfigurationError(f"invalid config: {_first_error(e)}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid config: {e}") from e


def run(selection: SelectionConfig, config: RuntimeConfig) -> PaginationResult:
    """打开输入/输出并执行一次分页"""
    paginator = Paginator(
        selection.policy,
        selection.page_range,
        chunk_size=config.pagination.read_chunk_size,
    )
    with open_source(selection.source_path) as source:
        with open_sink(selection.print_dest, config.printer) as sink:
            return paginator.paginate(source, sink)


def configure_logging(config: RuntimeConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.logging.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return EXIT_ERROR
    configure_logging(config, args.verbose)

    try:
        selection = build_selection(args, config)
    except UsageError as e:
        parser.print_help(sys.stderr)
        logger.debug(f"参数不足: {e}")
        return EXIT_USAGE
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return EXIT_ERROR

    try:
        result = run(selection, config)
    except SelpgError as e:
        print(e, file=sys.stderr)
        return EXIT_ERROR

    logger.info(
        f"完成: {result.cause.value}, 最后页 {result.last_page}, "
        f"写出 {result.segments_written} 段 / {result.bytes_written} 字节"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
