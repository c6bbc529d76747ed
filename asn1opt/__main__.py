"""asn1opt命令行工具."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from . import loads
from .config import ConfigProvider, EnvConfig, MappingConfig
from .const import MAX_FRAMES_KEY
from .exceptions import Asn1OptionError, Asn1ParseError
from .log import get_context, logger
from .options import ParseOption
from .struct import Asn1Options


def _build_table(options: Asn1Options) -> Table:
    """构建选项结果表格."""
    table = Table(title="asn1 options", show_header=True, header_style="bold")
    table.add_column("Option", style="bold blue")
    table.add_column("Value")

    for name, value in options.model_dump().items():
        if value is None:
            table.add_row(name, "[dim]-[/dim]")
        elif isinstance(value, bool):
            table.add_row(name, "[green]yes[/green]" if value else "[dim]no[/dim]")
        else:
            table.add_row(name, f"[magenta]{value}[/magenta]")
    return table


def _print_result(options: Asn1Options, output_format: str) -> None:
    """按指定格式输出解析结果."""
    if output_format == "rule":
        click.echo(options.to_rule())
        return

    console = Console()
    if output_format == "json":
        output_text = json.dumps(options.model_dump(), indent=2)
        console.print(Syntax(output_text, "json", theme="monokai", word_wrap=True))
    else:
        console.print(_build_table(options))


@click.command(help="asn1 关键字选项解析工具")
@click.argument("argument", required=False)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="从文件读取选项文本",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "rule"]),
    default="table",
    show_default=True,
    help="输出格式",
)
@click.option(
    "--max-frames-override",
    "max_frames",
    help=f"模拟配置项 {MAX_FRAMES_KEY} 的值 (默认读取环境变量)",
)
@click.option(
    "--strict-separator",
    is_flag=True,
    help="要求每两个子句之间必须有分隔符",
)
@click.option(
    "--reject-duplicates",
    is_flag=True,
    help="关键字重复时报错",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="显示详细的解析过程信息",
)
def cli(
    argument: str | None,
    file_path: Path | None,
    output_format: str,
    max_frames: str | None,
    strict_separator: bool,
    reject_duplicates: bool,
    verbose: bool,
) -> None:
    """asn1 关键字选项解析工具.

    Examples:
      # 直接解析选项文本
      asn1opt "oversize_length 1024, absolute_offset 10"

      # 从文件读取选项文本
      asn1opt -f options.txt

      # 以 JSON 格式输出结果
      asn1opt "bitstring_overflow" --format json
    """
    # 互斥参数检查
    if argument is not None and file_path:
        raise click.UsageError("不能同时指定 ARGUMENT 和 --file 参数")
    if argument is None and not file_path:
        raise click.UsageError("必须指定 ARGUMENT 或 --file 参数")

    if file_path:
        text = file_path.read_text(encoding="utf-8")
        if verbose:
            click.echo(f"[DEBUG] 从文件读取 {len(text)} 个字符", err=True)
    else:
        assert argument is not None
        text = argument

    provider: ConfigProvider
    if max_frames is not None:
        provider = MappingConfig({MAX_FRAMES_KEY: max_frames})
    else:
        provider = EnvConfig()

    option = ParseOption.NONE
    if strict_separator:
        option |= ParseOption.STRICT_SEPARATOR
    if reject_duplicates:
        option |= ParseOption.REJECT_DUPLICATES

    handler: logging.Handler | None = None
    if verbose:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)

    try:
        options = loads(
            text, option=option, provider=provider, suppress_log=not verbose
        )
    except Asn1ParseError as e:
        message = f"解析失败: {e}"
        if e.position is not None:
            message += "\n" + get_context(text, e.position)
        raise click.ClickException(message) from e
    except Asn1OptionError as e:
        raise click.ClickException(f"解析失败: {e}") from e
    finally:
        if handler is not None:
            logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    _print_result(options, output_format)


def main() -> None:
    """入口函数."""
    cli()


if __name__ == "__main__":
    main()
