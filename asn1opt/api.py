"""asn1opt API模块.

提供用于选项文本解析和渲染的高级接口 `loads`, `load`, `dumps`, `dump`.
"""

import re
from collections.abc import Mapping
from typing import IO

from .config import ConfigProvider, ParseConfig
from .const import U16_MAX
from .exceptions import InvalidEncodingError
from .log import logger
from .options import ParseOption
from .parser import OptionParser
from .reader import TextReader
from .struct import Asn1Options

RawText = str | bytes | bytearray | memoryview

_U16_PATTERN = re.compile(r"\+?[0-9]+", re.ASCII)


def decode_text(raw: RawText) -> str:
    """将原始输入转换为合法文本.

    两种输入都按 NUL 结尾约定截断到第一个 NUL.

    - `str`: 拒绝包含孤立代理字符 (surrogate) 的字符串.
    - 字节类: 按严格 UTF-8 解码.

    Raises:
        InvalidEncodingError: 输入不是合法文本.
        TypeError: 输入类型不受支持.
    """
    if isinstance(raw, str):
        try:
            raw.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidEncodingError(f"Invalid option text: {e}") from e
        return raw.partition("\x00")[0]

    if isinstance(raw, bytes | bytearray | memoryview):
        data = bytes(raw)
        nul = data.find(b"\x00")
        if nul != -1:
            data = data[:nul]
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(f"Invalid UTF-8 option text: {e}") from e

    raise TypeError(f"Expected str or bytes, got {type(raw).__name__}")


def parse_max_frames(value: object) -> int | None:
    """将配置值解析为 u16, 不是字符串、无法解析或超出范围时返回 None."""
    if not isinstance(value, str) or not _U16_PATTERN.fullmatch(value):
        return None
    digits = value.lstrip("+").lstrip("0") or "0"
    if len(digits) > 5:
        return None
    number = int(digits)
    if number > U16_MAX:
        return None
    return number


def apply_override(options: Asn1Options, config: ParseConfig) -> Asn1Options:
    """查询配置提供者并应用 `max_frames` 覆盖值.

    覆盖值无效时只记录日志, 保留默认值.
    """
    if config.ignore_override:
        return options

    raw = config.provider.get(config.max_frames_key)
    if raw is None:
        return options

    max_frames = parse_max_frames(raw)
    if max_frames is None:
        logger.debug("Could not parse %s: %s", config.max_frames_key, raw)
        return options

    return options.with_max_frames(max_frames)


def loads(
    text: RawText,
    option: ParseOption = ParseOption.NONE,
    *,
    provider: ConfigProvider | Mapping[str, str] | None = None,
    suppress_log: bool = False,
) -> Asn1Options:
    """解析 asn1 关键字的选项文本.

    Args:
        text: 选项文本. 字节输入按 UTF-8 解码 (截断到第一个 NUL).
        option: 解析选项 (如 `ParseOption.REJECT_DUPLICATES`).
        provider: 用于查询 `asn1-max-frames` 覆盖值的配置提供者.
            可以是 `ConfigProvider` 或普通映射; 为 None 时读取环境变量.
        suppress_log: 是否抑制解析日志.

    Returns:
        Asn1Options: 解析结果 (不可变).

    Raises:
        InvalidEncodingError: 输入不是合法文本.
        EmptyInputError: 输入为空.
        UnrecognizedOptionError: 存在无法识别的选项.
        NumericOverflowError: 数值参数超出范围.
        DuplicateOptionError: 启用 REJECT_DUPLICATES 时关键字重复.

    Examples:
        >>> from asn1opt import loads
        >>> loads("oversize_length 1024 absolute_offset 10", provider={})
        Asn1Options(bitstring_overflow=False, double_overflow=False, oversize_length=1024, absolute_offset=10, relative_offset=None, max_frames=30)
    """
    if text is None:
        raise TypeError("Option text must not be None")

    config = ParseConfig.from_params(option=option, provider=provider)
    decoded = decode_text(text)

    parser = OptionParser(TextReader(decoded), config)
    options = parser.parse(suppress_log=suppress_log)
    return apply_override(options, config)


def load(
    fp: IO[str],
    option: ParseOption = ParseOption.NONE,
    *,
    provider: ConfigProvider | Mapping[str, str] | None = None,
    suppress_log: bool = False,
) -> Asn1Options:
    """从文本文件读取并解析选项.

    封装了 `read()` 和 `loads()`.
    """
    return loads(
        fp.read(),
        option=option,
        provider=provider,
        suppress_log=suppress_log,
    )


def dumps(options: Asn1Options) -> str:
    """将 `Asn1Options` 渲染为规范的选项文本.

    Examples:
        >>> dumps(Asn1Options(oversize_length=1024, bitstring_overflow=True))
        'bitstring_overflow, oversize_length 1024'
    """
    return options.to_rule()


def dump(options: Asn1Options, fp: IO[str]) -> None:
    """渲染选项文本并写入文件."""
    fp.write(dumps(options))
