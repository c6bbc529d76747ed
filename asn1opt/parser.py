"""asn1 选项解析引擎.

该模块提供 `OptionParser`, 在剩余未消费的文本上反复识别子句,
直到输入耗尽或失败.
"""

from typing import Any

from .config import ParseConfig
from .exceptions import (
    Asn1ParseError,
    DuplicateOptionError,
    EmptyInputError,
    UnrecognizedOptionError,
)
from .grammar import match_clause
from .log import get_context, logger
from .reader import TextReader
from .struct import Asn1Options


class OptionParser:
    """选项文本解析器.

    每轮迭代:
        1. 消费零个或多个空白字符.
        2. 按优先级尝试五种子句, 接受第一个完整匹配的子句并写入字段.
        3. 可选地消费一个分隔单元 (一段空白, 或单个逗号).

    任意一轮没有子句匹配时立即失败, 不返回部分结果.
    """

    __slots__ = ("_config", "_reader", "_seen")

    _reader: TextReader
    _config: ParseConfig
    _seen: set[str]

    def __init__(self, reader: TextReader, config: ParseConfig | None = None):
        self._reader = reader
        self._config = config if config is not None else ParseConfig()
        self._seen = set()

    def parse(self, suppress_log: bool = False) -> Asn1Options:
        """解析整个输入, 返回 `max_frames` 为默认值的 `Asn1Options`.

        Raises:
            EmptyInputError: 输入为空.
            UnrecognizedOptionError: 当前位置没有子句匹配.
            NumericOverflowError: 数值参数超出范围.
            DuplicateOptionError: 启用 REJECT_DUPLICATES 时关键字重复.
        """
        reader = self._reader
        if not suppress_log:
            logger.debug("[OptionParser] 开始解析 %d 个字符", reader.length)

        try:
            if reader.length == 0:
                raise EmptyInputError("Empty asn1 option string", "", 0)

            fields: dict[str, Any] = {}
            while not reader.eof:
                self._parse_clause(fields, suppress_log)

            result = Asn1Options.model_validate(fields)
            if not suppress_log:
                logger.debug("[OptionParser] 成功解析 %d 个选项", len(fields))
            return result

        except Asn1ParseError as e:
            if not suppress_log:
                logger.error("[OptionParser] 解析错误: %s", e)
                if e.position is not None:
                    logger.debug(get_context(reader.text, e.position))
            raise

    def _parse_clause(self, fields: dict[str, Any], suppress_log: bool) -> None:
        reader = self._reader
        start = reader.pos
        reader.read_whitespace()

        pos = reader.pos
        matched = match_clause(reader)
        if matched is None:
            # 只剩空白时报告整段空白
            if reader.eof:
                pos = start
            raise UnrecognizedOptionError(
                "Unrecognized asn1 option", reader.text[pos:], pos
            )

        keyword, value = matched
        if keyword in self._seen and self._config.reject_duplicates:
            raise DuplicateOptionError(keyword, reader.text[pos:], pos)
        self._seen.add(keyword)
        fields[keyword] = value
        if not suppress_log:
            logger.debug("[OptionParser] 位置 %d: %s = %r", pos, keyword, value)

        separator = reader.read_separator()
        if not separator and not reader.eof and self._config.strict_separator:
            raise UnrecognizedOptionError(
                "Missing separator between asn1 options",
                reader.remainder(),
                reader.pos,
            )
