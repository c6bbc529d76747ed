"""asn1 选项语法.

定义五种互斥的子句形式及其参数规则, 按固定优先级匹配:

1. `bitstring_overflow` - 标志, 无参数.
2. `double_overflow` - 标志, 无参数.
3. `oversize_length <uint>` - 关键字, 必需空白, 无符号十进制数.
4. `absolute_offset <uint>` - 同上.
5. `relative_offset <int>` - 关键字, 必需空白, 可选 `-`, 十进制数.
"""

from dataclasses import dataclass
from typing import Any, Literal

from .const import (
    ABSOLUTE_OFFSET,
    BITSTRING_OVERFLOW,
    DOUBLE_OVERFLOW,
    I32_MAX,
    I32_MIN,
    OVERSIZE_LENGTH,
    RELATIVE_OFFSET,
    U32_MAX,
)
from .exceptions import NumericOverflowError
from .reader import TextReader

ArgKind = Literal["flag", "uint", "int"]


def parse_u32(digits: str, reader: TextReader, pos: int) -> int:
    """将十进制数字串解析为 u32.

    Raises:
        NumericOverflowError: 超出 u32 范围.
    """
    # u32 最多 10 位有效数字
    significant = digits.lstrip("0") or "0"
    if len(significant) > 10 or int(significant) > U32_MAX:
        raise NumericOverflowError(
            f"Value {digits} exceeds u32 range",
            reader.text[pos:],
            pos,
        )
    return int(significant)


def parse_i32(negative: bool, digits: str, reader: TextReader, pos: int) -> int:
    """将 (符号, 数字串) 解析为 i32.

    数值部分先按 u32 解析, 再乘以符号, 最后检查 i32 范围.
    `-0` 得到 0.

    Raises:
        NumericOverflowError: 数值部分超出 u32, 或结果超出 i32 范围.
    """
    magnitude = parse_u32(digits, reader, pos)
    value = -magnitude if negative else magnitude
    if not I32_MIN <= value <= I32_MAX:
        raise NumericOverflowError(
            f"Value {'-' if negative else ''}{digits} exceeds i32 range",
            reader.text[pos:],
            pos,
        )
    return value


@dataclass(frozen=True)
class Clause:
    """一种选项子句形式.

    Attributes:
        keyword: 关键字拼写 (同时也是 `Asn1Options` 的字段名).
        kind: 参数类型: `flag` 无参数, `uint` 无符号, `int` 有符号.
    """

    keyword: str
    kind: ArgKind

    def match(self, reader: TextReader) -> tuple[str, Any] | None:
        """尝试在当前位置完整匹配该子句.

        成功时消费文本并返回 (字段名, 值); 失败时游标不变并返回 None.

        Raises:
            NumericOverflowError: 子句形式匹配但数值超出范围.
        """
        mark = reader.mark()
        if not reader.read_literal(self.keyword):
            return None

        if self.kind == "flag":
            return self.keyword, True

        # 关键字与参数之间必须至少有一个空白字符
        if not reader.read_whitespace():
            reader.reset(mark)
            return None

        negative = False
        if self.kind == "int":
            negative = reader.read_literal("-")

        digits_pos = reader.pos
        digits = reader.read_digits()
        if not digits:
            reader.reset(mark)
            return None

        if self.kind == "uint":
            return self.keyword, parse_u32(digits, reader, digits_pos)
        return self.keyword, parse_i32(negative, digits, reader, digits_pos)


# 按优先级排列的子句表
CLAUSES: tuple[Clause, ...] = (
    Clause(BITSTRING_OVERFLOW, "flag"),
    Clause(DOUBLE_OVERFLOW, "flag"),
    Clause(OVERSIZE_LENGTH, "uint"),
    Clause(ABSOLUTE_OFFSET, "uint"),
    Clause(RELATIVE_OFFSET, "int"),
)


def match_clause(reader: TextReader) -> tuple[str, Any] | None:
    """按优先级尝试所有子句, 返回第一个完整匹配的结果."""
    for clause in CLAUSES:
        result = clause.match(reader)
        if result is not None:
            return result
    return None
