"""asn1 选项特定的异常类.

该模块为asn1opt库定义了异常层次结构.
"""


class Asn1OptionError(Exception):
    """所有 asn1opt 异常的基类."""

    pass


class Asn1ParseError(Asn1OptionError):
    """选项文本解析失败时抛出.

    所有解析失败都是终止性的: 不会返回部分结果.
    """

    def __init__(
        self,
        msg: str,
        remainder: str | None = None,
        position: int | None = None,
    ) -> None:
        """初始化解析错误.

        Args:
            msg: 错误描述信息.
            remainder: 出错位置开始的未消费文本.
            position: 出错位置在输入中的偏移量.
        """
        super().__init__(msg)
        self.remainder = remainder
        self.position = position

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.remainder is not None:
            return f"{base_msg} (at {self.position}: {self.remainder!r})"
        return base_msg


class EmptyInputError(Asn1ParseError):
    """输入文本为空时抛出."""

    pass


class UnrecognizedOptionError(Asn1ParseError):
    """当前位置没有任何选项子句能够匹配时抛出.

    Case:
        - 未知的关键字 (如 `some_other_param 360`).
        - 关键字缺少必需的参数 (如单独的 `oversize_length`).
        - 分隔符格式错误 (如 `,,`).
    """

    pass


class DuplicateOptionError(Asn1ParseError):
    """启用 `ParseOption.REJECT_DUPLICATES` 时, 同一关键字重复出现时抛出."""

    def __init__(
        self,
        keyword: str,
        remainder: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(f"Duplicate option: {keyword}", remainder, position)
        self.keyword = keyword


class NumericOverflowError(Asn1ParseError, ValueError):
    """数值参数超出目标整数宽度时抛出.

    Case:
        - `oversize_length` / `absolute_offset` 超出 u32 范围.
        - `relative_offset` 超出 i32 范围.
    """

    pass


class InvalidEncodingError(Asn1OptionError, ValueError):
    """原始输入不是合法文本时抛出 (在语法解析之前)."""

    pass


class ReleasedHandleError(Asn1OptionError):
    """访问已释放的 `OptionsHandle` 时抛出."""

    pass
