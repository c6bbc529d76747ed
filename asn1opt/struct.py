"""asn1 选项结构体定义模块."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Self

from .const import (
    ABSOLUTE_OFFSET,
    BITSTRING_OVERFLOW,
    DEFAULT_MAX_FRAMES,
    DOUBLE_OVERFLOW,
    I32_MAX,
    I32_MIN,
    OVERSIZE_LENGTH,
    RELATIVE_OFFSET,
    U16_MAX,
    U32_MAX,
)


class Asn1Options(BaseModel):
    """asn1 检测关键字的解析结果.

    这是解析器输出的唯一实体, 由检测引擎消费. 实例是不可变的:
    解析完成并交给调用者之后, 本库不会再修改它.

    字段范围由模型自身保证:
        - `oversize_length` / `absolute_offset`: u32 或 None.
        - `relative_offset`: i32 或 None.
        - `max_frames`: u16, 默认为 30.

    Examples:
        >>> from asn1opt import loads
        >>> opts = loads("oversize_length 1024, bitstring_overflow")
        >>> opts.oversize_length, opts.bitstring_overflow
        (1024, True)
        >>> opts.max_frames
        30
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bitstring_overflow: bool = False
    double_overflow: bool = False
    oversize_length: int | None = Field(default=None, ge=0, le=U32_MAX)
    absolute_offset: int | None = Field(default=None, ge=0, le=U32_MAX)
    relative_offset: int | None = Field(default=None, ge=I32_MIN, le=I32_MAX)
    max_frames: int = Field(default=DEFAULT_MAX_FRAMES, ge=0, le=U16_MAX)

    def with_max_frames(self, max_frames: int) -> Self:
        """返回替换了 `max_frames` 的新实例 (会重新校验范围)."""
        data: dict[str, Any] = self.model_dump()
        data["max_frames"] = max_frames
        return type(self).model_validate(data)

    def to_rule(self) -> str:
        """渲染为规范的选项文本.

        子句按语法优先级排列, 以 `", "` 连接; 默认值不输出.
        `max_frames` 不属于选项语法, 因此不会被渲染.
        """
        clauses: list[str] = []
        if self.bitstring_overflow:
            clauses.append(BITSTRING_OVERFLOW)
        if self.double_overflow:
            clauses.append(DOUBLE_OVERFLOW)
        if self.oversize_length is not None:
            clauses.append(f"{OVERSIZE_LENGTH} {self.oversize_length}")
        if self.absolute_offset is not None:
            clauses.append(f"{ABSOLUTE_OFFSET} {self.absolute_offset}")
        if self.relative_offset is not None:
            clauses.append(f"{RELATIVE_OFFSET} {self.relative_offset}")
        return ", ".join(clauses)
