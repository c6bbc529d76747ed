"""asn1 关键字选项常量.

该模块定义了选项语法中使用的关键字拼写、整数边界和默认值.
"""

# 选项关键字 (区分大小写, 按匹配优先级排列)
BITSTRING_OVERFLOW = "bitstring_overflow"
DOUBLE_OVERFLOW = "double_overflow"
OVERSIZE_LENGTH = "oversize_length"
ABSOLUTE_OFFSET = "absolute_offset"
RELATIVE_OFFSET = "relative_offset"

KEYWORDS = (
    BITSTRING_OVERFLOW,
    DOUBLE_OVERFLOW,
    OVERSIZE_LENGTH,
    ABSOLUTE_OFFSET,
    RELATIVE_OFFSET,
)

# 分隔符
WHITESPACE = " \t\r\n"
COMMA = ","

# 整数边界
U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

# 每次检测最多处理的 ASN.1 帧数
DEFAULT_MAX_FRAMES = 30

# 配置覆盖键
MAX_FRAMES_KEY = "asn1-max-frames"
