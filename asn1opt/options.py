"""asn1 选项解析的行为标志.

该模块定义了用于控制 `loads` 和 `parse_handle` 严格程度的选项标志.
"""

from enum import IntFlag


class ParseOption(IntFlag):
    """解析选项标志.

    可以使用位运算组合多个选项:
        option = ParseOption.REJECT_DUPLICATES | ParseOption.STRICT_SEPARATOR
    """

    # 默认行为: 重复关键字后者覆盖前者, 允许子句直接相连
    NONE = 0x0000

    # 同一关键字出现多次时报错
    REJECT_DUPLICATES = 0x0001

    # 要求每两个子句之间必须存在分隔符
    STRICT_SEPARATOR = 0x0002

    # 不查询配置提供者 (max_frames 保持默认值)
    IGNORE_OVERRIDE = 0x0004
