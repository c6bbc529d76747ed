"""asn1opt 配置对象与配置提供者."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .const import MAX_FRAMES_KEY
from .options import ParseOption


@runtime_checkable
class ConfigProvider(Protocol):
    """只读键值配置提供者.

    实现必须能承受多个解析调用的并发只读查询.
    """

    def get(self, key: str) -> str | None:
        """返回键对应的值, 不存在时返回 None."""
        ...


class MappingConfig:
    """基于内存映射的配置提供者.

    构造时复制映射, 之后对原映射的修改不会影响查询结果.

    Examples:
        >>> provider = MappingConfig({"asn1-max-frames": "64"})
        >>> provider.get("asn1-max-frames")
        '64'
    """

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"MappingConfig({self._values!r})"


class EnvConfig:
    """从环境变量读取配置的提供者.

    键会被转换为环境变量名: 转为大写, `-` 和 `.` 替换为 `_`,
    并加上可选前缀. 例如 `asn1-max-frames` -> `ASN1_MAX_FRAMES`.
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def env_name(self, key: str) -> str:
        """返回键对应的环境变量名."""
        name = key.upper().replace("-", "_").replace(".", "_")
        return f"{self.prefix}{name}"

    def get(self, key: str) -> str | None:
        return os.environ.get(self.env_name(key))

    def __repr__(self) -> str:
        return f"EnvConfig(prefix={self.prefix!r})"


@dataclass(frozen=True)
class ParseConfig:
    """asn1opt 解析配置 (不可变).

    在 API 入口层创建, 然后传递给解析器和覆盖逻辑.

    Attributes:
        flags: 解析选项标志 (IntFlag).
        provider: 用于查询 max_frames 覆盖值的配置提供者.
        max_frames_key: 覆盖值的配置键.
    """

    flags: ParseOption = ParseOption.NONE
    provider: ConfigProvider = field(default_factory=EnvConfig)
    max_frames_key: str = MAX_FRAMES_KEY

    @classmethod
    def from_params(
        cls,
        option: ParseOption = ParseOption.NONE,
        provider: ConfigProvider | Mapping[str, str] | None = None,
    ) -> "ParseConfig":
        """从参数构建配置对象.

        Args:
            option: ParseOption 枚举.
            provider: 配置提供者; 传入普通映射时包装为 `MappingConfig`,
                为 None 时使用环境变量.

        Returns:
            ParseConfig: 配置对象.
        """
        if provider is None:
            resolved: ConfigProvider = EnvConfig()
        elif isinstance(provider, Mapping):
            resolved = MappingConfig(provider)
        else:
            resolved = provider

        return cls(flags=ParseOption(option), provider=resolved)

    @property
    def reject_duplicates(self) -> bool:
        """重复关键字是否报错."""
        return bool(self.flags & ParseOption.REJECT_DUPLICATES)

    @property
    def strict_separator(self) -> bool:
        """子句之间是否必须有分隔符."""
        return bool(self.flags & ParseOption.STRICT_SEPARATOR)

    @property
    def ignore_override(self) -> bool:
        """是否跳过配置覆盖."""
        return bool(self.flags & ParseOption.IGNORE_OVERRIDE)
