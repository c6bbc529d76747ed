"""跨调用边界的句柄接口.

提供与外部调用方约定一致的两个操作:

- `parse_handle`: 解析选项, 成功返回拥有所有权的 `OptionsHandle`,
  任何失败都返回 None (不暴露部分结果).
- `release`: 释放句柄; None 为空操作.

Python 调用方通常直接使用 `loads`.
"""

from collections.abc import Mapping
from types import TracebackType

from .api import RawText, loads
from .config import ConfigProvider
from .exceptions import Asn1OptionError, ReleasedHandleError
from .log import logger
from .options import ParseOption
from .struct import Asn1Options


class OptionsHandle:
    """`Asn1Options` 的所有权句柄.

    句柄由 `parse_handle` 创建, 由调用者独占, 直到 `release()`.
    释放后访问 `options` 抛出 `ReleasedHandleError`.
    也可以作为上下文管理器使用, 退出时自动释放.
    """

    __slots__ = ("_options",)

    def __init__(self, options: Asn1Options):
        self._options: Asn1Options | None = options

    @property
    def options(self) -> Asn1Options:
        """句柄持有的解析结果."""
        if self._options is None:
            raise ReleasedHandleError("Options handle has been released")
        return self._options

    @property
    def released(self) -> bool:
        """句柄是否已释放."""
        return self._options is None

    def release(self) -> None:
        """释放句柄持有的结果."""
        self._options = None

    def __enter__(self) -> "OptionsHandle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        if self._options is None:
            return "OptionsHandle(<released>)"
        return f"OptionsHandle({self._options!r})"


def parse_handle(
    raw: RawText | None,
    provider: ConfigProvider | Mapping[str, str] | None = None,
    option: ParseOption = ParseOption.NONE,
) -> OptionsHandle | None:
    """解析选项文本, 返回拥有所有权的句柄.

    Args:
        raw: 选项文本 (str 或以 NUL 结尾的字节串). None 直接返回 None.
        provider: 配置提供者, 用于 `asn1-max-frames` 覆盖值.
        option: 解析选项.

    Returns:
        成功时返回 `OptionsHandle`, 任何失败返回 None.
    """
    if raw is None:
        return None

    try:
        options = loads(raw, option=option, provider=provider, suppress_log=True)
    except (Asn1OptionError, TypeError) as e:
        logger.debug("Could not parse asn1 options: %s", e)
        return None

    return OptionsHandle(options)


def release(handle: OptionsHandle | None) -> None:
    """释放 `parse_handle` 返回的句柄. None 为空操作."""
    if handle is None:
        return
    handle.release()
