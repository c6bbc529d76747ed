"""asn1 检测关键字选项解析库.

提供选项文本的解析(loads)和渲染(dumps)功能, 以及跨调用边界的句柄接口.
"""

from .api import decode_text, dump, dumps, load, loads
from .boundary import OptionsHandle, parse_handle, release
from .config import ConfigProvider, EnvConfig, MappingConfig, ParseConfig
from .const import DEFAULT_MAX_FRAMES, MAX_FRAMES_KEY
from .exceptions import (
    Asn1OptionError,
    Asn1ParseError,
    DuplicateOptionError,
    EmptyInputError,
    InvalidEncodingError,
    NumericOverflowError,
    ReleasedHandleError,
    UnrecognizedOptionError,
)
from .options import ParseOption
from .struct import Asn1Options

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_FRAMES",
    "MAX_FRAMES_KEY",
    "Asn1OptionError",
    "Asn1Options",
    "Asn1ParseError",
    "ConfigProvider",
    "DuplicateOptionError",
    "EmptyInputError",
    "EnvConfig",
    "InvalidEncodingError",
    "MappingConfig",
    "NumericOverflowError",
    "OptionsHandle",
    "ParseConfig",
    "ParseOption",
    "ReleasedHandleError",
    "UnrecognizedOptionError",
    "__version__",
    "decode_text",
    "dump",
    "dumps",
    "load",
    "loads",
    "parse_handle",
    "release",
]
