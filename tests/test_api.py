"""测试 asn1opt API 层."""

import io
import logging

import pytest

from asn1opt import (
    Asn1Options,
    EmptyInputError,
    InvalidEncodingError,
    MappingConfig,
    NumericOverflowError,
    ParseOption,
    UnrecognizedOptionError,
    decode_text,
    dump,
    dumps,
    load,
    loads,
)
from asn1opt.api import parse_max_frames


def test_loads_basic() -> None:
    """loads() 应能正确解析基本的选项文本."""
    opts = loads("oversize_length 1024 absolute_offset 10", provider={})

    assert opts == Asn1Options(oversize_length=1024, absolute_offset=10)
    assert opts.max_frames == 30


def test_loads_errors_propagate() -> None:
    """loads() 应原样抛出解析错误."""
    with pytest.raises(EmptyInputError):
        loads("", provider={})
    with pytest.raises(UnrecognizedOptionError):
        loads("oversize_length", provider={})
    with pytest.raises(NumericOverflowError):
        loads("oversize_length 4294967296", provider={})


def test_loads_none_rejected() -> None:
    """loads() 不接受 None."""
    with pytest.raises(TypeError):
        loads(None, provider={})  # type: ignore[arg-type]


def test_loads_with_option() -> None:
    """loads() 应将选项传递给解析器."""
    with pytest.raises(UnrecognizedOptionError):
        loads(
            "bitstring_overflowdouble_overflow",
            option=ParseOption.STRICT_SEPARATOR,
            provider={},
        )


# --- 输入解码 ---

INPUT_CASES = [
    (b"bitstring_overflow", "bytes"),
    (bytearray(b"bitstring_overflow"), "bytearray"),
    (memoryview(b"bitstring_overflow"), "memoryview"),
    (b"bitstring_overflow\x00oversize_length 5", "NUL 截断"),
]


@pytest.mark.parametrize(
    ("raw", "desc"),
    INPUT_CASES,
    ids=[c[1] for c in INPUT_CASES],
)
def test_loads_with_bytes_input(raw: bytes, desc: str) -> None:
    """loads() 应支持字节类输入."""
    assert loads(raw, provider={}) == Asn1Options(bitstring_overflow=True)


def test_decode_text_invalid_utf8() -> None:
    """非法 UTF-8 字节应报 InvalidEncodingError."""
    with pytest.raises(InvalidEncodingError):
        decode_text(b"oversize_length \xff\xfe")


def test_decode_text_lone_surrogate() -> None:
    """包含孤立代理字符的字符串应报 InvalidEncodingError."""
    with pytest.raises(InvalidEncodingError):
        decode_text("bitstring_overflow \ud800")


def test_decode_text_unsupported_type() -> None:
    """不支持的输入类型应报 TypeError."""
    with pytest.raises(TypeError):
        decode_text(123)  # type: ignore[arg-type]


def test_invalid_encoding_checked_before_grammar() -> None:
    """编码错误优先于语法错误."""
    with pytest.raises(InvalidEncodingError):
        loads(b"\xff", provider={})


def test_nul_at_start_is_empty_input() -> None:
    """以 NUL 开头的字节串等价于空输入."""
    with pytest.raises(EmptyInputError):
        loads(b"\x00bitstring_overflow", provider={})


# --- max_frames 覆盖 ---

OVERRIDE_CASES = [
    ("100", 100, "合法值"),
    ("0", 0, "零"),
    ("65535", 65535, "u16 最大值"),
    ("+42", 42, "带正号"),
    ("007", 7, "前导零"),
    ("65536", 30, "超出 u16"),
    ("70000", 30, "远超 u16"),
    ("-1", 30, "负数"),
    ("abc", 30, "非数字"),
    (" 10", 30, "前导空白"),
    ("", 30, "空字符串"),
    ("1" * 100, 30, "超长数字"),
]


@pytest.mark.parametrize(
    ("value", "expected", "desc"),
    OVERRIDE_CASES,
    ids=[c[2] for c in OVERRIDE_CASES],
)
def test_loads_max_frames_override(value: str, expected: int, desc: str) -> None:
    """配置值可解析为 u16 时替换 max_frames, 否则保留默认值."""
    opts = loads("bitstring_overflow", provider={"asn1-max-frames": value})

    assert opts.max_frames == expected


def test_parse_max_frames() -> None:
    """parse_max_frames() 对无效值返回 None."""
    assert parse_max_frames("30") == 30
    assert parse_max_frames("３０") is None
    assert parse_max_frames("30.0") is None


def test_loads_override_absent_key() -> None:
    """配置中不存在覆盖键时保留默认值."""
    opts = loads("bitstring_overflow", provider=MappingConfig({"other": "1"}))

    assert opts.max_frames == 30


def test_loads_override_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """未指定提供者时应从环境变量读取覆盖值."""
    monkeypatch.setenv("ASN1_MAX_FRAMES", "12")

    assert loads("double_overflow").max_frames == 12


def test_loads_ignore_override() -> None:
    """IGNORE_OVERRIDE 时不查询配置提供者."""
    opts = loads(
        "double_overflow",
        option=ParseOption.IGNORE_OVERRIDE,
        provider={"asn1-max-frames": "12"},
    )

    assert opts.max_frames == 30


def test_loads_invalid_override_logged(caplog: pytest.LogCaptureFixture) -> None:
    """无效的覆盖值应记录调试日志, 而不是报错."""
    caplog.set_level(logging.DEBUG, logger="asn1opt")

    opts = loads("bitstring_overflow", provider={"asn1-max-frames": "abc"})

    assert opts.max_frames == 30
    assert "Could not parse asn1-max-frames: abc" in caplog.text


def test_loads_override_not_queried_on_failure() -> None:
    """解析失败时不会查询配置提供者."""

    class RecordingConfig:
        def __init__(self) -> None:
            self.keys: list[str] = []

        def get(self, key: str) -> str | None:
            self.keys.append(key)
            return "10"

    provider = RecordingConfig()
    with pytest.raises(UnrecognizedOptionError):
        loads("nope", provider=provider)
    assert provider.keys == []

    loads("bitstring_overflow", provider=provider)
    assert provider.keys == ["asn1-max-frames"]


# --- load / dumps / dump ---


def test_load_from_file() -> None:
    """load() 应从文本流读取并解析."""
    fp = io.StringIO("oversize_length 1024,\nrelative_offset -3\n")

    opts = load(fp, provider={})

    assert opts == Asn1Options(oversize_length=1024, relative_offset=-3)


def test_dumps_canonical_order() -> None:
    """dumps() 按语法优先级输出子句."""
    opts = Asn1Options(
        relative_offset=-3, oversize_length=1024, bitstring_overflow=True
    )

    assert dumps(opts) == "bitstring_overflow, oversize_length 1024, relative_offset -3"


def test_dumps_parses_back() -> None:
    """dumps() 的输出应能重新解析为相同的结果."""
    opts = loads(
        "absolute_offset 10 double_overflow,relative_offset -0", provider={}
    )

    assert loads(dumps(opts), provider={}) == opts


def test_dump_to_file() -> None:
    """dump() 应将渲染结果写入文本流."""
    fp = io.StringIO()

    dump(Asn1Options(double_overflow=True), fp)

    assert fp.getvalue() == "double_overflow"


def test_decode_text_str_truncated_at_nul() -> None:
    """str 输入与字节输入一样截断到第一个 NUL."""
    assert decode_text("bitstring_overflow\x00junk") == "bitstring_overflow"
    assert loads("bitstring_overflow\x00junk", provider={}) == loads(
        b"bitstring_overflow\x00junk", provider={}
    )


@pytest.mark.parametrize(
    "value", [64, 64.0, b"64", ["64"]], ids=["int", "float", "bytes", "list"]
)
def test_loads_non_str_override_ignored(value: object) -> None:
    """非字符串的覆盖值应被忽略, 不影响解析结果."""
    opts = loads("bitstring_overflow", provider={"asn1-max-frames": value})  # type: ignore[dict-item]

    assert opts.bitstring_overflow
    assert opts.max_frames == 30


def test_parse_max_frames_non_str() -> None:
    """parse_max_frames() 对非字符串返回 None."""
    assert parse_max_frames(64) is None
    assert parse_max_frames(["64"]) is None
