"""测试选项文本读取器."""

from asn1opt.reader import TextReader


def test_read_literal_advances_on_match() -> None:
    """read_literal() 匹配时前进, 不匹配时游标不变."""
    reader = TextReader("double_overflow")

    assert not reader.read_literal("bitstring_overflow")
    assert reader.pos == 0
    assert reader.read_literal("double_overflow")
    assert reader.eof


def test_read_digits_ascii_only() -> None:
    """read_digits() 只接受 ASCII 数字."""
    assert TextReader("1024 x").read_digits() == "1024"
    assert TextReader("１２").read_digits() == ""


def test_read_whitespace_variants() -> None:
    """read_whitespace() 接受空格、制表符、回车和换行."""
    reader = TextReader(" \t\r\nx")

    assert reader.read_whitespace() == " \t\r\n"
    assert reader.remainder() == "x"


def test_read_separator_whitespace_run() -> None:
    """read_separator() 消费整段空白, 但不继续消费逗号."""
    reader = TextReader("  , x")

    assert reader.read_separator() == "  "
    assert reader.remainder() == ", x"


def test_read_separator_single_comma() -> None:
    """read_separator() 只消费一个逗号."""
    reader = TextReader(",, x")

    assert reader.read_separator() == ","
    assert reader.remainder() == ", x"


def test_read_separator_optional() -> None:
    """没有分隔符时 read_separator() 返回空字符串."""
    reader = TextReader("abc")

    assert reader.read_separator() == ""
    assert reader.pos == 0


def test_mark_and_reset() -> None:
    """reset() 应回退到 mark() 记录的位置."""
    reader = TextReader("relative_offset -")
    mark = reader.mark()
    reader.read_literal("relative_offset")
    reader.read_whitespace()

    reader.reset(mark)

    assert reader.pos == 0
    assert reader.remainder() == "relative_offset -"
