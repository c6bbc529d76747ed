"""选项文本读取器.

为语法匹配器和解析引擎提供带游标的文本读取功能,
所有匹配都在当前位置进行, 失败时不移动游标.
"""

from .const import COMMA, WHITESPACE


class TextReader:
    """选项文本的游标读取器."""

    __slots__ = ("_pos", "_text", "length")

    _text: str
    _pos: int
    length: int

    def __init__(self, text: str):
        """初始化TextReader.

        Args:
            text: 要读取的选项文本.
        """
        self._text = text
        self._pos = 0
        self.length = len(text)

    @property
    def pos(self) -> int:
        """当前游标位置."""
        return self._pos

    @property
    def eof(self) -> bool:
        """是否已消费全部文本."""
        return self._pos >= self.length

    @property
    def text(self) -> str:
        """完整输入文本."""
        return self._text

    def remainder(self) -> str:
        """返回从当前位置开始的未消费文本."""
        return self._text[self._pos :]

    def mark(self) -> int:
        """返回当前位置, 用于匹配失败时回退."""
        return self._pos

    def reset(self, mark: int) -> None:
        """回退到之前 `mark()` 返回的位置."""
        self._pos = mark

    def read_literal(self, literal: str) -> bool:
        """如果当前位置以 literal 开头则消费它.

        Returns:
            是否匹配成功.
        """
        if self._text.startswith(literal, self._pos):
            self._pos += len(literal)
            return True
        return False

    def read_while(self, chars: str) -> str:
        """消费连续属于 chars 的字符, 返回消费的文本 (可能为空)."""
        start = self._pos
        while self._pos < self.length and self._text[self._pos] in chars:
            self._pos += 1
        return self._text[start : self._pos]

    def read_whitespace(self) -> str:
        """消费零个或多个空白字符."""
        return self.read_while(WHITESPACE)

    def read_digits(self) -> str:
        """消费一个或多个 ASCII 十进制数字; 不匹配时返回空字符串."""
        return self.read_while("0123456789")

    def read_separator(self) -> str:
        """消费一个可选的分隔单元: 一段空白, 或单个逗号.

        两种形式不会在同一个分隔位置混用.
        """
        spaces = self.read_whitespace()
        if spaces:
            return spaces
        if self.read_literal(COMMA):
            return COMMA
        return ""
