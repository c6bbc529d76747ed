"""asn1opt日志记录器."""

import logging

logger = logging.getLogger("asn1opt")


def _escape(char: str) -> str:
    """按单引号 repr 的规则转义单个字符."""
    if char == "'":
        return "\\'"
    return repr(char)[1:-1]


def get_context(text: str, pos: int, window: int = 16) -> str:
    """获取指定位置周围文本的上下文摘录."""
    start = max(0, pos - window)
    end = min(len(text), pos + window)
    chunk = text[start:end]

    # 显示行与标记行使用同一套逐字符转义, ^ 对齐出错位置
    escaped = [_escape(c) for c in chunk]
    offset = 1 + sum(len(e) for e in escaped[: max(0, pos - start)])
    marker = " " * offset + "^"

    return f"位置 {pos} 的上下文 (显示 {start}-{end}):\n'{''.join(escaped)}'\n{marker}"
