# -*- coding: utf-8 -*-
"""
Fast Float
延迟解析的数值参数。参数文本在第一次读取 value 时才转换为 float，
结果被缓存；格式错误在此时以 WFCorruptException 抛出，而不是在分词阶段。

主要接口:
- FastFloat: 包装一段参数文本的惰性数值

依赖:
- 标准库: re, typing
- 本地模块: errors.WFCorruptException
"""

import re
from typing import Optional

from .errors import WFCorruptException

_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class FastFloat:
    """
    Lazily evaluated floating point value backed by the raw parameter text.

    Attributes:
        text: The raw token text exactly as it appeared on the line.
        line_number: Source line of the token, reported if parsing fails.
    """

    __slots__ = ("text", "line_number", "_value")

    def __init__(self, text: str, line_number: Optional[int] = None):
        self.text = text
        self.line_number = line_number
        self._value: Optional[float] = None

    @property
    def value(self) -> float:
        """Parsed value, computed on first access and cached."""
        if self._value is None:
            if not self.is_number():
                raise WFCorruptException(f"Invalid number '{self.text}'.", self.line_number)
            self._value = float(self.text)
        return self._value

    @property
    def is_evaluated(self) -> bool:
        return self._value is not None

    def is_number(self) -> bool:
        """Whether the text is a valid number, without raising."""
        return _NUMBER_PATTERN.fullmatch(self.text) is not None

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __repr__(self):
        if self._value is None:
            return f"FastFloat(text={self.text!r})"
        return f"FastFloat(text={self.text!r}, value={self._value})"
