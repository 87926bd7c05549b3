# -*- coding: utf-8 -*-
"""
Scan Command
把一行文本拆分为命令关键字与参数列表。同一个 ScanCommand 对象在扫描
过程中被反复复用，每读一行就被重新填充一次。

主要接口:
- ScanCommand.parse: 解析一行文本
- ScanCommand.get_string_param / get_fast_float: 读取参数

依赖:
- 标准库: typing
- 本地模块: fast_float.FastFloat
"""

from typing import Optional, Tuple

from .fast_float import FastFloat

COMMENT_MARKER = "#"
_LINE_ENDINGS = "\r\n"


class ScanCommand:
    """
    Mutable scan state for one line of MTL input.

    A parsed command is exactly one of: empty (blank line), comment
    (``comment`` holds the free text), or a command with a non-empty
    ``keyword`` and an immutable tuple of parameter tokens.
    """

    def __init__(self):
        self.keyword: str = ""
        self.comment: str = ""
        self.parameters: Tuple[str, ...] = ()
        self._is_comment = False
        self.line_number: Optional[int] = None

    def parse(self, line: str, line_number: Optional[int] = None) -> "ScanCommand":
        """Re-populate this command from ``line``. Never raises."""
        self.line_number = line_number
        self.keyword = ""
        self.comment = ""
        self.parameters = ()
        self._is_comment = False

        content = line.rstrip(_LINE_ENDINGS).lstrip()
        if not content:
            return self
        if content.startswith(COMMENT_MARKER):
            self._is_comment = True
            self.comment = content[len(COMMENT_MARKER):].lstrip()
            return self

        tokens = content.split()
        self.keyword = tokens[0]
        self.parameters = tuple(tokens[1:])
        return self

    def is_empty(self) -> bool:
        return not self._is_comment and not self.keyword

    def is_comment(self) -> bool:
        return self._is_comment

    def is_command(self, name: str) -> bool:
        return self.keyword == name

    @property
    def parameter_count(self) -> int:
        return len(self.parameters)

    @property
    def last_param_index(self) -> int:
        return len(self.parameters) - 1

    def get_string_param(self, index: int) -> str:
        return self.parameters[index]

    def get_fast_float(self, index: int) -> FastFloat:
        return FastFloat(self.parameters[index], self.line_number)

    def __repr__(self):
        if self._is_comment:
            return f"ScanCommand(comment={self.comment!r})"
        return f"ScanCommand(keyword={self.keyword!r}, parameters={self.parameters!r})"
