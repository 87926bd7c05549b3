# -*- coding: utf-8 -*-
"""Exception types raised while scanning MTL content."""
from typing import Optional


class WFException(Exception):
    """Base class for all scanner failures."""


class WFCorruptException(WFException):
    """
    Raised when the input is structurally invalid: a recognized command is
    missing a required parameter, or a numeric parameter cannot be parsed.

    Attributes:
        line_number: 1-based line on which the problem was detected, when known.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"{self.message} (line {self.line_number})"


class WFIOException(WFException):
    """Raised when the underlying line source could not be read."""
