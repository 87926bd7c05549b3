# -*- coding: utf-8 -*-
"""
Scan Color
解析颜色命令 (Ka / Kd / Ks / Tf) 的参数。只有恰好三个数值参数的 RGB 形式
会被转换；xyz、spectral 以及参数数量不符的形式只做分类，不产生颜色事件。
"""

from enum import Enum

from .scan_command import ScanCommand

XYZ_KEYWORD = "xyz"
SPECTRAL_KEYWORD = "spectral"


class ColorForm(Enum):
    """Color model recognized for the most recently processed command."""
    RGB = 1
    XYZ = 2
    SPECTRAL = 3
    UNSUPPORTED = 4


class ScanColor:
    """
    Per-command scratch state for color commands. Reused across commands
    and reset at the start of every ``process`` call.
    """

    def __init__(self):
        self.form = ColorForm.UNSUPPORTED
        self.r = 0.0
        self.g = 0.0
        self.b = 0.0

    def process(self, command: ScanCommand) -> ColorForm:
        """
        Classify the color specification of ``command``.

        Raises:
            WFCorruptException: If an RGB component is not a valid number.
        """
        self.form = ColorForm.UNSUPPORTED
        self.r = self.g = self.b = 0.0

        if command.parameter_count == 0:
            return self.form
        first = command.get_string_param(0)
        if first == XYZ_KEYWORD:
            self.form = ColorForm.XYZ
        elif first == SPECTRAL_KEYWORD:
            self.form = ColorForm.SPECTRAL
        elif command.parameter_count == 3:
            r = command.get_fast_float(0).value
            g = command.get_fast_float(1).value
            b = command.get_fast_float(2).value
            self.r, self.g, self.b = r, g, b
            self.form = ColorForm.RGB
        return self.form

    def is_rgb(self) -> bool:
        return self.form is ColorForm.RGB
