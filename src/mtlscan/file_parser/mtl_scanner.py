# -*- coding: utf-8 -*-
"""
MTL Scanner
==================
逐行扫描 MTL 文本，识别命令并以回调形式通知 IMTLScannerHandler。

扫描过程是单次、顺序的前向遍历：
    读取一行 -> ScanCommand 分词 -> 按关键字分发 -> 调用 handler 回调

未知关键字会被忽略（兼容厂商扩展）；已识别命令缺少必需参数时抛出
WFCorruptException，扫描立即终止，扫描器进入 FAILED 状态。
"""

import logging
from enum import Enum
from functools import partial
from typing import Callable, Dict, Iterable, Iterator, Optional

from .errors import WFCorruptException, WFException, WFIOException
from .handler_interface import IMTLScannerHandler
from .scan_color import ScanColor
from .scan_command import ScanCommand

COMMAND_MATERIAL = "newmtl"
COMMAND_AMBIENT_COLOR = "Ka"
COMMAND_DIFFUSE_COLOR = "Kd"
COMMAND_SPECULAR_COLOR = "Ks"
COMMAND_TRANSMISSION_COLOR = "Tf"
COMMAND_DISSOLVE = "d"
COMMAND_SHARPNESS = "sharpness"
COMMAND_ILLUMINATION = "illum"
COMMAND_SPECULAR_EXPONENT = "Ns"
COMMAND_AMBIENT_TEXTURE = "map_Ka"
COMMAND_DIFFUSE_TEXTURE = "map_Kd"
COMMAND_SPECULAR_TEXTURE = "map_Ks"
COMMAND_SPECULAR_EXPONENT_TEXTURE = "map_Ns"
COMMAND_DISSOLVE_TEXTURE = "map_d"
COMMAND_BUMP_TEXTURE = "bump"
COMMAND_REFLECTION_TEXTURE = "refl"


class ScanState(Enum):
    READY = 1
    FAILED = 2


class MTLScanner:
    """
    Command dispatcher for MTL content.

    The ScanCommand and ScanColor scratch objects are reused for every line,
    so one instance must never be shared by two scans running at once.

    Attributes:
        handler (IMTLScannerHandler): Receiver of scan events.
        state (ScanState): READY until a scan raises, then FAILED for good.
        line_number (int): 1-based number of the line most recently read.
    """

    def __init__(self, handler: IMTLScannerHandler):
        self.handler = handler
        self.state = ScanState.READY
        self.line_number = 0
        self.command = ScanCommand()
        self.color = ScanColor()
        self.logger = logging.getLogger("MTLScanner")
        self._processors: Dict[str, Callable[[ScanCommand], None]] = {
            COMMAND_MATERIAL: self._process_material,
            COMMAND_AMBIENT_COLOR: partial(self._process_color, handler.on_ambient_color_rgb),
            COMMAND_DIFFUSE_COLOR: partial(self._process_color, handler.on_diffuse_color_rgb),
            COMMAND_SPECULAR_COLOR: partial(self._process_color, handler.on_specular_color_rgb),
            COMMAND_TRANSMISSION_COLOR: partial(self._process_color, handler.on_transmission_color_rgb),
            COMMAND_DISSOLVE: partial(
                self._process_scalar, "Missing dissolve factor.", handler.on_dissolve),
            COMMAND_SHARPNESS: partial(
                self._process_scalar, "Missing sharpness factor.", handler.on_sharpness),
            COMMAND_ILLUMINATION: partial(
                self._process_scalar, "Missing illumination model.", handler.on_illumination),
            COMMAND_SPECULAR_EXPONENT: partial(
                self._process_scalar, "Missing specular exponent amount.", handler.on_specular_exponent),
            COMMAND_AMBIENT_TEXTURE: partial(
                self._process_texture, "ambient", handler.on_ambient_texture),
            COMMAND_DIFFUSE_TEXTURE: partial(
                self._process_texture, "diffuse", handler.on_diffuse_texture),
            COMMAND_SPECULAR_TEXTURE: partial(
                self._process_texture, "specular", handler.on_specular_texture),
            COMMAND_SPECULAR_EXPONENT_TEXTURE: partial(
                self._process_texture, "specular exponent", handler.on_specular_exponent_texture),
            COMMAND_DISSOLVE_TEXTURE: partial(
                self._process_texture, "dissolve", handler.on_dissolve_texture),
            COMMAND_BUMP_TEXTURE: partial(
                self._process_texture, "bump", handler.on_bump_texture),
            COMMAND_REFLECTION_TEXTURE: partial(
                self._process_texture, "reflection", handler.on_reflection_texture),
        }

    @property
    def keywords(self):
        """Command keywords this scanner recognizes."""
        return tuple(self._processors)

    def run(self, lines: Iterable[str]) -> int:
        """
        Scan ``lines`` to exhaustion, dispatching one event per recognized command.

        Args:
            lines: Any iterable of text lines (an open text file, a list, a generator).

        Returns:
            int: Number of lines read.

        Raises:
            WFCorruptException: A recognized command is missing a required
                parameter, or an RGB component is not a number.
            WFIOException: The line source raised OSError.
            WFException: The scanner already failed on an earlier run.
            TypeError: ``lines`` is a single string rather than a sequence of lines.
            Exception: Anything raised by the handler, unchanged.
        """
        if self.state is ScanState.FAILED:
            raise WFException("Scanner is in FAILED state and cannot be reused.")
        if isinstance(lines, (str, bytes)):
            raise TypeError("run expects an iterable of lines, not a single string.")

        self.line_number = 0
        iterator = iter(lines)
        try:
            while True:
                line = self._next_line(iterator)
                if line is None:
                    break
                self.line_number += 1
                self._dispatch(self.command.parse(line, self.line_number))
        except Exception:
            self.state = ScanState.FAILED
            raise
        return self.line_number

    def _next_line(self, iterator: Iterator[str]) -> Optional[str]:
        try:
            return next(iterator)
        except StopIteration:
            return None
        except UnicodeDecodeError as e:
            raise WFCorruptException(f"Undecodable input: {e.reason}.", self.line_number + 1) from e
        except OSError as e:
            raise WFIOException(f"Failed to read line {self.line_number + 1}: {e}") from e

    def _dispatch(self, command: ScanCommand) -> None:
        if command.is_empty():
            return
        if command.is_comment():
            self.handler.on_comment(command.comment)
            return
        processor = self._processors.get(command.keyword)
        if processor is None:
            self.logger.debug(f"Line {self.line_number}: ignoring unknown command '{command.keyword}'")
            return
        processor(command)

    def _corrupt(self, message: str) -> WFCorruptException:
        return WFCorruptException(message, self.line_number)

    def _process_material(self, command: ScanCommand) -> None:
        if command.parameter_count == 0:
            raise self._corrupt("Missing material name.")
        self.handler.on_material(command.get_string_param(0))

    def _process_color(self, callback: Callable[[float, float, float], None], command: ScanCommand) -> None:
        self.color.process(command)
        if not self.color.is_rgb():
            self.logger.warning(
                f"Line {self.line_number}: {command.keyword} uses {self.color.form.name} color form, skipped"
            )
            return
        callback(self.color.r, self.color.g, self.color.b)

    def _process_scalar(self, missing_message: str, callback: Callable, command: ScanCommand) -> None:
        if command.parameter_count == 0:
            raise self._corrupt(missing_message)
        callback(command.get_fast_float(command.last_param_index))

    def _process_texture(self, kind: str, callback: Callable[[str], None], command: ScanCommand) -> None:
        if command.parameter_count == 0:
            raise self._corrupt(f"Missing {kind} texture filename.")
        # leading texture options (-blendu, -o, ...) are not interpreted
        callback(command.get_string_param(command.last_param_index))
