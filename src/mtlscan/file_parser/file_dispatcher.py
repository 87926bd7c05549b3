# -*- coding: utf-8 -*-
"""
File Dispatcher
统一的扫描入口：文件、字符串或任意行序列都交给 MTLScanner 处理。

主要接口:
- scan_file: 打开 .mtl 文件并扫描，返回读取的行数
- scan_lines / scan_text: 扫描已有的行序列或字符串
- collect_events / collect_file_events: 扫描并返回 MTLEvent 列表

依赖:
- 标准库: io, logging, pathlib, typing
- 第三方: tqdm
- 本地模块: MTLScanner, MTLEventCollector, config
"""

import io
import logging
from collections.abc import Sized
from pathlib import Path
from typing import Iterable, List, Optional, Union

from tqdm import tqdm

from .config import DEFAULT_ENCODING, MTL_SUFFIXES, PROGRESS_MIN_LINES
from .handler_interface import IMTLScannerHandler
from .mtl_events import MTLEvent, MTLEventCollector
from .mtl_scanner import MTLScanner

logger = logging.getLogger("MTLScan.file_dispatcher")


def scan_lines(lines: Iterable[str], handler: IMTLScannerHandler, progress: bool = False) -> int:
    """Scan a sequence of text lines with a fresh MTLScanner.

    Args:
        lines: Iterable of text lines.
        handler: Receiver of scan events.
        progress: Whether to show a tqdm progress bar. Sized inputs shorter
            than PROGRESS_MIN_LINES never show one.

    Returns:
        int: Number of lines read.
    """
    if isinstance(lines, (str, bytes)):
        raise TypeError("scan_lines expects an iterable of lines; use scan_text for a string.")
    small = isinstance(lines, Sized) and len(lines) < PROGRESS_MIN_LINES
    it_lines = tqdm(lines, desc="MTL lines", unit="line", leave=False, disable=not progress or small)
    return MTLScanner(handler).run(it_lines)


def scan_text(text: str, handler: IMTLScannerHandler) -> int:
    """Scan MTL content held in a string.

    Lines break on \\n, \\r and \\r\\n only, the same as scan_file.
    """
    return scan_lines(io.StringIO(text, newline=None), handler)


def scan_file(
    file_path: Union[str, Path],
    handler: IMTLScannerHandler,
    progress: bool = False,
    encoding: Optional[str] = None,
) -> int:
    """Open an MTL file, scan it and close it.

    Args:
        file_path: 文件路径，支持 str 或 Path。
        handler: Receiver of scan events.
        progress: Whether to show a tqdm progress bar while scanning.
        encoding: Text encoding; defaults to DEFAULT_ENCODING.

    Returns:
        int: Number of lines read.

    Raises:
        FileNotFoundError: 当文件不存在时抛出。
        ValueError: 当文件后缀不是 .mtl 时抛出。
        WFCorruptException: On malformed content.
        WFIOException: If reading the file fails mid-scan.

    Examples:
        >>> from mtlscan.file_parser import MTLEventCollector, scan_file
        >>> collector = MTLEventCollector()
        >>> line_count = scan_file("materials.mtl", collector)
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix not in MTL_SUFFIXES:
        raise ValueError(f"Unsupported file format: {suffix}. Only .mtl is supported.")

    logger.info(f"Scanning {path}")
    with open(path, "r", encoding=encoding or DEFAULT_ENCODING) as f:
        it_lines = tqdm(f, desc=path.name, unit="line", leave=False, disable=not progress)
        line_count = MTLScanner(handler).run(it_lines)
    logger.info(f"Scanned {line_count} lines from {path.name}")
    return line_count


def collect_events(lines: Union[str, Iterable[str]]) -> List[MTLEvent]:
    """Scan a string or a sequence of lines and return the events in order."""
    collector = MTLEventCollector()
    if isinstance(lines, str):
        scan_text(lines, collector)
    else:
        scan_lines(lines, collector)
    return collector.events


def collect_file_events(file_path: Union[str, Path], **kwargs) -> List[MTLEvent]:
    """Scan an MTL file and return the events in order."""
    collector = MTLEventCollector()
    scan_file(file_path, collector, **kwargs)
    return collector.events
