# -*- coding: utf-8 -*-
__version__ = "1.0.0"
__author__ = "MTLScan Team"
__license__ = "MIT"

from .file_parser import (
    FastFloat,
    IMTLScannerHandler,
    MTLColor,
    MTLEvent,
    MTLEventCollector,
    MTLEventType,
    MTLScanner,
    WFCorruptException,
    WFException,
    WFIOException,
    collect_events,
    collect_file_events,
    scan_file,
    scan_lines,
    scan_text,
)

__all__ = [
    "FastFloat",
    "IMTLScannerHandler",
    "MTLColor",
    "MTLEvent",
    "MTLEventCollector",
    "MTLEventType",
    "MTLScanner",
    "WFCorruptException",
    "WFException",
    "WFIOException",
    "collect_events",
    "collect_file_events",
    "scan_file",
    "scan_lines",
    "scan_text",
]
