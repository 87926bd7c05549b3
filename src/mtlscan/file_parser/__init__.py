# -*- coding: utf-8 -*-
"""
MTLScan File Parser Package
===========================

This package scans Wavefront MTL material files line by line and reports
each recognized command to an ``IMTLScannerHandler``.

Recognized commands:
- newmtl
- Ka / Kd / Ks / Tf (RGB form only)
- d / sharpness / illum / Ns
- map_Ka / map_Kd / map_Ks / map_Ns / map_d / bump / refl

Usage Example:
    from mtlscan.file_parser import collect_file_events
    events = collect_file_events("materials.mtl")
"""

__version__ = "1.0.0"
__author__ = "MTLScan Team"
__license__ = "MIT"

from .errors import WFCorruptException, WFException, WFIOException
from .fast_float import FastFloat
from .scan_command import ScanCommand
from .scan_color import ColorForm, ScanColor
from .mtl_color import MTLColor
from .handler_interface import IMTLScannerHandler
from .mtl_scanner import MTLScanner, ScanState
from .mtl_events import MTLEvent, MTLEventCollector, MTLEventType
from .file_dispatcher import collect_events, collect_file_events, scan_file, scan_lines, scan_text

__all__ = [
    "ColorForm",
    "FastFloat",
    "IMTLScannerHandler",
    "MTLColor",
    "MTLEvent",
    "MTLEventCollector",
    "MTLEventType",
    "MTLScanner",
    "ScanColor",
    "ScanCommand",
    "ScanState",
    "WFCorruptException",
    "WFException",
    "WFIOException",
    "collect_events",
    "collect_file_events",
    "scan_file",
    "scan_lines",
    "scan_text",
]
