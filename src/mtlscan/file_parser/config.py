# -*- coding: utf-8 -*-
"""
MTLScan File Parser Configuration
=================================

This module stores default configuration values for the MTL scanner.
Values come from the project-wide ``default_config.DEFAULTS``; the file
encoding may be overridden with the ``MTLSCAN_ENCODING`` environment variable.

Attributes:
    COLOR_TOLERANCE (float): Per-component tolerance for MTLColor equality.
    DEFAULT_ENCODING (str): Encoding used by scan_file when none is given.
    PROGRESS_MIN_LINES (int): Sized inputs to scan_lines shorter than this
        never show a tqdm bar. scan_file does not apply it.
    MTL_SUFFIXES (tuple): File suffixes accepted by scan_file.
"""
import os

from ..default_config import DEFAULTS

COLOR_TOLERANCE = DEFAULTS["COLOR_TOLERANCE"]
DEFAULT_ENCODING = os.environ.get("MTLSCAN_ENCODING") or DEFAULTS["DEFAULT_ENCODING"]
PROGRESS_MIN_LINES = DEFAULTS["PROGRESS_MIN_LINES"]
MTL_SUFFIXES = DEFAULTS["MTL_SUFFIXES"]
