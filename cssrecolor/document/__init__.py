# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""Whole-document color scanning and rewriting."""

from cssrecolor.document.scanner import detect_colors, scan_and_convert

__all__ = ["detect_colors", "scan_and_convert"]
