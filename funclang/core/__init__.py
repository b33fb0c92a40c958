"""
Core module for funclang.

This module contains the top-level driver that runs the parser over a
whole program and applies error recovery.
"""

from .driver import Driver, DriveResult, TopLevelResult, parse_source

__all__ = [
    "Driver",
    "DriveResult",
    "TopLevelResult",
    "parse_source",
]
