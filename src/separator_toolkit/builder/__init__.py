"""
Module: builder

Purpose:
    Building pipeline for double-sided separator tabs. Pairs an ordered
    item sequence into separators, paginates them onto sheets and
    reorders back faces for duplex printing.

Key Functions:
    - build_separators(): Main entry point for separator generation

Key Classes:
    - SeparatorConfig: Print configuration
    - BuildResult: Pages plus metadata
    - BuildError: Build failure

Used By:
    - separator_toolkit.cli: Command line interface
"""

from .config import SeparatorConfig, ImageQuality
from .controller import build_separators, BuildResult, BuildError

__all__ = [
    # Config
    "SeparatorConfig",
    "ImageQuality",
    # Controller
    "build_separators",
    "BuildResult",
    "BuildError",
]
