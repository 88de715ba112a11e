"""
LensCore Shared Module
======================

Configuration, structured logging, console presentation, and result
models shared by the PassLens password analysis tool.
"""

from lenscore.config import LensConfig, get_config

__all__ = ["LensConfig", "get_config"]
