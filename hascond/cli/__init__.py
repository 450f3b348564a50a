"""
Command-line interface for hascond.
"""

from .main import main

__all__ = ["main"]
