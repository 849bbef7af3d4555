"""Compatibility import surface.

The engine lives in `engine.py` and the command line in `cli.py`; this
module keeps `from ctcodecs.main import ctcodec` and `python -m` entry
points working from one place.
"""

from .cli import cli, main
from .engine import ctcodec

__all__ = ["ctcodec", "cli", "main"]
