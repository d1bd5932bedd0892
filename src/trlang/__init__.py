"""
trlang - Generate .lang files from localization comments in source code.
"""

import sys

from .main import main as _main


def main() -> None:
    """Console script entry point."""
    sys.exit(_main())


__all__ = ["main"]
