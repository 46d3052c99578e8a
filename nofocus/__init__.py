"""nofocus: keep focused tests out of committed code."""

__version__ = "0.1.0"
