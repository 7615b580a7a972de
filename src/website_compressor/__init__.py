"""Minify website assets in place."""

__version__ = "0.1.0"
