# png_scout/__init__.py
"""
png_scout package initializer.
Defines the package version; the CLI lives in :mod:`png_scout.cli`.
"""
__version__ = "0.1.0"
