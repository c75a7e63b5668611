# File: png_scout/report/__init__.py
"""png_scout.report: writers for the crawl outputs used by the CLI and tests."""

from png_scout.report.json_report import render_json
from png_scout.report.text_report import write_url_list

__all__ = ["render_json", "write_url_list"]
