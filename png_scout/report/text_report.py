# png_scout/report/text_report.py
"""Plain-text URL lists: ``png_urls.txt`` and the visited-URL log."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union


def write_url_list(urls: Iterable[str], output_path: Union[Path, str]) -> Path:
    """Write *urls* one per line, in order, and return the file path."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        for url in urls:
            f.write(f"{url}\n")
    return output
