# png_scout/report/json_report.py

"""
JSON summary of a png_scout crawl.

Serializes a CrawlResult to a file.
"""
import json
from pathlib import Path
from typing import Any, Dict

from png_scout.crawler.models import CrawlResult


def result_to_dict(result: CrawlResult) -> Dict[str, Any]:
    """Plain-dict view of *result*, suitable for json.dumps."""
    return {
        'reason': result.reason.value,
        'png_urls': result.png_urls,
        'pages_crawled': result.pages_crawled,
        'visited': result.visited,
        'elapsed': round(result.elapsed, 6),
    }


def render_json(result: CrawlResult, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save the crawl summary as JSON at the given path.

    :param result: CrawlResult returned by the crawler
    :param output_path: path of the JSON file
    :param pretty: indent the output by 2 spaces
    :return: Path of the saved file

    Example:
    ```python
    from png_scout.report.json_report import render_json
    report_path = render_json(result, 'reports/crawl.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(result_to_dict(result), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
