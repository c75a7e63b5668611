# === FILE: png_scout/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for the png_scout crawler.

Commands:
  crawl     Crawl from a seed URL and write the PNG URLs found
  config    Show the effective configuration

Global options:
  --config PATH       YAML/JSON config file (optional; CLI options override it)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if omitted)
  --log-format FORMAT Logging format (e.g. "%(asctime)s %(levelname)s %(message)s")

crawl options:
  -t INT              Number of workers (default 1)
  -m INT              Number of PNG URLs to find (default 50)
  -v PATH             Write every visited URL to PATH
  --output PATH       File for the PNG URLs (default png_urls.txt)
  --json PATH         Also save a JSON summary
  --capacity INT      Bound on distinct URLs (unbounded if omitted)
  --overflow POLICY   error | drop, when the capacity is exceeded
  --timeout SEC       Per-request timeout

Also:
  --version           Show the png_scout version

Example:
  png_scout crawl -t 10 -m 50 -v visited.txt http://example.com/
"""
import asyncio
import json
import sys
import time
from pathlib import Path

import click
from pydantic import ValidationError

from png_scout import __version__
from png_scout.config import build_config
from png_scout.logger import configure as configure_logging
from png_scout.scanner import start_crawl
from png_scout.report.json_report import render_json
from png_scout.report.text_report import write_url_list

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', message='png_scout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Format string for log records'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """png_scout command group."""
    configure_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


def _build(ctx, **overrides):
    try:
        return build_config(ctx.obj['config_path'], **overrides)
    except ValidationError as e:
        print_error(f'Invalid configuration: {e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Failed to load configuration: {e}')


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('seed_url', required=False)
@click.option('-t', '--workers', 'workers', type=int, default=None, help='Number of crawl workers [default: 1]')
@click.option('-m', '--max-pngs', 'max_pngs', type=int, default=None, help='PNG URLs to find [default: 50]')
@click.option(
    '-v', '--visited-log', 'visited_log',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Write every visited URL to this file'
)
@click.option(
    '--output', '-o', 'png_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='File for the PNG URLs [default: png_urls.txt]'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON summary to this file'
)
@click.option('--pretty', is_flag=True, help='Indent the JSON summary')
@click.option('--capacity', type=int, default=None, help='Bound on distinct URLs')
@click.option('--overflow', type=click.Choice(['error', 'drop']), default=None, help='Policy when capacity is exceeded')
@click.option('--timeout', type=float, default=None, help='Per-request timeout (seconds)')
@click.pass_context
def crawl(ctx, seed_url, workers, max_pngs, visited_log, png_output, json_output, pretty,
          capacity, overflow, timeout):
    """Crawl from SEED_URL until enough PNG URLs are found."""
    started = time.monotonic()
    cfg = _build(
        ctx,
        seed_url=seed_url,
        workers=workers,
        max_pngs=max_pngs,
        visited_log=visited_log,
        png_output=png_output,
        capacity=capacity,
        overflow=overflow,
        timeout=timeout,
    )
    try:
        result = asyncio.run(start_crawl(cfg))
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    try:
        write_url_list(result.png_urls, cfg.png_output)
        if cfg.visited_log is not None:
            write_url_list(result.visited, cfg.visited_log)
        if json_output:
            render_json(result, json_output, pretty=pretty)
    except OSError as e:
        print_error(f'Failed to write results: {e}')

    click.echo(f'Found {len(result.png_urls)} PNG URL(s) ({result.reason.value}): {cfg.png_output}')
    click.echo(f'png_scout execution time: {time.monotonic() - started:.6f} seconds')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('seed_url', required=False)
@click.pass_context
def show_config(ctx, seed_url):
    """Show the effective configuration as JSON."""
    cfg = _build(ctx, seed_url=seed_url)
    click.echo(json.dumps(cfg.model_dump(mode='json'), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    cli()
