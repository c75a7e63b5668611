# File: tests/test_cli.py
"""Tests for the CLI (`png_scout.cli`) using click.testing.CliRunner.
They cover the `crawl` and `config` commands, `--version` and error handling.
"""
import asyncio
import json

import click
import pytest
import png_scout.cli as cli_module
from click.testing import CliRunner
from png_scout.cli import cli
from png_scout.crawler.errors import CapacityExceeded
from png_scout.crawler.models import CrawlResult, DoneReason


@pytest.fixture(autouse=True)
def patch_start_crawl(monkeypatch):
    """Replace start_crawl with a stub that records the config and returns a fixed result."""
    seen = {}

    async def fake_crawl(cfg):
        seen["config"] = cfg
        return CrawlResult(
            png_urls=["http://example.com/a.png", "http://example.com/b.png"],
            reason=DoneReason.FRONTIER_EXHAUSTED,
            visited=["http://example.com/", "http://example.com/b.png", "http://example.com/a.png"],
            pages_crawled=3,
            elapsed=0.5,
        )

    monkeypatch.setattr(cli_module, "start_crawl", fake_crawl)
    return seen


@pytest.fixture(autouse=True)
def restore_logging(project_logger):
    """The CLI points the project logger at CliRunner's streams; undo that afterwards."""
    yield


def test_cli_module_is_importable_by_name():
    import png_scout

    assert png_scout.cli is cli_module
    assert isinstance(cli_module.cli, click.Group)
    assert callable(cli_module.start_crawl)


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "png_scout" in result.output


def test_crawl_writes_png_urls(tmp_path, monkeypatch, patch_start_crawl):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl", "-t", "4", "-m", "2", "http://example.com/"])

    assert result.exit_code == 0, result.output
    assert "execution time" in result.output
    lines = (tmp_path / "png_urls.txt").read_text(encoding="utf-8").splitlines()
    assert lines == ["http://example.com/a.png", "http://example.com/b.png"]
    cfg = patch_start_crawl["config"]
    assert cfg.workers == 4
    assert cfg.max_pngs == 2
    assert cfg.visited_log is None


def test_crawl_visited_log_and_json(tmp_path, patch_start_crawl):
    visited = tmp_path / "visited.txt"
    out = tmp_path / "out" / "pngs.txt"
    summary = tmp_path / "summary.json"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "crawl", "http://example.com/",
            "-v", str(visited), "--output", str(out), "--json", str(summary), "--pretty",
        ],
    )

    assert result.exit_code == 0, result.output
    assert visited.read_text(encoding="utf-8").splitlines() == [
        "http://example.com/", "http://example.com/b.png", "http://example.com/a.png",
    ]
    assert len(out.read_text(encoding="utf-8").splitlines()) == 2
    data = json.loads(summary.read_text(encoding="utf-8"))
    assert data["reason"] == "frontier_exhausted"
    assert data["pages_crawled"] == 3
    assert patch_start_crawl["config"].visited_log == visited


def test_crawl_reads_config_file(tmp_path, patch_start_crawl):
    cfg_file = tmp_path / "crawl.yaml"
    cfg_file.write_text(
        "seed_url: http://from-file/\nworkers: 3\npng_output: %s\n" % (tmp_path / "p.txt"),
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "crawl", "-m", "9"])

    assert result.exit_code == 0, result.output
    cfg = patch_start_crawl["config"]
    assert cfg.seed_url == "http://from-file/"
    assert cfg.workers == 3
    assert cfg.max_pngs == 9


@pytest.mark.parametrize(
    "args",
    [
        ["crawl"],
        ["crawl", "-t", "0", "http://example.com/"],
        ["crawl", "-m", "0", "http://example.com/"],
        ["crawl", "not-a-url"],
    ],
)
def test_crawl_rejects_bad_config(tmp_path, monkeypatch, args):
    monkeypatch.chdir(tmp_path)
    called = []

    async def never(cfg):
        called.append(cfg)

    monkeypatch.setattr(cli_module, "start_crawl", never)
    runner = CliRunner()
    result = runner.invoke(cli, args)

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert called == []


def test_crawl_failure_exits_nonzero(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    async def boom(cfg):
        await asyncio.sleep(0)
        raise CapacityExceeded("visited set", 10)

    monkeypatch.setattr(cli_module, "start_crawl", boom)
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl", "http://example.com/"])

    assert result.exit_code == 1
    assert "capacity of 10 URLs exceeded" in result.output
    assert not (tmp_path / "png_urls.txt").exists()


def test_show_config(tmp_path):
    cfg_file = tmp_path / "crawl.json"
    cfg_file.write_text(json.dumps({"seed_url": "https://example.com", "workers": 2}), encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["seed_url"] == "https://example.com"
    assert data["workers"] == 2
    assert data["max_pngs"] == 50
