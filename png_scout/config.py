# === FILE: png_scout/config.py ===
"""
Loading and validation of the png_scout crawler configuration.
The schema is described with Pydantic, which also validates the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CrawlerConfig(BaseModel):
    """Configuration for a single crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: str = Field(..., description="URL the crawl starts from.")
    workers: int = Field(1, ge=1, description="Number of concurrent crawl workers.")
    max_pngs: int = Field(50, ge=1, description="Stop once this many PNG URLs are found.")
    capacity: Optional[int] = Field(
        None, ge=1, description="Upper bound on distinct URLs (None = unbounded)."
    )
    overflow: Literal["error", "drop"] = Field(
        "error", description="What to do when capacity is exceeded."
    )
    timeout: Optional[float] = Field(
        None, gt=0, description="Timeout per request in seconds (None = disabled)."
    )
    max_redirects: int = Field(5, ge=0, description="Redirect hops followed per request.")
    retry_times: int = Field(0, ge=0, description="Retries on 5xx/429 responses.")
    user_agent: str = Field("png_scout crawler", min_length=1, description="User-Agent header.")
    png_output: Path = Field(Path("png_urls.txt"), description="File receiving the PNG URLs.")
    visited_log: Optional[Path] = Field(
        None, description="File receiving every visited URL in visit order."
    )

    @field_validator("seed_url", mode="before")
    def _strip_seed(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("seed_url")
    def _check_seed(cls, v: str) -> str:
        if not v:
            raise ValueError("seed_url must not be empty")
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError(f"seed_url must be an http(s) URL, got {v!r}")
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """
    Read a YAML or JSON config file into a plain mapping.
    A missing file raises FileNotFoundError.
    """
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path]) -> CrawlerConfig:
    """Read YAML or JSON and return a validated CrawlerConfig."""
    return CrawlerConfig(**read_config_file(path))


def build_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Merge command-line overrides over an optional config file.

    Overrides set to ``None`` are ignored so that unset CLI options keep the
    file's (or the model's) defaults.
    """
    data = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)
