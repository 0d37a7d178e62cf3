# === FILE: robots_scout/config.py ===
"""
Loading and validation of the RobotsScout fetch configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Final, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

#: Google's documented robots.txt size limit (500 KiB).
GOOGLE_SIZE_LIMIT: Final[int] = 500 * 1024
DEFAULT_TIMEOUT: Final[float] = 30.0
DEFAULT_MAX_REDIRECTS: Final[int] = 5
DEFAULT_CHUNK_SIZE: Final[int] = 8192
DEFAULT_USER_AGENT: Final[str] = "RobotsScout/0.1 (+robots.txt analyzer)"


class FetchConfig(BaseModel):
    """Settings for downloading a robots.txt file."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Total request timeout (seconds).")
    max_redirects: int = Field(DEFAULT_MAX_REDIRECTS, ge=0, description="Redirects to follow.")
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, ge=1, description="Streaming read size (bytes).")
    size_limit: int = Field(GOOGLE_SIZE_LIMIT, ge=1, description="Download cut-off (bytes).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="User-Agent header.")

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


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


def load_config(path: Union[str, Path, None] = None) -> FetchConfig:
    """
    Read YAML or JSON and return a validated FetchConfig.

    With *path* ``None`` the default ``configs/default.yaml`` is used when it
    exists, otherwise the built-in defaults. An explicit path that does not
    exist raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return FetchConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return FetchConfig(**data)


__all__ = [
    "GOOGLE_SIZE_LIMIT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_MAX_REDIRECTS",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_USER_AGENT",
    "FetchConfig",
    "load_config",
]
