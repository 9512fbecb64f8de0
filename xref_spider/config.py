# === FILE: xref_spider/config.py ===
"""
Loading and validation of the XrefSpider crawl configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    ValidationError,
    field_validator,
)

SiteName = Literal["aws", "unity"]

AWS_DOCS_URL = "https://docs.aws.amazon.com/sdkfornet/v3/apidocs/"
UNITY_DOCS_URL = "https://docs.unity3d.com/ScriptReference/"
UNITY_SITEMAP_URL = "https://docs.unity3d.com/sitemap.xml"

_DEFAULT_DOCS_URLS: dict[str, str] = {
    "aws": AWS_DOCS_URL,
    "unity": UNITY_DOCS_URL,
}


class SpiderConfig(BaseModel):
    """Configuration for a single crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    site: SiteName = Field(..., description="Documentation site to crawl.")
    docs_url: Optional[HttpUrl] = Field(None, description="Root of the API reference (site default if unset).")
    sitemap_url: Optional[HttpUrl] = Field(None, description="Sitemap used as the Unity seed.")
    timeout: float = Field(30.0, gt=0, description="Total timeout per request (seconds).")
    user_agent: str = Field("XrefSpider/1.0", min_length=1, description="User-Agent header.")
    rate_limit: Optional[float] = Field(None, gt=0, description="Requests per second, unlimited if unset.")

    @field_validator("docs_url", mode="before")
    def _ensure_trailing_slash(cls, v: Any) -> Any:
        # relative links on the reference pages resolve against a directory URL
        if isinstance(v, str) and not v.endswith("/"):
            return v + "/"
        return v

    @property
    def resolved_docs_url(self) -> str:
        return str(self.docs_url) if self.docs_url else _DEFAULT_DOCS_URLS[self.site]

    @property
    def resolved_sitemap_url(self) -> str:
        return str(self.sitemap_url) if self.sitemap_url else UNITY_SITEMAP_URL


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


def load_config(path: Union[str, Path]) -> SpiderConfig:
    """
    Read a YAML or JSON file and return a validated SpiderConfig.
    Raises FileNotFoundError when the file does not exist.
    """
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

    try:
        return SpiderConfig(**data)
    except ValidationError:
        raise


__all__ = [
    "SpiderConfig",
    "SiteName",
    "load_config",
    "AWS_DOCS_URL",
    "UNITY_DOCS_URL",
    "UNITY_SITEMAP_URL",
]
