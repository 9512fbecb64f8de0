# File: xref_spider/models.py
"""
Data models shared by the crawler, the identifier builder and the serializer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

# attribute -> serialized key, in output order
XREF_KEYS: tuple[tuple[str, str], ...] = (
    ("uid", "uid"),
    ("name", "name"),
    ("href", "href"),
    ("comment_id", "commentId"),
    ("full_name", "fullName"),
    ("name_with_type", "nameWithType"),
    ("is_spec", "isSpec"),
)


@dataclass(slots=True)
class Xref:
    """One entry of the xref map: a uid plus its display metadata and page URL."""

    uid: str
    name: str
    href: str
    comment_id: Optional[str] = None
    full_name: Optional[str] = None
    name_with_type: Optional[str] = None
    is_spec: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        """Mapping in canonical key order with absent fields left out."""
        out: Dict[str, Any] = {}
        for attr, key in XREF_KEYS:
            value = getattr(self, attr)
            if value is None:
                continue
            out[key] = value
        return out


@dataclass(slots=True)
class PageData:
    """Result of one fetch: requested URL, HTTP status, body and the URL after redirects."""

    url: str
    status: int
    content: str
    final_url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


__all__ = ["Xref", "PageData", "XREF_KEYS"]
