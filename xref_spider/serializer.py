# File: xref_spider/serializer.py
"""
Rendering of the xref map as a YAML document.

Serialization is a plain projection of the records: fields without a value
are left out and keys keep the canonical order of :data:`~xref_spider.models.XREF_KEYS`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

import yaml

from xref_spider.models import Xref


class _XrefDumper(yaml.SafeDumper):
    """SafeDumper that indents sequence items, matching DocFX xrefmap files."""

    def increase_indent(self, flow: bool = False, indentless: bool = False):
        return super().increase_indent(flow, False)


def render_yaml(records: Iterable[Xref]) -> str:
    """Serialize *records* to a YAML list of mappings."""
    data = [record.to_dict() for record in records]
    return yaml.dump(
        data,
        Dumper=_XrefDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=4096,
    )


def write_yaml(records: Iterable[Xref], output_path: Union[str, Path]) -> Path:
    """
    Save the xref map to *output_path* and return the path.

    Example:
    ```python
    from xref_spider.serializer import write_yaml
    path = write_yaml(records, 'out/unity-xrefmap.yml')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_yaml(records), encoding="utf-8")
    return output


__all__ = ["render_yaml", "write_yaml"]
