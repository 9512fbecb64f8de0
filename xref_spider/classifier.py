# File: xref_spider/classifier.py
"""xref_spider.classifier: decides what kind of symbol a reference page documents.

The two sites lay their pages out too differently to share one classifier, so
each gets a ``classify_*`` function returning a :class:`Classification` (or
``None`` for pages that document nothing we recognize) and a ``parse_*``
function that additionally pulls out the fragments the identifier builder
needs and packs them into the matching page variant.

Markup read on the AWS SDK reference::

    <div id="titles"><h1>AmazonS3Client Class</h1><h2>Class</h2></div>
    <div id="titles"><h1><a href="TS3Client.html">AmazonS3Client</a>.GetObject Method (String)</h1>...
    <div id="namespaceblurb">Namespace: Amazon.S3<br/>Assembly: ...</div>
    <div id="inheritancehierarchy">System.Object<br/>&nbsp;&nbsp;Amazon.S3.AmazonS3Client</div>
    <div id="parameters"><dl><dt>key</dt><dd>Type: System.String<p>...</p></dd></dl></div>

Markup read on the Unity scripting reference::

    <div class="content-block">
      <h1><a href="Transform.html">Transform</a>.position</h1>
      <p>class in UnityEngine</p>
      <div class="signature">public Vector3 position;</div>
    </div>
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, Tag

from xref_spider.identifiers import member_name, normalize_type_name
from xref_spider.models import Xref
from xref_spider.pages import (
    ConstructorGroupPage,
    ConstructorPage,
    EnumerationPage,
    MethodPage,
    NamespacePage,
    OperatorPage,
    OverloadGroupPage,
    Page,
    PageKind,
    PropertyPage,
    TypePage,
)

__all__: Sequence[str] = (
    "Classification",
    "AWS_KINDS",
    "UNITY_TYPE_KINDS",
    "classify_aws_page",
    "classify_unity_page",
    "parse_aws_page",
    "parse_unity_page",
    "aws_type_full_name",
    "aws_param_types",
    "aws_declaring_type",
)

AWS_KINDS: dict[str, PageKind] = {
    kind.value: kind
    for kind in (
        PageKind.NAMESPACE,
        PageKind.CLASS,
        PageKind.INTERFACE,
        PageKind.ENUMERATION,
        PageKind.CONSTRUCTOR,
        PageKind.METHOD,
    )
}

UNITY_TYPE_KINDS: dict[str, PageKind] = {
    kind.value.lower(): kind
    for kind in (PageKind.CLASS, PageKind.INTERFACE, PageKind.ENUMERATION, PageKind.STRUCT)
}

_NAMESPACE_RE = re.compile(r"Namespace:\s*([\w.]+)")
_BLOCK_TAGS = frozenset({"p", "div", "dl", "ul", "table"})


@dataclass(frozen=True, slots=True)
class Classification:
    kind: PageKind
    heading: str
    signature: Optional[str] = None


def _soup(markup: str | BeautifulSoup) -> BeautifulSoup:
    if isinstance(markup, BeautifulSoup):
        return markup
    return BeautifulSoup(markup, "html.parser")


def _text(node: Tag) -> str:
    """Visible text of *node* with whitespace runs (``&nbsp;`` included) collapsed."""
    return " ".join(node.get_text().replace("\xa0", " ").split())


# --------------------------------------------------------------------------- #
# AWS SDK for .NET reference                                                  #
# --------------------------------------------------------------------------- #


def classify_aws_page(markup: str | BeautifulSoup) -> Optional[Classification]:
    """Read the kind label under the page title; unknown labels are not recognized."""
    soup = _soup(markup)
    titles = soup.find("div", id="titles")
    if not isinstance(titles, Tag):
        return None
    label, title = titles.find("h2"), titles.find("h1")
    if not isinstance(label, Tag) or not isinstance(title, Tag):
        return None
    kind = AWS_KINDS.get(_text(label))
    if kind is None:
        return None
    # "AmazonS3Client Class", "GetObject Method (String)" -> drop the kind word
    heading = re.sub(rf"\s+{kind.value}\b", "", _text(title)).strip()
    return Classification(kind=kind, heading=heading)


def _line_segments(block: Tag) -> List[str]:
    """Split a block on ``<br>`` and return its non-empty, cleaned text lines."""
    segments: List[str] = []
    current: List[str] = []
    for node in block.descendants:
        if isinstance(node, Tag) and node.name == "br":
            segments.append("".join(current))
            current = []
        elif isinstance(node, NavigableString) and not isinstance(node, Comment):
            current.append(str(node))
    segments.append("".join(current))
    cleaned = (seg.replace("\xa0", " ").replace("\r", " ").replace("\n", " ").strip() for seg in segments)
    return [seg for seg in cleaned if seg]


def aws_type_full_name(markup: str | BeautifulSoup, heading: str) -> str:
    """Fully-qualified type name from the inheritance hierarchy (or namespace blurb)."""
    soup = _soup(markup)
    hierarchy = soup.find("div", id="inheritancehierarchy")
    if isinstance(hierarchy, Tag):
        lines = _line_segments(hierarchy)
        for line in reversed(lines):
            if line == heading or line.endswith(f".{heading}"):
                return line
        if lines:
            return lines[-1]
    namespace = _aws_namespace(soup)
    if namespace and heading:
        return f"{namespace}.{heading}"
    return ""


def _type_line(dd: Tag) -> str:
    parts: List[str] = []
    for child in dd.children:
        if isinstance(child, Tag):
            if child.name in _BLOCK_TAGS:
                break
            parts.append(child.get_text())
        elif isinstance(child, NavigableString) and not isinstance(child, Comment):
            parts.append(str(child))
    line = "".join(parts).strip()
    if not line:
        # <dd><p>Type: System.String</p><p>description</p></dd>
        first = dd.find(["p", "div"])
        line = first.get_text().strip() if isinstance(first, Tag) else ""
    if line.startswith("Type:"):
        line = line[len("Type:"):]
    return line


def aws_param_types(markup: str | BeautifulSoup) -> Tuple[str, ...]:
    """Parameter types listed in the parameters section, in declaration order."""
    soup = _soup(markup)
    section = soup.find("div", id="parameters")
    if not isinstance(section, Tag):
        return ()
    types = (normalize_type_name(_type_line(dd)) for dd in section.find_all("dd"))
    return tuple(t for t in types if t)


def _aws_namespace(soup: BeautifulSoup) -> str:
    blurb = soup.find("div", id="namespaceblurb")
    if not isinstance(blurb, Tag):
        return ""
    match = _NAMESPACE_RE.search(blurb.get_text(" "))
    return match.group(1) if match else ""


def aws_declaring_type(markup: str | BeautifulSoup, kind: PageKind, heading: str, base_url: str) -> Tuple[str, str]:
    """``(type_url, type_name)`` of the type declaring a constructor or method page.

    The URL comes from a link in the title; the name joins the namespace blurb
    with the type named in the title (``AmazonS3Client`` for a constructor, the
    part before the last dot for a method).  Either is empty when the page
    does not give it.
    """
    soup = _soup(markup)
    type_url = ""
    title = soup.select_one("div#titles h1")
    if isinstance(title, Tag):
        anchor = title.find("a", href=True)
        if isinstance(anchor, Tag) and str(anchor["href"]).strip():
            type_url = urljoin(base_url, str(anchor["href"]).strip())

    head = heading.split("(", 1)[0].strip()
    short = head if kind is PageKind.CONSTRUCTOR else head.rpartition(".")[0]
    namespace = _aws_namespace(soup)
    type_name = f"{namespace}.{short}" if namespace and short else ""
    return type_url, type_name


def parse_aws_page(
    markup: str,
    url: str,
    enclosing: Optional[Xref] = None,
    base_url: Optional[str] = None,
) -> Optional[Page]:
    """Classify an AWS SDK page and extract its kind-specific fragments.

    *enclosing* is the record of the type whose member table linked here.
    Relative links resolve against *base_url* (the URL after redirects),
    defaulting to *url*.
    """
    soup = _soup(markup)
    result = classify_aws_page(soup)
    if result is None:
        return None
    kind, heading = result.kind, result.heading
    if kind is PageKind.NAMESPACE:
        return NamespacePage(url=url, heading=heading)
    if kind in (PageKind.CONSTRUCTOR, PageKind.METHOD):
        type_url, type_name = aws_declaring_type(soup, kind, heading, base_url or url)
        if kind is PageKind.CONSTRUCTOR:
            return ConstructorPage(
                url=url,
                param_types=aws_param_types(soup),
                enclosing=enclosing,
                type_url=type_url,
                type_name=type_name,
            )
        return MethodPage(
            url=url,
            name=member_name(heading),
            param_types=aws_param_types(soup),
            enclosing=enclosing,
            type_url=type_url,
            type_name=type_name,
        )
    return TypePage(url=url, kind=kind, heading=heading, full_name=aws_type_full_name(soup, heading))


# --------------------------------------------------------------------------- #
# Unity scripting reference                                                   #
# --------------------------------------------------------------------------- #


def _unity_parts(soup: BeautifulSoup) -> Optional[Tuple[Tag, Tag]]:
    block = soup.find("div", class_="content-block")
    if not isinstance(block, Tag):
        return None
    h1 = block.find("h1")
    if not isinstance(h1, Tag):
        return None
    return block, h1


def _subheading(h1: Tag) -> str:
    p = h1.find_next("p")
    return _text(p) if isinstance(p, Tag) else ""


def classify_unity_page(markup: str | BeautifulSoup, url: str) -> Optional[Classification]:
    """Signature block first, then the type word under the title, then the title itself."""
    soup = _soup(markup)
    parts = _unity_parts(soup)
    if parts is None:
        return None
    block, h1 = parts
    heading = _text(h1)

    signature_div = block.find("div", class_="signature")
    signature = _text(signature_div) if isinstance(signature_div, Tag) else ""
    if signature:
        if "-ctor" in url:
            kind = PageKind.CONSTRUCTOR
        elif "-operator" in url:
            kind = PageKind.OPERATOR
        elif "(" in signature:
            kind = PageKind.METHOD
        else:
            kind = PageKind.PROPERTY
        return Classification(kind=kind, heading=heading, signature=signature)

    words = _subheading(h1).split()
    kind = UNITY_TYPE_KINDS.get(words[0].lower()) if words else None
    if kind is not None:
        return Classification(kind=kind, heading=heading)
    if "(" in heading:
        return Classification(kind=PageKind.MESSAGE, heading=heading)
    return None


def _heading_link(h1: Tag, url: str) -> str:
    anchor = h1.find("a", href=True)
    if not isinstance(anchor, Tag):
        return ""
    return urljoin(url, str(anchor["href"]).strip())


def parse_unity_page(markup: str, url: str, base_url: Optional[str] = None) -> Optional[Page]:
    """Classify a Unity page and extract its kind-specific fragments.

    Member pages carry the URL of their declaring type, resolved against
    *base_url* (defaults to *url*); the spider fills in ``enclosing`` once that
    type has been crawled.
    """
    soup = _soup(markup)
    result = classify_unity_page(soup, url)
    if result is None:
        return None
    _, h1 = _unity_parts(soup)  # type: ignore[misc]
    kind, heading = result.kind, result.heading

    if kind is PageKind.ENUMERATION:
        return EnumerationPage(url=url, heading=heading)
    if kind in (PageKind.CLASS, PageKind.INTERFACE, PageKind.STRUCT):
        # "class in UnityEngine" -> UnityEngine
        words = _subheading(h1).split()
        full_name = f"{words[2]}.{heading}" if len(words) > 2 else ""
        return TypePage(url=url, kind=kind, heading=heading, full_name=full_name)
    if kind is PageKind.CONSTRUCTOR:
        return ConstructorGroupPage(url=url, type_url=url.replace("-ctor", ""))

    type_url = _heading_link(h1, base_url or url)
    if kind is PageKind.PROPERTY:
        return PropertyPage(url=url, heading=heading, type_url=type_url)
    if kind is PageKind.OPERATOR:
        return OperatorPage(url=url, heading=heading, signature=result.signature or "", type_url=type_url)
    return OverloadGroupPage(url=url, kind=kind, heading=heading, type_url=type_url)
