# File: xref_spider/pages.py
"""
Classified documentation pages.

Each symbol kind has its own small frozen dataclass carrying only the
fragments its identifier rule needs.  Instances live for the duration of one
``crawl_page`` call and are never stored.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from xref_spider.models import Xref


class PageKind(str, Enum):
    NAMESPACE = "Namespace"
    CLASS = "Class"
    INTERFACE = "Interface"
    ENUMERATION = "Enumeration"
    STRUCT = "Struct"
    CONSTRUCTOR = "Constructor"
    METHOD = "Method"
    PROPERTY = "Property"
    OPERATOR = "Operator"
    MESSAGE = "Message"


TYPE_KINDS = frozenset({PageKind.CLASS, PageKind.INTERFACE, PageKind.ENUMERATION, PageKind.STRUCT})


@dataclass(frozen=True, slots=True)
class NamespacePage:
    url: str
    heading: str


@dataclass(frozen=True, slots=True)
class TypePage:
    """Class, interface, enumeration or struct whose full name is already known."""

    url: str
    kind: PageKind
    heading: str
    full_name: str


@dataclass(frozen=True, slots=True)
class EnumerationPage:
    """Unity enumeration: recognized, but never turned into a record."""

    url: str
    heading: str


# --------------------------------------------------------------------------- #
# AWS SDK members                                                             #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ConstructorPage:
    """AWS constructor.

    ``type_url`` (the title link) and ``type_name`` (namespace plus the type in
    the title) name the declaring type when the page gives them; ``enclosing``
    is filled in by the spider.
    """

    url: str
    param_types: Tuple[str, ...]
    enclosing: Optional[Xref] = None
    type_url: str = ""
    type_name: str = ""


@dataclass(frozen=True, slots=True)
class MethodPage:
    url: str
    name: str
    param_types: Tuple[str, ...]
    enclosing: Optional[Xref] = None
    type_url: str = ""
    type_name: str = ""


# --------------------------------------------------------------------------- #
# Unity members, which point back to their declaring type                     #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class PropertyPage:
    url: str
    heading: str
    type_url: str
    enclosing: Optional[Xref] = None


@dataclass(frozen=True, slots=True)
class OverloadGroupPage:
    """Method or message page: only the overload group is identifiable."""

    url: str
    kind: PageKind
    heading: str
    type_url: str
    enclosing: Optional[Xref] = None


@dataclass(frozen=True, slots=True)
class ConstructorGroupPage:
    url: str
    type_url: str
    enclosing: Optional[Xref] = None


@dataclass(frozen=True, slots=True)
class OperatorPage:
    url: str
    heading: str
    signature: str
    type_url: str
    enclosing: Optional[Xref] = None


MemberPage = Union[PropertyPage, OverloadGroupPage, ConstructorGroupPage, OperatorPage]
MEMBER_PAGE_TYPES = (PropertyPage, OverloadGroupPage, ConstructorGroupPage, OperatorPage)
AWS_MEMBER_PAGE_TYPES = (ConstructorPage, MethodPage)

Page = Union[
    NamespacePage,
    TypePage,
    EnumerationPage,
    ConstructorPage,
    MethodPage,
    PropertyPage,
    OverloadGroupPage,
    ConstructorGroupPage,
    OperatorPage,
]

__all__ = [
    "PageKind",
    "TYPE_KINDS",
    "NamespacePage",
    "TypePage",
    "EnumerationPage",
    "ConstructorPage",
    "MethodPage",
    "PropertyPage",
    "OverloadGroupPage",
    "ConstructorGroupPage",
    "OperatorPage",
    "MemberPage",
    "MEMBER_PAGE_TYPES",
    "AWS_MEMBER_PAGE_TYPES",
    "Page",
]
