# File: xref_spider/identifiers.py
"""xref_spider.identifiers: turns classified pages into xref records.

Every function here is pure: the same page always yields the same record, so
re-crawling an unchanged site reproduces the map byte for byte.  A builder
returns ``None`` when the page does not carry enough information for a
reliable identifier.
"""
from __future__ import annotations

import html
import re
from functools import singledispatch
from typing import Iterable, Optional, Sequence, Tuple

from xref_spider.models import Xref
from xref_spider.pages import (
    ConstructorGroupPage,
    ConstructorPage,
    EnumerationPage,
    MethodPage,
    NamespacePage,
    OperatorPage,
    OverloadGroupPage,
    PropertyPage,
    TypePage,
)

__all__: Sequence[str] = (
    "build_xref",
    "normalize_type_name",
    "short_type_name",
    "member_name",
    "operator_name",
    "CLR_TYPE_NAMES",
)

# C# keyword aliases as they appear in signatures -> CLR type names
CLR_TYPE_NAMES: dict[str, str] = {
    "bool": "System.Boolean",
    "byte": "System.Byte",
    "sbyte": "System.SByte",
    "char": "System.Char",
    "decimal": "System.Decimal",
    "double": "System.Double",
    "float": "System.Single",
    "int": "System.Int32",
    "uint": "System.UInt32",
    "long": "System.Int64",
    "ulong": "System.UInt64",
    "short": "System.Int16",
    "ushort": "System.UInt16",
    "object": "System.Object",
    "string": "System.String",
    "dynamic": "System.Object",
}

_KEYWORD_RE = re.compile(r"(?<![\w.])(" + "|".join(CLR_TYPE_NAMES) + r")(?![\w.])")
_QUALIFIED_RE = re.compile(r"[\w.]+")
_WHITESPACE_RE = re.compile(r"\s+")

# first match wins; None means "unary or binary"
_OPERATOR_RULES: Tuple[Tuple[str, Optional[bool], str], ...] = (
    ("++", None, "Increment"),
    ("--", None, "Decrement"),
    ("+", True, "UnaryPlus"),
    ("-", True, "UnaryNegation"),
    ("*", None, "Multiply"),
    ("/", None, "Division"),
    ("%", None, "Modulus"),
    ("+", None, "Addition"),
    ("-", None, "Subtraction"),
)


# --------------------------------------------------------------------------- #
# Name helpers                                                                #
# --------------------------------------------------------------------------- #


def normalize_type_name(raw: str) -> str:
    """HTML-decode a parameter type and spell keyword aliases as CLR names."""
    text = _WHITESPACE_RE.sub(" ", html.unescape(raw).replace("\xa0", " ")).strip()
    text = text.replace(" <", "<").replace("< ", "<").replace(" >", ">")
    return _KEYWORD_RE.sub(lambda m: CLR_TYPE_NAMES[m.group(1)], text)


def short_type_name(full: str) -> str:
    """``System.Collections.Generic.List<System.String>`` -> ``List<String>``."""
    return _QUALIFIED_RE.sub(lambda m: m.group(0).rsplit(".", 1)[-1], full)


def member_name(heading: str) -> str:
    """Last dotted segment of a heading, cut at the parameter list."""
    return heading.split("(", 1)[0].strip().rsplit(".", 1)[-1].strip()


def operator_name(heading: str, signature: str) -> Optional[str]:
    """Canonical operator name, or None for operators without a mapping.

    Conversion and (in)equality operators are not mapped yet.
    """
    _, keyword, tail = heading.partition("operator")
    token = tail if keyword else heading
    unary = signature.count(",") == 1
    for symbol, needs_unary, name in _OPERATOR_RULES:
        if symbol in token and (needs_unary is None or needs_unary == unary):
            return name
    return None


def _param_list(types: Iterable[str]) -> str:
    return ", ".join(types)


def _collapse_empty(full_name: str) -> str:
    return full_name[:-2] if full_name.endswith("()") else full_name


# --------------------------------------------------------------------------- #
# Builders                                                                    #
# --------------------------------------------------------------------------- #


@singledispatch
def build_xref(page: object) -> Optional[Xref]:
    """Build the record for a classified page, or None when it cannot be identified."""
    raise TypeError(f"No identifier rule for {type(page).__name__}")


@build_xref.register
def _namespace(page: NamespacePage) -> Optional[Xref]:
    if not page.heading:
        return None
    return Xref(
        uid=page.heading,
        name=page.heading,
        href=page.url,
        comment_id=f"N:{page.heading}",
        full_name=page.heading,
        name_with_type=page.heading,
    )


@build_xref.register
def _type(page: TypePage) -> Optional[Xref]:
    if not page.heading or not page.full_name:
        return None
    return Xref(
        uid=page.full_name,
        name=page.heading,
        href=page.url,
        comment_id=f"T:{page.full_name}",
        full_name=page.full_name,
        name_with_type=page.heading,
    )


@build_xref.register
def _enumeration(page: EnumerationPage) -> Optional[Xref]:
    # Unity enumeration pages do not say which namespace the type lives in
    return None


@build_xref.register
def _constructor(page: ConstructorPage) -> Optional[Xref]:
    enclosing = page.enclosing
    if enclosing is None or not enclosing.full_name:
        return None
    type_name = enclosing.name
    params = _param_list(page.param_types)
    short_params = _param_list(short_type_name(t) for t in page.param_types)
    uid = _collapse_empty(f"{enclosing.full_name}.#ctor({params})")
    return Xref(
        uid=uid,
        name=type_name,
        href=page.url,
        comment_id=f"M:{uid}",
        full_name=f"{enclosing.full_name}.{type_name}({params})",
        name_with_type=f"{type_name}.{type_name}({short_params})",
    )


@build_xref.register
def _method(page: MethodPage) -> Optional[Xref]:
    enclosing = page.enclosing
    if enclosing is None or not enclosing.full_name or not page.name:
        return None
    params = _param_list(page.param_types)
    short_params = _param_list(short_type_name(t) for t in page.param_types)
    full_name = f"{enclosing.full_name}.{page.name}({params})"
    uid = _collapse_empty(full_name)
    return Xref(
        uid=uid,
        name=page.name,
        href=page.url,
        comment_id=f"M:{uid}",
        full_name=full_name,
        name_with_type=f"{enclosing.name}.{page.name}({short_params})",
    )


@build_xref.register
def _property(page: PropertyPage) -> Optional[Xref]:
    enclosing = page.enclosing
    name = member_name(page.heading)
    if enclosing is None or not enclosing.full_name or not name:
        return None
    full_name = f"{enclosing.full_name}.{name}"
    return Xref(
        uid=full_name,
        name=name,
        href=page.url,
        comment_id=f"P:{full_name}",
        full_name=full_name,
        name_with_type=page.heading,
    )


@build_xref.register
def _overload_group(page: OverloadGroupPage) -> Optional[Xref]:
    enclosing = page.enclosing
    name = member_name(page.heading)
    if enclosing is None or not enclosing.full_name or not name:
        return None
    full_name = f"{enclosing.full_name}.{name}"
    return Xref(
        uid=f"{full_name}*",
        name=name,
        href=page.url,
        comment_id=f"Overload:{full_name}",
        full_name=full_name,
        name_with_type=page.heading,
        is_spec=True,
    )


@build_xref.register
def _constructor_group(page: ConstructorGroupPage) -> Optional[Xref]:
    enclosing = page.enclosing
    if enclosing is None or not enclosing.full_name:
        return None
    type_name = enclosing.name
    return Xref(
        uid=f"{enclosing.full_name}.#ctor*",
        name=type_name,
        href=page.url,
        comment_id=f"Overload:{enclosing.full_name}.#ctor",
        full_name=f"{enclosing.full_name}.{type_name}",
        name_with_type=f"{type_name}.{type_name}",
        is_spec=True,
    )


@build_xref.register
def _operator(page: OperatorPage) -> Optional[Xref]:
    enclosing = page.enclosing
    if enclosing is None or not enclosing.full_name:
        return None
    name = operator_name(page.heading, page.signature)
    if name is None:
        return None
    return Xref(
        uid=f"{enclosing.full_name}.op_{name}*",
        name=name,
        href=page.url,
        comment_id=f"Overload:{enclosing.full_name}.op_{name}",
        full_name=f"{enclosing.full_name}.{name}",
        name_with_type=f"{enclosing.name}.{name}",
        is_spec=True,
    )
