# File: tests/test_identifiers.py
"""Identifier rules per symbol kind, independent of any markup."""
import pytest

from xref_spider.identifiers import (
    build_xref,
    member_name,
    normalize_type_name,
    operator_name,
    short_type_name,
)
from xref_spider.pages import (
    ConstructorGroupPage,
    ConstructorPage,
    EnumerationPage,
    MethodPage,
    NamespacePage,
    OperatorPage,
    OverloadGroupPage,
    PageKind,
    PropertyPage,
    TypePage,
)

from html_fixtures import AWS_DOCS, UNITY_DOCS


def test_namespace_fields_all_equal_heading():
    xref = build_xref(NamespacePage(url=f"{AWS_DOCS}items/NS3.html", heading="Amazon.S3"))
    assert xref.to_dict() == {
        "uid": "Amazon.S3",
        "name": "Amazon.S3",
        "href": f"{AWS_DOCS}items/NS3.html",
        "commentId": "N:Amazon.S3",
        "fullName": "Amazon.S3",
        "nameWithType": "Amazon.S3",
    }


def test_type_uses_full_name_and_t_prefix():
    page = TypePage(url="u", kind=PageKind.CLASS, heading="Inner", full_name="Namespace.Outer.Inner")
    xref = build_xref(page)
    assert xref.uid == xref.full_name == "Namespace.Outer.Inner"
    assert xref.comment_id == "T:Namespace.Outer.Inner"
    assert xref.name == xref.name_with_type == "Inner"
    assert xref.is_spec is None


def test_type_without_full_name_declines():
    assert build_xref(TypePage(url="u", kind=PageKind.INTERFACE, heading="IFoo", full_name="")) is None


def test_enumeration_page_is_never_emitted():
    assert build_xref(EnumerationPage(url=f"{UNITY_DOCS}KeyCode.html", heading="KeyCode")) is None


def test_aws_constructor_without_parameters(s3_client_xref):
    xref = build_xref(ConstructorPage(url="ctor.html", param_types=(), enclosing=s3_client_xref))
    assert xref.uid == "Amazon.S3.AmazonS3Client.#ctor"
    assert xref.comment_id == "M:Amazon.S3.AmazonS3Client.#ctor"
    assert xref.full_name == "Amazon.S3.AmazonS3Client.AmazonS3Client()"
    assert xref.name_with_type == "AmazonS3Client.AmazonS3Client()"
    assert xref.name == "AmazonS3Client"


def test_aws_constructor_with_parameters(s3_client_xref):
    page = ConstructorPage(
        url="ctor.html",
        param_types=("Amazon.Runtime.AWSCredentials", "Amazon.S3.AmazonS3Config"),
        enclosing=s3_client_xref,
    )
    xref = build_xref(page)
    assert xref.uid == "Amazon.S3.AmazonS3Client.#ctor(Amazon.Runtime.AWSCredentials, Amazon.S3.AmazonS3Config)"
    assert xref.comment_id == f"M:{xref.uid}"
    assert xref.name_with_type == "AmazonS3Client.AmazonS3Client(AWSCredentials, AmazonS3Config)"


def test_aws_member_without_enclosing_type_declines():
    assert build_xref(ConstructorPage(url="ctor.html", param_types=())) is None
    assert build_xref(MethodPage(url="m.html", name="GetObject", param_types=())) is None


def test_method_parameter_types_round_trip(s3_client_xref):
    page = MethodPage(
        url="m.html",
        name="GetObject",
        param_types=("System.String", "System.Int32"),
        enclosing=s3_client_xref,
    )
    xref = build_xref(page)
    assert xref.full_name.endswith("(System.String, System.Int32)")
    assert xref.name_with_type.endswith("(String, Int32)")
    assert xref.uid == xref.full_name == "Amazon.S3.AmazonS3Client.GetObject(System.String, System.Int32)"
    assert xref.comment_id == f"M:{xref.uid}"
    assert xref.name == "GetObject"


def test_method_without_parameters_collapses_uid(s3_client_xref):
    xref = build_xref(MethodPage(url="m.html", name="Dispose", param_types=(), enclosing=s3_client_xref))
    assert xref.full_name == "Amazon.S3.AmazonS3Client.Dispose()"
    assert xref.uid == "Amazon.S3.AmazonS3Client.Dispose"
    assert xref.name_with_type == "AmazonS3Client.Dispose()"


def test_unity_property(transform_xref):
    page = PropertyPage(url="p.html", heading="Transform.position", type_url="t.html", enclosing=transform_xref)
    xref = build_xref(page)
    assert xref.to_dict() == {
        "uid": "UnityEngine.Transform.position",
        "name": "position",
        "href": "p.html",
        "commentId": "P:UnityEngine.Transform.position",
        "fullName": "UnityEngine.Transform.position",
        "nameWithType": "Transform.position",
    }


@pytest.mark.parametrize("kind", [PageKind.METHOD, PageKind.MESSAGE])
def test_unity_method_and_message_are_overload_groups(kind, transform_xref):
    page = OverloadGroupPage(
        url="m.html",
        kind=kind,
        heading="Transform.Rotate(Vector3, Space)",
        type_url="t.html",
        enclosing=transform_xref,
    )
    xref = build_xref(page)
    assert xref.uid == "UnityEngine.Transform.Rotate*"
    assert xref.comment_id == "Overload:UnityEngine.Transform.Rotate"
    assert xref.full_name == "UnityEngine.Transform.Rotate"
    assert xref.name == "Rotate"
    assert xref.name_with_type == "Transform.Rotate(Vector3, Space)"
    assert xref.is_spec is True


def test_unity_constructor_group(transform_xref):
    xref = build_xref(ConstructorGroupPage(url="c.html", type_url="t.html", enclosing=transform_xref))
    assert xref.to_dict() == {
        "uid": "UnityEngine.Transform.#ctor*",
        "name": "Transform",
        "href": "c.html",
        "commentId": "Overload:UnityEngine.Transform.#ctor",
        "fullName": "UnityEngine.Transform.Transform",
        "nameWithType": "Transform.Transform",
        "isSpec": True,
    }


def test_unity_member_without_resolved_type_declines():
    assert build_xref(PropertyPage(url="p.html", heading="Transform.position", type_url="t.html")) is None
    assert build_xref(ConstructorGroupPage(url="c.html", type_url="t.html")) is None


@pytest.mark.parametrize(
    "heading,signature,expected",
    [
        ("Vector3.operator ++", "(a)", "Increment"),
        ("Vector3.operator --", "(a)", "Decrement"),
        ("Vector3.operator +", "(a, b)", "UnaryPlus"),
        ("Vector3.operator -", "(a, b)", "UnaryNegation"),
        ("Vector3.operator *", "(a, b)", "Multiply"),
        ("Vector3.operator /", "(a, b)", "Division"),
        ("Vector3.operator %", "(a, b)", "Modulus"),
        ("Vector3.operator +", "(a)", "Addition"),
        ("Vector3.operator -", "(a, b, c)", "Subtraction"),
        ("Vector3.operator ==", "(a, b)", None),
        ("Vector3.operator !=", "(a, b)", None),
        ("Vector3.operator Vector2", "(v)", None),
    ],
)
def test_operator_names(heading, signature, expected):
    assert operator_name(heading, signature) == expected


def test_operator_record(transform_xref):
    page = OperatorPage(
        url="op.html",
        heading="Transform.operator *",
        signature="public static Transform operator *(Transform a, float d);",
        type_url="t.html",
        enclosing=transform_xref,
    )
    xref = build_xref(page)
    assert xref.uid == "UnityEngine.Transform.op_Multiply*"
    assert xref.comment_id == "Overload:UnityEngine.Transform.op_Multiply"
    assert xref.full_name == "UnityEngine.Transform.Multiply"
    assert xref.name_with_type == "Transform.Multiply"
    assert xref.is_spec is True


def test_unmapped_operator_declines(transform_xref):
    page = OperatorPage(url="op.html", heading="Transform.operator ==", signature="(a, b)", type_url="t.html", enclosing=transform_xref)
    assert build_xref(page) is None


@pytest.mark.parametrize(
    "full,short",
    [
        ("System.String", "String"),
        ("Int32", "Int32"),
        ("System.Collections.Generic.List<System.String>", "List<String>"),
        ("System.Collections.Generic.Dictionary<System.String, Amazon.S3.Model.Tag>", "Dictionary<String, Tag>"),
        ("System.Byte[]", "Byte[]"),
    ],
)
def test_short_type_name(full, short):
    assert short_type_name(full) == short


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("System.String", "System.String"),
        ("  string ", "System.String"),
        ("int[]", "System.Int32[]"),
        ("System.Collections.Generic.List&lt;System.String&gt;", "System.Collections.Generic.List<System.String>"),
        ("List &lt; string &gt;", "List<System.String>"),
        ("Amazon.S3.Model.string", "Amazon.S3.Model.string"),
    ],
)
def test_normalize_type_name(raw, expected):
    assert normalize_type_name(raw) == expected


@pytest.mark.parametrize(
    "heading,name",
    [
        ("Transform.position", "position"),
        ("MonoBehaviour.Awake()", "Awake"),
        ("Object.Instantiate(UnityEngine.Object)", "Instantiate"),
        ("GetObject (String, String)", "GetObject"),
    ],
)
def test_member_name(heading, name):
    assert member_name(heading) == name


def test_builder_is_deterministic(s3_client_xref):
    page = MethodPage(url="m.html", name="PutObject", param_types=("Amazon.S3.Model.PutObjectRequest",), enclosing=s3_client_xref)
    assert build_xref(page) == build_xref(page)


def test_unknown_page_type_raises():
    with pytest.raises(TypeError):
        build_xref(object())
