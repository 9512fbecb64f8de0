# File: tests/conftest.py
from pathlib import Path

import pytest

from xref_spider.config import SpiderConfig
from xref_spider.models import Xref

from html_fixtures import AWS_DOCS, UNITY_DOCS


@pytest.fixture()
def aws_config() -> SpiderConfig:
    """
    Return a valid AWS SpiderConfig pointing at the fixture docs root.
    """
    return SpiderConfig(site="aws", docs_url=AWS_DOCS, timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def unity_config() -> SpiderConfig:
    return SpiderConfig(site="unity", docs_url=UNITY_DOCS, timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def s3_client_xref() -> Xref:
    """
    Record of a class as the AWS spider would have built it.
    """
    return Xref(
        uid="Amazon.S3.AmazonS3Client",
        name="AmazonS3Client",
        href=f"{AWS_DOCS}items/TS3Client.html",
        comment_id="T:Amazon.S3.AmazonS3Client",
        full_name="Amazon.S3.AmazonS3Client",
        name_with_type="AmazonS3Client",
    )


@pytest.fixture()
def transform_xref() -> Xref:
    return Xref(
        uid="UnityEngine.Transform",
        name="Transform",
        href=f"{UNITY_DOCS}Transform.html",
        comment_id="T:UnityEngine.Transform",
        full_name="UnityEngine.Transform",
        name_with_type="Transform",
    )


@pytest.fixture()
def config_file(tmp_path: Path):
    """Factory writing a config file with the given content and suffix."""

    def _write(content: str, suffix: str = ".yaml") -> Path:
        path = tmp_path / f"config{suffix}"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
