from __future__ import annotations

import pathlib
from datetime import datetime

import pytest

from blognav.articles import Article


def make_article(identifier: str, created: str, **kw) -> Article:
    kw.setdefault("kind", "article")
    kw.setdefault("title", identifier.strip("/").replace("-", " ").title())
    return Article(
        identifier=identifier,
        created_at=datetime.fromisoformat(created),
        **kw,
    )


@pytest.fixture
def three_ascending():
    return (
        make_article("/a/", "2020-01-01"),
        make_article("/b/", "2021-01-01"),
        make_article("/c/", "2022-01-01"),
    )


@pytest.fixture
def write_content(tmp_path):
    content = tmp_path / "content"
    content.mkdir()

    def _write(rel: str, text: str) -> pathlib.Path:
        p = content / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p

    _write.dir = content
    return _write


@pytest.fixture
def article():
    return make_article
