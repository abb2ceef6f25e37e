from __future__ import annotations

from blognav.navigation import article_url, build_navigation, nav_link


def test_article_url(article):
    a = article("/posts/hello/", "2020-01-01")
    assert article_url(a) == "/posts/hello/"
    assert article_url(a, "blog") == "/blog/posts/hello/"
    assert article_url(a, "/blog/") == "/blog/posts/hello/"


def test_nav_link(article):
    a = article("/hello/", "2020-01-01", title="Hello")
    assert nav_link(a) == {"title": "Hello", "url": "/hello/"}
    assert nav_link(None) is None


def test_build_navigation(three_ascending):
    nav = build_navigation(three_ascending, prefix="blog")
    assert [e["identifier"] for e in nav] == ["/a/", "/b/", "/c/"]

    first, middle, last = nav
    assert "prev" not in first
    assert first["next"] == {"title": "B", "url": "/blog/b/"}
    assert middle["prev"] == {"title": "A", "url": "/blog/a/"}
    assert middle["next"] == {"title": "C", "url": "/blog/c/"}
    assert last["prev"]["url"] == "/blog/b/"
    assert "next" not in last
    assert middle["created_at"] == "2021-01-01"


def test_single_article_has_no_links(article):
    (entry,) = build_navigation((article("/solo/", "2020-01-01"),))
    assert "prev" not in entry and "next" not in entry


def test_empty_collection():
    assert build_navigation(()) == []
