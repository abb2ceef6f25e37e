from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .articles import Article
from .config import MULTI_SLASH
from .sequencer import ArticleSequence


def article_url(article: Article, prefix: str = "") -> str:
    url = f"/{prefix.strip('/')}/{article.identifier}"
    return MULTI_SLASH.sub("/", url)


def nav_link(
    article: Optional[Article], prefix: str = ""
) -> Optional[Dict[str, str]]:
    if article is None:
        return None
    return {"title": article.title, "url": article_url(article, prefix)}


def build_navigation(
    collection: Sequence[Article], prefix: str = ""
) -> List[Dict[str, Any]]:
    """
    One entry per article, in collection order, carrying ``prev``/``next``
    links. A missing neighbour leaves its key out so templates skip the link.
    """
    seq = ArticleSequence(collection)
    entries: List[Dict[str, Any]] = []
    for a in seq:
        entry: Dict[str, Any] = {
            "identifier": a.identifier,
            "title": a.title,
            "url": article_url(a, prefix),
            "created_at": (
                a.created_at.date().isoformat() if a.created_at else None
            ),
        }
        prv, nxt = seq.neighbours(a)
        if prv is not None:
            entry["prev"] = nav_link(prv, prefix)
        if nxt is not None:
            entry["next"] = nav_link(nxt, prefix)
        entries.append(entry)
    return entries
